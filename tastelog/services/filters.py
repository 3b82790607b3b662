"""WHERE clause builder for the visit list."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping

# 목록 정렬: 방문일 최신순 (방문일 없는 기록은 맨 뒤), 같은 날이면 나중에 저장한 기록 먼저
LISTING_ORDER = "visit_date DESC NULLS LAST, created_at DESC"

FILTER_KEYS = ("category", "minRating", "tag", "q", "area", "from", "to")


def placeholder(index: int) -> str:
    """Bind parameter name for the ``index``-th value (1-based)."""
    return f"p{index}"


@dataclass
class CompiledFilter:
    clauses: list[str] = field(default_factory=list)
    values: list[Any] = field(default_factory=list)

    @property
    def where(self) -> str:
        if not self.clauses:
            return ""
        return "WHERE " + " AND ".join(self.clauses)

    @property
    def params(self) -> dict[str, Any]:
        """Values keyed by placeholder name, ready for ``Session.execute``."""
        return {placeholder(i): value for i, value in enumerate(self.values, start=1)}

    def bind(self, value: Any) -> str:
        """Append a value and return its ``:pN`` reference."""
        self.values.append(value)
        return ":" + placeholder(len(self.values))


def _present(value: Any) -> bool:
    return value is not None and value != ""


def _as_number(value: Any) -> float | None:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _as_date(value: Any) -> date | None:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        return None


def compile_filters(params: Mapping[str, Any]) -> CompiledFilter:
    """Translate list query parameters into a parameterized predicate.

    Parameters are AND-joined in the order of ``FILTER_KEYS``; absent or empty
    ones add nothing. Values that cannot be bound safely (a non-numeric
    ``minRating``, a malformed date) are dropped the same way, so this never
    raises.
    """
    compiled = CompiledFilter()

    category = params.get("category")
    if _present(category):
        compiled.clauses.append(f"category = {compiled.bind(category)}")

    min_rating = params.get("minRating")
    if _present(min_rating):
        number = _as_number(min_rating)
        if number is not None:
            compiled.clauses.append(f"rating_overall >= {compiled.bind(number)}")

    tag = params.get("tag")
    if _present(tag):
        compiled.clauses.append(f"{compiled.bind(tag)} = ANY(tags)")

    q = params.get("q")
    if _present(q):
        ref = compiled.bind(f"%{q}%")
        compiled.clauses.append(f"(place_name ILIKE {ref} OR menu ILIKE {ref} OR notes ILIKE {ref})")

    # 지역 필터는 부분 일치: area=성동 이면 "성동구", "성동구 성수동" 모두 매칭
    area = params.get("area")
    if _present(area):
        compiled.clauses.append(f"area ILIKE {compiled.bind(f'%{area}%')}")

    for key, operator in (("from", ">="), ("to", "<=")):
        raw = params.get(key)
        if not _present(raw):
            continue
        day = _as_date(raw)
        if day is not None:
            compiled.clauses.append(f"visit_date {operator} {compiled.bind(day)}")

    return compiled
