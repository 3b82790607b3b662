"""Naver local search client.

API 문서: https://developers.naver.com/docs/serviceapi/search/local/local.md
"""

from __future__ import annotations

import logging
import re
from typing import Any

import requests

from tastelog.core.config import Settings, settings
from tastelog.schemas.place import PlaceCandidate, PlaceSearchResult

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<[^>]*>")
# .env.example 에 들어 있는 자리표시 값
_PLACEHOLDER_MARK = "발급받은"
DEFAULT_CATEGORY = "기타"
DEFAULT_HIGHLIGHT = "네이버 검색 결과"


class SearchNotConfiguredError(RuntimeError):
    """Client id / secret missing or still set to the example placeholder."""


class UpstreamSearchError(RuntimeError):
    """The search API answered with an error or could not be reached."""

    def __init__(self, status: int | None, detail: str) -> None:
        super().__init__(f"naver search failed ({status}): {detail}")
        self.status = status
        self.detail = detail


def strip_tags(value: str) -> str:
    """Remove the <b> highlight markup Naver puts in titles."""
    return _TAG_RE.sub("", value or "")


def leaf_category(value: str | None) -> str:
    """'음식점>카페,디저트' -> '카페,디저트'."""
    leaf = (value or "").split(">")[-1].strip()
    return leaf or DEFAULT_CATEGORY


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def to_candidate(index: int, item: dict[str, Any]) -> PlaceCandidate:
    return PlaceCandidate(
        id=f"naver-{index}",
        name=strip_tags(item.get("title", "")),
        category=leaf_category(item.get("category")),
        address=item.get("address"),
        roadAddress=item.get("roadAddress"),
        phone=item.get("telephone") or "",
        mapx=_optional_str(item.get("mapx")),
        mapy=_optional_str(item.get("mapy")),
        link=item.get("link"),
        highlight=item.get("description") or DEFAULT_HIGHLIGHT,
    )


class NaverLocalSearch:
    """Thin wrapper around the local search endpoint."""

    def __init__(
        self,
        client_id: str | None,
        client_secret: str | None,
        url: str,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.url = url
        self.timeout = timeout
        self._http = session or requests.Session()

    @classmethod
    def from_settings(cls, config: Settings = settings) -> "NaverLocalSearch":
        return cls(
            client_id=config.naver_client_id,
            client_secret=config.naver_client_secret,
            url=config.naver_local_search_url,
            timeout=config.naver_timeout_seconds,
        )

    @property
    def configured(self) -> bool:
        if not self.client_id or not self.client_secret:
            return False
        return _PLACEHOLDER_MARK not in self.client_id

    def search(self, query: str, display: int = 5) -> PlaceSearchResult:
        if not self.configured:
            raise SearchNotConfiguredError("NAVER_CLIENT_ID / NAVER_CLIENT_SECRET are not configured.")

        try:
            response = self._http.get(
                self.url,
                params={"query": query, "display": display},
                headers={
                    "X-Naver-Client-Id": self.client_id,
                    "X-Naver-Client-Secret": self.client_secret,
                },
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("naver search request failed: %s", exc)
            raise UpstreamSearchError(None, str(exc)) from exc

        if not response.ok:
            logger.error("naver search returned %s: %s", response.status_code, response.text)
            raise UpstreamSearchError(response.status_code, response.text)

        data = response.json()
        items = [to_candidate(index, item) for index, item in enumerate(data.get("items") or [])]
        return PlaceSearchResult(
            items=items,
            total=data.get("total") or 0,
            display=data.get("display") or 0,
        )


def get_search_client() -> NaverLocalSearch:
    """FastAPI dependency; overridden in tests."""
    return NaverLocalSearch.from_settings()
