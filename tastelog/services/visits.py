"""Visit persistence and read-side queries."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from sqlalchemy import text
from sqlalchemy.orm import Session

from tastelog.models.visit import Visit
from tastelog.schemas.place import PopularPlace
from tastelog.schemas.stats import Summary, TagUsage
from tastelog.schemas.visit import VisitOut
from tastelog.services.filters import LISTING_ORDER, CompiledFilter, compile_filters
from tastelog.services.images import decode_image_payload

logger = logging.getLogger(__name__)

# image_data 를 뺀 컬럼 목록 (사진 3장이면 레코드당 수 MB라 목록에서는 제외 가능)
LIGHT_COLUMNS = ", ".join(
    column.name for column in Visit.__table__.columns if column.name != "image_data"
)


def visit_out(row: Mapping[str, Any], with_images: bool = True) -> VisitOut:
    """Build the response model, decoding the photo payload once."""
    data = {key: value for key, value in row.items() if key != "image_data"}
    if with_images:
        payload = decode_image_payload(row.get("image_data"))
        data["images"] = list(payload.images)
        data["photo_count"] = payload.count
    return VisitOut.model_validate(data)


def _columns(visit: Visit) -> dict[str, Any]:
    return {column.name: getattr(visit, column.name) for column in Visit.__table__.columns}


def create_visit(db: Session, values: dict[str, Any]) -> VisitOut:
    """Insert a visit; unspecified optional fields are stored as NULL."""
    try:
        visit = Visit(**values)
        db.add(visit)
        db.commit()
        db.refresh(visit)
    except Exception:
        db.rollback()
        raise
    logger.info("visit %s created (%s)", visit.id, visit.place_name)
    return visit_out(_columns(visit))


def get_visit(db: Session, visit_id: int) -> VisitOut | None:
    visit = db.get(Visit, visit_id)
    return visit_out(_columns(visit)) if visit else None


def update_visit(db: Session, visit_id: int, values: dict[str, Any]) -> VisitOut | None:
    """Apply a partial update. Columns missing from ``values`` keep their value."""
    try:
        visit = db.get(Visit, visit_id)
        if visit is None:
            return None
        for column, value in values.items():
            setattr(visit, column, value)
        db.commit()
        db.refresh(visit)
    except Exception:
        db.rollback()
        raise
    logger.info("visit %s updated (%s)", visit_id, ", ".join(sorted(values)))
    return visit_out(_columns(visit))


def delete_visit(db: Session, visit_id: int) -> bool:
    try:
        visit = db.get(Visit, visit_id)
        if visit is None:
            return False
        db.delete(visit)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("visit %s deleted", visit_id)
    return True


def list_visits(
    db: Session,
    filters: Mapping[str, Any],
    limit: int = 20,
    offset: int = 0,
    exclude_images: bool = False,
) -> list[VisitOut]:
    """Return one page of visits matching the list filters."""
    compiled: CompiledFilter = compile_filters(filters)
    columns = LIGHT_COLUMNS if exclude_images else "*"
    limit_ref = compiled.bind(limit)
    offset_ref = compiled.bind(offset)
    sql = (
        f"SELECT {columns} FROM visits {compiled.where} "
        f"ORDER BY {LISTING_ORDER} LIMIT {limit_ref} OFFSET {offset_ref}"
    )
    rows = db.execute(text(sql), compiled.params).mappings().all()
    return [visit_out(row, with_images=not exclude_images) for row in rows]


def recent_visits(db: Session, limit: int = 3) -> list[VisitOut]:
    rows = db.execute(
        text(f"SELECT * FROM visits ORDER BY {LISTING_ORDER} LIMIT :limit"),
        {"limit": limit},
    ).mappings().all()
    return [visit_out(row) for row in rows]


def fetch_popular_places(db: Session, limit: int) -> list[PopularPlace]:
    """Group visits by place identity, most visited first.

    AVG skips NULL ratings, so unrated visits count toward ``visit_count``
    but not toward ``avg_rating``.
    """
    rows = db.execute(
        text(
            """
            SELECT place_name,
                   category,
                   address,
                   phone,
                   CAST(AVG(rating_overall) AS FLOAT) AS avg_rating,
                   CAST(COUNT(*) AS INTEGER) AS visit_count,
                   MAX(visit_date) AS last_visit
            FROM visits
            GROUP BY place_name, category, address, phone
            ORDER BY visit_count DESC, avg_rating DESC NULLS LAST
            LIMIT :limit
            """
        ),
        {"limit": limit},
    ).mappings().all()
    return [PopularPlace.model_validate(dict(row)) for row in rows]


def top_tags(db: Session, limit: int = 10) -> list[TagUsage]:
    rows = db.execute(
        text(
            """
            SELECT tag, CAST(COUNT(*) AS INTEGER) AS usage_count
            FROM (SELECT UNNEST(tags) AS tag FROM visits WHERE tags IS NOT NULL) AS tag_table
            GROUP BY tag
            ORDER BY usage_count DESC
            LIMIT :limit
            """
        ),
        {"limit": limit},
    ).mappings().all()
    return [TagUsage.model_validate(dict(row)) for row in rows]


def summarize(db: Session) -> Summary:
    """Totals for the dashboard header."""
    totals = db.execute(
        text(
            "SELECT CAST(COUNT(*) AS INTEGER) AS total, "
            "CAST(COALESCE(AVG(rating_overall), 0) AS FLOAT) AS avg_rating FROM visits"
        )
    ).mappings().one()
    month_count = db.execute(
        text(
            """
            SELECT CAST(COUNT(*) AS INTEGER)
            FROM visits
            WHERE visit_date >= date_trunc('month', CURRENT_DATE)
              AND visit_date < date_trunc('month', CURRENT_DATE) + INTERVAL '1 month'
            """
        )
    ).scalar_one()
    tag_count = db.execute(
        text(
            "SELECT COUNT(DISTINCT tag) "
            "FROM (SELECT UNNEST(tags) AS tag FROM visits WHERE tags IS NOT NULL) AS tag_table"
        )
    ).scalar_one()
    return Summary(
        total_count=totals["total"],
        avg_rating=totals["avg_rating"],
        month_count=month_count,
        tag_count=int(tag_count or 0),
    )
