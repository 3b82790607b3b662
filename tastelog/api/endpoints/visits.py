"""Visit endpoints."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from tastelog.api.errors import NoFields, NotFound, PlaceNameRequired, parse_id
from tastelog.db.session import get_db
from tastelog.schemas.visit import VisitCreate, VisitList, VisitOut, VisitUpdate
from tastelog.services.visits import (
    create_visit,
    delete_visit,
    get_visit,
    list_visits,
    recent_visits,
    update_visit,
)

router = APIRouter(prefix="/visits", tags=["visits"])


@router.get("", response_model=VisitList)
def list_(
    category: str | None = None,
    min_rating: str | None = Query(None, alias="minRating"),
    tag: str | None = None,
    q: str | None = Query(None, description="가게 이름, 메뉴, 메모 부분 검색"),
    area: str | None = None,
    date_from: str | None = Query(None, alias="from"),
    date_to: str | None = Query(None, alias="to"),
    limit: int = Query(20, ge=1, le=500),
    offset: int = Query(0, ge=0),
    exclude_images: bool = Query(False, alias="excludeImages", description="타임라인용: 사진 데이터 제외"),
    db: Session = Depends(get_db),
) -> VisitList:
    """Filtered, paged visit list."""
    filters = {
        "category": category,
        "minRating": min_rating,
        "tag": tag,
        "q": q,
        "area": area,
        "from": date_from,
        "to": date_to,
    }
    items = list_visits(db, filters, limit=limit, offset=offset, exclude_images=exclude_images)
    return VisitList(items=items)


@router.get("/recent", response_model=VisitList)
def recent(limit: int = Query(3, ge=1, le=100), db: Session = Depends(get_db)) -> VisitList:
    return VisitList(items=recent_visits(db, limit))


@router.get("/{visit_id}", response_model=VisitOut)
def read(visit_id: str, db: Session = Depends(get_db)) -> VisitOut:
    visit = get_visit(db, parse_id(visit_id))
    if visit is None:
        raise NotFound()
    return visit


@router.post("", response_model=VisitOut, status_code=201)
def create(payload: VisitCreate, db: Session = Depends(get_db)) -> VisitOut:
    if not payload.place_name:
        raise PlaceNameRequired()
    return create_visit(db, payload.column_values())


@router.put("/{visit_id}", response_model=VisitOut)
def update(visit_id: str, payload: VisitUpdate, db: Session = Depends(get_db)) -> VisitOut:
    """Partial update: only fields present in the body are written."""
    pk = parse_id(visit_id)
    values = payload.column_values(only_set=True)
    if not values:
        raise NoFields()
    if "place_name" in values and not values["place_name"]:
        raise PlaceNameRequired()
    visit = update_visit(db, pk, values)
    if visit is None:
        raise NotFound()
    return visit


@router.delete("/{visit_id}")
def delete(visit_id: str, db: Session = Depends(get_db)) -> dict[str, bool]:
    if not delete_visit(db, parse_id(visit_id)):
        raise NotFound()
    return {"ok": True}
