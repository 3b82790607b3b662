"""Dashboard statistics endpoints."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from tastelog.db.session import get_db
from tastelog.schemas.stats import Summary, TagList
from tastelog.services.visits import summarize, top_tags

router = APIRouter(tags=["stats"])


@router.get("/summary", response_model=Summary)
def summary(db: Session = Depends(get_db)) -> Summary:
    """Total visits, average rating, this month's visits and distinct tags."""
    return summarize(db)


@router.get("/tags", response_model=TagList)
def tags(limit: int = Query(10, ge=1, le=100), db: Session = Depends(get_db)) -> TagList:
    """Most used tags."""
    return TagList(items=top_tags(db, limit))
