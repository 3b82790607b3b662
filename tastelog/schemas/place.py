"""Pydantic schemas for places."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class PopularPlace(BaseModel):
    """Visits grouped by place identity."""

    place_name: str
    category: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    avg_rating: Optional[float] = Field(None, description="평점이 있는 방문만의 평균")
    visit_count: int
    last_visit: Optional[date] = None

    model_config = {"from_attributes": True}


class PopularPlaceList(BaseModel):
    items: list[PopularPlace]


class PlaceCandidate(BaseModel):
    """A place returned by the local search API."""

    id: str
    name: str
    category: str
    address: Optional[str] = None
    roadAddress: Optional[str] = None
    phone: str = ""
    distance_m: Optional[int] = None
    mapx: Optional[str] = None
    mapy: Optional[str] = None
    link: Optional[str] = None
    highlight: str
    rating: Optional[float] = None


class PlaceSearchResult(BaseModel):
    items: list[PlaceCandidate]
    total: int = 0
    display: int = 0
