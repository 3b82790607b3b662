"""Place endpoints: local search and popular places."""

from functools import partial

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from tastelog.api.errors import QueryRequired, SearchNotConfigured, SearchUpstreamFailed
from tastelog.db.session import get_db
from tastelog.schemas.place import PlaceSearchResult, PopularPlaceList
from tastelog.services.naver_search import (
    NaverLocalSearch,
    SearchNotConfiguredError,
    UpstreamSearchError,
    get_search_client,
)
from tastelog.services.popular_cache import PopularPlacesCache
from tastelog.services.visits import fetch_popular_places

router = APIRouter(prefix="/places", tags=["places"])


def get_popular_cache(request: Request) -> PopularPlacesCache:
    """The cache created with the application."""
    return request.app.state.popular_cache


@router.get("/search", response_model=PlaceSearchResult)
def search(
    query: str | None = None,
    display: int = Query(5, ge=1, le=5),
    client: NaverLocalSearch = Depends(get_search_client),
) -> PlaceSearchResult:
    """Search nearby places through the Naver local search API."""
    if not query:
        raise QueryRequired("검색어를 입력해주세요")
    try:
        return client.search(query, display)
    except SearchNotConfiguredError as exc:
        raise SearchNotConfigured("네이버 API 키가 설정되지 않았습니다.") from exc
    except UpstreamSearchError as exc:
        raise SearchUpstreamFailed("네이버 API 호출에 실패했습니다.", detail=exc.detail) from exc


@router.get("/popular", response_model=PopularPlaceList)
def popular(
    limit: int = Query(4, ge=1, le=500),
    cache: PopularPlacesCache = Depends(get_popular_cache),
    db: Session = Depends(get_db),
) -> PopularPlaceList:
    """Most visited places, served from the popular-places cache."""
    items = cache.get(limit, partial(fetch_popular_places, db))
    return PopularPlaceList(items=items)
