"""Expose schemas for easier import."""

from tastelog.schemas.visit import VisitCreate, VisitList, VisitOut, VisitUpdate  # noqa: F401
from tastelog.schemas.place import (  # noqa: F401
    PlaceCandidate,
    PlaceSearchResult,
    PopularPlace,
    PopularPlaceList,
)
from tastelog.schemas.stats import Summary, TagList, TagUsage  # noqa: F401
