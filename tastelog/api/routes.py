"""Root API router."""

from datetime import datetime, timezone

from fastapi import APIRouter

from tastelog.api.endpoints import places, stats, visits

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check() -> dict:
    """Simple health check endpoint."""
    return {"ok": True, "now": datetime.now(timezone.utc).isoformat()}


router.include_router(stats.router)
router.include_router(visits.router)
router.include_router(places.router)
