"""FastAPI application entry point."""

from dotenv import load_dotenv

from fastapi import FastAPI

# Load environment variables from .env file
load_dotenv()

from tastelog import models  # noqa: F401,E402
from tastelog.api.errors import register_error_handlers  # noqa: E402
from tastelog.api.routes import router  # noqa: E402
from tastelog.core.config import settings, setup_logging  # noqa: E402
from tastelog.db.init_db import init_db  # noqa: E402
from tastelog.services.popular_cache import PopularPlacesCache  # noqa: E402

setup_logging()

app = FastAPI(title=settings.project_name)
app.include_router(router, prefix=settings.api_prefix)
register_error_handlers(app)

# 인기 장소 캐시: 앱 하나에 하나, 요청 핸들러는 의존성으로 받아 사용
app.state.popular_cache = PopularPlacesCache(
    ttl_seconds=settings.popular_cache_ttl_seconds,
    min_fetch=settings.popular_cache_min_fetch,
)


@app.on_event("startup")
def on_startup() -> None:
    """Make sure the schema exists before serving requests."""
    init_db()


@app.get("/", tags=["root"])
async def root() -> dict[str, str]:
    """Basic sanity endpoint."""
    return {"message": "Taste Log API is running"}


@app.get("/health", tags=["health"])
async def health() -> dict[str, str]:
    """Health check endpoint for Docker."""
    return {"status": "healthy"}
