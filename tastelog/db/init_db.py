"""Database initialization utilities."""

import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine

from tastelog import models  # noqa: F401
from tastelog.db.base import Base
from tastelog.db.session import engine as default_engine

logger = logging.getLogger(__name__)

# 초기 버전 테이블에는 없던 컬럼들 (이미 있으면 아무 일도 하지 않음)
LATE_COLUMNS = (
    "ALTER TABLE visits ADD COLUMN IF NOT EXISTS area TEXT",
    "ALTER TABLE visits ADD COLUMN IF NOT EXISTS image_data TEXT",
)


def init_db(engine: Engine | None = None) -> None:
    """Create tables and add late columns. Safe to run repeatedly."""
    engine = engine or default_engine
    Base.metadata.create_all(bind=engine)
    with engine.begin() as conn:
        for statement in LATE_COLUMNS:
            conn.execute(text(statement))
    logger.info("visits table is ready")
