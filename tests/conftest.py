from __future__ import annotations

from datetime import date, datetime, timezone

import pytest
from fastapi.testclient import TestClient

from tastelog.db.session import get_db
from tastelog.main import app
from tastelog.schemas.visit import VisitOut


def make_visit(**overrides) -> VisitOut:
    data = {
        "id": 1,
        "place_name": "Cafe X",
        "category": "카페",
        "visit_date": date(2024, 5, 1),
        "rating_overall": 4.5,
        "tags": ["데이트", "디저트"],
        "notes": "라떼가 맛있음",
        "area": "성수동",
        "created_at": datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
        "images": [],
        "photo_count": 0,
    }
    data.update(overrides)
    return VisitOut(**data)


@pytest.fixture
def client():
    app.dependency_overrides[get_db] = lambda: None
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
