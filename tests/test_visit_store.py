from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from tastelog.models.visit import Visit
from tastelog.schemas.visit import VisitUpdate
from tastelog.services.visits import delete_visit, update_visit


def _stored_visit() -> Visit:
    return Visit(
        id=1,
        place_name="Cafe X",
        category="카페",
        visit_date=date(2024, 5, 1),
        rating_overall=Decimal("4.5"),
        rating_taste=Decimal("4.0"),
        tags=["데이트", "디저트"],
        notes="처음 방문",
        area="성수동",
        image_data='["img-a"]',
        created_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    )


def _session(visit):
    db = MagicMock()
    db.get.return_value = visit
    return db


def test_update_notes_only_keeps_other_fields():
    visit = _stored_visit()
    db = _session(visit)

    values = VisitUpdate(notes="또 가고 싶다").column_values(only_set=True)
    updated = update_visit(db, 1, values)

    assert values == {"notes": "또 가고 싶다"}
    assert updated.notes == "또 가고 싶다"
    assert updated.rating_overall == 4.5
    assert updated.rating_taste == 4.0
    assert updated.tags == ["데이트", "디저트"]
    assert updated.category == "카페"
    assert updated.visit_date == date(2024, 5, 1)
    assert updated.images == ["img-a"]
    assert updated.created_at == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    db.commit.assert_called_once()


def test_update_missing_visit_returns_none():
    db = _session(None)
    assert update_visit(db, 42, {"notes": "x"}) is None
    db.commit.assert_not_called()


def test_update_failure_rolls_back():
    db = _session(_stored_visit())
    db.commit.side_effect = RuntimeError("db down")
    with pytest.raises(RuntimeError):
        update_visit(db, 1, {"notes": "x"})
    db.rollback.assert_called_once()


def test_delete_missing_visit():
    db = _session(None)
    assert delete_visit(db, 42) is False
    db.delete.assert_not_called()
