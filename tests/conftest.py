from datetime import date, datetime

import pytest

from tripsplit.config import get_settings
from tripsplit.models import Participant, Payment, Trip


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in ("TRIPSPLIT_CURRENCY", "TRIPSPLIT_LOG_LEVEL", "TRIPSPLIT_CSV_BOM"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def trip():
    """Four-day trip."""
    return Trip(id="t1", code="GALIL", name="Galilee", start_date=date(2024, 7, 1), end_date=date(2024, 7, 4))


@pytest.fixture
def participants():
    """Dana stays the whole trip, Avi and Noa two days each."""
    return [
        Participant(id="p1", trip_id="t1", name="Dana"),
        Participant(id="p2", trip_id="t1", name="Avraham", nickname="Avi", days_in_trip=2),
        Participant(id="p3", trip_id="t1", name="Noa", days_in_trip=2),
    ]


@pytest.fixture
def payments():
    return [
        Payment(
            id="pay1",
            trip_id="t1",
            paid_by_id="p1",
            amount_cents=60000,
            description="Dinner",
            paid_at=datetime(2024, 7, 2, 20, 30),
        ),
        Payment(id="pay2", trip_id="t1", paid_by_id="p3", amount_cents=20000, description="Fuel, tolls"),
    ]


@pytest.fixture
def trip_document():
    return {
        "trip": {"id": "t1", "code": "GALIL", "name": "Galilee", "start_date": "2024-07-01", "end_date": "2024-07-04"},
        "participants": [
            {"id": "p1", "name": "Dana"},
            {"id": "p2", "name": "Avraham", "nickname": "Avi", "days_in_trip": 2},
            {"id": "p3", "name": "Noa", "days_in_trip": 2},
        ],
        "payments": [
            {"id": "pay1", "paid_by_id": "p1", "amount": 600, "description": "Dinner", "paid_at": "2024-07-02T20:30:00"},
            {"id": "pay2", "paid_by_id": "p3", "amount": "200.00", "description": "Fuel, tolls"},
        ],
    }
