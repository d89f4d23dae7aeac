"""
Dashboard aggregation with a pinned clock.
"""
from __future__ import annotations

import sys
import time
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# Garantisce che il pacchetto vitaapp sia importabile durante i test locali
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from vitaapp.repositories.json_storage import JsonFileStore  # noqa: E402
from vitaapp.services.dashboard_service import DashboardError, DashboardService  # noqa: E402

NOW = datetime(2024, 3, 15, 18, 30)


def _day(offset: int) -> str:
    return (NOW + timedelta(days=offset)).date().isoformat()


@pytest.fixture()
def stores(tmp_path):
    names = ("deadlines", "events", "expenses", "properties", "vehicles")
    return {name: JsonFileStore(tmp_path / f"{name}.json") for name in names}


def _service(stores, **kwargs) -> DashboardService:
    return DashboardService(
        clock=lambda: NOW,
        timestamp=lambda: "2024-03-15T17:30:00.000Z",
        **stores,
        **kwargs,
    )


def test_empty_data_yields_zeroes(stores):
    assert _service(stores).summary() == {
        "urgentDeadlinesCount": 0,
        "upcomingEventsCount": 0,
        "currentMonthExpenses": 0,
        "propertyCount": 0,
        "totalPropertyValue": 0,
        "vehicleCount": 0,
        "totalVehicleValue": 0,
        "lastActivity": "2024-03-15T17:30:00.000Z",
    }


def test_urgent_deadlines_window_and_completion(stores):
    stores["deadlines"].write([
        {"id": "1", "dueDate": _day(5), "completed": False},
        {"id": "2", "dueDate": _day(40), "completed": False},
        {"id": "3", "dueDate": _day(2), "completed": True},
    ])
    assert _service(stores).summary()["urgentDeadlinesCount"] == 1


def test_urgent_deadlines_bounds_are_calendar_days(stores):
    stores["deadlines"].write([
        {"id": "today-morning", "dueDate": f"{_day(0)}T00:00:00"},
        {"id": "edge", "dueDate": _day(30)},
        {"id": "past", "dueDate": _day(-1)},
        {"id": "frontend-flag", "dueDate": _day(3), "isCompleted": True},
        {"id": "no-date"},
        {"id": "garbage", "dueDate": "domani"},
    ])
    assert _service(stores).summary()["urgentDeadlinesCount"] == 2


def test_current_month_expenses(stores):
    stores["expenses"].write([
        {"amount": 10, "date": "2024-03-01"},
        {"amount": 5, "date": "2024-02-28"},
        {"amount": 2.5, "date": "2024-03-31"},
        {"amount": "7", "date": "2024-03-10"},
        {"amount": 99, "date": "2023-03-10"},
        {"date": "2024-03-02"},
    ])
    assert _service(stores).summary()["currentMonthExpenses"] == pytest.approx(19.5)


def test_property_and_vehicle_totals(stores):
    stores["properties"].write([{"currentValue": 200000}, {"currentValue": 50000}, {"address": "x"}])
    stores["vehicles"].write([{"currentValue": 12000.5}])

    summary = _service(stores).summary()

    assert summary["propertyCount"] == 3
    assert summary["totalPropertyValue"] == 250000
    assert summary["vehicleCount"] == 1
    assert summary["totalVehicleValue"] == pytest.approx(12000.5)


def test_upcoming_events_within_a_week(stores):
    stores["events"].write([
        {"date": _day(0)},
        {"date": _day(7)},
        {"date": _day(8)},
        {"date": _day(-2)},
    ])
    assert _service(stores).summary()["upcomingEventsCount"] == 2


def test_last_activity_is_request_time(stores):
    svc = DashboardService(clock=lambda: NOW, **stores)
    stamp = svc.summary()["lastActivity"]
    assert stamp.endswith("Z")
    assert datetime.fromisoformat(stamp[:-1] + "+00:00").year >= 2024


def test_any_failure_becomes_dashboard_error(stores):
    def broken_clock():
        raise RuntimeError("clock down")

    svc = DashboardService(clock=broken_clock, **stores)
    with pytest.raises(DashboardError) as exc:
        svc.summary()
    assert exc.value.status_code == 500
    assert exc.value.message == "Errore recupero dati dashboard"


@pytest.fixture()
def rome_tz(monkeypatch):
    """Pin the process timezone to Europe/Rome rules (CET/CEST) for the test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset non disponibile su questa piattaforma")
    monkeypatch.setenv("TZ", "CET-1CEST,M3.5.0,M10.5.0/3")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_aware_due_dates_use_local_calendar_day(stores, rome_tz):
    stores["deadlines"].write([
        # 00:30 on March 15 in Rome: today
        {"id": "utc-late-yesterday", "dueDate": "2024-03-14T23:30:00Z"},
        # 23:15 on March 14 in Rome: already past
        {"id": "offset-yesterday", "dueDate": "2024-03-15T00:15:00+02:00"},
        # 23:30 on April 14 in Rome: last day of the window
        {"id": "utc-edge-inside", "dueDate": "2024-04-14T21:30:00Z"},
        # 01:30 on April 15 in Rome: one day too far
        {"id": "utc-edge-outside", "dueDate": "2024-04-14T23:30:00Z"},
        # 22:15 on April 14 in Rome
        {"id": "offset-edge-inside", "dueDate": "2024-04-15T00:15:00+04:00"},
    ])
    assert _service(stores).summary()["urgentDeadlinesCount"] == 3


def test_aware_expense_dates_respect_local_month(stores, rome_tz):
    stores["expenses"].write([
        {"amount": 1, "date": "2024-02-29T23:30:00Z"},       # March 1, 00:30 CET
        {"amount": 2, "date": "2024-03-31T22:30:00Z"},       # April 1, 00:30 CEST
        {"amount": 4, "date": "2024-03-01T00:15:00+02:00"},  # February 29, 23:15 CET
        {"amount": 8, "date": "2024-03-31T21:30:00Z"},       # March 31, 23:30 CEST
    ])
    assert _service(stores).summary()["currentMonthExpenses"] == 9


def test_non_finite_amounts_count_as_zero(stores):
    stores["expenses"].write([
        {"amount": "NaN", "date": "2024-03-02"},
        {"amount": "inf", "date": "2024-03-03"},
        {"amount": "1e999", "date": "2024-03-04"},
        {"amount": 3, "date": "2024-03-05"},
    ])
    stores["properties"].write([{"currentValue": "-Infinity"}, {"currentValue": 10}])

    summary = _service(stores).summary()

    assert summary["currentMonthExpenses"] == 3
    assert summary["totalPropertyValue"] == 10


def test_overflowing_sum_is_a_dashboard_error(stores):
    stores["vehicles"].write([{"currentValue": 1e308}, {"currentValue": 1e308}])
    with pytest.raises(DashboardError):
        _service(stores).summary()


def test_counts_match_stored_arrays(stores):
    stores["properties"].write([{"currentValue": 5}, "legacy-entry", None])
    stores["vehicles"].write([42, {"currentValue": 7}])

    summary = _service(stores).summary()

    assert summary["propertyCount"] == 3
    assert summary["totalPropertyValue"] == 5
    assert summary["vehicleCount"] == 2
    assert summary["totalVehicleValue"] == 7
