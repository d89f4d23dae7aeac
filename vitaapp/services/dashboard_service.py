"""Read-only dashboard summary computed from the resource files."""

from __future__ import annotations

import logging
import math
from datetime import date, datetime, timedelta
from typing import Callable, Iterable

from vitaapp.core.utils import as_number, parse_calendar_day, utc_now_iso
from vitaapp.repositories.json_storage import JsonFileStore
from vitaapp.services.resource_service import VitaError

logger = logging.getLogger(__name__)

URGENT_WINDOW_DAYS = 30
UPCOMING_EVENTS_WINDOW_DAYS = 7


class DashboardError(VitaError):
    status_code = 500


def _within(day: date | None, start: date, end: date) -> bool:
    return day is not None and start <= day <= end


def _is_completed(deadline: dict) -> bool:
    return bool(deadline.get("completed") or deadline.get("isCompleted"))


def _total(records: Iterable[dict], field: str) -> int | float:
    total = sum((as_number(item.get(field)) for item in records), 0)
    if isinstance(total, float) and not math.isfinite(total):
        raise ValueError(f"somma non finita per {field}")
    return total


def _records(items: list) -> list[dict]:
    return [item for item in items if isinstance(item, dict)]


class DashboardService:
    """
    Aggregates deadlines, events, expenses, properties and vehicles.

    ``clock`` returns the server's local "now"; tests pin it to a fixed
    instant. ``lastActivity`` is always the request time, not a watermark
    derived from the records.
    """

    def __init__(
        self,
        deadlines: JsonFileStore,
        events: JsonFileStore,
        expenses: JsonFileStore,
        properties: JsonFileStore,
        vehicles: JsonFileStore,
        clock: Callable[[], datetime] = datetime.now,
        timestamp: Callable[[], str] = utc_now_iso,
    ) -> None:
        self.deadlines = deadlines
        self.events = events
        self.expenses = expenses
        self.properties = properties
        self.vehicles = vehicles
        self._clock = clock
        self._timestamp = timestamp

    def summary(self) -> dict:
        try:
            return self._compute()
        except Exception as exc:
            logger.exception("Errore API dashboard")
            raise DashboardError("Errore recupero dati dashboard") from exc

    def _compute(self) -> dict:
        deadlines = _records(self.deadlines.read_array())
        events = _records(self.events.read_array())
        expenses = _records(self.expenses.read_array())
        # counts mirror the stored arrays; only sums skip non-object items
        properties = self.properties.read_array()
        vehicles = self.vehicles.read_array()

        today = self._clock().date()
        urgent_until = today + timedelta(days=URGENT_WINDOW_DAYS)
        events_until = today + timedelta(days=UPCOMING_EVENTS_WINDOW_DAYS)

        urgent = [
            d for d in deadlines
            if not _is_completed(d)
            and _within(parse_calendar_day(d.get("dueDate")), today, urgent_until)
        ]
        upcoming = [
            e for e in events
            if _within(parse_calendar_day(e.get("date")), today, events_until)
        ]
        this_month = []
        for expense in expenses:
            day = parse_calendar_day(expense.get("date"))
            if day is not None and (day.year, day.month) == (today.year, today.month):
                this_month.append(expense)

        return {
            "urgentDeadlinesCount": len(urgent),
            "upcomingEventsCount": len(upcoming),
            "currentMonthExpenses": _total(this_month, "amount"),
            "propertyCount": len(properties),
            "totalPropertyValue": _total(_records(properties), "currentValue"),
            "vehicleCount": len(vehicles),
            "totalVehicleValue": _total(_records(vehicles), "currentValue"),
            "lastActivity": self._timestamp(),
        }
