"""
Utility helpers shared across routers/services.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any
import math
import uuid


def new_record_id() -> str:
    """Server-side identifier for a freshly created record."""
    return str(uuid.uuid4())


def parse_calendar_day(value: Any) -> date | None:
    """
    Converte una data ISO 8601 ("2024-01-15" o "2024-01-15T10:00:00Z") nel
    giorno di calendario locale. Valori assenti o non validi restituiscono None.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return value
    elif isinstance(value, str) and value.strip():
        raw = value.strip()
        if raw.endswith("Z") or raw.endswith("z"):
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.date()


def as_number(value: Any) -> int | float:
    """Numeric view of a free-form field; anything unusable counts as 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else 0
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return 0
        # "NaN", "inf", "1e999" parse but cannot be rendered as JSON
        return number if math.isfinite(number) else 0
    return 0


def utc_now_iso() -> str:
    """Current UTC instant as ISO 8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
