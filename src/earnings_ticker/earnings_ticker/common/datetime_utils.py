from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def at_time_of_day(day: date, hour: int, minute: int) -> datetime:
    """Project an hour/minute pair onto a calendar day (seconds zeroed)."""
    return datetime.combine(day, time(hour=hour, minute=minute))


def to_iso(value: datetime) -> str:
    return value.isoformat()


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse a stored ISO timestamp into local wall-clock time.

    Accepts the ``Z`` suffix and explicit offsets; aware values are converted
    to the local zone and returned naive. Unparseable input returns None.
    """
    if not value or not isinstance(value, str):
        return None

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed
