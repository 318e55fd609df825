from __future__ import annotations

import re

from ..core.exceptions import FormatError

HourMinute = tuple[int, int]

_TIME_RE = re.compile(r"(0?[1-9]|1[0-2]):([0-5][0-9])\s?(AM|PM)", re.IGNORECASE)


def parse_time_of_day(text: str) -> HourMinute:
    """Parse ``H:MM AM/PM`` into a 24-hour ``(hour, minute)`` pair.

    12 AM is midnight (0) and 12 PM is noon (12); other PM hours get +12.
    """
    match = _TIME_RE.fullmatch(text or "")
    if not match:
        raise FormatError("Invalid time format. Use HH:MM AM/PM.")

    hour = int(match.group(1))
    minute = int(match.group(2))
    meridian = match.group(3).upper()

    if meridian == "AM" and hour == 12:
        hour = 0
    elif meridian == "PM" and hour != 12:
        hour += 12
    return hour, minute


def format_time_of_day(hour: int, minute: int) -> str:
    meridian = "AM" if hour < 12 else "PM"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{minute:02d} {meridian}"
