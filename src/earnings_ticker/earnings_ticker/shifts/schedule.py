from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime

from ..common.datetime_utils import at_time_of_day
from ..core.exceptions import InvertedWindowError
from .model import ShiftConfig
from .time_parser import HourMinute


def build_schedule(
    salary: float,
    currency: str,
    start_hm: HourMinute,
    end_hm: HourMinute,
    reference_date: date,
    *,
    days_actively_working: int,
) -> ShiftConfig:
    """Combine validated inputs with a calendar day into a concrete shift."""
    start = at_time_of_day(reference_date, *start_hm)
    end = at_time_of_day(reference_date, *end_hm)

    if end <= start:
        raise InvertedWindowError("Start time must be before the end time.")

    return ShiftConfig(
        annual_salary=float(salary),
        currency=currency,
        days_actively_working=int(days_actively_working),
        start=start,
        end=end,
    )


def rebase_schedule(config: ShiftConfig, reference_date: date) -> ShiftConfig:
    """Move a stored shift onto another day, keeping its wall-clock window."""
    if config.start.date() == reference_date:
        return config

    return replace(
        config,
        start=datetime.combine(reference_date, config.start.time()),
        end=datetime.combine(reference_date, config.end.time()),
    )
