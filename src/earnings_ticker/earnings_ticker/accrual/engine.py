"""Accrual engine.

Pure computation over a shift, the current instant and the carried flags.
Nothing here reads the clock or keeps state between calls, so polling the
same instant twice gives the same answer and a restarted process picks up
exactly where the wall clock says it should be.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta
from typing import Optional

from ..core.constants import DEFAULT_COOLDOWN_MINUTES
from ..core.enums import Phase
from ..shifts.model import ShiftConfig
from .model import AccrualFlags, AccrualResult

DEFAULT_COOLDOWN = timedelta(minutes=DEFAULT_COOLDOWN_MINUTES)


def accrued_fraction(config: ShiftConfig, now: datetime) -> float:
    """Share of the shift elapsed at ``now``, clamped to [0, 1]."""
    total = config.duration.total_seconds()
    elapsed = (now - config.start).total_seconds()
    return min(max(elapsed / total, 0.0), 1.0)


def evaluate(
    config: Optional[ShiftConfig],
    now: datetime,
    flags: AccrualFlags,
    *,
    cooldown: timedelta = DEFAULT_COOLDOWN,
) -> AccrualResult:
    if config is None:
        return AccrualResult(phase=Phase.IDLE, display_value=None, flags=flags)

    if now < config.start:
        return AccrualResult(phase=Phase.PRE_SHIFT, display_value=0.0, flags=flags)

    if now <= config.end:
        earned = accrued_fraction(config, now) * config.daily_wage
        return AccrualResult(
            phase=Phase.ACTIVE,
            display_value=earned,
            flags=replace(flags, workday_active=True),
        )

    # Past the end: one wind-down path, whether or not this process saw the shift run.
    if not flags.cooldown_armed or flags.cooldown_started_at is None:
        return AccrualResult(
            phase=Phase.JUST_ENDED,
            display_value=config.daily_wage,
            flags=AccrualFlags(workday_active=False, cooldown_armed=True, cooldown_started_at=now),
        )

    if now - flags.cooldown_started_at < cooldown:
        return AccrualResult(phase=Phase.COOLDOWN, display_value=config.daily_wage, flags=flags)

    return AccrualResult(phase=Phase.COOLDOWN, display_value=config.daily_wage, flags=flags, should_deactivate=True)
