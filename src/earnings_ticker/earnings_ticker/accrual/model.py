from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional, Union

from ..core.enums import Phase
from ..shifts.model import ShiftConfig


@dataclass(frozen=True)
class AccrualFlags:
    """Flags carried between ticks; the engine reads them and returns new ones."""

    workday_active: bool = False
    cooldown_armed: bool = False
    cooldown_started_at: Optional[datetime] = None


@dataclass(frozen=True)
class TickerState:
    """The single live ticker value. Replaced whole, never mutated."""

    config: Optional[ShiftConfig] = None
    active: bool = False
    flags: AccrualFlags = field(default_factory=AccrualFlags)

    @classmethod
    def empty(cls) -> "TickerState":
        return cls()

    @classmethod
    def running(cls, config: ShiftConfig, flags: Optional[AccrualFlags] = None) -> "TickerState":
        return cls(config=config, active=True, flags=flags or AccrualFlags())


@dataclass(frozen=True)
class AccrualResult:
    phase: Phase
    display_value: Optional[float]
    flags: AccrualFlags
    should_deactivate: bool = False


@dataclass(frozen=True)
class UpdateDisplay:
    phase: Phase
    amount: float
    currency: str


@dataclass(frozen=True)
class ArmDeactivation:
    delay: timedelta


@dataclass(frozen=True)
class Deactivate:
    pass


Effect = Union[UpdateDisplay, ArmDeactivation, Deactivate]
