from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..shifts.model import ShiftConfig


@dataclass(frozen=True)
class StoredTicker:
    """What the state store hands back. Any field may be missing."""

    annual_salary: Optional[float] = None
    currency: Optional[str] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    active: bool = False

    @property
    def is_complete(self) -> bool:
        return bool(
            self.annual_salary
            and self.annual_salary > 0
            and self.currency
            and self.currency.strip()
            and self.start is not None
            and self.end is not None
            and self.end > self.start
        )

    def to_config(self, *, days_actively_working: int) -> ShiftConfig:
        return ShiftConfig(
            annual_salary=float(self.annual_salary),
            currency=str(self.currency),
            days_actively_working=int(days_actively_working),
            start=self.start,
            end=self.end,
        )
