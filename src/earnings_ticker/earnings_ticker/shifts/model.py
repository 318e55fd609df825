from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta

from ..core.exceptions import InvalidCurrencyError, InvalidSalaryError, InvertedWindowError, ValidationError


@dataclass(frozen=True)
class ShiftConfig:
    """Domain entity: one configured shift and the salary it accrues against."""

    annual_salary: float
    currency: str
    days_actively_working: int
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if not self.annual_salary or self.annual_salary <= 0:
            raise InvalidSalaryError("Annual salary must be a positive number")
        if not self.currency or not self.currency.strip():
            raise InvalidCurrencyError("Currency must not be empty")
        if int(self.days_actively_working) <= 0:
            raise ValidationError("Days actively working must be positive")
        if self.end <= self.start:
            raise InvertedWindowError("Start time must be before the end time.")

    @property
    def daily_wage(self) -> float:
        return self.annual_salary / self.days_actively_working

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def with_days_actively_working(self, days: int) -> "ShiftConfig":
        return replace(self, days_actively_working=int(days))
