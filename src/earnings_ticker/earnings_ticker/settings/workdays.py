from __future__ import annotations

import threading
from typing import Callable, Optional

from ..common.logging_config import get_logger
from ..common.validators import require_positive_int
from ..core.constants import DEFAULT_ANNUAL_WORKDAYS, DEFAULT_DAYS_OFF_WORK
from ..core.exceptions import ValidationError

logger = get_logger("settings.workdays")

Listener = Callable[["WorkdaySettings"], None]


class WorkdaySettings:
    """Config source for the daily-wage denominator, with change notification."""

    def __init__(self, annual_workdays: int = DEFAULT_ANNUAL_WORKDAYS, days_off: int = DEFAULT_DAYS_OFF_WORK):
        self._check(annual_workdays, days_off)
        self._annual_workdays = int(annual_workdays)
        self._days_off = int(days_off)
        self._listeners: list[Listener] = []
        self._lock = threading.Lock()

    @staticmethod
    def _check(annual_workdays: int, days_off: int) -> None:
        require_positive_int(annual_workdays, "Number of annual workdays")
        if int(days_off) < 0:
            raise ValidationError("Number of days off work cannot be negative")
        if int(annual_workdays) - int(days_off) <= 0:
            raise ValidationError("Days off work must be fewer than annual workdays")

    @property
    def annual_workdays(self) -> int:
        return self._annual_workdays

    @property
    def days_off(self) -> int:
        return self._days_off

    @property
    def days_actively_working(self) -> int:
        return self._annual_workdays - self._days_off

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a function that unsubscribes it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def update(self, *, annual_workdays: Optional[int] = None, days_off: Optional[int] = None) -> bool:
        """Apply new values and notify listeners. Returns False when nothing changed."""
        new_annual = self._annual_workdays if annual_workdays is None else int(annual_workdays)
        new_days_off = self._days_off if days_off is None else int(days_off)
        self._check(new_annual, new_days_off)

        with self._lock:
            if (new_annual, new_days_off) == (self._annual_workdays, self._days_off):
                return False
            self._annual_workdays = new_annual
            self._days_off = new_days_off
            listeners = list(self._listeners)

        logger.info(
            "Workday settings changed: %s annual workdays, %s days off (%s working)",
            new_annual,
            new_days_off,
            self.days_actively_working,
        )
        for listener in listeners:
            listener(self)
        return True
