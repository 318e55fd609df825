from __future__ import annotations

import threading
from typing import Any, Optional

from ..common.datetime_utils import parse_iso_datetime, to_iso
from ..shifts.model import ShiftConfig
from .model import StoredTicker
from .repository import KEY_ACTIVE, KEY_CURRENCY, KEY_END, KEY_SALARY, KEY_START, StateStore


class InMemoryStateStore(StateStore):
    """Process-local key-value store with the same contract as the MySQL one."""

    def __init__(self, initial: Optional[dict[str, Any]] = None):
        self._values: dict[str, Any] = dict(initial or {})
        self._lock = threading.Lock()

    def load(self) -> StoredTicker:
        with self._lock:
            values = dict(self._values)

        salary = values.get(KEY_SALARY)
        currency = values.get(KEY_CURRENCY)
        return StoredTicker(
            annual_salary=float(salary) if isinstance(salary, (int, float)) else None,
            currency=currency if isinstance(currency, str) and currency.strip() else None,
            start=parse_iso_datetime(values.get(KEY_START)),
            end=parse_iso_datetime(values.get(KEY_END)),
            active=bool(values.get(KEY_ACTIVE, False)),
        )

    def save(self, config: Optional[ShiftConfig], *, active: bool) -> None:
        with self._lock:
            if config is not None:
                self._values[KEY_SALARY] = config.annual_salary
                self._values[KEY_CURRENCY] = config.currency
                self._values[KEY_START] = to_iso(config.start)
                self._values[KEY_END] = to_iso(config.end)
            self._values[KEY_ACTIVE] = bool(active)

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            return dict(self._values)
