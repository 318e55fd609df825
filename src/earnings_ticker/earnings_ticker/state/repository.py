from __future__ import annotations

from typing import Optional, Protocol

from ..shifts.model import ShiftConfig
from .model import StoredTicker

KEY_SALARY = "annualSalary"
KEY_CURRENCY = "currency"
KEY_START = "startTime"
KEY_END = "endTime"
KEY_ACTIVE = "active"


class StateStore(Protocol):
    def load(self) -> StoredTicker:
        """Return the persisted ticker record.

        Must not raise: unreadable or missing fields fall back to defaults.
        """

        raise NotImplementedError

    def save(self, config: Optional[ShiftConfig], *, active: bool) -> None:
        """Persist the active flag and, when given, the shift configuration.

        Saving ``active=False`` without a config keeps the previously stored
        salary, currency and window. Raises StoreError on failure.
        """

        raise NotImplementedError
