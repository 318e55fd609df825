from __future__ import annotations

import threading
import time
from typing import Callable, Protocol

from ..common.logging_config import get_logger

logger = get_logger("ticker.scheduler")

Callback = Callable[[], None]


class TimerHandle(Protocol):
    def cancel(self) -> None:
        raise NotImplementedError


class Scheduler(Protocol):
    def call_every(self, interval: float, callback: Callback) -> TimerHandle:
        raise NotImplementedError

    def call_later(self, delay: float, callback: Callback) -> TimerHandle:
        raise NotImplementedError


class _RepeatingTimer(threading.Thread):
    """Fires on a fixed cadence anchored at start, so late callbacks do not accumulate drift."""

    def __init__(self, interval: float, callback: Callback):
        super().__init__(name="ticker-interval", daemon=True)
        self._interval = float(interval)
        self._callback = callback
        self._stopped = threading.Event()

    def run(self) -> None:
        started = time.monotonic()
        fired = 0
        while True:
            fired += 1
            deadline = started + fired * self._interval
            if self._stopped.wait(max(0.0, deadline - time.monotonic())):
                return
            try:
                self._callback()
            except Exception:
                logger.exception("Interval callback failed")

    def cancel(self) -> None:
        self._stopped.set()


class ThreadingScheduler(Scheduler):
    """Scheduler backed by daemon threads.

    Callers serialise their own state; every callback here may run on a
    different thread than the one that scheduled it.
    """

    def call_every(self, interval: float, callback: Callback) -> TimerHandle:
        timer = _RepeatingTimer(interval, callback)
        timer.start()
        return timer

    def call_later(self, delay: float, callback: Callback) -> TimerHandle:
        timer = threading.Timer(float(delay), callback)
        timer.daemon = True
        timer.start()
        return timer
