from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable, Optional, Sequence

import pytest

from src.earnings_ticker.earnings_ticker.settings.workdays import WorkdaySettings
from src.earnings_ticker.earnings_ticker.state.memory_state_store import InMemoryStateStore
from src.earnings_ticker.earnings_ticker.ticker.controller import TickerController
from src.earnings_ticker.earnings_ticker.ticker.ui import Prompt


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def set(self, now: datetime) -> None:
        self.now = now


class ManualTimer:
    def __init__(self, due: datetime, callback: Callable[[], None], interval: Optional[timedelta] = None):
        self.due = due
        self.callback = callback
        self.interval = interval
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Fires timers against a FakeClock when the test advances time."""

    def __init__(self, clock: FakeClock):
        self.clock = clock
        self.timers: list[ManualTimer] = []

    def call_every(self, interval: float, callback):
        timer = ManualTimer(self.clock.now + timedelta(seconds=interval), callback, timedelta(seconds=interval))
        self.timers.append(timer)
        return timer

    def call_later(self, delay: float, callback):
        timer = ManualTimer(self.clock.now + timedelta(seconds=delay), callback)
        self.timers.append(timer)
        return timer

    @property
    def live_intervals(self) -> list[ManualTimer]:
        return [t for t in self.timers if t.interval is not None and not t.cancelled]

    @property
    def live_one_shots(self) -> list[ManualTimer]:
        return [t for t in self.timers if t.interval is None and not t.cancelled]

    def advance(self, delta: timedelta) -> None:
        target = self.clock.now + delta
        while True:
            pending = [t for t in self.timers if not t.cancelled and t.due <= target]
            if not pending:
                break
            timer = min(pending, key=lambda t: t.due)
            self.clock.set(timer.due)
            if timer.interval is None:
                timer.cancelled = True
            else:
                timer.due = timer.due + timer.interval
            timer.callback()
        self.clock.set(target)


class RecordingUI:
    def __init__(self, answers: Optional[dict[str, Optional[str]]] = None, choice: Optional[str] = None):
        self.answers = dict(answers or {})
        self.choice = choice
        self.prompts: list[str] = []
        self.choices: list[tuple[str, Sequence[str]]] = []
        self.errors: list[str] = []
        self.infos: list[str] = []
        self.displays: list[str] = []
        self.cleared = 0
        self.on_prompt: Optional[Callable[[Prompt], None]] = None

    def prompt_text(self, prompt: Prompt) -> Optional[str]:
        self.prompts.append(prompt.key)
        if self.on_prompt:
            self.on_prompt(prompt)
        return self.answers.get(prompt.key)

    def show_choice(self, message: str, options: Sequence[str]) -> Optional[str]:
        self.choices.append((message, list(options)))
        return self.choice

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def display_live_value(self, text: str) -> None:
        self.displays.append(text)

    def clear_display(self) -> None:
        self.cleared += 1

    @property
    def last_display(self) -> Optional[str]:
        return self.displays[-1] if self.displays else None


SHIFT_ANSWERS = {
    "currency": "USD",
    "salary": "47000",
    "start_time": "9:00 AM",
    "end_time": "5:00 PM",
}


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 13, 0, 0)


@pytest.fixture
def clock(fixed_now) -> FakeClock:
    return FakeClock(fixed_now)


@pytest.fixture
def scheduler(clock) -> ManualScheduler:
    return ManualScheduler(clock)


@pytest.fixture
def store() -> InMemoryStateStore:
    return InMemoryStateStore()


@pytest.fixture
def ui() -> RecordingUI:
    return RecordingUI(dict(SHIFT_ANSWERS))


@pytest.fixture
def workdays() -> WorkdaySettings:
    # 261 - 26 = 235 working days; 47000 / 235 = 200.00 per day
    return WorkdaySettings(annual_workdays=261, days_off=26)


@pytest.fixture
def controller(store, ui, scheduler, workdays, clock) -> TickerController:
    ctrl = TickerController(store, ui, scheduler, workdays, clock=clock, cooldown=timedelta(minutes=10))
    ctrl.activate()
    yield ctrl
    ctrl.shutdown()
