from __future__ import annotations

import threading
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..accrual.engine import DEFAULT_COOLDOWN
from ..accrual.model import (
    AccrualFlags,
    AccrualResult,
    ArmDeactivation,
    Deactivate,
    Effect,
    TickerState,
    UpdateDisplay,
)
from ..accrual.step import advance
from ..common.datetime_utils import now_local
from ..common.logging_config import get_logger
from ..common.money import format_money
from ..common.validators import validate_currency, validate_salary, validate_time_window
from ..core.constants import DEFAULT_TICK_INTERVAL_SECONDS, RESET_OPTION, REUSE_OPTION
from ..core.enums import ControllerState, Phase
from ..core.exceptions import StoreError, ValidationError
from ..settings.workdays import WorkdaySettings
from ..shifts.model import ShiftConfig
from ..shifts.schedule import build_schedule, rebase_schedule
from ..shifts.time_parser import format_time_of_day
from ..state.repository import StateStore
from .scheduler import Scheduler, TimerHandle
from .ui import CURRENCY_PROMPT, END_PROMPT, SALARY_PROMPT, START_PROMPT, TickerUI

logger = get_logger("ticker.controller")

CANCELLED_MESSAGE = "Earnings ticker cancelled."
FINISHED_MESSAGE = "Shift complete. Earnings ticker stopped."


class TickerController:
    """Owns the live TickerState and drives it through one shift.

    Every transition happens under one re-entrant lock and replaces the
    state value whole. A generation counter invalidates timers and pending
    prompts that belong to a run which has since been cancelled or restarted.
    """

    def __init__(
        self,
        store: StateStore,
        ui: TickerUI,
        scheduler: Scheduler,
        workdays: WorkdaySettings,
        *,
        clock: Callable[[], datetime] = now_local,
        cooldown: timedelta = DEFAULT_COOLDOWN,
        tick_interval: float = DEFAULT_TICK_INTERVAL_SECONDS,
    ):
        self._store = store
        self._ui = ui
        self._scheduler = scheduler
        self._workdays = workdays
        self._clock = clock
        self._cooldown = cooldown
        self._tick_interval = float(tick_interval)

        self._lock = threading.RLock()
        self._state = TickerState.empty()
        self._status = ControllerState.IDLE
        self._phase = Phase.IDLE
        self._persisted = False
        self._generation = 0
        self._interval: Optional[TimerHandle] = None
        self._deactivation: Optional[TimerHandle] = None
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def state(self) -> TickerState:
        return self._state

    @property
    def status(self) -> ControllerState:
        return self._status

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def cooldown(self) -> timedelta:
        return self._cooldown

    # ------------------------------------------------------------------
    # Host lifecycle
    # ------------------------------------------------------------------

    def activate(self) -> None:
        if self._unsubscribe is None:
            self._unsubscribe = self._workdays.subscribe(lambda _settings: self.reconfigure())

        stored = self._store.load()
        if stored.is_complete:
            logger.info(
                "Stored shift found: %s-%s (active=%s)",
                stored.start.isoformat(),
                stored.end.isoformat(),
                stored.active,
            )

    def shutdown(self) -> None:
        """Release timers and the display without touching persisted state."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

        with self._lock:
            self._generation += 1
            self._stop_timers()
            self._ui.clear_display()
            self._reset()

    # Commands exposed to the host
    def start_ticker(self) -> None:
        self.start()

    def cancel_ticker(self) -> None:
        self.cancel()

    # ------------------------------------------------------------------
    # Flows
    # ------------------------------------------------------------------

    def start(self) -> None:
        with self._lock:
            self._generation += 1
            generation = self._generation
            self._stop_timers()
            if self._state.active:
                self._ui.clear_display()
            self._reset()

        stored = self._store.load()
        if stored.active and stored.is_complete:
            choice = self._ui.show_choice(
                "Resume your saved shift "
                f"({format_time_of_day(stored.start.hour, stored.start.minute)} - "
                f"{format_time_of_day(stored.end.hour, stored.end.minute)})?",
                [REUSE_OPTION, RESET_OPTION],
            )
            if not self._is_current(generation):
                return
            if choice is None:
                self._abandon(generation)
                return
            if choice == REUSE_OPTION:
                config = stored.to_config(days_actively_working=self._workdays.days_actively_working)
                self._persisted = True
                self._run(rebase_schedule(config, self._clock().date()), generation)
                return

        config = self._collect_config(generation)
        if config is None:
            return

        with self._lock:
            # A cancel that landed during validation wins; nothing is saved.
            if not self._is_current(generation):
                return
            try:
                self._store.save(config, active=True)
                self._persisted = True
            except StoreError as e:
                logger.warning("Running without persisted state: %s", e)
                self._persisted = False
                self._ui.show_error(str(e))

        self._run(config, generation)

    def tick(self, now: Optional[datetime] = None) -> Optional[AccrualResult]:
        with self._lock:
            if not self._state.active:
                return None

            now = now or self._clock()
            state, effects, result = advance(self._state, now, cooldown=self._cooldown)
            self._state = state
            self._phase = result.phase
            if result.phase in (Phase.JUST_ENDED, Phase.COOLDOWN) and self._status == ControllerState.RUNNING:
                self._set_status(ControllerState.DRAINING)

            logger.debug("tick phase=%s value=%s", result.phase.value, result.display_value)
            for effect in effects:
                self._apply(effect)
            return result

    def cancel(self) -> None:
        self._teardown(CANCELLED_MESSAGE)

    def reconfigure(self) -> None:
        with self._lock:
            current = self._state.config
            if not self._state.active or current is None:
                logger.debug("Workday settings changed while idle; nothing to restart")
                return
            self._generation += 1
            generation = self._generation
            flags = self._state.flags
            self._stop_timers()

        days = self._workdays.days_actively_working
        stored = self._store.load() if self._persisted else None
        if stored is not None and stored.active and stored.is_complete:
            config = rebase_schedule(stored.to_config(days_actively_working=days), current.start.date())
        else:
            config = current.with_days_actively_working(days)

        logger.info("Restarting ticker with %s working days", days)
        self._ui.show_info(f"Daily wage updated to {format_money(config.daily_wage, config.currency)}.")
        # An armed cooldown keeps its original start; only the wage changes.
        self._run(config, generation, flags=flags if flags.cooldown_armed else None)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _collect_config(self, generation: int) -> Optional[ShiftConfig]:
        with self._lock:
            if not self._is_current(generation):
                return None
            self._set_status(ControllerState.AWAITING_INPUT)

        answers: list[str] = []
        for prompt in (CURRENCY_PROMPT, SALARY_PROMPT, START_PROMPT, END_PROMPT):
            text = self._ui.prompt_text(prompt)
            if not self._is_current(generation):
                return None
            if text is None:
                self._abandon(generation)
                return None
            answers.append(text)

        currency_text, salary_text, start_text, end_text = answers
        with self._lock:
            if not self._is_current(generation):
                return None
            self._set_status(ControllerState.VALIDATING)

        try:
            currency = validate_currency(currency_text)
            salary = validate_salary(salary_text)
            start_hm, end_hm = validate_time_window(start_text, end_text)
            return build_schedule(
                salary,
                currency,
                start_hm,
                end_hm,
                self._clock().date(),
                days_actively_working=self._workdays.days_actively_working,
            )
        except ValidationError as e:
            logger.info("Rejected ticker input: %s", e)
            self._ui.show_error(str(e))
            self._abandon(generation)
            return None

    def _run(self, config: ShiftConfig, generation: int, *, flags: Optional[AccrualFlags] = None) -> None:
        with self._lock:
            if not self._is_current(generation):
                return
            self._stop_timers()
            self._state = TickerState.running(config, flags)
            self._set_status(ControllerState.RUNNING)
            self._interval = self._scheduler.call_every(self._tick_interval, lambda: self._on_interval(generation))
            if flags is not None and flags.cooldown_started_at is not None:
                remaining = self._cooldown - (self._clock() - flags.cooldown_started_at)
                self._apply(ArmDeactivation(max(remaining, timedelta(0))))
            logger.info(
                "Ticker running: %s per day, shift %s - %s",
                format_money(config.daily_wage, config.currency),
                config.start.isoformat(),
                config.end.isoformat(),
            )
            self.tick()

    def _on_interval(self, generation: int) -> None:
        if self._is_current(generation):
            self.tick()

    def _on_cooldown_elapsed(self, generation: int) -> None:
        with self._lock:
            if not self._is_current(generation) or not self._state.active:
                return
        self._teardown(FINISHED_MESSAGE)

    def _apply(self, effect: Effect) -> None:
        if isinstance(effect, UpdateDisplay):
            self._ui.display_live_value(self._render(effect))
        elif isinstance(effect, ArmDeactivation):
            if self._deactivation is not None:
                self._deactivation.cancel()
            generation = self._generation
            self._deactivation = self._scheduler.call_later(
                effect.delay.total_seconds(), lambda: self._on_cooldown_elapsed(generation)
            )
        elif isinstance(effect, Deactivate):
            self._teardown(FINISHED_MESSAGE)

    def _render(self, effect: UpdateDisplay) -> str:
        amount = format_money(effect.amount, effect.currency)
        if effect.phase in (Phase.JUST_ENDED, Phase.COOLDOWN):
            return f"Congrats! You earned {amount}"
        return amount

    def _teardown(self, message: str) -> None:
        with self._lock:
            self._generation += 1
            previous = self._status
            was_live = self._state.active
            self._stop_timers()
            self._ui.clear_display()
            self._reset()

            if was_live:
                try:
                    self._store.save(None, active=False)
                except StoreError:
                    logger.warning("Could not persist ticker deactivation", exc_info=True)

        if previous != ControllerState.IDLE:
            logger.info("Ticker stopped from %s", previous.value)
            self._ui.show_info(message)

    def _abandon(self, generation: int) -> None:
        with self._lock:
            if self._is_current(generation):
                logger.info("Ticker start abandoned")
                self._reset()

    def _reset(self) -> None:
        self._state = TickerState.empty()
        self._phase = Phase.IDLE
        self._set_status(ControllerState.IDLE)

    def _stop_timers(self) -> None:
        if self._interval is not None:
            self._interval.cancel()
            self._interval = None
        if self._deactivation is not None:
            self._deactivation.cancel()
            self._deactivation = None

    def _set_status(self, status: ControllerState) -> None:
        if status != self._status:
            logger.debug("controller %s -> %s", self._status.value, status.value)
            self._status = status

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation
