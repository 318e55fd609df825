from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Optional

from .common.datetime_utils import now_local
from .core.constants import (
    DEFAULT_ANNUAL_WORKDAYS,
    DEFAULT_COOLDOWN_MINUTES,
    DEFAULT_DAYS_OFF_WORK,
    DEFAULT_TICK_INTERVAL_SECONDS,
)
from .database.connection import DBConfig, DatabaseConnection
from .settings.workdays import WorkdaySettings
from .state.memory_state_store import InMemoryStateStore
from .state.mysql_state_store import MySQLStateStore
from .state.repository import StateStore
from .ticker.controller import TickerController
from .ticker.scheduler import Scheduler, ThreadingScheduler
from .web.ui import WebTickerUI


@dataclass(frozen=True)
class Container:
    store: StateStore
    workdays: WorkdaySettings
    scheduler: Scheduler
    ui: WebTickerUI
    controller: TickerController


def build_store(settings: Any) -> StateStore:
    backend = str(getattr(settings, "STATE_BACKEND", "mysql")).lower()
    if backend == "memory":
        return InMemoryStateStore()
    if backend == "mysql":
        return MySQLStateStore(DatabaseConnection(DBConfig.from_dict(getattr(settings, "DB_CONFIG"))))
    raise ValueError(f"Unknown STATE_BACKEND: {backend!r}")


def build_container(
    *,
    settings: Any,
    store: Optional[StateStore] = None,
    scheduler: Optional[Scheduler] = None,
    ui: Optional[WebTickerUI] = None,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    store = store or build_store(settings)
    scheduler = scheduler or ThreadingScheduler()
    ui = ui or WebTickerUI()

    workdays = WorkdaySettings(
        annual_workdays=int(getattr(settings, "ANNUAL_WORKDAYS", DEFAULT_ANNUAL_WORKDAYS)),
        days_off=int(getattr(settings, "DAYS_OFF_WORK", DEFAULT_DAYS_OFF_WORK)),
    )
    controller = TickerController(
        store,
        ui,
        scheduler,
        workdays,
        clock=clock,
        cooldown=timedelta(minutes=float(getattr(settings, "COOLDOWN_MINUTES", DEFAULT_COOLDOWN_MINUTES))),
        tick_interval=float(getattr(settings, "TICK_INTERVAL_SECONDS", DEFAULT_TICK_INTERVAL_SECONDS)),
    )

    return Container(
        store=store,
        workdays=workdays,
        scheduler=scheduler,
        ui=ui,
        controller=controller,
    )
