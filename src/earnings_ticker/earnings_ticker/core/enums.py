from __future__ import annotations

from enum import Enum


class Phase(str, Enum):
    """Shift phase derived from the schedule and the current instant."""

    IDLE = "IDLE"
    PRE_SHIFT = "PRE_SHIFT"
    ACTIVE = "ACTIVE"
    JUST_ENDED = "JUST_ENDED"
    COOLDOWN = "COOLDOWN"


class ControllerState(str, Enum):
    """Lifecycle of one ticker run, owned by the controller."""

    IDLE = "IDLE"
    AWAITING_INPUT = "AWAITING_INPUT"
    VALIDATING = "VALIDATING"
    RUNNING = "RUNNING"
    DRAINING = "DRAINING"
