from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta

from ..core.enums import Phase
from .engine import DEFAULT_COOLDOWN, evaluate
from .model import AccrualResult, ArmDeactivation, Deactivate, Effect, TickerState, UpdateDisplay


def advance(
    state: TickerState,
    now: datetime,
    *,
    cooldown: timedelta = DEFAULT_COOLDOWN,
) -> tuple[TickerState, tuple[Effect, ...], AccrualResult]:
    """One poll step: the next state plus the effects the caller should perform."""
    result = evaluate(state.config, now, state.flags, cooldown=cooldown)

    if not state.active or state.config is None:
        return state, (), result

    if result.should_deactivate:
        return replace(state, flags=result.flags), (Deactivate(),), result

    effects: list[Effect] = [
        UpdateDisplay(phase=result.phase, amount=float(result.display_value or 0.0), currency=state.config.currency)
    ]
    if result.phase == Phase.JUST_ENDED:
        effects.append(ArmDeactivation(delay=cooldown))

    return replace(state, flags=result.flags), tuple(effects), result
