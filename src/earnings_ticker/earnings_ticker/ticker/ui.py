from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence


@dataclass(frozen=True)
class Prompt:
    key: str
    label: str


CURRENCY_PROMPT = Prompt("currency", "Enter your salary currency code (e.g. USD):")
SALARY_PROMPT = Prompt("salary", "Enter your annual salary (NUMBERS ONLY):")
START_PROMPT = Prompt("start_time", "Enter your shift start time (HH:MM AM/PM):")
END_PROMPT = Prompt("end_time", "Enter your shift end time (HH:MM AM/PM):")


class TickerUI(Protocol):
    """Host UI the controller talks to. ``None`` from a prompt means the user abandoned it."""

    def prompt_text(self, prompt: Prompt) -> Optional[str]:
        raise NotImplementedError

    def show_error(self, message: str) -> None:
        raise NotImplementedError

    def show_info(self, message: str) -> None:
        raise NotImplementedError

    def show_choice(self, message: str, options: Sequence[str]) -> Optional[str]:
        raise NotImplementedError

    def display_live_value(self, text: str) -> None:
        raise NotImplementedError

    def clear_display(self) -> None:
        raise NotImplementedError
