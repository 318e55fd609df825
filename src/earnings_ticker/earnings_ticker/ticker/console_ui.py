from __future__ import annotations

import sys
from typing import Callable, Optional, Sequence, TextIO

from .ui import Prompt, TickerUI


class ConsoleTickerUI(TickerUI):
    """Terminal host: prompts on stdin, live value rewritten in place on one line."""

    def __init__(self, *, input_fn: Callable[[str], str] = input, stream: Optional[TextIO] = None):
        self._input = input_fn
        self._stream = stream or sys.stdout
        self._live = False

    def _read(self, label: str) -> Optional[str]:
        self._end_live_line()
        try:
            text = self._input(f"{label} ")
        except (EOFError, KeyboardInterrupt):
            return None
        # An empty answer behaves like dismissing the prompt.
        return text if text != "" else None

    def prompt_text(self, prompt: Prompt) -> Optional[str]:
        return self._read(prompt.label)

    def show_choice(self, message: str, options: Sequence[str]) -> Optional[str]:
        answer = self._read(f"{message} [{'/'.join(options)}]")
        if answer is None:
            return None
        for option in options:
            if answer.strip().lower() in (option.lower(), option[:1].lower()):
                return option
        return None

    def show_error(self, message: str) -> None:
        self._write_line(f"Error: {message}")

    def show_info(self, message: str) -> None:
        self._write_line(message)

    def display_live_value(self, text: str) -> None:
        self._stream.write(f"\r\x1b[2K{text}")
        self._stream.flush()
        self._live = True

    def clear_display(self) -> None:
        if self._live:
            self._stream.write("\r\x1b[2K")
            self._stream.flush()
            self._live = False

    def _write_line(self, text: str) -> None:
        self._end_live_line()
        self._stream.write(f"{text}\n")
        self._stream.flush()

    def _end_live_line(self) -> None:
        if self._live:
            self._stream.write("\n")
            self._live = False
