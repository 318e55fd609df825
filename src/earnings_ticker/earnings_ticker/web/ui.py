from __future__ import annotations

import threading
from collections import deque
from contextlib import contextmanager
from typing import Iterator, Mapping, Optional, Sequence

from ..ticker.ui import Prompt, TickerUI


class WebTickerUI(TickerUI):
    """UI contract served over HTTP.

    Prompt answers come from the form of the request that issued the start
    command; a missing or blank field is an abandoned prompt. Output is kept
    on a shared board that ``GET /ticker`` reads.
    """

    def __init__(self, *, max_messages: int = 20):
        self._lock = threading.Lock()
        self._local = threading.local()
        self._display: Optional[str] = None
        self._messages: deque[dict] = deque(maxlen=max_messages)

    @contextmanager
    def answering(self, answers: Mapping[str, str]) -> Iterator[None]:
        self._local.answers = dict(answers)
        try:
            yield
        finally:
            self._local.answers = {}

    def _answer(self, key: str) -> Optional[str]:
        answers = getattr(self._local, "answers", None) or {}
        value = answers.get(key)
        if value is None or value == "":
            return None
        return value

    def prompt_text(self, prompt: Prompt) -> Optional[str]:
        return self._answer(prompt.key)

    def show_choice(self, message: str, options: Sequence[str]) -> Optional[str]:
        answer = self._answer("reuse")
        if answer is None:
            return None
        for option in options:
            if answer.strip().lower() == option.lower():
                return option
        return None

    def show_error(self, message: str) -> None:
        with self._lock:
            self._messages.append({"level": "error", "message": message})

    def show_info(self, message: str) -> None:
        with self._lock:
            self._messages.append({"level": "info", "message": message})

    def display_live_value(self, text: str) -> None:
        with self._lock:
            self._display = text

    def clear_display(self) -> None:
        with self._lock:
            self._display = None

    @property
    def display(self) -> Optional[str]:
        with self._lock:
            return self._display

    def drain_messages(self) -> list[dict]:
        with self._lock:
            out = list(self._messages)
            self._messages.clear()
            return out
