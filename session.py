from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from wrapping import count_spaces, wrap_text

logger = logging.getLogger(__name__)


class CharState(Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    UNTYPED = "untyped"


@dataclass(frozen=True)
class Diff:
    state: CharState
    char: str


def diff_char(expected: str, typed: str | None) -> Diff:
    """Classify one reference character against what was typed at its position."""
    if typed is None:
        return Diff(CharState.UNTYPED, expected)
    if typed == expected:
        return Diff(CharState.CORRECT, expected)
    return Diff(CharState.INCORRECT, typed)


class TypingSession:
    """Reference text, the typed buffer and the current wrap of the text."""

    def __init__(self, text: str, width: int) -> None:
        if not text:
            raise ValueError("reference text must not be empty")
        self._text = text
        self._typed: list[str] = []
        self.lines = wrap_text(text, width)

    @property
    def text(self) -> str:
        return self._text

    @property
    def typed(self) -> str:
        return "".join(self._typed)

    @property
    def typed_len(self) -> int:
        return len(self._typed)

    def push_char(self, ch: str) -> bool:
        if self.is_complete():
            return False
        self._typed.append(ch)
        return True

    def pop_char(self) -> None:
        if self._typed:
            self._typed.pop()

    def is_complete(self) -> bool:
        return len(self._typed) == len(self._text)

    def rewrap(self, width: int) -> None:
        self.lines = wrap_text(self._text, width)
        logger.debug("Rewrapped to width %d: %d lines", width, len(self.lines))

    def classify(self) -> Iterator[Diff]:
        typed = self._typed
        for i, expected in enumerate(self._text):
            yield diff_char(expected, typed[i] if i < len(typed) else None)

    def cursor_position(self) -> tuple[int, int] | None:
        """Wrapped line and column of the first untyped character, None once complete."""
        if self.is_complete():
            return None
        remaining = len(self._typed)
        for line_no, line in enumerate(self.lines):
            if remaining < len(line):
                return line_no, remaining
            remaining -= len(line)
        return None

    def typed_words(self) -> int:
        return count_spaces(self.typed)

    def total_words(self) -> int:
        return count_spaces(self._text) + 1
