"""Pytest fixtures for Typing Tutor tests."""

import pytest

from session import TypingSession


@pytest.fixture
def make_session():
    """Build a session with part of the reference already typed."""
    def _make(text: str, typed: str = "", width: int = 80) -> TypingSession:
        session = TypingSession(text, width)
        for ch in typed:
            session.push_char(ch)
        return session

    return _make


def style_at(text, index: int) -> str:
    """Style of the span covering `index` in a rich Text, or '' if none."""
    for span in text.spans:
        if span.start <= index < span.end:
            return str(span.style)
    return ""
