from __future__ import annotations

import time


class Timer:
    """Wall-clock stopwatch started on creation."""

    def __init__(self) -> None:
        self._started_at = time.monotonic()

    def elapsed(self) -> float:
        return max(0.0, time.monotonic() - self._started_at)


def format_elapsed(seconds: float) -> str:
    whole = int(max(seconds, 0.0))
    return f"{whole // 60}:{whole % 60:02d}"
