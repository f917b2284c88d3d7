"""Per-frame update callbacks driven by a millisecond clock."""

from __future__ import annotations

import time
from collections.abc import Callable

TickFunction = Callable[[float], None]

_START = time.monotonic()


def _ticks_ms() -> int:
    return int((time.monotonic() - _START) * 1000)


class Ticker:
    """Calls registered functions with the seconds elapsed since the previous tick."""

    def __init__(self) -> None:
        self.functions: list[TickFunction] = []
        self.last = 0

    def add(self, func: TickFunction) -> None:
        self.functions.append(func)

    def clear(self) -> None:
        self.functions.clear()

    def tick(self, now_ms: int | None = None) -> float:
        """Run every function once and return the elapsed time in seconds."""
        now = _ticks_ms() if now_ms is None else now_ms
        now &= 0xFFFFFFFF
        dt = ((now - self.last) & 0xFFFFFFFF) / 1000.0
        self.last = now
        for func in self.functions:
            func(dt)
        return dt