"""Millisecond time sources driving spawn, cooldown and frame timers."""

from __future__ import annotations

from typing import Protocol
import time


class Clock(Protocol):
    def now_ms(self) -> int:
        ...


class MonotonicClock:
    """Wall-clock time source for the interactive session."""

    def __init__(self) -> None:
        self._origin = time.monotonic()

    def now_ms(self) -> int:
        return int((time.monotonic() - self._origin) * 1000)


class ManualClock:
    """Clock that only moves when told to, for deterministic simulation runs."""

    def __init__(self, start_ms: int = 0) -> None:
        self._now = start_ms

    def now_ms(self) -> int:
        return self._now

    def advance(self, ms: int) -> None:
        if ms < 0:
            raise ValueError("ms must be non-negative")
        self._now += ms
