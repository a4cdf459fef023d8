"""In-memory trace of session state changes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Event:
    """One state change, numbered in emission order."""

    name: str
    seq: int
    payload: dict[str, Any] = field(default_factory=dict)


class EventBus:
    """Ordered event log; the terminal drains it each frame, tests query it."""

    def __init__(self) -> None:
        self._pending: list[Event] = []
        self._seq = 0

    def emit(self, event_name: str, /, **payload: Any) -> Event:
        self._seq += 1
        event = Event(name=event_name, seq=self._seq, payload=payload)
        self._pending.append(event)
        return event

    def named(self, event_name: str) -> list[Event]:
        return [event for event in self._pending if event.name == event_name]

    def latest(self, event_name: str) -> Event | None:
        matches = self.named(event_name)
        return matches[-1] if matches else None

    def drain(self) -> list[Event]:
        drained, self._pending = self._pending, []
        return drained
