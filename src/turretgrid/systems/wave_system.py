"""Wave scheduling: spawn pacing, per-wave counters and completion."""

from __future__ import annotations

from typing import Iterable

from turretgrid.entities.enemy import Enemy


class WaveSystem:
    def __init__(self, total_enemies: int, spawn_interval_ms: int, now_ms: int = 0) -> None:
        if total_enemies <= 0:
            raise ValueError("total_enemies must be positive")
        self.wave_number = 1
        self.total_enemies = total_enemies
        self.spawn_interval_ms = spawn_interval_ms
        self.spawned = 0
        self.started = False
        self._last_spawn_ms = now_ms

    def start(self) -> None:
        # The spawn timer keeps running from wave setup, so idling before the
        # start makes the first enemy due on the first tick.
        if self.started:
            raise ValueError("Wave already running")
        self.started = True

    def tick(self, now_ms: int) -> bool:
        """Returns True when one enemy is due this tick."""
        if not self.started or self.spawned >= self.total_enemies:
            return False
        if now_ms - self._last_spawn_ms < self.spawn_interval_ms:
            return False
        self.spawned += 1
        self._last_spawn_ms = now_ms
        return True

    def is_wave_complete(self, enemies: Iterable[Enemy]) -> bool:
        if self.spawned != self.total_enemies:
            return False
        return not any(enemy.is_alive for enemy in enemies)

    def next_wave(self, increment: int, now_ms: int) -> None:
        self.wave_number += 1
        self.total_enemies += increment
        self.spawned = 0
        self.started = False
        self._last_spawn_ms = now_ms
