"""Tower entity with a fixed facing and attack cooldown logic."""

from __future__ import annotations

from dataclasses import dataclass

from turretgrid.core.grid import Cell, Direction


@dataclass
class Tower:
    tower_id: str
    cell: Cell
    last_shot_ms: int
    facing: Direction = Direction.LEFT

    def rotate(self) -> Direction:
        self.facing = self.facing.next()
        return self.facing

    def can_fire(self, now_ms: int, cooldown_ms: int) -> bool:
        return now_ms - self.last_shot_ms >= cooldown_ms

    def reset_cooldown(self, now_ms: int) -> None:
        self.last_shot_ms = now_ms
