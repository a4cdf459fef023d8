"""Enemy entity walking the path one cell per tick."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Enemy:
    enemy_id: str
    hit_points: int = 1
    path_index: int = 0
    is_alive: bool = True

    def advance(self, path_length: int) -> bool:
        """Step to the next path cell; returns True when the enemy leaks into the base."""
        if not self.is_alive:
            return False
        if self.path_index + 1 < path_length:
            self.path_index += 1
            return False
        self.is_alive = False
        return True

    def apply_damage(self, amount: int) -> bool:
        if not self.is_alive:
            return False
        self.hit_points -= max(amount, 0)
        if self.hit_points <= 0:
            self.is_alive = False
            return True
        return False
