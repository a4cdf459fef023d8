"""Projectile entity travelling in a straight line."""

from __future__ import annotations

from dataclasses import dataclass

from turretgrid.core.grid import Bounds, Cell, Direction


@dataclass
class Projectile:
    cell: Cell
    facing: Direction
    is_alive: bool = True

    def advance(self, bounds: Bounds) -> bool:
        """Move one cell; returns False once the projectile hits the wall."""
        if not self.is_alive:
            return False
        next_cell = bounds.step(self.cell, self.facing)
        if next_cell is None:
            self.is_alive = False
            return False
        self.cell = next_cell
        return True
