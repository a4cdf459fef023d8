"""Tower placement, rotation and occupancy validation."""

from __future__ import annotations

from dataclasses import dataclass

from turretgrid.core.grid import Bounds, Cell
from turretgrid.entities.tower import Tower
from turretgrid.systems.pathing import Path


@dataclass
class PlacementSystem:
    bounds: Bounds
    path: Path

    def __post_init__(self) -> None:
        self._towers_by_cell: dict[Cell, Tower] = {}
        self._counter = 0

    def place_tower(self, cell: Cell, now_ms: int) -> Tower:
        if not self.bounds.contains(cell):
            raise ValueError(f"Cell is outside the interior: {cell}")
        if self.path.contains(cell):
            raise ValueError(f"Cell is on the path: {cell}")
        if cell in self._towers_by_cell:
            raise ValueError(f"Cell is occupied: {cell}")
        self._counter += 1
        tower = Tower(tower_id=f"tower_{self._counter:03d}", cell=cell, last_shot_ms=now_ms)
        self._towers_by_cell[cell] = tower
        return tower

    def rotate_tower(self, cell: Cell) -> Tower:
        tower = self._towers_by_cell.get(cell)
        if tower is None:
            raise ValueError(f"No tower at cell: {cell}")
        tower.rotate()
        return tower

    def get_tower(self, cell: Cell) -> Tower | None:
        return self._towers_by_cell.get(cell)

    def all_towers(self) -> list[Tower]:
        return list(self._towers_by_cell.values())
