"""Enemy route: ordered, orthogonally connected grid cells."""

from __future__ import annotations

from dataclasses import dataclass

from turretgrid.config import DifficultyConfig, Waypoint
from turretgrid.core.grid import Bounds, Cell


@dataclass
class Path:
    cells: list[Cell]

    def __post_init__(self) -> None:
        if len(self.cells) < 2:
            raise ValueError("Path requires at least 2 cells")
        for a, b in zip(self.cells, self.cells[1:]):
            if abs(a.x - b.x) + abs(a.y - b.y) != 1:
                raise ValueError(f"Path cells {a} and {b} are not orthogonally adjacent")
        self._members = frozenset(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def last_index(self) -> int:
        return len(self.cells) - 1

    def contains(self, cell: Cell) -> bool:
        return cell in self._members

    def coordinate_at(self, index: int) -> Cell:
        if not 0 <= index < len(self.cells):
            raise IndexError(f"path index {index} out of range 0..{self.last_index}")
        return self.cells[index]


def expand_waypoints(waypoints: list[Waypoint]) -> list[Cell]:
    if len(waypoints) < 2:
        raise ValueError("At least 2 waypoints are required")

    cells = [Cell(waypoints[0].x, waypoints[0].y)]
    for a, b in zip(waypoints, waypoints[1:]):
        if a.x != b.x and a.y != b.y:
            raise ValueError(f"Diagonal segment ({a.x}, {a.y}) -> ({b.x}, {b.y})")
        dx = (b.x > a.x) - (b.x < a.x)
        dy = (b.y > a.y) - (b.y < a.y)
        x, y = a.x, a.y
        while (x, y) != (b.x, b.y):
            x += dx
            y += dy
            cells.append(Cell(x, y))
    return cells


def build_path(difficulty: DifficultyConfig, bounds: Bounds) -> Path:
    cells = expand_waypoints(difficulty.path_waypoints)
    for cell in cells:
        if not bounds.contains(cell):
            raise ValueError(f"difficulty {difficulty.level}: path cell {cell} is outside the interior")
    return Path(cells)
