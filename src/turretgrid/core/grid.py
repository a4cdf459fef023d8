"""Grid coordinates, facings and interior bounds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class Cell(NamedTuple):
    x: int
    y: int


class Direction(int, Enum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def next(self) -> "Direction":
        return Direction((self.value + 1) % 4)

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]


_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


@dataclass(frozen=True)
class Bounds:
    """Grid dimensions; the playable interior excludes the one-cell frame."""

    width: int
    height: int

    def contains(self, cell: Cell) -> bool:
        return 1 <= cell.x <= self.width - 2 and 1 <= cell.y <= self.height - 2

    def step(self, cell: Cell, direction: Direction) -> Cell | None:
        dx, dy = direction.offset
        candidate = Cell(cell.x + dx, cell.y + dy)
        if not self.contains(candidate):
            return None
        return candidate
