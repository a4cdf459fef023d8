"""Semantic commands delivered to the session by an input source."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from turretgrid.core.grid import Cell


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class StartWave:
    pass


@dataclass(frozen=True)
class ContinueToNextWave:
    pass


@dataclass(frozen=True)
class SelectDifficulty:
    level: int


@dataclass(frozen=True)
class PlaceOrRotateTowerAt:
    cell: Cell


Command = Union[Quit, StartWave, ContinueToNextWave, SelectDifficulty, PlaceOrRotateTowerAt]
