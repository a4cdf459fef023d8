import pytest

from turretgrid.core.grid import Bounds, Cell, Direction
from turretgrid.systems.pathing import Path
from turretgrid.systems.placement_system import PlacementSystem


def _placement() -> PlacementSystem:
    return PlacementSystem(bounds=Bounds(width=10, height=6), path=Path([Cell(1, 3), Cell(2, 3), Cell(3, 3)]))


def test_place_tower_assigns_ids_and_keeps_order() -> None:
    placement = _placement()
    first = placement.place_tower(Cell(5, 2), now_ms=100)
    second = placement.place_tower(Cell(6, 2), now_ms=200)

    assert first.tower_id == "tower_001"
    assert second.tower_id == "tower_002"
    assert first.last_shot_ms == 100
    assert placement.all_towers() == [first, second]


def test_place_tower_rejects_invalid_cells() -> None:
    placement = _placement()
    placement.place_tower(Cell(5, 2), now_ms=0)

    with pytest.raises(ValueError, match="occupied"):
        placement.place_tower(Cell(5, 2), now_ms=0)
    with pytest.raises(ValueError, match="on the path"):
        placement.place_tower(Cell(1, 3), now_ms=0)
    with pytest.raises(ValueError, match="outside"):
        placement.place_tower(Cell(9, 2), now_ms=0)


def test_rotate_tower() -> None:
    placement = _placement()
    placement.place_tower(Cell(5, 2), now_ms=0)

    assert placement.rotate_tower(Cell(5, 2)).facing == Direction.UP
    with pytest.raises(ValueError, match="No tower"):
        placement.rotate_tower(Cell(6, 2))
