import pytest

from turretgrid.config import DifficultyConfig, Waypoint, load_game_content
from turretgrid.core.grid import Bounds, Cell
from turretgrid.systems.pathing import Path, build_path, expand_waypoints


def _bounds() -> Bounds:
    grid = load_game_content().rules.grid
    return Bounds(width=grid.width, height=grid.height)


@pytest.mark.parametrize("level", [1, 2, 3])
def test_every_difficulty_builds_connected_interior_path(level: int) -> None:
    bounds = _bounds()
    path = build_path(load_game_content().difficulty(level), bounds)

    assert len(path) >= 2
    for a, b in zip(path.cells, path.cells[1:]):
        assert abs(a.x - b.x) + abs(a.y - b.y) == 1
    assert all(bounds.contains(cell) for cell in path.cells)


def test_path_topologies_match_known_routes() -> None:
    content = load_game_content()
    bounds = _bounds()

    easy = build_path(content.difficulty(1), bounds)
    assert len(easy) == 90
    assert easy.coordinate_at(0) == Cell(1, 8)
    assert easy.coordinate_at(23) == Cell(24, 8)
    assert easy.coordinate_at(29) == Cell(24, 14)
    assert easy.coordinate_at(30) == Cell(25, 14)
    assert easy.coordinate_at(easy.last_index) == Cell(78, 20)

    medium = build_path(content.difficulty(2), bounds)
    assert len(medium) == 53
    assert medium.coordinate_at(14) == Cell(40, 15)

    hard = build_path(content.difficulty(3), bounds)
    assert len(hard) == 78
    assert {cell.y for cell in hard.cells} == {12}


def test_contains_and_coordinate_bounds() -> None:
    path = Path([Cell(1, 1), Cell(2, 1), Cell(2, 2)])
    assert path.contains(Cell(2, 1))
    assert not path.contains(Cell(1, 2))
    assert path.coordinate_at(2) == Cell(2, 2)
    with pytest.raises(IndexError):
        path.coordinate_at(3)
    with pytest.raises(IndexError):
        path.coordinate_at(-1)


def test_path_rejects_gaps_and_single_cells() -> None:
    with pytest.raises(ValueError, match="not orthogonally adjacent"):
        Path([Cell(1, 1), Cell(3, 1)])
    with pytest.raises(ValueError, match="at least 2"):
        Path([Cell(1, 1)])


def test_expand_waypoints_walks_each_segment_once() -> None:
    cells = expand_waypoints([Waypoint(3, 1), Waypoint(1, 1), Waypoint(1, 3)])
    assert cells == [Cell(3, 1), Cell(2, 1), Cell(1, 1), Cell(1, 2), Cell(1, 3)]


def test_build_path_rejects_cells_outside_interior() -> None:
    difficulty = DifficultyConfig(
        level=9,
        name="Off grid",
        enemies=1,
        starting_gold=0,
        path_waypoints=[Waypoint(1, 1), Waypoint(12, 1)],
    )
    with pytest.raises(ValueError, match="outside the interior"):
        build_path(difficulty, Bounds(width=10, height=5))
