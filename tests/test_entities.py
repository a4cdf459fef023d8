from turretgrid.core.grid import Bounds, Cell, Direction
from turretgrid.entities.enemy import Enemy
from turretgrid.entities.projectile import Projectile
from turretgrid.entities.tower import Tower


def test_enemy_leaks_instead_of_overflowing_path() -> None:
    enemy = Enemy(enemy_id="e1", path_index=1)
    assert enemy.advance(path_length=3) is False
    assert enemy.path_index == 2

    assert enemy.advance(path_length=3) is True
    assert enemy.path_index == 2
    assert not enemy.is_alive

    # Dead enemies are inert.
    assert enemy.advance(path_length=3) is False


def test_enemy_damage_reports_killing_blow_once() -> None:
    enemy = Enemy(enemy_id="e1", hit_points=2)
    assert enemy.apply_damage(1) is False
    assert enemy.is_alive
    assert enemy.apply_damage(1) is True
    assert enemy.hit_points == 0
    assert enemy.apply_damage(1) is False


def test_direction_cycle_has_period_four() -> None:
    facing = Direction.UP
    seen = []
    for _ in range(4):
        facing = facing.next()
        seen.append(facing)
    assert seen == [Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.UP]


def test_tower_starts_facing_left_and_meters_cooldown() -> None:
    tower = Tower(tower_id="t1", cell=Cell(3, 3), last_shot_ms=1000)
    assert tower.facing == Direction.LEFT
    assert not tower.can_fire(2999, cooldown_ms=2000)
    assert tower.can_fire(3000, cooldown_ms=2000)
    tower.reset_cooldown(3000)
    assert not tower.can_fire(4000, cooldown_ms=2000)


def test_projectile_dies_at_interior_edge() -> None:
    bounds = Bounds(width=10, height=6)
    projectile = Projectile(cell=Cell(7, 2), facing=Direction.RIGHT)

    assert projectile.advance(bounds) is True
    assert projectile.cell == Cell(8, 2)

    assert projectile.advance(bounds) is False
    assert projectile.cell == Cell(8, 2)
    assert not projectile.is_alive


def test_bounds_exclude_border_frame() -> None:
    bounds = Bounds(width=10, height=6)
    assert bounds.contains(Cell(1, 1))
    assert bounds.contains(Cell(8, 4))
    assert not bounds.contains(Cell(0, 3))
    assert not bounds.contains(Cell(9, 3))
    assert not bounds.contains(Cell(4, 5))
    assert bounds.step(Cell(1, 1), Direction.UP) is None
    assert bounds.step(Cell(1, 1), Direction.DOWN) == Cell(1, 2)
