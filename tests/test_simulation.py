from turretgrid.config import GridConfig, RulesConfig
from turretgrid.core.grid import Bounds, Cell, Direction
from turretgrid.entities.enemy import Enemy
from turretgrid.systems.economy_system import EconomySystem
from turretgrid.systems.pathing import Path
from turretgrid.systems.placement_system import PlacementSystem
from turretgrid.systems.progression_system import ProgressionSystem
from turretgrid.systems.simulation import Session, Simulation
from turretgrid.systems.wave_system import WaveSystem


def _rules() -> RulesConfig:
    return RulesConfig(
        grid=GridConfig(width=10, height=6),
        tick_interval_ms=200,
        spawn_interval_ms=1500,
        tower_cooldown_ms=2000,
        tower_cost=10,
        kill_bounty=2,
        wave_clear_bonus=25,
        starting_lives=10,
        waves_to_win=3,
        enemies_per_wave_increment=5,
        enemy_hit_points=1,
    )


def _session(total_enemies: int = 2) -> Session:
    bounds = Bounds(width=10, height=6)
    path = Path([Cell(x, 3) for x in range(1, 6)])
    return Session(
        bounds=bounds,
        path=path,
        economy=EconomySystem(gold=50),
        progression=ProgressionSystem(lives=10),
        waves=WaveSystem(total_enemies, spawn_interval_ms=1500),
        placement=PlacementSystem(bounds=bounds, path=path),
    )


def test_spawned_enemy_advances_on_its_first_tick() -> None:
    session = _session()
    session.waves.start()
    simulation = Simulation(_rules(), session.bounds)

    result = simulation.advance_tick(session, now_ms=1600)

    assert len(result.spawned) == 1
    assert session.enemies[0].path_index == 1
    assert session.enemies[0].hit_points == 1


def test_leak_costs_exactly_one_life_and_no_gold() -> None:
    session = _session()
    session.waves.start()
    session.enemies = [Enemy(enemy_id="e1", path_index=4)]
    simulation = Simulation(_rules(), session.bounds)

    result = simulation.advance_tick(session, now_ms=100)

    assert result.leaked == session.enemies
    assert session.progression.lives == 9
    assert session.economy.gold == 50
    # The dead entry stays in the wave's collection.
    assert len(session.enemies) == 1

    simulation.advance_tick(session, now_ms=300)
    assert session.progression.lives == 9


def test_kill_awards_bounty() -> None:
    session = _session()
    session.enemies = [Enemy(enemy_id="e1", path_index=1)]
    tower = session.placement.place_tower(Cell(3, 1), now_ms=0)
    tower.facing = Direction.DOWN
    simulation = Simulation(_rules(), session.bounds)

    result = simulation.advance_tick(session, now_ms=2000)

    # Enemy steps onto (3, 3); the shot spawns at (3, 2) and flies to (3, 3).
    assert result.shots_fired == 1
    assert result.killed == session.enemies
    assert session.economy.gold == 52
    assert session.projectiles == []


def test_path_index_never_passes_last_cell() -> None:
    session = _session(total_enemies=3)
    session.waves.start()
    simulation = Simulation(_rules(), session.bounds)
    last_seen: dict[str, int] = {}

    for now in range(200, 20001, 200):
        simulation.advance_tick(session, now_ms=now)
        for enemy in session.enemies:
            assert enemy.path_index <= session.path.last_index
            if enemy.is_alive:
                assert enemy.path_index >= last_seen.get(enemy.enemy_id, 0)
                last_seen[enemy.enemy_id] = enemy.path_index

    assert session.progression.lives == 7
    assert session.waves.is_wave_complete(session.enemies)
