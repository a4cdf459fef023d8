"""Read-only view of the session handed to renderers once per frame."""

from __future__ import annotations

from dataclasses import dataclass, field

from turretgrid.core.game_state import GameState
from turretgrid.core.grid import Bounds, Cell, Direction
from turretgrid.game import TurretGridGame


@dataclass(frozen=True)
class HudSnapshot:
    wave_number: int
    spawned: int
    total_enemies: int
    living_enemies: int
    gold: int
    tower_count: int
    lives: int
    wave_started: bool


@dataclass(frozen=True)
class FrameSnapshot:
    state: GameState
    bounds: Bounds
    path_cells: tuple[Cell, ...] = ()
    enemy_cells: tuple[Cell, ...] = ()
    towers: tuple[tuple[Cell, Direction], ...] = ()
    projectile_cells: tuple[Cell, ...] = ()
    hud: HudSnapshot | None = None
    tower_cost: int = 0
    wave_bonus: int = 0
    difficulty_names: dict[int, str] = field(default_factory=dict)


def snapshot_game(game: TurretGridGame) -> FrameSnapshot:
    difficulty_names = {level: cfg.name for level, cfg in game.content.difficulties.items()}
    session = game.session
    if session is None:
        return FrameSnapshot(state=game.state, bounds=game.bounds, difficulty_names=difficulty_names)

    living = session.living_enemies()
    towers = session.placement.all_towers()
    hud = HudSnapshot(
        wave_number=session.waves.wave_number,
        spawned=session.waves.spawned,
        total_enemies=session.waves.total_enemies,
        living_enemies=len(living),
        gold=session.economy.gold,
        tower_count=len(towers),
        lives=session.progression.lives,
        wave_started=session.waves.started,
    )
    return FrameSnapshot(
        state=game.state,
        bounds=game.bounds,
        path_cells=tuple(session.path.cells),
        enemy_cells=tuple(session.path.coordinate_at(enemy.path_index) for enemy in living),
        towers=tuple((tower.cell, tower.facing) for tower in towers),
        projectile_cells=tuple(p.cell for p in session.projectiles if p.is_alive),
        hud=hud,
        tower_cost=game.rules.tower_cost,
        wave_bonus=game.rules.wave_clear_bonus,
        difficulty_names=difficulty_names,
    )
