"""Per-tick state transition over an explicit session state record."""

from __future__ import annotations

from dataclasses import dataclass, field

from turretgrid.config import RulesConfig
from turretgrid.core.grid import Bounds
from turretgrid.entities.enemy import Enemy
from turretgrid.entities.projectile import Projectile
from turretgrid.systems.combat_system import CombatSystem
from turretgrid.systems.economy_system import EconomySystem
from turretgrid.systems.pathing import Path
from turretgrid.systems.placement_system import PlacementSystem
from turretgrid.systems.progression_system import ProgressionSystem
from turretgrid.systems.wave_system import WaveSystem


@dataclass
class Session:
    """Everything a tick reads or mutates; owned by the game loop."""

    bounds: Bounds
    path: Path
    economy: EconomySystem
    progression: ProgressionSystem
    waves: WaveSystem
    placement: PlacementSystem
    enemies: list[Enemy] = field(default_factory=list)
    projectiles: list[Projectile] = field(default_factory=list)

    def living_enemies(self) -> list[Enemy]:
        return [enemy for enemy in self.enemies if enemy.is_alive]

    def reset_wave_entities(self) -> None:
        self.enemies = []
        self.projectiles = []


@dataclass
class TickResult:
    spawned: list[Enemy] = field(default_factory=list)
    leaked: list[Enemy] = field(default_factory=list)
    killed: list[Enemy] = field(default_factory=list)
    shots_fired: int = 0
    projectiles_expired: int = 0


class Simulation:
    """Runs the fixed-order tick phases against a Session.

    Phase order is spawn, enemy advance, tower fire, projectile advance,
    collision, compaction. A projectile fired this tick also moves this tick,
    so it is first tested for hits two cells in front of its tower.
    """

    def __init__(self, rules: RulesConfig, bounds: Bounds) -> None:
        self.rules = rules
        self.combat = CombatSystem(bounds, rules.tower_cooldown_ms)

    def advance_tick(self, session: Session, now_ms: int) -> TickResult:
        result = TickResult()

        if session.waves.tick(now_ms):
            enemy = Enemy(
                enemy_id=f"enemy_{session.waves.wave_number:02d}_{session.waves.spawned:03d}",
                hit_points=self.rules.enemy_hit_points,
            )
            session.enemies.append(enemy)
            result.spawned.append(enemy)

        path_length = len(session.path)
        for enemy in session.enemies:
            if enemy.advance(path_length):
                session.progression.lose_life()
                result.leaked.append(enemy)

        combat = self.combat.tick(
            now_ms,
            session.placement.all_towers(),
            session.enemies,
            session.projectiles,
            session.path,
        )
        for _ in combat.killed_enemies:
            session.economy.reward(self.rules.kill_bounty)

        result.killed = combat.killed_enemies
        result.shots_fired = combat.shots_fired
        result.projectiles_expired = combat.projectiles_expired
        return result
