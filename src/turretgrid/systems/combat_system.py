"""Tower fire, projectile flight and hit resolution."""

from __future__ import annotations

from dataclasses import dataclass, field

from turretgrid.core.grid import Bounds
from turretgrid.entities.enemy import Enemy
from turretgrid.entities.projectile import Projectile
from turretgrid.entities.tower import Tower
from turretgrid.systems.pathing import Path


@dataclass
class CombatTickResult:
    shots_fired: int = 0
    projectiles_expired: int = 0
    hits: int = 0
    killed_enemies: list[Enemy] = field(default_factory=list)


class CombatSystem:
    def __init__(self, bounds: Bounds, tower_cooldown_ms: int) -> None:
        self._bounds = bounds
        self._cooldown_ms = tower_cooldown_ms

    def tick(
        self,
        now_ms: int,
        towers: list[Tower],
        enemies: list[Enemy],
        projectiles: list[Projectile],
        path: Path,
    ) -> CombatTickResult:
        result = CombatTickResult()
        result.shots_fired = self.fire_towers(now_ms, towers, projectiles)
        result.projectiles_expired = self.advance_projectiles(projectiles)
        result.hits, result.killed_enemies = self.resolve_collisions(projectiles, enemies, path)
        self.compact(projectiles)
        return result

    def fire_towers(self, now_ms: int, towers: list[Tower], projectiles: list[Projectile]) -> int:
        fired = 0
        for tower in towers:
            if not tower.can_fire(now_ms, self._cooldown_ms):
                continue
            target_cell = self._bounds.step(tower.cell, tower.facing)
            # Facing the wall: hold fire and keep the cooldown elapsed.
            if target_cell is None:
                continue
            projectiles.append(Projectile(cell=target_cell, facing=tower.facing))
            tower.reset_cooldown(now_ms)
            fired += 1
        return fired

    def advance_projectiles(self, projectiles: list[Projectile]) -> int:
        expired = 0
        for projectile in projectiles:
            if projectile.is_alive and not projectile.advance(self._bounds):
                expired += 1
        return expired

    def resolve_collisions(
        self,
        projectiles: list[Projectile],
        enemies: list[Enemy],
        path: Path,
    ) -> tuple[int, list[Enemy]]:
        hits = 0
        killed: list[Enemy] = []
        for projectile in projectiles:
            if not projectile.is_alive:
                continue
            for enemy in enemies:
                if not enemy.is_alive:
                    continue
                if path.coordinate_at(enemy.path_index) != projectile.cell:
                    continue
                hits += 1
                projectile.is_alive = False
                if enemy.apply_damage(1):
                    killed.append(enemy)
                break
        return hits, killed

    @staticmethod
    def compact(projectiles: list[Projectile]) -> None:
        projectiles[:] = [p for p in projectiles if p.is_alive]
