"""Config loading and validation for the Turretgrid simulation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import json


@dataclass
class GridConfig:
    width: int
    height: int


@dataclass
class Waypoint:
    x: int
    y: int


@dataclass
class RulesConfig:
    grid: GridConfig
    tick_interval_ms: int
    spawn_interval_ms: int
    tower_cooldown_ms: int
    tower_cost: int
    kill_bounty: int
    wave_clear_bonus: int
    starting_lives: int
    waves_to_win: int
    enemies_per_wave_increment: int
    enemy_hit_points: int


@dataclass
class DifficultyConfig:
    level: int
    name: str
    enemies: int
    starting_gold: int
    path_waypoints: list[Waypoint]


@dataclass
class GameContent:
    rules: RulesConfig
    difficulties: dict[int, DifficultyConfig]

    def difficulty(self, level: int) -> DifficultyConfig:
        cfg = self.difficulties.get(level)
        if cfg is None:
            raise ValueError(f"Unknown difficulty level: {level}")
        return cfg


DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "data"

_POSITIVE_RULES = (
    "tick_interval_ms",
    "spawn_interval_ms",
    "tower_cooldown_ms",
    "tower_cost",
    "starting_lives",
    "waves_to_win",
    "enemy_hit_points",
)


def _load_json(path: Path) -> dict | list:
    if not path.exists():
        raise ValueError(f"Missing config file: {path}")
    return json.loads(path.read_text())


def _require_keys(data: dict, keys: set[str], context: str) -> None:
    missing = keys - set(data.keys())
    if missing:
        raise ValueError(f"{context}: missing keys {sorted(missing)}")


def _parse_rules(raw: dict) -> RulesConfig:
    _require_keys(
        raw,
        {
            "grid",
            "tick_interval_ms",
            "spawn_interval_ms",
            "tower_cooldown_ms",
            "tower_cost",
            "kill_bounty",
            "wave_clear_bonus",
            "starting_lives",
            "waves_to_win",
            "enemies_per_wave_increment",
            "enemy_hit_points",
        },
        "rules",
    )
    _require_keys(raw["grid"], {"width", "height"}, "rules.grid")

    rules = RulesConfig(
        grid=GridConfig(width=int(raw["grid"]["width"]), height=int(raw["grid"]["height"])),
        tick_interval_ms=int(raw["tick_interval_ms"]),
        spawn_interval_ms=int(raw["spawn_interval_ms"]),
        tower_cooldown_ms=int(raw["tower_cooldown_ms"]),
        tower_cost=int(raw["tower_cost"]),
        kill_bounty=int(raw["kill_bounty"]),
        wave_clear_bonus=int(raw["wave_clear_bonus"]),
        starting_lives=int(raw["starting_lives"]),
        waves_to_win=int(raw["waves_to_win"]),
        enemies_per_wave_increment=int(raw["enemies_per_wave_increment"]),
        enemy_hit_points=int(raw["enemy_hit_points"]),
    )

    # A 3x3 grid is the smallest with a non-empty interior.
    if rules.grid.width < 3 or rules.grid.height < 3:
        raise ValueError("grid must be at least 3x3")
    for name in _POSITIVE_RULES:
        if getattr(rules, name) <= 0:
            raise ValueError(f"{name} must be positive")
    for name in ("kill_bounty", "wave_clear_bonus", "enemies_per_wave_increment"):
        if getattr(rules, name) < 0:
            raise ValueError(f"{name} must be non-negative")
    return rules


def _validate_waypoints(cfg: DifficultyConfig, grid: GridConfig) -> None:
    if len(cfg.path_waypoints) < 2:
        raise ValueError(f"difficulty {cfg.level}: path_waypoints must include at least 2 points")

    for point in cfg.path_waypoints:
        if not (1 <= point.x <= grid.width - 2 and 1 <= point.y <= grid.height - 2):
            raise ValueError(f"difficulty {cfg.level}: waypoint ({point.x}, {point.y}) is outside the interior")

    for a, b in zip(cfg.path_waypoints, cfg.path_waypoints[1:]):
        if a.x != b.x and a.y != b.y:
            raise ValueError(
                f"difficulty {cfg.level}: diagonal segment ({a.x}, {a.y}) -> ({b.x}, {b.y})"
            )
        if a.x == b.x and a.y == b.y:
            raise ValueError(f"difficulty {cfg.level}: repeated waypoint ({a.x}, {a.y})")


def load_game_content(base_data_dir: Path | None = None) -> GameContent:
    data_dir = base_data_dir or DEFAULT_DATA_DIR

    rules = _parse_rules(_load_json(data_dir / "rules.json"))

    difficulties_raw = _load_json(data_dir / "difficulties.json")
    difficulties: dict[int, DifficultyConfig] = {}
    for entry in difficulties_raw:
        _require_keys(
            entry,
            {"level", "name", "enemies", "starting_gold", "path_waypoints"},
            f"difficulty {entry!r}",
        )
        cfg = DifficultyConfig(
            level=int(entry["level"]),
            name=entry["name"],
            enemies=int(entry["enemies"]),
            starting_gold=int(entry["starting_gold"]),
            path_waypoints=[Waypoint(x=int(p["x"]), y=int(p["y"])) for p in entry["path_waypoints"]],
        )
        if cfg.level in difficulties:
            raise ValueError(f"Duplicate difficulty level: {cfg.level}")
        if cfg.enemies <= 0:
            raise ValueError(f"difficulty {cfg.level}: enemies must be positive")
        if cfg.starting_gold < 0:
            raise ValueError(f"difficulty {cfg.level}: starting_gold must be non-negative")
        _validate_waypoints(cfg, rules.grid)
        difficulties[cfg.level] = cfg

    if not difficulties:
        raise ValueError("At least one difficulty is required")

    return GameContent(
        rules=rules,
        difficulties=dict(sorted(difficulties.items())),
    )
