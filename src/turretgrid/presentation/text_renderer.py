"""Character-grid rendering of a frame snapshot."""

from __future__ import annotations

from turretgrid.core.game_state import GameState
from turretgrid.core.grid import Direction
from turretgrid.presentation.snapshot import FrameSnapshot, HudSnapshot

BORDER = "#"
PATH = "."
ENEMY = "@"
PROJECTILE = "*"
EMPTY = " "

TOWER_GLYPHS = {
    Direction.UP: "^",
    Direction.RIGHT: ">",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
}

_HELP_LINES = {
    GameState.WAVE_IDLE: "Press ENTER to start wave | SPACE places a tower ({cost} gold) or rotates one | q quits",
    GameState.WAVE_ACTIVE: "Arrows/WASD move the cursor | SPACE places a tower ({cost} gold) or rotates one | q quits",
    GameState.WAVE_COMPLETE: "Press ENTER for next wave or 'q' to quit",
    GameState.SESSION_WON: "Press 'q' to exit",
    GameState.SESSION_LOST: "Press 'q' to exit",
}


def render_menu(snapshot: FrameSnapshot) -> list[str]:
    rows = ["=== TURRETGRID TOWER DEFENSE ===", "", "Choose difficulty:"]
    for level, name in sorted(snapshot.difficulty_names.items()):
        rows.append(f"{level}. {name}")
    rows.extend(["", "Press a number to select, 'q' to quit:"])
    return rows


def render_grid(snapshot: FrameSnapshot) -> list[str]:
    bounds = snapshot.bounds
    grid = [[EMPTY] * bounds.width for _ in range(bounds.height)]

    for y in range(bounds.height):
        for x in range(bounds.width):
            if y in (0, bounds.height - 1) or x in (0, bounds.width - 1):
                grid[y][x] = BORDER

    # Later layers overwrite earlier ones.
    for cell in snapshot.path_cells:
        grid[cell.y][cell.x] = PATH
    for cell in snapshot.enemy_cells:
        grid[cell.y][cell.x] = ENEMY
    for cell, facing in snapshot.towers:
        grid[cell.y][cell.x] = TOWER_GLYPHS[facing]
    for cell in snapshot.projectile_cells:
        grid[cell.y][cell.x] = PROJECTILE

    return ["".join(row) for row in grid]


def render_hud(hud: HudSnapshot) -> str:
    return (
        f"Wave {hud.wave_number} | Enemies: {hud.spawned}/{hud.total_enemies} | "
        f"Alive: {hud.living_enemies} | Gold: {hud.gold} | Towers: {hud.tower_count} | Lives: {hud.lives}"
    )


def render_banner(snapshot: FrameSnapshot) -> str | None:
    if snapshot.state == GameState.WAVE_COMPLETE and snapshot.hud is not None:
        return f"WAVE {snapshot.hud.wave_number} COMPLETE! +{snapshot.wave_bonus} Gold!"
    if snapshot.state == GameState.SESSION_WON:
        return "YOU WIN!!"
    if snapshot.state == GameState.SESSION_LOST:
        return "GAME OVER"
    return None


def render_rows(snapshot: FrameSnapshot) -> list[str]:
    if snapshot.state == GameState.SELECTING_DIFFICULTY or snapshot.hud is None:
        return render_menu(snapshot)

    rows = render_grid(snapshot)
    rows.append(render_hud(snapshot.hud))
    help_line = _HELP_LINES.get(snapshot.state)
    if help_line:
        rows.append(help_line.format(cost=snapshot.tower_cost))
    banner = render_banner(snapshot)
    if banner:
        rows.append(banner)
    return rows
