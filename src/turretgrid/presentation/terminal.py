"""Interactive terminal front end built on blessed.

Keys are translated into session commands; each frame is drawn from a
FrameSnapshot, so nothing here touches simulation state directly.
"""

from __future__ import annotations

import sys
from typing import Callable

from blessed import Terminal
from blessed.keyboard import Keystroke

from turretgrid.core.commands import (
    Command,
    ContinueToNextWave,
    PlaceOrRotateTowerAt,
    Quit,
    SelectDifficulty,
    StartWave,
)
from turretgrid.core.event_bus import Event
from turretgrid.core.game_state import GameState
from turretgrid.core.grid import Bounds, Cell, Direction
from turretgrid.game import TurretGridGame
from turretgrid.presentation import text_renderer
from turretgrid.presentation.snapshot import snapshot_game

POLL_TIMEOUT_S = 0.01
STATUS_LINES = 1

_MOVE_KEYS = {
    "KEY_UP": Direction.UP,
    "KEY_RIGHT": Direction.RIGHT,
    "KEY_DOWN": Direction.DOWN,
    "KEY_LEFT": Direction.LEFT,
    "w": Direction.UP,
    "d": Direction.RIGHT,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
}

_REJECTION_TEXT = {
    "out_of_bounds": "Can't build outside the field",
    "on_path": "Can't build on the path",
    "insufficient_gold": "Not enough gold",
}


class TerminalUnavailable(RuntimeError):
    """Raised when the attached terminal cannot host the game screen."""


def _is_enter(key: Keystroke) -> bool:
    return key.name == "KEY_ENTER" or str(key) in ("\n", "\r")


def commands_for_key(
    key: Keystroke,
    state: GameState,
    cursor: Cell,
    bounds: Bounds,
) -> tuple[list[Command], Cell]:
    """Map one keystroke to commands and the (possibly moved) placement cursor."""
    char = "" if key.is_sequence else str(key).lower()

    if char == "q":
        return [Quit()], cursor

    if state == GameState.SELECTING_DIFFICULTY:
        if char.isdigit():
            return [SelectDifficulty(int(char))], cursor
        return [], cursor

    if _is_enter(key):
        if state == GameState.WAVE_IDLE:
            return [StartWave()], cursor
        if state == GameState.WAVE_COMPLETE:
            return [ContinueToNextWave()], cursor
        return [], cursor

    if state not in {GameState.WAVE_IDLE, GameState.WAVE_ACTIVE}:
        return [], cursor

    direction = _MOVE_KEYS.get(key.name or "")
    if direction is None:
        direction = _MOVE_KEYS.get(char)
    if direction is not None:
        moved = bounds.step(cursor, direction)
        return [], moved or cursor

    if char == " ":
        return [PlaceOrRotateTowerAt(cursor)], cursor

    return [], cursor


def describe_event(event: Event) -> str | None:
    """Status-line text for the events a player should notice."""
    payload = event.payload
    if event.name == "placement_rejected":
        return _REJECTION_TEXT.get(payload["reason"], "Can't build there")
    if event.name == "tower_built":
        return f"Tower built at ({payload['x']}, {payload['y']})"
    if event.name == "tower_rotated":
        return f"Tower now facing {payload['facing'].lower()}"
    if event.name == "enemy_leaked":
        return "An enemy reached the base!"
    if event.name == "wave_start":
        return f"Wave {payload['wave_number']} incoming: {payload['total_enemies']} enemies"
    return None


class TerminalApp:
    def __init__(self, term: Terminal, game: TurretGridGame) -> None:
        self.term = term
        self.game = game
        bounds = game.bounds
        self.cursor = Cell(bounds.width // 2, bounds.height // 2)
        self.status = ""
        self._glyph_styles: dict[str, Callable[[str], str]] = {
            text_renderer.BORDER: term.green,
            text_renderer.PATH: term.yellow,
            text_renderer.ENEMY: term.red,
            text_renderer.PROJECTILE: term.cyan,
        }
        for glyph in text_renderer.TOWER_GLYPHS.values():
            self._glyph_styles[glyph] = term.blue

    def check_size(self) -> None:
        if not self.term.is_a_tty:
            raise TerminalUnavailable("Turretgrid needs an interactive terminal")
        bounds = self.game.bounds
        # Grid rows plus HUD, help, banner and status lines.
        min_height = bounds.height + 3 + STATUS_LINES
        if self.term.width < bounds.width or self.term.height < min_height:
            raise TerminalUnavailable(
                f"Terminal too small: {self.term.width}x{self.term.height}. "
                f"Minimum: {bounds.width}x{min_height}"
            )

    def handle_input(self) -> bool:
        """Drain pending keys; returns True when any key was read."""
        handled = False
        key = self.term.inkey(timeout=POLL_TIMEOUT_S)
        while key:
            handled = True
            commands, self.cursor = commands_for_key(key, self.game.state, self.cursor, self.game.bounds)
            for command in commands:
                self.game.handle(command)
            key = self.term.inkey(timeout=0)
        return handled

    def update_status(self) -> None:
        for event in self.game.events.drain():
            message = describe_event(event)
            if message:
                self.status = message

    def draw(self) -> None:
        snapshot = snapshot_game(self.game)
        rows = text_renderer.render_rows(snapshot)
        show_cursor = snapshot.state in {GameState.WAVE_IDLE, GameState.WAVE_ACTIVE}

        out = [self.term.home]
        for y, row in enumerate(rows):
            if y < snapshot.bounds.height and snapshot.hud is not None:
                line = self._style_row(row, y, show_cursor)
            else:
                line = self.term.normal + row
            out.append(self.term.move_xy(0, y) + line + self.term.normal + self.term.clear_eol)
        out.append(self.term.move_xy(0, len(rows)) + self.status + self.term.clear_eos)
        print("".join(out), end="", flush=True)

    def _style_row(self, row: str, y: int, show_cursor: bool) -> str:
        parts = []
        for x, glyph in enumerate(row):
            style = self._glyph_styles.get(glyph)
            text = style(glyph) if style else glyph
            if show_cursor and (x, y) == self.cursor:
                text = self.term.reverse(glyph)
            parts.append(text)
        return "".join(parts)

    def run(self) -> None:
        print(self.term.home + self.term.clear, end="", flush=True)
        self.draw()
        while not self.game.exited:
            handled = self.handle_input()
            frame_due = self.game.update()
            if handled or frame_due:
                self.update_status()
                self.draw()


def run_terminal(game: TurretGridGame | None = None) -> TurretGridGame:
    term = Terminal()
    game = game or TurretGridGame()
    app = TerminalApp(term, game)
    try:
        app.check_size()
    except TerminalUnavailable as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        app.run()
        print(term.normal, end="", flush=True)
    return game
