"""Main game orchestrator for the Turretgrid session."""

from __future__ import annotations

from pathlib import Path as FsPath

from turretgrid.config import DifficultyConfig, GameContent, load_game_content
from turretgrid.core.clock import Clock, MonotonicClock
from turretgrid.core.commands import (
    Command,
    ContinueToNextWave,
    PlaceOrRotateTowerAt,
    Quit,
    SelectDifficulty,
    StartWave,
)
from turretgrid.core.event_bus import EventBus
from turretgrid.core.game_state import GameState
from turretgrid.core.grid import Bounds, Cell
from turretgrid.systems.economy_system import EconomySystem
from turretgrid.systems.pathing import build_path
from turretgrid.systems.placement_system import PlacementSystem
from turretgrid.systems.progression_system import ProgressionSystem
from turretgrid.systems.simulation import Session, Simulation, TickResult
from turretgrid.systems.wave_system import WaveSystem

_PLACEMENT_STATES = {GameState.WAVE_IDLE, GameState.WAVE_ACTIVE}


class TurretGridGame:
    """Engine-agnostic session model: difficulty menu, wave loop and outcome."""

    def __init__(
        self,
        data_dir: FsPath | None = None,
        content: GameContent | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.content = content or load_game_content(base_data_dir=data_dir)
        self.rules = self.content.rules
        self.clock = clock or MonotonicClock()
        self.events = EventBus()
        self.bounds = Bounds(width=self.rules.grid.width, height=self.rules.grid.height)
        self.simulation = Simulation(self.rules, self.bounds)

        self.state = GameState.SELECTING_DIFFICULTY
        self.difficulty: DifficultyConfig | None = None
        self.session: Session | None = None
        self.exited = False
        self._last_frame_ms = self.clock.now_ms()

    def handle(self, command: Command) -> None:
        """Apply one input command; commands the current state does not accept are ignored."""
        if isinstance(command, Quit):
            self.quit()
        elif isinstance(command, SelectDifficulty):
            if self.state == GameState.SELECTING_DIFFICULTY and command.level in self.content.difficulties:
                self.select_difficulty(command.level)
        elif isinstance(command, StartWave):
            if self.state == GameState.WAVE_IDLE:
                self.start_wave()
        elif isinstance(command, ContinueToNextWave):
            if self.state == GameState.WAVE_COMPLETE:
                self.continue_to_next_wave()
        elif isinstance(command, PlaceOrRotateTowerAt):
            if self.state in _PLACEMENT_STATES:
                self.place_or_rotate_tower_at(command.cell)

    def select_difficulty(self, level: int) -> None:
        if self.state != GameState.SELECTING_DIFFICULTY:
            raise ValueError("Difficulty can only be chosen from the menu")

        difficulty = self.content.difficulty(level)
        path = build_path(difficulty, self.bounds)
        now = self.clock.now_ms()

        self.difficulty = difficulty
        self.session = Session(
            bounds=self.bounds,
            path=path,
            economy=EconomySystem(gold=difficulty.starting_gold),
            progression=ProgressionSystem(lives=self.rules.starting_lives),
            waves=WaveSystem(difficulty.enemies, self.rules.spawn_interval_ms, now_ms=now),
            placement=PlacementSystem(bounds=self.bounds, path=path),
        )
        self.state = GameState.WAVE_IDLE
        self.events.emit(
            "difficulty_selected",
            level=difficulty.level,
            difficulty=difficulty.name,
            total_enemies=difficulty.enemies,
            gold=difficulty.starting_gold,
            path_length=len(path),
        )

    def place_or_rotate_tower_at(self, cell: Cell) -> str | None:
        """Rotate the tower on ``cell`` or build a new one; returns the action taken."""
        if self.state not in _PLACEMENT_STATES:
            raise ValueError("Towers can only be placed while a wave is pending or running")
        session = self._require_session()

        if not self.bounds.contains(cell):
            self.events.emit("placement_rejected", x=cell.x, y=cell.y, reason="out_of_bounds")
            return None

        if session.placement.get_tower(cell) is not None:
            tower = session.placement.rotate_tower(cell)
            self.events.emit("tower_rotated", tower_id=tower.tower_id, facing=tower.facing.name)
            return "rotated"

        if session.path.contains(cell):
            self.events.emit("placement_rejected", x=cell.x, y=cell.y, reason="on_path")
            return None

        cost = self.rules.tower_cost
        if not session.economy.can_afford(cost):
            self.events.emit("placement_rejected", x=cell.x, y=cell.y, reason="insufficient_gold")
            return None

        session.economy.spend(cost)

        tower = session.placement.place_tower(cell, self.clock.now_ms())
        self.events.emit("gold_changed", delta=-cost, reason="tower_build", gold=session.economy.gold)
        self.events.emit(
            "tower_built",
            tower_id=tower.tower_id,
            x=cell.x,
            y=cell.y,
            facing=tower.facing.name,
        )
        return "built"

    def start_wave(self) -> None:
        if self.state != GameState.WAVE_IDLE:
            raise ValueError("Cannot start wave from current state")
        session = self._require_session()
        session.waves.start()
        self.state = GameState.WAVE_ACTIVE
        self.events.emit(
            "wave_start",
            wave_number=session.waves.wave_number,
            total_enemies=session.waves.total_enemies,
        )

    def continue_to_next_wave(self) -> None:
        if self.state != GameState.WAVE_COMPLETE:
            raise ValueError("No completed wave to continue from")
        session = self._require_session()
        session.reset_wave_entities()
        session.waves.next_wave(self.rules.enemies_per_wave_increment, self.clock.now_ms())
        self.state = GameState.WAVE_IDLE
        self.events.emit(
            "next_wave_ready",
            wave_number=session.waves.wave_number,
            total_enemies=session.waves.total_enemies,
        )

    def quit(self) -> None:
        if self.state in {GameState.SESSION_WON, GameState.SESSION_LOST}:
            self.exited = True
            return
        if self.state != GameState.SESSION_QUIT:
            self.events.emit("session_quit", from_state=self.state.value)
        self.state = GameState.SESSION_QUIT
        self.exited = True

    def update(self) -> bool:
        """Run at most one frame; returns True when the frame interval elapsed."""
        now = self.clock.now_ms()
        if now - self._last_frame_ms < self.rules.tick_interval_ms:
            return False
        self._last_frame_ms = now
        self.tick()
        return True

    def tick(self) -> None:
        if self.state != GameState.WAVE_ACTIVE:
            return
        session = self._require_session()
        result = self.simulation.advance_tick(session, self.clock.now_ms())
        self._emit_tick_events(result)

        if session.progression.is_defeated:
            self.state = GameState.SESSION_LOST
            self.events.emit("session_result", victory=False, waves_completed=session.progression.waves_completed)
            return

        if session.waves.is_wave_complete(session.enemies):
            bonus = self.rules.wave_clear_bonus
            session.economy.reward(bonus)
            session.progression.record_wave_clear()
            self.events.emit("wave_complete", wave_number=session.waves.wave_number)
            self.events.emit("gold_changed", delta=bonus, reason="wave_clear", gold=session.economy.gold)

            if session.progression.has_won(self.rules.waves_to_win):
                self.state = GameState.SESSION_WON
                self.events.emit(
                    "session_result",
                    victory=True,
                    waves_completed=session.progression.waves_completed,
                )
            else:
                self.state = GameState.WAVE_COMPLETE

    def snapshot(self) -> dict[str, int | str | bool]:
        summary: dict[str, int | str | bool] = {"state": self.state.value}
        if self.session is None:
            return summary
        session = self.session
        summary.update(
            {
                "difficulty": self.difficulty.name if self.difficulty else "",
                "wave_number": session.waves.wave_number,
                "spawned": session.waves.spawned,
                "total_enemies": session.waves.total_enemies,
                "living_enemies": len(session.living_enemies()),
                "gold": session.economy.gold,
                "tower_count": len(session.placement.all_towers()),
                "lives": session.progression.lives,
                "waves_completed": session.progression.waves_completed,
                "wave_started": session.waves.started,
            }
        )
        return summary

    def _require_session(self) -> Session:
        if self.session is None:
            raise ValueError("No difficulty selected")
        return self.session

    def _emit_tick_events(self, result: TickResult) -> None:
        session = self._require_session()
        for enemy in result.spawned:
            self.events.emit("enemy_spawned", enemy_id=enemy.enemy_id)
        for enemy in result.leaked:
            self.events.emit("enemy_leaked", enemy_id=enemy.enemy_id)
            self.events.emit("lives_changed", delta=-1, reason="enemy_leak", lives=session.progression.lives)
        if result.shots_fired:
            self.events.emit("projectile_fired", count=result.shots_fired)
        for enemy in result.killed:
            self.events.emit("enemy_killed", enemy_id=enemy.enemy_id)
            self.events.emit(
                "gold_changed",
                delta=self.rules.kill_bounty,
                reason="enemy_kill",
                gold=session.economy.gold,
            )
