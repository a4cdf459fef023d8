"""Lives and cleared-wave bookkeeping."""

from dataclasses import dataclass


@dataclass
class ProgressionSystem:
    lives: int
    waves_completed: int = 0

    def lose_life(self) -> None:
        self.lives -= 1

    def record_wave_clear(self) -> None:
        self.waves_completed += 1

    @property
    def is_defeated(self) -> bool:
        return self.lives <= 0

    def has_won(self, waves_to_win: int) -> bool:
        return self.waves_completed >= waves_to_win
