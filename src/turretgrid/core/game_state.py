"""Session state definitions for the tower defense flow."""

from enum import Enum


class GameState(str, Enum):
    SELECTING_DIFFICULTY = "selecting_difficulty"
    WAVE_IDLE = "wave_idle"
    WAVE_ACTIVE = "wave_active"
    WAVE_COMPLETE = "wave_complete"
    SESSION_WON = "session_won"
    SESSION_LOST = "session_lost"
    SESSION_QUIT = "session_quit"
