"""Session states for Dodgefall.

Only PLAYING advances the simulation. IDLE is the state before the first
start command; GAME_OVER is entered on a Hazard collision and left only by
a restart.
"""
from enum import Enum


class GameState(Enum):
    """Session states.

    States:
        IDLE: Start screen shown, nothing moves
        PLAYING: Active gameplay in progress
        GAME_OVER: Session ended by a Hazard, final score shown
    """
    IDLE = "idle"
    PLAYING = "playing"
    GAME_OVER = "game_over"
