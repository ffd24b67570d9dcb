"""
Dodgefall - Configuration loader.

Every gameplay constant can be overridden from the environment or from a
``.env`` file placed next to this package. Tuning profiles (see tuning.py)
start from these values.
"""
import os
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

# Load .env from package directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Display
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 600)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 800)
FULLSCREEN = _get_bool('FULLSCREEN', False)
FPS = _get_int('FPS', 60)

# Viewport limits
MAX_VIEWPORT_WIDTH = _get_int('MAX_VIEWPORT_WIDTH', 600)
MIN_VIEWPORT_WIDTH = _get_int('MIN_VIEWPORT_WIDTH', 120)
MIN_VIEWPORT_HEIGHT = _get_int('MIN_VIEWPORT_HEIGHT', 200)

# Longest frame the simulation will integrate in one step (seconds)
MAX_FRAME_DT = _get_float('MAX_FRAME_DT', 0.25)

# Actor
ACTOR_SIZE = _get_float('ACTOR_SIZE', 40.0)
ACTOR_SPEED = _get_float('ACTOR_SPEED', 300.0)  # pixels/second
ACTOR_BOTTOM_OFFSET = _get_float('ACTOR_BOTTOM_OFFSET', 100.0)  # resting y = height - offset

# Obstacles
OBSTACLE_MIN_SIZE = _get_float('OBSTACLE_MIN_SIZE', 40.0)
OBSTACLE_SIZE_RANGE = _get_float('OBSTACLE_SIZE_RANGE', 20.0)
OBSTACLE_BASE_SPEED = _get_float('OBSTACLE_BASE_SPEED', 200.0)  # pixels/second
OBSTACLE_SPEED_RANGE = _get_float('OBSTACLE_SPEED_RANGE', 100.0)
OBSTACLE_SPIN_RANGE = _get_float('OBSTACLE_SPIN_RANGE', 5.0)  # radians/second, centered on 0
BOON_CHANCE = _get_float('BOON_CHANCE', 0.10)

# Difficulty: multiplier = 1 + score / DIFFICULTY_RAMP_SECONDS
DIFFICULTY_RAMP_SECONDS = _get_float('DIFFICULTY_RAMP_SECONDS', 30.0)
BASE_SPAWN_INTERVAL = _get_float('BASE_SPAWN_INTERVAL', 1.0)  # seconds at difficulty 1

# Boon slow-down
BOON_SLOW_FACTOR = _get_float('BOON_SLOW_FACTOR', 0.5)
BOON_DURATION = _get_float('BOON_DURATION', 3.0)
BOON_STACKING = os.getenv('BOON_STACKING', 'extend')  # 'extend' or 'legacy'

# Particles
PARTICLE_SPEED_RANGE = _get_float('PARTICLE_SPEED_RANGE', 10.0)  # units/frame, centered on 0
PARTICLE_DECAY_RATE = _get_float('PARTICLE_DECAY_RATE', 2.0)  # life lost per second
HAZARD_BURST_SIZE = _get_int('HAZARD_BURST_SIZE', 50)
BOON_BURST_SIZE = _get_int('BOON_BURST_SIZE', 20)
DEFAULT_BURST_SIZE = _get_int('DEFAULT_BURST_SIZE', 10)

# Default tuning profile name
DEFAULT_PROFILE = os.getenv('DEFAULT_PROFILE', 'classic')

# Visual
BACKGROUND_COLOR = '#111111'
GRID_COLOR = '#222222'
GRID_SIZE = 50
GRID_SCROLL_SPEED = 100.0  # pixels/second
ACTOR_COLOR = '#8b5cf6'
ACTOR_LABEL = '#LATE'
HAZARD_COLOR = '#fe1010'
HAZARD_BELL_COLOR = '#999999'
HAZARD_FACE_COLOR = '#ffffff'
BOON_COLOR = '#3b82f6'
BOON_SHINE_COLOR = '#93c5fd'
HAZARD_PARTICLE_COLOR = '#f472b6'
BOON_PARTICLE_COLOR = '#a78bfa'
DEFAULT_PARTICLE_COLOR = '#ffffff'
PARTICLE_RADIUS = 3
TEXT_COLOR: Tuple[int, int, int] = (255, 255, 255)
OVERLAY_COLOR: Tuple[int, int, int, int] = (0, 0, 0, 170)
