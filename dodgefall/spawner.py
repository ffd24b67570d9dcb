"""
Dodgefall - Obstacle spawner.

Spawns one obstacle each time the accumulated frame time reaches the
current spawn interval. The interval shrinks as difficulty rises:

    threshold = spawn_interval / difficulty

When the threshold is reached the accumulator drops back to zero and any
excess time is discarded, so at very high difficulty the spawn rate is
bounded by the frame rate.
"""
from typing import Optional

from dodgefall.logging import get_logger
from dodgefall.models.entities import Obstacle
from dodgefall.random_draws import RandomDraws
from dodgefall.tuning import TuningProfile

log = get_logger('spawner')


class ObstacleSpawner:
    """Spawns falling obstacles at a difficulty-scaled rate."""

    def __init__(self, tuning: TuningProfile, draws: Optional[RandomDraws] = None):
        """Initialize the spawner.

        Args:
            tuning: Gameplay constants (sizes, speeds, boon chance, interval)
            draws: Random source (a fresh unseeded one if omitted)
        """
        self.tuning = tuning
        self.draws = draws or RandomDraws()
        self._accumulator = 0.0
        self.spawned_count = 0

    @property
    def accumulator(self) -> float:
        """Seconds accumulated towards the next spawn."""
        return self._accumulator

    def reset(self) -> None:
        """Reset spawner for a new session."""
        self._accumulator = 0.0
        self.spawned_count = 0

    def threshold(self, difficulty: float) -> float:
        """Seconds between spawns at the given difficulty multiplier."""
        return self.tuning.spawn_interval / difficulty

    def update(self, dt: float, difficulty: float, viewport_width: float) -> Optional[Obstacle]:
        """Advance the spawn timer.

        Args:
            dt: Time delta in seconds
            difficulty: Current difficulty multiplier (>= 1)
            viewport_width: Current playfield width

        Returns:
            A new obstacle if one is due this step, else None
        """
        self._accumulator += dt
        # Inclusive so exact-multiple frame times give floor(duration * D) spawns
        if self._accumulator >= self.threshold(difficulty):
            self._accumulator = 0.0
            return self.spawn(difficulty, viewport_width)
        return None

    def spawn(self, difficulty: float, viewport_width: float) -> Obstacle:
        """Create a new obstacle just above the top edge.

        Args:
            difficulty: Multiplier applied to the base fall speed
            viewport_width: Current playfield width

        Returns:
            New Obstacle, fully off-screen (y = -size)
        """
        t = self.tuning
        size = self.draws.obstacle_size(t.obstacle_min_size, t.obstacle_size_range)
        kind = self.draws.obstacle_kind(t.boon_chance)
        obstacle = Obstacle(
            x=self.draws.spawn_x(viewport_width - size),
            y=-size,
            size=size,
            speed=self.draws.fall_speed(t.obstacle_base_speed, t.obstacle_speed_range) * difficulty,
            kind=kind,
            rotation=0.0,
            spin=self.draws.spin(t.obstacle_spin_range),
        )
        self.spawned_count += 1
        log.trace("Spawned %s at x=%.1f size=%.1f speed=%.1f",
                  kind.value, obstacle.x, size, obstacle.speed)
        return obstacle
