"""
Dodgefall - Random draws.

Every randomized quantity in the game comes from a RandomDraws instance,
so a seeded instance replays the same obstacle stream and particle
spray. Ranges are half-open unless noted:

    obstacle_size      [min_size, min_size + size_range)
    fall_speed         [base_speed, base_speed + speed_range)
    spin               [-spin_range / 2, spin_range / 2)       radians/second
    spawn_x            [0, max_x]                               clamps max_x at 0
    obstacle_kind      BOON with probability boon_chance, else HAZARD
    particle_velocity  each of vx, vy in [-speed_range / 2, speed_range / 2)
"""
import random
from typing import Optional, Tuple

from dodgefall.models.entities import ObstacleKind


class RandomDraws:
    """Seedable source of gameplay and cosmetic randomness."""

    def __init__(self, seed: Optional[int] = None):
        """Initialize the draw source.

        Args:
            seed: Seed for reproducible draws (None = system entropy)
        """
        self.seed = seed
        self._rng = random.Random(seed)

    def reseed(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng.seed(seed)

    def _uniform(self, low: float, span: float) -> float:
        return low + self._rng.random() * span

    def obstacle_size(self, min_size: float, size_range: float) -> float:
        return self._uniform(min_size, size_range)

    def fall_speed(self, base_speed: float, speed_range: float) -> float:
        return self._uniform(base_speed, speed_range)

    def spin(self, spin_range: float) -> float:
        return (self._rng.random() - 0.5) * spin_range

    def spawn_x(self, max_x: float) -> float:
        return self._rng.random() * max(0.0, max_x)

    def obstacle_kind(self, boon_chance: float) -> ObstacleKind:
        if self._rng.random() < boon_chance:
            return ObstacleKind.BOON
        return ObstacleKind.HAZARD

    def particle_velocity(self, speed_range: float) -> Tuple[float, float]:
        vx = (self._rng.random() - 0.5) * speed_range
        vy = (self._rng.random() - 0.5) * speed_range
        return vx, vy
