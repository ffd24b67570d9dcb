"""
Dodgefall - Simulation entities.

The Actor is the player's coin, Obstacles fall from the top of the
viewport, Particles are short-lived burst debris. All three are mutable
and owned by the Session; the renderer only ever sees snapshots of them.
"""
from dataclasses import dataclass
from enum import Enum

from dodgefall import config
from dodgefall.models.primitives import Rectangle, Vector2D


class ObstacleKind(Enum):
    """Types of falling obstacles."""
    HAZARD = "hazard"
    BOON = "boon"


@dataclass
class Actor:
    """The player-controlled entity.

    Position is the top-left corner. Horizontal velocity is recomputed
    every step from the input direction.
    """
    x: float
    y: float
    width: float = config.ACTOR_SIZE
    height: float = config.ACTOR_SIZE
    speed: float = config.ACTOR_SPEED
    color: str = config.ACTOR_COLOR
    vx: float = 0.0

    @property
    def bounds(self) -> Rectangle:
        """Axis-aligned bounding box used for collision tests."""
        return Rectangle(x=self.x, y=self.y, width=self.width, height=self.height)

    @property
    def center(self) -> Vector2D:
        return Vector2D(x=self.x + self.width / 2, y=self.y + self.height / 2)

    def move(self, direction: int, dt: float) -> None:
        """Integrate horizontal motion for one step.

        Args:
            direction: Net input direction (-1, 0 or +1)
            dt: Time delta in seconds
        """
        self.vx = direction * self.speed
        self.x += self.vx * dt

    def clamp(self, viewport_width: float) -> None:
        """Keep the actor's horizontal extent inside [0, viewport_width]."""
        if self.x < 0:
            self.x = 0.0
        if self.x + self.width > viewport_width:
            self.x = max(0.0, viewport_width - self.width)


@dataclass
class Obstacle:
    """A falling square.

    Rotation is cosmetic: collision always uses the unrotated box.
    """
    x: float
    y: float
    size: float
    speed: float               # Fall speed in pixels/second, difficulty already applied
    kind: ObstacleKind
    rotation: float = 0.0      # Radians
    spin: float = 0.0          # Radians/second

    @property
    def width(self) -> float:
        return self.size

    @property
    def height(self) -> float:
        return self.size

    @property
    def is_hazard(self) -> bool:
        return self.kind == ObstacleKind.HAZARD

    @property
    def bounds(self) -> Rectangle:
        """Axis-aligned bounding box used for collision tests."""
        return Rectangle(x=self.x, y=self.y, width=self.size, height=self.size)

    def advance(self, dt: float, speed_multiplier: float) -> None:
        """Fall and spin for one step.

        Args:
            dt: Time delta in seconds
            speed_multiplier: Global fall-speed scale (Boon slow-down)
        """
        self.y += self.speed * speed_multiplier * dt
        self.rotation += self.spin * dt

    def is_below(self, viewport_height: float) -> bool:
        """True once the top edge has crossed the bottom of the viewport."""
        return self.y > viewport_height


@dataclass
class Particle:
    """A fading burst fragment.

    Velocity is in units per frame, not per second: position moves by
    (vx, vy) every step regardless of dt. Life decays with dt.
    """
    x: float
    y: float
    vx: float
    vy: float
    color: str = config.DEFAULT_PARTICLE_COLOR
    life: float = 1.0

    @property
    def is_dead(self) -> bool:
        return self.life <= 0

    def advance(self, dt: float, decay_rate: float = config.PARTICLE_DECAY_RATE) -> None:
        self.x += self.vx
        self.y += self.vy
        self.life -= decay_rate * dt
