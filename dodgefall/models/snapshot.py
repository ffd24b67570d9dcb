"""
Read-only frame snapshots handed to the presentation layer.

A snapshot captures everything the renderer needs for one frame. Entity
lists are tuples of frozen models, so a renderer cannot reach back into
the Session and mutate live state.
"""
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from dodgefall.game_state import GameState
from dodgefall.models.entities import Actor, Obstacle, ObstacleKind, Particle
from dodgefall.models.primitives import Viewport


class ActorSnapshot(BaseModel):
    """Frozen copy of the Actor."""
    x: float
    y: float
    width: float
    height: float
    color: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_actor(cls, actor: Actor) -> 'ActorSnapshot':
        return cls(x=actor.x, y=actor.y, width=actor.width,
                   height=actor.height, color=actor.color)


class ObstacleSnapshot(BaseModel):
    """Frozen copy of an Obstacle."""
    x: float
    y: float
    size: float
    kind: ObstacleKind
    rotation: float

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_obstacle(cls, obstacle: Obstacle) -> 'ObstacleSnapshot':
        return cls(x=obstacle.x, y=obstacle.y, size=obstacle.size,
                   kind=obstacle.kind, rotation=obstacle.rotation)


class ParticleSnapshot(BaseModel):
    """Frozen copy of a Particle."""
    x: float
    y: float
    life: float
    color: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_particle(cls, particle: Particle) -> 'ParticleSnapshot':
        return cls(x=particle.x, y=particle.y, life=particle.life, color=particle.color)


class FrameSnapshot(BaseModel):
    """Everything Presentation receives for one frame.

    Attributes:
        state: Current session state
        score: Seconds survived
        score_text: Score formatted for the live readout (two decimals)
        final_score: Integer-truncated score, set once the session is over
        speed_multiplier: Current fall-speed scale (0.5 while slowed)
        viewport: Current playfield size
        actor: The player entity
        obstacles: Falling obstacles
        particles: Live particles
    """
    state: GameState
    score: float
    score_text: str
    final_score: Optional[int] = None
    speed_multiplier: float = 1.0
    viewport: Viewport
    actor: ActorSnapshot
    obstacles: Tuple[ObstacleSnapshot, ...] = ()
    particles: Tuple[ParticleSnapshot, ...] = ()

    model_config = ConfigDict(frozen=True)
