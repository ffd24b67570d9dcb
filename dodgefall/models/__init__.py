"""
Data models for Dodgefall.

- Primitives: Vector2D, Viewport, Color, Rectangle (pydantic, frozen)
- Entities: Actor, Obstacle, Particle (mutable, owned by the Session)
- Snapshots: frozen per-frame copies for the renderer
"""
from .primitives import Color, Rectangle, Vector2D, Viewport
from .entities import Actor, Obstacle, ObstacleKind, Particle
from .snapshot import ActorSnapshot, FrameSnapshot, ObstacleSnapshot, ParticleSnapshot

__all__ = [
    'Color',
    'Rectangle',
    'Vector2D',
    'Viewport',
    'Actor',
    'Obstacle',
    'ObstacleKind',
    'Particle',
    'ActorSnapshot',
    'FrameSnapshot',
    'ObstacleSnapshot',
    'ParticleSnapshot',
]
