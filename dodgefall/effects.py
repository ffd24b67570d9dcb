"""
Dodgefall - Timed speed effects.

A Boon pickup slows every obstacle down for a few seconds. Instead of a
detached timer, each pickup leaves a SpeedEffect record in the session;
the simulation step expires records against the session clock.

Two stacking policies are supported:

    EXTEND  A second pickup while slowed pushes the single active record's
            expiry out to now + duration.
    LEGACY  Every pickup adds its own record and the first one to expire
            restores normal speed, even if a later pickup is still pending.
            This reproduces the clipped timing of independent fire-and-forget
            resets.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List


class BoonStacking(Enum):
    """How overlapping Boon pickups combine."""
    EXTEND = "extend"
    LEGACY = "legacy"


@dataclass
class SpeedEffect:
    """One pending slow-down.

    Attributes:
        multiplier: Fall-speed scale while the effect is active
        expires_at: Session clock time (seconds) at which speed is restored
        generation: Session generation that created the effect
    """
    multiplier: float
    expires_at: float
    generation: int


class SpeedEffects:
    """Active slow-down records for a session."""

    def __init__(self, policy: BoonStacking = BoonStacking.EXTEND):
        self.policy = policy
        self._active: List[SpeedEffect] = []

    @property
    def active(self) -> List[SpeedEffect]:
        """Pending effects, oldest first."""
        return list(self._active)

    @property
    def is_active(self) -> bool:
        return bool(self._active)

    def apply(self, now: float, duration: float, multiplier: float, generation: int) -> SpeedEffect:
        """Record a new pickup.

        Args:
            now: Current session clock time
            duration: Seconds until the effect lapses
            multiplier: Speed scale to apply
            generation: Generation of the session applying the effect

        Returns:
            The effect record now governing the slow-down
        """
        expires_at = now + duration
        if self.policy == BoonStacking.EXTEND and self._active:
            effect = self._active[-1]
            effect.expires_at = max(effect.expires_at, expires_at)
            effect.multiplier = multiplier
            effect.generation = generation
            return effect

        effect = SpeedEffect(multiplier=multiplier, expires_at=expires_at, generation=generation)
        self._active.append(effect)
        return effect

    def expire(self, now: float) -> List[SpeedEffect]:
        """Remove and return every effect whose expiry time has been reached."""
        expired = [e for e in self._active if e.expires_at <= now]
        if expired:
            self._active = [e for e in self._active if e.expires_at > now]
        return expired

    def clear(self) -> None:
        self._active.clear()
