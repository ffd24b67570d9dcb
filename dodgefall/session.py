"""
Dodgefall Session

The Session is the single owner of all simulation state: the Actor, the
obstacle and particle collections, score, difficulty, the Boon slow-down
and the viewport. It also implements the state machine:

    IDLE --start--> PLAYING --hazard--> GAME_OVER --restart--> PLAYING

Every entry into PLAYING bumps ``generation``. Anything captured against
an older generation (a pending speed reset, for instance) is ignored
when it is applied to a newer session.

The per-frame advancement lives in simulation.py and operates on a
Session passed in explicitly.
"""
import math
from typing import List, Optional

from dodgefall import config
from dodgefall.effects import SpeedEffects
from dodgefall.game_state import GameState
from dodgefall.logging import emit_record, get_logger
from dodgefall.models.entities import Actor, Obstacle, Particle
from dodgefall.models.primitives import Viewport
from dodgefall.models.snapshot import (
    ActorSnapshot,
    FrameSnapshot,
    ObstacleSnapshot,
    ParticleSnapshot,
)
from dodgefall.random_draws import RandomDraws
from dodgefall.spawner import ObstacleSpawner
from dodgefall.tuning import TuningProfile, default_profile

log = get_logger('session')


def fit_viewport(width: float, height: float) -> Optional[Viewport]:
    """Apply the responsive sizing rules to a requested viewport.

    Width is capped at MAX_VIEWPORT_WIDTH; both dimensions are floored at
    the minimum playable size. Non-finite or non-positive sizes are
    rejected.

    Returns:
        The fitted Viewport, or None if the request is unusable
    """
    try:
        width = float(width)
        height = float(height)
    except (TypeError, ValueError):
        return None
    if not (math.isfinite(width) and math.isfinite(height)) or width <= 0 or height <= 0:
        return None

    width = min(width, config.MAX_VIEWPORT_WIDTH)
    width = max(width, config.MIN_VIEWPORT_WIDTH)
    height = max(height, config.MIN_VIEWPORT_HEIGHT)
    return Viewport(width=width, height=height)


class Session:
    """All state for one game window, across any number of plays."""

    def __init__(
        self,
        viewport_width: float = config.SCREEN_WIDTH,
        viewport_height: float = config.SCREEN_HEIGHT,
        tuning: Optional[TuningProfile] = None,
        seed: Optional[int] = None,
        draws: Optional[RandomDraws] = None,
    ):
        """Initialize an idle session.

        Args:
            viewport_width: Requested playfield width (capped and floored)
            viewport_height: Requested playfield height (floored)
            tuning: Gameplay constants (config defaults if omitted)
            seed: Seed for a fresh RandomDraws (ignored when draws is given)
            draws: Random source shared with the spawner
        """
        self.tuning = tuning or default_profile()
        self.draws = draws or RandomDraws(seed)
        self.spawner = ObstacleSpawner(self.tuning, self.draws)
        self.effects = SpeedEffects(self.tuning.boon_stacking)

        self.viewport = (fit_viewport(viewport_width, viewport_height)
                         or Viewport(width=config.MIN_VIEWPORT_WIDTH, height=config.MIN_VIEWPORT_HEIGHT))

        self.actor = Actor(
            x=0.0,
            y=0.0,
            width=self.tuning.actor_size,
            height=self.tuning.actor_size,
            speed=self.tuning.actor_speed,
        )
        self._center_actor()

        self.obstacles: List[Obstacle] = []
        self.particles: List[Particle] = []

        self.state = GameState.IDLE
        self.score = 0.0
        self.difficulty = 1.0
        self.speed_multiplier = 1.0
        self.clock = 0.0
        self.generation = 0
        self.final_score: Optional[int] = None

    # =========================================================================
    # State machine
    # =========================================================================

    @property
    def is_playing(self) -> bool:
        return self.state == GameState.PLAYING

    def start(self) -> None:
        """Enter PLAYING with a fresh round.

        Valid from any state; from PLAYING it simply starts over.
        """
        self.generation += 1
        self.score = 0.0
        self.difficulty = 1.0
        self.speed_multiplier = 1.0
        self.clock = 0.0
        self.final_score = None
        self.obstacles = []
        self.particles = []
        self.effects.clear()
        self.spawner.reset()
        self._center_actor()
        self.state = GameState.PLAYING

        log.info("Session %d started (%s)", self.generation, self.viewport)
        emit_record('session', {
            'type': 'session_start',
            'generation': self.generation,
            'profile': self.tuning.name,
            'viewport': [self.viewport.width, self.viewport.height],
        })

    def restart(self) -> None:
        """Restart after a game over; identical to start()."""
        self.start()

    def end(self) -> None:
        """Transition to GAME_OVER and freeze the final score."""
        if self.state != GameState.PLAYING:
            return
        self.state = GameState.GAME_OVER
        self.final_score = int(self.score)

        log.info("Session %d over: survived %.2fs (difficulty %.2f)",
                 self.generation, self.score, self.difficulty)
        emit_record('session', {
            'type': 'game_over',
            'generation': self.generation,
            'score': round(self.score, 3),
            'final_score': self.final_score,
            'difficulty': round(self.difficulty, 3),
            'obstacles_spawned': self.spawner.spawned_count,
        })

    # =========================================================================
    # Score readout
    # =========================================================================

    @property
    def score_text(self) -> str:
        """Live score readout, two decimals."""
        return f"{self.score:.2f}"

    def recompute_difficulty(self) -> None:
        self.difficulty = 1.0 + self.score / self.tuning.difficulty_ramp_seconds

    # =========================================================================
    # Boon slow-down
    # =========================================================================

    def apply_boon(self) -> None:
        """Slow obstacles down for the configured duration."""
        effect = self.effects.apply(
            now=self.clock,
            duration=self.tuning.boon_duration,
            multiplier=self.tuning.boon_slow_factor,
            generation=self.generation,
        )
        self.speed_multiplier = effect.multiplier
        log.debug("Boon collected: speed x%.2f until t=%.2f", effect.multiplier, effect.expires_at)

    def restore_speed(self, generation: int) -> bool:
        """Return fall speed to normal on behalf of an expired effect.

        Args:
            generation: Generation the effect was created in

        Returns:
            True if speed was restored, False if the request was stale
        """
        if generation != self.generation:
            log.debug("Ignoring speed reset from generation %d (current %d)",
                      generation, self.generation)
            return False
        self.speed_multiplier = 1.0
        return True

    def expire_effects(self) -> None:
        """Restore speed for every effect whose time has run out."""
        for effect in self.effects.expire(self.clock):
            self.restore_speed(effect.generation)

    # =========================================================================
    # Particles
    # =========================================================================

    def spawn_burst(self, x: float, y: float, color: str = config.DEFAULT_PARTICLE_COLOR,
                    count: Optional[int] = None) -> None:
        """Spray particles from a point.

        Args:
            x, y: Origin of the burst
            color: Particle color tag
            count: Number of particles (tuning default if omitted)
        """
        if count is None:
            count = self.tuning.default_burst_size
        for _ in range(count):
            vx, vy = self.draws.particle_velocity(self.tuning.particle_speed_range)
            self.particles.append(Particle(x=x, y=y, vx=vx, vy=vy, color=color))

    # =========================================================================
    # Viewport
    # =========================================================================

    def resize(self, width: float, height: float) -> bool:
        """React to a new available display size.

        Invalid geometry is ignored and leaves everything where it was.

        Returns:
            True if the viewport changed
        """
        viewport = fit_viewport(width, height)
        if viewport is None:
            log.warning("Ignoring invalid viewport size %rx%r", width, height)
            return False

        self.viewport = viewport
        self.actor.y = self._actor_rest_y()
        self.actor.clamp(viewport.width)
        log.debug("Resized to %s", viewport)
        return True

    def _actor_rest_y(self) -> float:
        return self.viewport.height - self.tuning.actor_bottom_offset

    def _center_actor(self) -> None:
        self.actor.x = self.viewport.width / 2 - self.actor.width / 2
        self.actor.y = self._actor_rest_y()
        self.actor.vx = 0.0
        self.actor.clamp(self.viewport.width)

    # =========================================================================
    # Presentation
    # =========================================================================

    def snapshot(self) -> FrameSnapshot:
        """Freeze the current state for the renderer."""
        return FrameSnapshot(
            state=self.state,
            score=self.score,
            score_text=self.score_text,
            final_score=self.final_score,
            speed_multiplier=self.speed_multiplier,
            viewport=self.viewport,
            actor=ActorSnapshot.from_actor(self.actor),
            obstacles=tuple(ObstacleSnapshot.from_obstacle(o) for o in self.obstacles),
            particles=tuple(ParticleSnapshot.from_particle(p) for p in self.particles),
        )
