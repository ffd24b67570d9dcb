"""
Dodgefall simulation step.

One call to step() advances a playing Session by dt seconds, in a fixed
order:

    1. expire finished Boon effects (session clock advances first)
    2. move and clamp the actor
    3. add dt to the score and recompute difficulty
    4. maybe spawn an obstacle
    5. move obstacles and resolve collisions, pruning as we go
    6. move and age particles, pruning dead ones

A Hazard collision ends the session and returns immediately: obstacles
not yet visited and all particles stay where they were on that frame.

Collections are walked by index from the back so removals never shift an
element that has not been visited yet.
"""
from dodgefall import config
from dodgefall.input.input_state import InputState
from dodgefall.models.entities import Obstacle
from dodgefall.session import Session


def step(session: Session, intent: InputState, dt: float) -> None:
    """Advance the session by one frame.

    Does nothing unless the session is PLAYING.

    Args:
        session: Session to advance (mutated in place)
        intent: Movement intent sampled for this frame
        dt: Seconds since the previous frame; negative values count as 0
    """
    if not session.is_playing:
        return
    dt = max(0.0, dt)

    session.clock += dt
    session.expire_effects()

    move_actor(session, intent.direction, dt)
    advance_score(session, dt)
    spawn_obstacles(session, dt)

    if not advance_obstacles(session, dt):
        return

    advance_particles(session, dt)


def move_actor(session: Session, direction: int, dt: float) -> None:
    """Integrate actor motion, then clamp it into the viewport."""
    session.actor.move(direction, dt)
    session.actor.clamp(session.viewport.width)


def advance_score(session: Session, dt: float) -> None:
    session.score += dt
    session.recompute_difficulty()


def spawn_obstacles(session: Session, dt: float) -> None:
    obstacle = session.spawner.update(dt, session.difficulty, session.viewport.width)
    if obstacle is not None:
        session.obstacles.append(obstacle)


def advance_obstacles(session: Session, dt: float) -> bool:
    """Move obstacles, resolve collisions and drop fallen ones.

    Returns:
        False if a Hazard ended the session this frame
    """
    actor_bounds = session.actor.bounds
    obstacles = session.obstacles

    for i in range(len(obstacles) - 1, -1, -1):
        obstacle = obstacles[i]
        obstacle.advance(dt, session.speed_multiplier)

        if actor_bounds.overlaps(obstacle.bounds):
            if obstacle.is_hazard:
                _hit_hazard(session)
                return False
            _collect_boon(session, obstacle)
            del obstacles[i]
            continue

        if obstacle.is_below(session.viewport.height):
            del obstacles[i]

    return True


def _hit_hazard(session: Session) -> None:
    center = session.actor.center
    session.spawn_burst(center.x, center.y, config.HAZARD_PARTICLE_COLOR,
                        session.tuning.hazard_burst_size)
    session.end()


def _collect_boon(session: Session, obstacle: Obstacle) -> None:
    session.apply_boon()
    session.spawn_burst(obstacle.x, obstacle.y, config.BOON_PARTICLE_COLOR,
                        session.tuning.boon_burst_size)


def advance_particles(session: Session, dt: float) -> None:
    """Drift and fade particles, removing the ones that have died."""
    particles = session.particles
    decay_rate = session.tuning.particle_decay_rate
    for i in range(len(particles) - 1, -1, -1):
        particle = particles[i]
        particle.advance(dt, decay_rate)
        if particle.is_dead:
            del particles[i]
