"""
Tuning profiles for Dodgefall.

A profile bundles every gameplay constant (actor, obstacles, difficulty
ramp, Boon effect, particles). Bundled profiles live as YAML files in
``dodgefall/profiles/``; any field a profile leaves out falls back to the
value in config.py, so environment overrides still apply.

Example profile (gentle.yaml):
    name: gentle
    description: "Slower ramp and more frequent Boons"
    difficulty_ramp_seconds: 60
    boon_chance: 0.2
"""
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dodgefall import config
from dodgefall.effects import BoonStacking
from dodgefall.logging import get_logger

log = get_logger('tuning')

PROFILES_DIR = Path(__file__).parent / 'profiles'


class TuningError(Exception):
    """Raised when a tuning profile cannot be found or fails validation."""
    pass


class TuningProfile(BaseModel):
    """Validated gameplay constants.

    Attributes:
        name: Profile identifier
        description: Short human-readable summary
        actor_size: Actor width and height
        actor_speed: Actor horizontal speed (pixels/second)
        actor_bottom_offset: Distance from the viewport bottom to the actor's top edge
        obstacle_min_size: Smallest obstacle side length
        obstacle_size_range: Extra random side length on top of the minimum
        obstacle_base_speed: Slowest base fall speed (pixels/second)
        obstacle_speed_range: Extra random fall speed on top of the base
        obstacle_spin_range: Width of the angular velocity range, centered on 0
        boon_chance: Probability a spawned obstacle is a Boon
        spawn_interval: Seconds between spawns at difficulty 1
        difficulty_ramp_seconds: Score needed to add 1 to the difficulty multiplier
        boon_slow_factor: Fall-speed scale while a Boon is active
        boon_duration: Seconds a Boon slow-down lasts
        boon_stacking: How overlapping Boon pickups combine
        particle_speed_range: Width of the per-axis particle velocity range
        particle_decay_rate: Particle life lost per second
        hazard_burst_size: Particles spawned when a Hazard hits the actor
        boon_burst_size: Particles spawned on a Boon pickup
        default_burst_size: Particles in a burst with no explicit count
    """
    name: str = 'classic'
    description: str = ''

    actor_size: float = Field(default=config.ACTOR_SIZE, gt=0)
    actor_speed: float = Field(default=config.ACTOR_SPEED, ge=0)
    actor_bottom_offset: float = Field(default=config.ACTOR_BOTTOM_OFFSET, ge=0)

    obstacle_min_size: float = Field(default=config.OBSTACLE_MIN_SIZE, gt=0)
    obstacle_size_range: float = Field(default=config.OBSTACLE_SIZE_RANGE, ge=0)
    obstacle_base_speed: float = Field(default=config.OBSTACLE_BASE_SPEED, ge=0)
    obstacle_speed_range: float = Field(default=config.OBSTACLE_SPEED_RANGE, ge=0)
    obstacle_spin_range: float = Field(default=config.OBSTACLE_SPIN_RANGE, ge=0)
    boon_chance: float = Field(default=config.BOON_CHANCE, ge=0, le=1)

    spawn_interval: float = Field(default=config.BASE_SPAWN_INTERVAL, gt=0)
    difficulty_ramp_seconds: float = Field(default=config.DIFFICULTY_RAMP_SECONDS, gt=0)

    boon_slow_factor: float = Field(default=config.BOON_SLOW_FACTOR, gt=0)
    boon_duration: float = Field(default=config.BOON_DURATION, ge=0)
    boon_stacking: BoonStacking = BoonStacking(config.BOON_STACKING)

    particle_speed_range: float = Field(default=config.PARTICLE_SPEED_RANGE, ge=0)
    particle_decay_rate: float = Field(default=config.PARTICLE_DECAY_RATE, gt=0)
    hazard_burst_size: int = Field(default=config.HAZARD_BURST_SIZE, ge=0)
    boon_burst_size: int = Field(default=config.BOON_BURST_SIZE, ge=0)
    default_burst_size: int = Field(default=config.DEFAULT_BURST_SIZE, ge=0)

    model_config = ConfigDict(frozen=True, extra='forbid')

    def with_overrides(self, **overrides: Any) -> 'TuningProfile':
        """Return a validated copy with some fields replaced.

        Raises:
            TuningError: If the overrides fail validation
        """
        data = {**self.model_dump(), **overrides}
        try:
            return TuningProfile.model_validate(data)
        except ValidationError as e:
            raise TuningError(f"Invalid tuning override: {e}") from e


def list_profiles() -> List[str]:
    """Names of the bundled profiles, sorted."""
    if not PROFILES_DIR.exists():
        return []
    return sorted(p.stem for p in PROFILES_DIR.glob('*.yaml'))


def _resolve_profile_path(name_or_path: Union[str, Path]) -> Path:
    """Map a profile name or file path to an existing YAML file."""
    candidate = Path(name_or_path)
    if candidate.suffix in ('.yaml', '.yml'):
        if candidate.exists():
            return candidate
        raise TuningError(f"Profile file not found: {candidate}")

    path = PROFILES_DIR / f"{name_or_path}.yaml"
    if path.exists():
        return path

    available = ', '.join(list_profiles()) or '(none)'
    raise TuningError(f"Unknown profile '{name_or_path}'. Available: {available}")


def _load_yaml(path: Path) -> Dict[str, Any]:
    with open(path, 'r') as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise TuningError(f"Could not parse {path}: {e}") from e
    if not isinstance(data, dict):
        raise TuningError(f"Profile {path} must be a mapping, got {type(data).__name__}")
    return data


def load_profile(name_or_path: Union[str, Path, None] = None) -> TuningProfile:
    """Load and validate a tuning profile.

    Args:
        name_or_path: Bundled profile name (e.g. 'gentle') or path to a
            YAML file. None loads config.DEFAULT_PROFILE.

    Returns:
        Validated TuningProfile

    Raises:
        TuningError: If the profile is missing, unparsable or invalid
    """
    path = _resolve_profile_path(name_or_path or config.DEFAULT_PROFILE)
    data = _load_yaml(path)
    data.setdefault('name', path.stem)

    try:
        profile = TuningProfile.model_validate(data)
    except ValidationError as e:
        raise TuningError(f"Invalid profile {path}: {e}") from e

    log.debug("Loaded tuning profile '%s' from %s", profile.name, path)
    return profile


def default_profile() -> TuningProfile:
    """Profile built purely from config.py values, no YAML involved."""
    return TuningProfile()


def resolve_profile(
    profile: Optional[Union[str, Path, TuningProfile]] = None,
    **overrides: Any,
) -> TuningProfile:
    """Accept a profile object, a name/path or None, then apply overrides.

    Overrides whose value is None are ignored, so CLI defaults can be
    passed straight through.
    """
    if isinstance(profile, TuningProfile):
        base = profile
    elif profile is None:
        base = default_profile()
    else:
        base = load_profile(profile)

    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        return base.with_overrides(**overrides)
    return base
