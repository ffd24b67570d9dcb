"""
Tuning Profile Tests

Loading of bundled and user YAML profiles, validation and overrides.
"""
import pytest
from pydantic import ValidationError

from dodgefall import config
from dodgefall.effects import BoonStacking
from dodgefall.tuning import (
    TuningError,
    TuningProfile,
    default_profile,
    list_profiles,
    load_profile,
    resolve_profile,
)


class TestDefaults:
    """Defaults mirror config.py."""

    def test_default_profile(self):
        p = default_profile()
        assert p.actor_size == config.ACTOR_SIZE
        assert p.actor_speed == 300
        assert p.spawn_interval == 1.0
        assert p.difficulty_ramp_seconds == 30
        assert p.boon_chance == 0.10
        assert p.boon_slow_factor == 0.5
        assert p.boon_duration == 3.0
        assert p.boon_stacking == BoonStacking.EXTEND
        assert p.hazard_burst_size == 50
        assert p.boon_burst_size == 20
        assert p.default_burst_size == 10

    def test_frozen(self):
        with pytest.raises(ValidationError):
            default_profile().actor_speed = 10


class TestBundledProfiles:
    """Profiles shipped in dodgefall/profiles."""

    def test_list(self):
        assert {'classic', 'gentle', 'frantic'} <= set(list_profiles())

    @pytest.mark.parametrize("name", ['classic', 'gentle', 'frantic'])
    def test_load(self, name):
        profile = load_profile(name)
        assert profile.name == name

    def test_default_name_loads_classic(self):
        assert load_profile().name == config.DEFAULT_PROFILE

    def test_classic_matches_defaults(self):
        classic = load_profile('classic')
        defaults = default_profile()
        assert classic.spawn_interval == defaults.spawn_interval
        assert classic.difficulty_ramp_seconds == defaults.difficulty_ramp_seconds
        assert classic.boon_duration == defaults.boon_duration

    def test_gentle_is_gentler(self):
        gentle = load_profile('gentle')
        assert gentle.difficulty_ramp_seconds > default_profile().difficulty_ramp_seconds
        assert gentle.boon_chance > default_profile().boon_chance

    def test_unknown_name(self):
        with pytest.raises(TuningError, match="Available"):
            load_profile('nightmare')


class TestProfileFiles:
    """Profiles loaded from arbitrary paths."""

    def test_load_from_path(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("spawn_interval: 0.5\nboon_stacking: legacy\n")
        profile = load_profile(path)
        assert profile.name == "custom"
        assert profile.spawn_interval == 0.5
        assert profile.boon_stacking == BoonStacking.LEGACY
        assert profile.actor_speed == config.ACTOR_SPEED

    def test_explicit_name_wins(self, tmp_path):
        path = tmp_path / "custom.yml"
        path.write_text("name: mine\n")
        assert load_profile(str(path)).name == "mine"

    def test_empty_file_is_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_profile(path).spawn_interval == config.BASE_SPAWN_INTERVAL

    def test_missing_file(self, tmp_path):
        with pytest.raises(TuningError, match="not found"):
            load_profile(tmp_path / "nope.yaml")

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("boon_chance: 1.5\n")
        with pytest.raises(TuningError):
            load_profile(path)

    def test_unknown_field(self, tmp_path):
        path = tmp_path / "typo.yaml"
        path.write_text("spawn_intervall: 2\n")
        with pytest.raises(TuningError):
            load_profile(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(TuningError, match="mapping"):
            load_profile(path)

    def test_unparsable(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("spawn_interval: [1, 2\n")
        with pytest.raises(TuningError):
            load_profile(path)


class TestOverrides:
    """with_overrides and resolve_profile."""

    def test_with_overrides(self):
        p = default_profile().with_overrides(spawn_interval=2.0)
        assert p.spawn_interval == 2.0
        assert default_profile().spawn_interval == 1.0

    def test_with_invalid_override(self):
        with pytest.raises(TuningError):
            default_profile().with_overrides(spawn_interval=0)

    def test_resolve_none(self):
        assert resolve_profile() == default_profile()

    def test_resolve_name_with_override(self):
        p = resolve_profile('gentle', boon_stacking='legacy')
        assert p.name == 'gentle'
        assert p.boon_stacking == BoonStacking.LEGACY

    def test_resolve_ignores_none_overrides(self):
        p = resolve_profile('frantic', boon_stacking=None)
        assert p == load_profile('frantic')

    def test_resolve_profile_object(self):
        base = TuningProfile(name='x', spawn_interval=3.0)
        assert resolve_profile(base) is base

    def test_bad_stacking_value(self):
        with pytest.raises(TuningError):
            resolve_profile(None, boon_stacking='sideways')
