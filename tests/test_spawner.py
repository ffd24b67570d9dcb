"""
Tests for random draws and the obstacle spawner.
"""
import math

import pytest

from dodgefall.models.entities import ObstacleKind
from dodgefall.random_draws import RandomDraws
from dodgefall.spawner import ObstacleSpawner
from dodgefall.tuning import default_profile


class TestRandomDraws:
    """Draws stay inside their documented ranges."""

    @pytest.fixture
    def draws(self):
        return RandomDraws(seed=42)

    def test_seeded_draws_repeat(self):
        a = RandomDraws(seed=7)
        b = RandomDraws(seed=7)
        assert [a.obstacle_size(40, 20) for _ in range(10)] == \
               [b.obstacle_size(40, 20) for _ in range(10)]

    def test_reseed(self, draws):
        first = [draws.spawn_x(500) for _ in range(5)]
        draws.reseed(42)
        assert [draws.spawn_x(500) for _ in range(5)] == first

    def test_ranges(self, draws):
        for _ in range(500):
            assert 40 <= draws.obstacle_size(40, 20) < 60
            assert 200 <= draws.fall_speed(200, 100) < 300
            assert -2.5 <= draws.spin(5) < 2.5
            assert 0 <= draws.spawn_x(550) <= 550
            vx, vy = draws.particle_velocity(10)
            assert -5 <= vx < 5
            assert -5 <= vy < 5

    def test_spawn_x_with_negative_span(self, draws):
        """Viewport narrower than the obstacle pins it to x=0."""
        assert draws.spawn_x(-20) == 0

    def test_obstacle_kind_extremes(self, draws):
        assert draws.obstacle_kind(0.0) == ObstacleKind.HAZARD
        assert draws.obstacle_kind(1.0) == ObstacleKind.BOON

    def test_boon_rate(self, draws):
        kinds = [draws.obstacle_kind(0.1) for _ in range(5000)]
        rate = kinds.count(ObstacleKind.BOON) / len(kinds)
        assert 0.07 < rate < 0.13


class TestSpawnerTiming:
    """Spawn cadence follows spawn_interval / difficulty."""

    @pytest.fixture
    def spawner(self):
        return ObstacleSpawner(default_profile(), RandomDraws(seed=3))

    def test_threshold(self, spawner):
        assert spawner.threshold(1.0) == 1.0
        assert spawner.threshold(2.0) == 0.5

    @pytest.mark.parametrize("dt", [0.5, 0.25, 0.125, 0.0625])
    @pytest.mark.parametrize("difficulty", [1.0, 2.0])
    def test_spawn_count_matches_rate(self, spawner, dt, difficulty):
        """Over a run of constant difficulty, count == floor(duration * D)."""
        duration = 4.0
        steps = int(duration / dt)
        spawned = sum(
            1 for _ in range(steps)
            if spawner.update(dt, difficulty, 600) is not None
        )
        assert spawned == math.floor(duration * difficulty)

    def test_first_spawn_after_threshold(self, spawner):
        assert spawner.update(0.5, 1.0, 600) is None
        assert spawner.accumulator == 0.5
        assert spawner.update(0.5, 1.0, 600) is not None
        assert spawner.accumulator == 0.0

    def test_excess_time_is_dropped(self, spawner):
        """A long frame spawns once and carries nothing over."""
        assert spawner.update(3.0, 1.0, 600) is not None
        assert spawner.accumulator == 0.0
        assert spawner.update(0.5, 1.0, 600) is None

    def test_reset(self, spawner):
        spawner.update(0.75, 1.0, 600)
        spawner.update(0.75, 1.0, 600)
        spawner.reset()
        assert spawner.accumulator == 0.0
        assert spawner.spawned_count == 0


class TestSpawnedObstacle:
    """Spawned obstacles start above the viewport with scaled speed."""

    def test_properties(self):
        spawner = ObstacleSpawner(default_profile(), RandomDraws(seed=11))
        for _ in range(200):
            o = spawner.spawn(difficulty=2.0, viewport_width=600)
            assert 40 <= o.size < 60
            assert o.y == -o.size
            assert 0 <= o.x <= 600 - o.size
            assert 400 <= o.speed < 600
            assert -2.5 <= o.spin < 2.5
            assert o.rotation == 0
        assert spawner.spawned_count == 200

    def test_boon_chance_from_tuning(self):
        tuning = default_profile().with_overrides(boon_chance=1.0)
        spawner = ObstacleSpawner(tuning, RandomDraws(seed=5))
        assert spawner.spawn(1.0, 600).kind == ObstacleKind.BOON

    def test_narrow_viewport(self):
        spawner = ObstacleSpawner(default_profile(), RandomDraws(seed=5))
        assert spawner.spawn(1.0, 30).x == 0
