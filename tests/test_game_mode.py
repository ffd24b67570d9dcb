"""
Tests for DodgefallMode, the host-facing game object.
"""
import pygame
import pytest

from dodgefall.base_game import BaseGame
from dodgefall.effects import BoonStacking
from dodgefall.game_mode import DodgefallMode
from dodgefall.game_state import GameState
from dodgefall.input import Direction, InputEvent, InputEventType
from dodgefall.main import build_parser, playfield_rect
from dodgefall.models.primitives import Vector2D, Viewport
from dodgefall.tuning import TuningError

from conftest import NO_SPAWN_INTERVAL


def confirm():
    return InputEvent(event_type=InputEventType.CONFIRM, timestamp=0.0)


def touch_at(x):
    return InputEvent(event_type=InputEventType.TOUCH_START, timestamp=0.0,
                      position=Vector2D(x=x, y=400))


def key_down(direction):
    return InputEvent(event_type=InputEventType.KEY_DOWN, timestamp=0.0, direction=direction)


@pytest.fixture
def game(quiet_tuning):
    return DodgefallMode(600, 800, profile=quiet_tuning, seed=99)


class TestMetadata:
    """Class-level metadata and CLI arguments."""

    def test_is_base_game(self):
        assert issubclass(DodgefallMode, BaseGame)

    def test_info(self):
        info = DodgefallMode.get_info()
        assert info['name'] == "Dodgefall"
        names = [a['name'] for a in info['arguments']]
        assert names == ['--boon-stacking', '--profile', '--seed']

    def test_mode_argument_overrides_base(self):
        class SeededMode(DodgefallMode):
            ARGUMENTS = [{'name': '--seed', 'type': int, 'default': 7, 'help': 'fixed'}]

        args = SeededMode.get_arguments()
        assert [a['name'] for a in args] == ['--seed', '--profile']
        assert args[0]['default'] == 7

    def test_parser(self):
        args = build_parser().parse_args(
            ['--width', '480', '--profile', 'gentle', '--seed', '3', '--boon-stacking', 'legacy'])
        assert args.width == 480
        assert args.profile == 'gentle'
        assert args.seed == 3
        assert args.boon_stacking == 'legacy'
        assert args.fullscreen is False

    def test_parser_rejects_unknown_stacking(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(['--boon-stacking', 'sometimes'])


class TestConstruction:
    """Profiles and overrides."""

    def test_starts_idle(self, game):
        assert game.state == GameState.IDLE
        assert game.get_score() == 0

    def test_named_profile(self):
        game = DodgefallMode(600, 800, profile='frantic')
        assert game.session.tuning.name == 'frantic'

    def test_stacking_override(self):
        game = DodgefallMode(600, 800, boon_stacking='legacy')
        assert game.session.effects.policy == BoonStacking.LEGACY

    def test_unknown_profile(self):
        with pytest.raises(TuningError):
            DodgefallMode(600, 800, profile='does-not-exist')

    def test_autostart(self, quiet_tuning):
        game = DodgefallMode(600, 800, profile=quiet_tuning, autostart=True)
        assert game.state == GameState.PLAYING


class TestControls:
    """Start/restart commands and steering."""

    def test_confirm_starts(self, game):
        game.handle_input([confirm()])
        assert game.state == GameState.PLAYING

    def test_tap_starts(self, game):
        game.handle_input([touch_at(100)])
        assert game.state == GameState.PLAYING
        assert game.input_state.direction == 0

    def test_tap_restarts_after_game_over(self, game):
        game.start()
        game.session.end()
        game.handle_input([touch_at(500)])
        assert game.state == GameState.PLAYING
        assert game.session.generation == 2

    def test_touch_steers_while_playing(self, game):
        game.start()
        game.handle_input([touch_at(100)])
        assert game.input_state.direction == -1

    def test_confirm_ignored_while_playing(self, game):
        game.start()
        game.update(0.25)
        game.handle_input([confirm()])
        assert game.session.score == 0.25
        assert game.session.generation == 1

    def test_keys_steer(self, game):
        game.start()
        game.handle_input([key_down(Direction.RIGHT)])
        x0 = game.session.actor.x
        game.update(0.25)
        assert game.session.actor.x == x0 + 75

    def test_held_key_survives_start(self, game):
        game.handle_input([key_down(Direction.LEFT)])
        game.handle_input([confirm()])
        assert game.state == GameState.PLAYING
        assert game.input_state.direction == -1

    def test_held_key_survives_restart(self, game):
        game.start()
        game.handle_input([key_down(Direction.RIGHT)])
        game.session.end()
        game.handle_input([confirm()])
        assert game.session.generation == 2

        x0 = game.session.actor.x
        game.update(0.25)
        assert game.input_state.direction == 1
        assert game.session.actor.x == x0 + 75

    def test_actions(self, game):
        assert [a['id'] for a in game.get_available_actions()] == ['start']
        assert game.execute_action('start')
        assert game.get_available_actions() == []
        game.session.end()
        assert [a['id'] for a in game.get_available_actions()] == ['restart']
        assert game.execute_action('restart')
        assert game.state == GameState.PLAYING
        assert not game.execute_action('pause')

    def test_start_mid_game_resets_round(self, game):
        game.start()
        game.update(0.25)
        game.start()
        assert game.session.score == 0
        assert game.state == GameState.PLAYING


class TestUpdate:
    """Frame time handling."""

    def test_idle_update_does_nothing(self, game):
        game.update(0.5)
        assert game.session.score == 0

    def test_long_frame_clamped(self, game):
        game.start()
        game.update(5.0)
        assert game.session.score == 0.25

    def test_negative_frame_ignored(self, game):
        game.start()
        game.update(-0.5)
        assert game.session.score == 0

    def test_score_is_whole_seconds(self, game):
        game.start()
        for _ in range(7):
            game.update(0.25)
        assert game.get_score() == 1

    def test_no_spawns_with_quiet_tuning(self, game):
        game.start()
        for _ in range(40):
            game.update(0.25)
        assert game.session.tuning.spawn_interval == NO_SPAWN_INTERVAL
        assert game.session.obstacles == []


class TestResizeAndRender:
    """Resize forwarding, snapshots and rendering."""

    def test_resize(self, game):
        assert game.resize(400, 600)
        assert game.session.viewport == Viewport(width=400, height=600)
        assert not game.resize(-1, 600)

    def test_snapshot(self, game):
        game.start()
        snap = game.snapshot()
        assert snap.state == GameState.PLAYING
        assert snap.score_text == "0.00"

    def test_render(self, game):
        surface = pygame.Surface((600, 800))
        game.render(surface)
        game.start()
        game.update(0.25)
        game.render(surface)

    def test_playfield_rect(self):
        rect = playfield_rect((1000, 800), Viewport(width=600, height=800))
        assert rect == pygame.Rect(200, 0, 600, 800)

    def test_playfield_rect_clipped(self):
        rect = playfield_rect((100, 150), Viewport(width=120, height=200))
        assert rect == pygame.Rect(0, 0, 100, 150)
