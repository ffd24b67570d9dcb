"""
Dodgefall Game Mode

Dodge the falling alarm clocks, catch the occasional blue pill to slow
time down. Score is the number of seconds survived; everything speeds up
the longer you last.

The game mode is the host-facing wrapper around a Session: it turns input
events into movement intent and start/restart commands, drives the
simulation step, and hands frozen snapshots to the renderer.
"""
from typing import Any, Dict, List, Optional, Union
from pathlib import Path

import pygame

from dodgefall import config
from dodgefall.base_game import BaseGame
from dodgefall.game_state import GameState
from dodgefall.input.input_event import InputEvent, InputEventType
from dodgefall.input.input_state import InputState
from dodgefall.logging import get_logger
from dodgefall.models.snapshot import FrameSnapshot
from dodgefall.renderer import Renderer
from dodgefall.session import Session
from dodgefall.simulation import step
from dodgefall.tuning import TuningProfile, resolve_profile

log = get_logger('game_mode')


class DodgefallMode(BaseGame):
    """Dodgefall game mode - survive as long as possible.

    Features:
    - Keyboard (arrows / A,D) and touch (screen halves) steering
    - Difficulty that ramps with survival time
    - Boon pickups that halve fall speed for a few seconds
    - Tuning profiles loaded from YAML
    """

    NAME = "Dodgefall"
    DESCRIPTION = "Dodge falling alarm clocks; grab blue pills to slow time."
    VERSION = "1.0.0"

    ARGUMENTS = [
        {
            'name': '--boon-stacking',
            'type': str,
            'default': None,
            'choices': ['extend', 'legacy'],
            'help': 'Overlapping Boons: extend the slow-down, or let the first expiry end it'
        },
    ]

    def __init__(
        self,
        width: float = config.SCREEN_WIDTH,
        height: float = config.SCREEN_HEIGHT,
        profile: Optional[Union[str, Path, TuningProfile]] = None,
        seed: Optional[int] = None,
        boon_stacking: Optional[str] = None,
        autostart: bool = False,
        **kwargs,
    ):
        """Initialize the game in the IDLE state.

        Args:
            width: Available playfield width (capped at MAX_VIEWPORT_WIDTH)
            height: Available playfield height
            profile: Tuning profile, profile name or YAML path
            seed: Random seed for reproducible runs
            boon_stacking: Override the profile's stacking policy ('extend' or 'legacy')
            autostart: Skip the start screen
        """
        tuning = resolve_profile(profile, boon_stacking=boon_stacking)
        self._session = Session(width, height, tuning=tuning, seed=seed)
        self._input = InputState()
        self._renderer: Optional[Renderer] = None

        log.info("Profile '%s', viewport %s", tuning.name, self._session.viewport)

        if autostart:
            self.start()

    @property
    def session(self) -> Session:
        return self._session

    @property
    def input_state(self) -> InputState:
        return self._input

    @property
    def state(self) -> GameState:
        return self._session.state

    def get_score(self) -> int:
        """Whole seconds survived."""
        return int(self._session.score)

    # =========================================================================
    # Control surface
    # =========================================================================

    def start(self) -> None:
        """Start a new round (from the start screen or mid-game).

        Latched keys are left alone, so an arrow held across the start
        keeps steering.
        """
        self._session.start()

    def restart(self) -> None:
        """Start again after a game over."""
        self._session.restart()

    def get_available_actions(self) -> List[Dict[str, Any]]:
        state = self._session.state
        if state == GameState.IDLE:
            return [{'id': 'start', 'label': 'Start', 'style': 'primary'}]
        if state == GameState.GAME_OVER:
            return [{'id': 'restart', 'label': 'Play Again', 'style': 'primary'}]
        return []

    def execute_action(self, action_id: str) -> bool:
        if action_id == 'start':
            self.start()
            return True
        if action_id == 'restart':
            self.restart()
            return True
        return False

    def _confirm(self) -> None:
        """Space/Enter or a tap on an overlay: take the offered action."""
        actions = self.get_available_actions()
        if actions:
            self.execute_action(actions[0]['id'])

    # =========================================================================
    # Frame loop
    # =========================================================================

    def handle_input(self, events: List[InputEvent]) -> None:
        """Process input events."""
        for event in events:
            if event.event_type == InputEventType.CONFIRM:
                self._confirm()
            elif event.event_type == InputEventType.TOUCH_START and not self._session.is_playing:
                self._confirm()
            else:
                self._input.apply(event, self._session.viewport.width)

    def update(self, dt: float) -> None:
        """Advance the simulation by one frame.

        Frame time is clamped to MAX_FRAME_DT so a stalled window does not
        drop obstacles straight through the actor.
        """
        dt = min(max(dt, 0.0), config.MAX_FRAME_DT)
        step(self._session, self._input, dt)

    def resize(self, width: float, height: float) -> bool:
        """Forward a display size change to the session."""
        return self._session.resize(width, height)

    def snapshot(self) -> FrameSnapshot:
        return self._session.snapshot()

    def render(self, screen: pygame.Surface) -> None:
        """Render the game."""
        if self._renderer is None:
            self._renderer = Renderer()
        self._renderer.render(screen, self.snapshot())
