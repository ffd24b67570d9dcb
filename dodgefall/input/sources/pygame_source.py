"""
Pygame Input Source - Keyboard and touch input from the game window.

Arrow keys (and A/D) steer, Space/Enter confirm. Finger touches map to
touch events; left mouse button presses stand in for touches on desktop.
Events this source does not consume are re-posted to the pygame event
queue for the main loop.
"""
import time
from typing import List, Optional, Tuple

import pygame

from dodgefall.input.input_event import Direction, InputEvent, InputEventType
from dodgefall.input.sources.base import InputSource
from dodgefall.models.primitives import Vector2D

STEER_KEYS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}

CONFIRM_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER)


class PygameInputSource(InputSource):
    """Converts pygame keyboard, finger and mouse events into InputEvents."""

    def __init__(self, playfield: Optional[pygame.Rect] = None):
        """Initialize the pygame input source.

        Args:
            playfield: Window-space rectangle of the playfield; touch
                positions are reported relative to its top-left corner.
        """
        self._event_queue: List[InputEvent] = []
        self._playfield = playfield or pygame.Rect(0, 0, 0, 0)

    def set_playfield(self, playfield: pygame.Rect) -> None:
        """Update the playfield rectangle after a window resize."""
        self._playfield = pygame.Rect(playfield)

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def _to_playfield(self, window_x: float, window_y: float) -> Vector2D:
        return Vector2D(x=window_x - self._playfield.x, y=window_y - self._playfield.y)

    def _window_size(self) -> Tuple[int, int]:
        surface = pygame.display.get_surface()
        if surface is None:
            return self._playfield.width, self._playfield.height
        return surface.get_size()

    def _push(self, event_type: InputEventType, **payload) -> None:
        self._event_queue.append(InputEvent(
            event_type=event_type,
            timestamp=time.monotonic(),
            **payload,
        ))

    def update(self, dt: float) -> None:
        """Process pygame events and collect keyboard and touch input."""
        for event in pygame.event.get():
            if event.type in (pygame.KEYDOWN, pygame.KEYUP) and event.key in STEER_KEYS:
                event_type = InputEventType.KEY_DOWN if event.type == pygame.KEYDOWN else InputEventType.KEY_UP
                self._push(event_type, direction=STEER_KEYS[event.key])
            elif event.type == pygame.KEYDOWN and event.key in CONFIRM_KEYS:
                self._push(InputEventType.CONFIRM)
            elif event.type == pygame.FINGERDOWN:
                width, height = self._window_size()
                self._push(InputEventType.TOUCH_START,
                           position=self._to_playfield(event.x * width, event.y * height))
            elif event.type == pygame.FINGERUP:
                self._push(InputEventType.TOUCH_END)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if not getattr(event, 'touch', False):  # Touch already reported as FINGERDOWN
                    self._push(InputEventType.TOUCH_START, position=self._to_playfield(*event.pos))
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                if not getattr(event, 'touch', False):
                    self._push(InputEventType.TOUCH_END)
            elif event.type not in (pygame.MOUSEMOTION, pygame.FINGERMOTION, pygame.KEYUP):
                # Re-post everything else (QUIT, VIDEORESIZE, Escape...) for the main loop
                pygame.event.post(event)

    def clear(self) -> None:
        """Clear the event queue."""
        self._event_queue.clear()
