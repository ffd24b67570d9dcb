"""
Input State - Latched directional intent.

Keyboard: each arrow key sets or clears its own flag, so both can be held
at once and cancel out. Touch: the half of the viewport that was touched
wins outright; lifting the finger clears both flags.
"""
from dataclasses import dataclass

from dodgefall.input.input_event import Direction, InputEvent, InputEventType


@dataclass
class InputState:
    """Current movement intent, sampled once per simulation step."""
    move_left: bool = False
    move_right: bool = False

    @property
    def direction(self) -> int:
        """Net horizontal direction: -1, 0 or +1."""
        net = 0
        if self.move_left:
            net += Direction.LEFT.value
        if self.move_right:
            net += Direction.RIGHT.value
        return net

    def key_down(self, direction: Direction) -> None:
        if direction == Direction.LEFT:
            self.move_left = True
        else:
            self.move_right = True

    def key_up(self, direction: Direction) -> None:
        if direction == Direction.LEFT:
            self.move_left = False
        else:
            self.move_right = False

    def touch_start(self, x: float, viewport_width: float) -> None:
        """Steer towards the touched half of the viewport."""
        if x < viewport_width / 2:
            self.move_left, self.move_right = True, False
        else:
            self.move_left, self.move_right = False, True

    def touch_end(self) -> None:
        self.clear()

    def clear(self) -> None:
        self.move_left = False
        self.move_right = False

    def apply(self, event: InputEvent, viewport_width: float) -> None:
        """Fold one input event into the latched state.

        CONFIRM events carry no movement and are ignored here.
        """
        if event.event_type == InputEventType.KEY_DOWN:
            self.key_down(event.direction)
        elif event.event_type == InputEventType.KEY_UP:
            self.key_up(event.direction)
        elif event.event_type == InputEventType.TOUCH_START:
            self.touch_start(event.position.x, viewport_width)
        elif event.event_type == InputEventType.TOUCH_END:
            self.touch_end()
