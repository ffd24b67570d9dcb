"""
Input Event - Represents a single input action.

Uses Pydantic for validation and immutability.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from dodgefall.models.primitives import Vector2D


class Direction(Enum):
    """Horizontal direction with its signed contribution."""
    LEFT = -1
    RIGHT = 1


class InputEventType(Enum):
    """Kinds of input the game reacts to."""
    KEY_DOWN = "key_down"
    KEY_UP = "key_up"
    TOUCH_START = "touch_start"
    TOUCH_END = "touch_end"
    CONFIRM = "confirm"    # Start / restart request (Space, Enter)


class InputEvent(BaseModel):
    """Immutable input event from any source.

    Attributes:
        event_type: What happened
        timestamp: Time when the event occurred (seconds, from monotonic clock)
        direction: Which way a key points (key events only)
        position: Where a touch landed, in viewport coordinates (touch start only)
    """
    event_type: InputEventType
    timestamp: float
    direction: Optional[Direction] = None
    position: Optional[Vector2D] = None

    @field_validator('timestamp')
    @classmethod
    def validate_timestamp(cls, v: float) -> float:
        """Validate timestamp is non-negative."""
        if v < 0:
            raise ValueError(f'Timestamp must be non-negative, got {v}')
        return v

    @model_validator(mode='after')
    def validate_payload(self) -> 'InputEvent':
        """Key events need a direction, touch starts need a position."""
        if self.event_type in (InputEventType.KEY_DOWN, InputEventType.KEY_UP) and self.direction is None:
            raise ValueError(f'{self.event_type.value} event requires a direction')
        if self.event_type == InputEventType.TOUCH_START and self.position is None:
            raise ValueError('touch_start event requires a position')
        return self

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        parts = [self.event_type.value, f"t={self.timestamp:.3f}"]
        if self.direction is not None:
            parts.append(self.direction.name.lower())
        if self.position is not None:
            parts.append(f"pos=({self.position.x:.1f}, {self.position.y:.1f})")
        return f"InputEvent({', '.join(parts)})"
