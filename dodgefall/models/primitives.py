"""
Shared primitive data types for the simulation and renderer.

Basic geometric and color types used by entities, snapshots and the
presentation layer.
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, computed_field, field_validator


class Vector2D(BaseModel):
    """Immutable 2D point/vector for positions and velocities.

    Attributes:
        x: X coordinate (horizontal, grows rightwards)
        y: Y coordinate (vertical, grows downwards)

    Examples:
        >>> pos = Vector2D(x=100.0, y=200.0)
        >>> vel = Vector2D(x=-5.0, y=2.5)
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Vector2D(x={self.x:.2f}, y={self.y:.2f})"


class Viewport(BaseModel):
    """Playfield dimensions in logical units.

    Attributes:
        width: Width (must be positive)
        height: Height (must be positive)
    """
    width: float
    height: float

    @field_validator('width', 'height')
    @classmethod
    def validate_positive(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Viewport dimensions must be positive, got {v}')
        return v

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Viewport({self.width:g}x{self.height:g})"


class Color(BaseModel):
    """Immutable RGBA color with validation.

    All color components must be in the range [0, 255] inclusive.

    Examples:
        >>> Color.from_hex('#8b5cf6').as_rgb_tuple
        (139, 92, 246)
    """
    r: int
    g: int
    b: int
    a: int = 255

    @field_validator('r', 'g', 'b', 'a')
    @classmethod
    def validate_color_range(cls, v: int) -> int:
        """Validate color components are in valid range [0, 255]."""
        if not 0 <= v <= 255:
            raise ValueError(f'Color component must be in range [0, 255], got {v}')
        return v

    @classmethod
    def from_hex(cls, value: str, alpha: int = 255) -> 'Color':
        """Parse a ``#rrggbb`` or ``#rgb`` color string."""
        digits = value.lstrip('#')
        if len(digits) == 3:
            digits = ''.join(c * 2 for c in digits)
        if len(digits) != 6:
            raise ValueError(f'Invalid hex color: {value!r}')
        return cls(
            r=int(digits[0:2], 16),
            g=int(digits[2:4], 16),
            b=int(digits[4:6], 16),
            a=alpha,
        )

    @computed_field
    @property
    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Return color as RGBA tuple for pygame compatibility."""
        return (self.r, self.g, self.b, self.a)

    @computed_field
    @property
    def as_rgb_tuple(self) -> Tuple[int, int, int]:
        """Return color as RGB tuple (without alpha)."""
        return (self.r, self.g, self.b)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})"


class Rectangle(BaseModel):
    """Immutable axis-aligned rectangle, top-left anchored (pygame convention).

    Examples:
        >>> a = Rectangle(x=10.0, y=10.0, width=40.0, height=40.0)
        >>> a.overlaps(Rectangle(x=20.0, y=20.0, width=40.0, height=40.0))
        True
        >>> a.overlaps(Rectangle(x=50.0, y=10.0, width=40.0, height=40.0))
        False
    """
    x: float
    y: float
    width: float
    height: float

    @field_validator('width', 'height')
    @classmethod
    def validate_positive_dimensions(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    @computed_field
    @property
    def center(self) -> Vector2D:
        """Center point of the rectangle."""
        return Vector2D(x=self.x + self.width / 2, y=self.y + self.height / 2)

    @computed_field
    @property
    def right(self) -> float:
        """Right edge x coordinate."""
        return self.x + self.width

    @computed_field
    @property
    def bottom(self) -> float:
        """Bottom edge y coordinate."""
        return self.y + self.height

    def overlaps(self, other: 'Rectangle') -> bool:
        """Check for a strictly positive-area overlap.

        Rectangles that only share an edge do not overlap.
        """
        return (self.x < other.right and
                self.right > other.x and
                self.y < other.bottom and
                self.bottom > other.y)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
