"""RGBA colours and colour manipulation helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


def _channel(value: float) -> int:
    """Truncate toward zero and saturate to the 0..255 range."""
    return max(0, min(255, int(value)))


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    YELLOW: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    CYAN: ClassVar[Color]
    TRANSPARENT: ClassVar[Color]

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"colour channel {name} must be an integer in 0..255, got {value!r}")

    def with_alpha(self, a: int) -> Color:
        """The same colour with another alpha value."""
        return Color(self.r, self.g, self.b, a)


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.RED = Color(255, 0, 0)
Color.GREEN = Color(0, 255, 0)
Color.BLUE = Color(0, 0, 255)
Color.YELLOW = Color(255, 255, 0)
Color.MAGENTA = Color(255, 0, 255)
Color.CYAN = Color(0, 255, 255)
Color.TRANSPARENT = Color(0, 0, 0, 0)


def darken(c: Color, r: float) -> Color:
    """Scale the RGB channels by ``1 - r``; alpha is kept."""
    k = 1.0 - r
    return Color(_channel(c.r * k), _channel(c.g * k), _channel(c.b * k), c.a)


def lighten(c: Color, r: float) -> Color:
    """Scale the RGB channels by ``1 + r``, saturating at 255; alpha is kept."""
    k = 1.0 + r
    return Color(_channel(c.r * k), _channel(c.g * k), _channel(c.b * k), c.a)


def interpolate(c1: Color, c2: Color, r: float) -> Color:
    """Linear interpolation of all four channels from ``c1`` (r=0) to ``c2`` (r=1)."""
    return Color(
        _channel(c1.r + (c2.r - c1.r) * r),
        _channel(c1.g + (c2.g - c1.g) * r),
        _channel(c1.b + (c2.b - c1.b) * r),
        _channel(c1.a + (c2.a - c1.a) * r),
    )


def complementary(c: Color) -> Color:
    """Invert the RGB channels; alpha is kept."""
    return Color(255 - c.r, 255 - c.g, 255 - c.b, c.a)