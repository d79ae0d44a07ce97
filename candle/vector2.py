"""Two-dimensional vectors and the vector helpers used by the lighting code."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

PI = 3.1415926


def _fdiv(a: float, b: float) -> float:
    """Divide with IEEE semantics: a zero divisor gives inf or nan."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector or point."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __mul__(self, k: float) -> Vector2:
        return Vector2(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> Vector2:
        return Vector2(_fdiv(self.x, k), _fdiv(self.y, k))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


def magnitude(v: Vector2) -> float:
    """Length of a vector."""
    return math.sqrt(v.x * v.x + v.y * v.y)


def magnitude2(v: Vector2) -> float:
    """Squared length of a vector."""
    return v.x * v.x + v.y * v.y


def normalize(v: Vector2) -> Vector2:
    """Unit vector with the direction of ``v`` (nan components for a zero vector)."""
    m = magnitude(v)
    return Vector2(_fdiv(v.x, m), _fdiv(v.y, m))


def dot(v1: Vector2, v2: Vector2) -> float:
    """Dot product of two vectors."""
    return v1.x * v2.x + v1.y * v2.y


def angle_between(v1: Vector2, v2: Vector2) -> float:
    """Angle in degrees between two vectors, in [0, 180]; nan if either is zero."""
    cosine = _fdiv(dot(v1, v2), magnitude(v1) * magnitude(v2))
    if math.isnan(cosine):
        return math.nan
    cosine = max(-1.0, min(1.0, cosine))
    return math.acos(cosine) * 180.0 / PI


def angle(v: Vector2) -> float:
    """Angle in degrees of a vector with the X axis, in [0, 360)."""
    return math.fmod(math.atan2(v.y, v.x) * 180.0 / PI + 360.0, 360.0)