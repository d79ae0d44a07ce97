"""Lines, segments and the ray-casting primitive."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from .transform import Rect
from .vector2 import PI, Vector2, angle_between, magnitude, normalize


def _fdiv(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _sign(f: float) -> int:
    return (0.0 < f) - (f < 0.0)


@dataclass(frozen=True)
class Line:
    """A 2D line given by an origin point and a (not necessarily unit) direction.

    Used as a segment, it runs from ``origin`` to ``point(1)``.
    """

    origin: Vector2
    direction: Vector2

    @classmethod
    def from_points(cls, p1: Vector2, p2: Vector2) -> Line:
        """Line through ``p1`` and ``p2`` with direction ``p2 - p1``."""
        return cls(p1, p2 - p1)

    @classmethod
    def from_angle(cls, p: Vector2, angle: float) -> Line:
        """Line from ``p`` with unit direction at ``angle`` degrees."""
        two_pi = PI * 2
        ang = math.fmod(angle * PI / 180.0 + PI, two_pi)
        if ang < 0:
            ang += two_pi
        ang -= PI
        return cls(p, Vector2(math.cos(ang), math.sin(ang)))

    def bounds(self) -> Rect:
        """Bounding rectangle of the segment, one unit larger on each axis."""
        p1 = self.origin
        p2 = self.origin + self.direction
        return Rect(
            min(p1.x, p2.x),
            min(p1.y, p2.y),
            abs(self.direction.x) + 1.0,
            abs(self.direction.y) + 1.0,
        )

    def relative_position(self, point: Vector2) -> int:
        """-1, 0 or 1 depending on the side of the line the point lies on."""
        f = _fdiv(point.x - self.origin.x, self.direction.x) - _fdiv(
            point.y - self.origin.y, self.direction.y
        )
        return _sign(f)

    def distance(self, point: Vector2) -> float:
        """Shortest distance from ``point`` to the line."""
        d = self.direction
        if d.x == 0:
            return abs(point.x - self.origin.x)
        if d.y == 0:
            return abs(point.y - self.origin.y)
        a = 1.0 / d.x
        b = -1.0 / d.y
        c = -b * self.origin.y - a * self.origin.x
        return abs(a * point.x + b * point.y + c) / math.sqrt(a * a + b * b)

    def intersection(self, other: Line) -> tuple[float, float] | None:
        """Parameters ``(t_self, t_other)`` of the crossing with ``other``, or None.

        Nearly parallel lines never intersect; a crossing also requires
        ``t_other > 0`` and ``0 < t_self < |self.direction|``.
        """
        a_o, a_d = self.origin, self.direction
        b_o, b_d = other.origin, other.direction

        line_angle = angle_between(a_d, b_d)
        if line_angle < 0.001 or line_angle > 359.999 or 179.999 < line_angle < 180.001:
            return None

        if abs(b_d.x) < 0.001 or abs(a_d.y) < 0.001:
            norm_b = _fdiv(
                a_d.x * (a_o.y - b_o.y) + a_d.y * (b_o.x - a_o.x),
                b_d.y * a_d.x - b_d.x * a_d.y,
            )
            norm_a = _fdiv(b_o.x + b_d.x * norm_b - a_o.x, a_d.x)
        else:
            norm_a = _fdiv(
                b_d.x * (b_o.y - a_o.y) + b_d.y * (a_o.x - b_o.x),
                a_d.y * b_d.x - a_d.x * b_d.y,
            )
            norm_b = _fdiv(a_o.x + a_d.x * norm_a - b_o.x, b_d.x)

        if norm_b > 0 and 0 < norm_a < magnitude(a_d):
            return norm_a, norm_b
        return None

    def point(self, param: float) -> Vector2:
        """The point ``origin + param * direction``."""
        return self.origin + self.direction * param


def cast_ray(edges: Iterable[Line], ray: Line, max_range: float = math.inf) -> Vector2:
    """Cast ``ray`` against segment ``edges`` and return the closest hit.

    If nothing is hit within ``max_range``, the point at ``max_range`` along
    the ray is returned.
    """
    min_range = max_range
    ray = Line(ray.origin, normalize(ray.direction))
    for edge in edges:
        hit = edge.intersection(ray)
        if hit is None:
            continue
        t_seg, t_ray = hit
        if 0.0 <= t_ray <= min_range and 0.0 <= t_seg <= 1.0:
            min_range = t_ray
    return ray.point(min_range)