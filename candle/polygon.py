"""Polygons represented as a closed chain of segments."""

from __future__ import annotations

from typing import Sequence

from .line import Line
from .transform import Rect
from .vector2 import Vector2


class Polygon:
    """A closed polygon held as the list of its edges."""

    def __init__(self, points: Sequence[Vector2]) -> None:
        points = list(points)
        self.lines: list[Line] = [
            Line.from_points(start, end)
            for start, end in zip(points, points[1:] + points[:1])
        ]

    @classmethod
    def from_rect(cls, rect: Rect) -> Polygon:
        """The four edges of a rectangle, clockwise from the top-left corner."""
        lt = Vector2(rect.left, rect.top)
        rt = Vector2(rect.right, rect.top)
        rb = Vector2(rect.right, rect.bottom)
        lb = Vector2(rect.left, rect.bottom)
        return cls([lt, rt, rb, lb])