"""A light that emits from a single point, optionally within a beam angle."""

from __future__ import annotations

import dataclasses
import math
from functools import cmp_to_key
from typing import Iterable

from .light_source import LightSource
from .line import Line, cast_ray
from .transform import Rect, Transform
from .vector2 import Vector2, angle
from .vertex_array import PrimitiveType, Vertex, VertexArray, set_color

BASE_RADIUS = 400.0


def module360(x: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    x = math.fmod(x, 360.0)
    if x < 0.0:
        x += 360.0
    return x


class RadialLight(LightSource):
    """Light emitted from the object's position, within ``beam_angle`` of its rotation.

    A beam angle of 0 (which is what 360 wraps to) means a full circle.
    """

    def __init__(self) -> None:
        super().__init__()
        full = BASE_RADIUS * 2 + 2
        corners = [
            Vector2(BASE_RADIUS + 1, BASE_RADIUS + 1),
            Vector2(0.0, 0.0),
            Vector2(full, 0.0),
            Vector2(full, full),
            Vector2(0.0, full),
            Vector2(0.0, 0.0),
        ]
        self.polygon = VertexArray(PrimitiveType.TRIANGLE_FAN)
        for corner in corners:
            self.polygon.append(Vertex(position=corner, tex_coords=corner))
        self.origin = Vector2(BASE_RADIUS, BASE_RADIUS)
        self.range = 1.0
        self._beam_angle = 0.0
        self.beam_angle = 360.0

    def _reset_color(self) -> None:
        set_color(self.polygon, self._color)

    def _draw_transform(self) -> Transform:
        s = self._range / BASE_RADIUS
        return self.get_transform().scale(Vector2(s, s), Vector2(BASE_RADIUS, BASE_RADIUS))

    @property
    def beam_angle(self) -> float:
        """Width of the beam in degrees, wrapped into [0, 360)."""
        return self._beam_angle

    @beam_angle.setter
    def beam_angle(self, value: float) -> None:
        self._beam_angle = module360(value)

    def local_bounds(self) -> Rect:
        """Bounding rectangle before any transformation."""
        return Rect(0.0, 0.0, BASE_RADIUS * 2, BASE_RADIUS * 2)

    def global_bounds(self) -> Rect:
        """Bounding rectangle with position, rotation and range applied."""
        return self._draw_transform().transform_rect(self.local_bounds())

    def cast_light(self, edges: Iterable[Line]) -> None:
        """Recompute the lit triangle fan against the given edges."""
        edges = list(edges)
        trm = self._draw_transform()

        bl1 = module360(self.rotation - self._beam_angle / 2)
        bl2 = module360(self.rotation + self._beam_angle / 2)
        full_circle = self._beam_angle < 0.1
        cast_point = self.position
        off = 0.001

        def in_beam(a: float) -> bool:
            return (
                full_circle
                or (bl1 < bl2 and bl1 < a < bl2)
                or (bl1 > bl2 and (a > bl1 or a < bl2))
            )

        rays: list[Line] = [
            Line.from_angle(cast_point, a)
            for a in (45.0, 135.0, 225.0, 315.0)
            if in_beam(a)
        ]

        light_bounds = self.global_bounds()
        for edge in edges:
            if light_bounds.find_intersection(edge.bounds()) is None:
                continue
            for end in (edge.origin, edge.point(1.0)):
                ray = Line.from_points(cast_point, end)
                a = angle(ray.direction)
                if in_beam(a):
                    rays.append(ray)
                    rays.append(Line.from_angle(cast_point, a - off))
                    rays.append(Line.from_angle(cast_point, a + off))

        if bl1 > bl2:
            lo, hi = bl1 - 0.1, bl2 + 0.1

            def less(r1: Line, r2: Line) -> bool:
                a1 = angle(r1.direction)
                a2 = angle(r2.direction)
                return (a1 >= lo and a2 <= hi) or (a1 < a2 and (lo <= a1 or a2 <= hi))

            def compare(r1: Line, r2: Line) -> int:
                if less(r1, r2):
                    return -1
                if less(r2, r1):
                    return 1
                return 0

            rays.sort(key=cmp_to_key(compare))
        else:
            rays.sort(key=lambda r: angle(r.direction))

        if not full_circle:
            rays.insert(0, Line.from_angle(cast_point, bl1))
            rays.append(Line.from_angle(cast_point, bl2))

        tr_i = trm.inverse()
        max_range = self._range * self._range
        points = [tr_i.transform_point(cast_ray(edges, r, max_range)) for r in rays]

        self.polygon.resize(len(points) + 1 + int(full_circle))
        center = tr_i.transform_point(cast_point)
        self.polygon[0] = Vertex(position=center, color=self._color, tex_coords=center)
        for i, p in enumerate(points, start=1):
            self.polygon[i] = Vertex(position=p, color=self._color, tex_coords=p)
        if full_circle:
            self.polygon[len(points) + 1] = dataclasses.replace(self.polygon[1])