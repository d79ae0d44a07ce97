"""A light whose rays all share one direction, emitted across a beam."""

from __future__ import annotations

import math
from typing import Iterable

from .color import Color
from .light_source import LightSource
from .line import Line, cast_ray
from .transform import Rect
from .vector2 import Vector2, magnitude
from .vertex_array import PrimitiveType, Vertex, VertexArray


class DirectedLight(LightSource):
    """Light emitted along the object's rotation from a segment of ``beam_width``.

    The source segment is centred on the object's position and is normal to
    the light direction; rays travel at most ``range`` from it.
    """

    def __init__(self) -> None:
        super().__init__()
        self.polygon = VertexArray(PrimitiveType.TRIANGLES, 2)
        self._beam_width = 10.0

    @property
    def beam_width(self) -> float:
        """Width of the segment from which rays are cast."""
        return self._beam_width

    @beam_width.setter
    def beam_width(self, value: float) -> None:
        self._beam_width = value

    def _faded(self, distance: float) -> Color:
        """The light colour with its alpha reduced for a ray of ``distance``."""
        if not self._fade:
            factor = 1.0
        elif self._range:
            factor = 1.0 - distance / self._range
        else:
            factor = 1.0 if distance == 0 else 0.0
        alpha = max(0, min(255, int(self._color.a * factor)))
        return self._color.with_alpha(alpha)

    def _reset_color(self) -> None:
        vertices = list(self.polygon)
        for base, second, third in zip(vertices[0::3], vertices[1::3], vertices[2::3]):
            base.color = self._color
            second.color = self._faded(magnitude(second.position - base.position))
            third.color = self._faded(magnitude(third.position - base.position))

    def cast_light(self, edges: Iterable[Line]) -> None:
        """Recompute the lit triangles against the given edges."""
        edges = list(edges)
        trm = self.get_transform()
        trm_i = trm.inverse()

        width_half = self._beam_width / 2.0
        base_beam = Rect(0.0, -width_half, self._range, self._beam_width)

        lim1o = trm.transform_point(Vector2(0.0, -width_half))
        lim1d = trm.transform_point(Vector2(self._range, -width_half))
        lim2o = trm.transform_point(Vector2(0.0, width_half))
        lim2d = trm.transform_point(Vector2(self._range, width_half))

        src_width = magnitude(lim2o - lim1o)
        off = 0.01 / src_width if src_width else math.inf
        light_dir = lim1d - lim1o

        ray_src = Line.from_points(lim1o, lim2o)
        ray_rng = Line.from_points(lim1d, lim2d)

        rays: list[tuple[float, Line]] = [
            (0.0, Line.from_points(lim1o, lim1d)),
            (1.0, Line.from_points(lim2o, lim2d)),
        ]

        def add_ray(t: float) -> None:
            rays.append((t, Line(ray_src.point(t), light_dir)))

        for seg in edges:
            hit = ray_rng.intersection(seg)
            if hit is not None:
                t_rng, t_seg = hit
                if 0.0 <= t_rng <= 1.0 and 0.0 <= t_seg <= 1.0:
                    add_ray(t_rng)
            for end in (seg.origin, seg.point(1.0)):
                local = trm_i.transform_point(end)
                if base_beam.contains(local):
                    # Parameter along the source segment of the ray through ``end``.
                    t = (local.y + width_half) / self._beam_width
                    add_ray(t - off)
                    add_ray(t)
                    add_ray(t + off)

        rays.sort(key=lambda item: item[0], reverse=True)

        points: list[Vector2] = []
        for _, ray in rays:
            points.append(trm_i.transform_point(ray.origin))
            points.append(trm_i.transform_point(cast_ray(edges, ray, self._range)))

        segments = len(points) // 2 - 1
        self.polygon.resize(segments * 6)
        for i in range(segments):
            tl, tr, bl, br = points[2 * i : 2 * i + 4]
            faded1 = self._faded(magnitude(tr - tl))
            faded2 = self._faded(magnitude(br - bl))
            p = i * 6
            self.polygon[p + 0] = Vertex(position=tl, color=self._color)
            self.polygon[p + 1] = Vertex(position=tr, color=faded1)
            self.polygon[p + 2] = Vertex(position=br, color=faded2)
            self.polygon[p + 3] = Vertex(position=tl, color=self._color)
            self.polygon[p + 4] = Vertex(position=br, color=faded2)
            self.polygon[p + 5] = Vertex(position=bl, color=faded1)