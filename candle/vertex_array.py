"""Vertex arrays and bulk operations on their vertices."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator

from . import color as _color
from .color import Color
from .transform import Rect, Transform
from .vector2 import Vector2


class PrimitiveType(Enum):
    """How the vertices of an array are assembled into shapes."""

    POINTS = auto()
    LINES = auto()
    LINE_STRIP = auto()
    TRIANGLES = auto()
    TRIANGLE_STRIP = auto()
    TRIANGLE_FAN = auto()


@dataclass
class Vertex:
    """A point with a colour and texture coordinates."""

    position: Vector2 = field(default_factory=Vector2)
    color: Color = Color.WHITE
    tex_coords: Vector2 = field(default_factory=Vector2)


class VertexArray:
    """A resizable sequence of vertices with a primitive type."""

    def __init__(self, primitive_type: PrimitiveType = PrimitiveType.POINTS, count: int = 0) -> None:
        self.primitive_type = primitive_type
        self._vertices: list[Vertex] = []
        self.resize(count)

    def __len__(self) -> int:
        return len(self._vertices)

    def __getitem__(self, index: int) -> Vertex:
        return self._vertices[index]

    def __setitem__(self, index: int, vertex: Vertex) -> None:
        self._vertices[index] = vertex

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def append(self, vertex: Vertex) -> None:
        self._vertices.append(vertex)

    def resize(self, count: int) -> None:
        """Truncate or extend with default vertices to ``count`` vertices."""
        if count < 0:
            raise ValueError("vertex count cannot be negative")
        del self._vertices[count:]
        self._vertices.extend(Vertex() for _ in range(count - len(self._vertices)))

    def clear(self) -> None:
        self._vertices.clear()

    def copy(self) -> VertexArray:
        """An independent copy of the array."""
        return copy.deepcopy(self)

    def bounds(self) -> Rect:
        """Bounding rectangle of all vertex positions (empty if no vertices)."""
        if not self._vertices:
            return Rect()
        xs = [v.position.x for v in self._vertices]
        ys = [v.position.y for v in self._vertices]
        left, top = min(xs), min(ys)
        return Rect(left, top, max(xs) - left, max(ys) - top)


def set_color(va: VertexArray, color: Color) -> None:
    """Give every vertex the same colour."""
    for vertex in va:
        vertex.color = color


def transform(va: VertexArray, t: Transform) -> None:
    """Apply a transform to every vertex position."""
    for vertex in va:
        vertex.position = t.transform_point(vertex.position)


def move(va: VertexArray, d: Vector2) -> None:
    """Shift every vertex position by ``d``."""
    for vertex in va:
        vertex.position = vertex.position + d


def darken(va: VertexArray, r: float) -> None:
    """Darken every vertex colour."""
    for vertex in va:
        vertex.color = _color.darken(vertex.color, r)


def lighten(va: VertexArray, r: float) -> None:
    """Lighten every vertex colour."""
    for vertex in va:
        vertex.color = _color.lighten(vertex.color, r)


def interpolate(va: VertexArray, color: Color, r: float) -> None:
    """Blend every vertex colour toward ``color``."""
    for vertex in va:
        vertex.color = _color.interpolate(vertex.color, color, r)


def complementary(va: VertexArray) -> None:
    """Replace every vertex colour with its complement."""
    for vertex in va:
        vertex.color = _color.complementary(vertex.color)