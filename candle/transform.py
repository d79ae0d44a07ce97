"""Rectangles, affine transforms and transformable objects."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .vector2 import Vector2


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def position(self) -> Vector2:
        return Vector2(self.left, self.top)

    @property
    def size(self) -> Vector2:
        return Vector2(self.width, self.height)

    def _extent(self) -> tuple[float, float, float, float]:
        return (
            min(self.left, self.right),
            min(self.top, self.bottom),
            max(self.left, self.right),
            max(self.top, self.bottom),
        )

    def contains(self, point: Vector2) -> bool:
        """Whether the point lies inside; right and bottom edges are excluded."""
        min_x, min_y, max_x, max_y = self._extent()
        return min_x <= point.x < max_x and min_y <= point.y < max_y

    def find_intersection(self, other: Rect) -> Rect | None:
        """The overlapping rectangle, or None when the rectangles do not overlap."""
        a_min_x, a_min_y, a_max_x, a_max_y = self._extent()
        b_min_x, b_min_y, b_max_x, b_max_y = other._extent()
        left = max(a_min_x, b_min_x)
        top = max(a_min_y, b_min_y)
        right = min(a_max_x, b_max_x)
        bottom = min(a_max_y, b_max_y)
        if left < right and top < bottom:
            return Rect(left, top, right - left, bottom - top)
        return None


@dataclass(frozen=True)
class Transform:
    """A 3x3 affine transformation matrix; operations return new transforms."""

    a00: float = 1.0
    a01: float = 0.0
    a02: float = 0.0
    a10: float = 0.0
    a11: float = 1.0
    a12: float = 0.0
    a20: float = 0.0
    a21: float = 0.0
    a22: float = 1.0

    def _rows(self) -> tuple[tuple[float, float, float], ...]:
        return (
            (self.a00, self.a01, self.a02),
            (self.a10, self.a11, self.a12),
            (self.a20, self.a21, self.a22),
        )

    def transform_point(self, point: Vector2) -> Vector2:
        """Apply the transform to a point."""
        return Vector2(
            self.a00 * point.x + self.a01 * point.y + self.a02,
            self.a10 * point.x + self.a11 * point.y + self.a12,
        )

    def transform_rect(self, rect: Rect) -> Rect:
        """Bounding rectangle of the transformed corners of ``rect``."""
        corners = [
            self.transform_point(Vector2(x, y))
            for x in (rect.left, rect.right)
            for y in (rect.top, rect.bottom)
        ]
        xs = [c.x for c in corners]
        ys = [c.y for c in corners]
        left, top = min(xs), min(ys)
        return Rect(left, top, max(xs) - left, max(ys) - top)

    def inverse(self) -> Transform:
        """The inverse transform, or the identity if the matrix is singular."""
        a00, a01, a02 = self.a00, self.a01, self.a02
        a10, a11, a12 = self.a10, self.a11, self.a12
        a20, a21, a22 = self.a20, self.a21, self.a22
        det = (
            a00 * (a11 * a22 - a12 * a21)
            - a01 * (a10 * a22 - a12 * a20)
            + a02 * (a10 * a21 - a11 * a20)
        )
        if det == 0:
            return Transform()
        return Transform(
            (a11 * a22 - a12 * a21) / det,
            (a02 * a21 - a01 * a22) / det,
            (a01 * a12 - a02 * a11) / det,
            (a12 * a20 - a10 * a22) / det,
            (a00 * a22 - a02 * a20) / det,
            (a02 * a10 - a00 * a12) / det,
            (a10 * a21 - a11 * a20) / det,
            (a01 * a20 - a00 * a21) / det,
            (a00 * a11 - a01 * a10) / det,
        )

    def combine(self, other: Transform) -> Transform:
        """``self * other``: the result applies ``other`` first, then ``self``."""
        columns = list(zip(*other._rows()))
        return Transform(
            *(
                sum(x * y for x, y in zip(row, col))
                for row in self._rows()
                for col in columns
            )
        )

    def __matmul__(self, other: Transform) -> Transform:
        return self.combine(other)

    def translate(self, offset: Vector2) -> Transform:
        """Combine with a translation."""
        return self.combine(Transform(1, 0, offset.x, 0, 1, offset.y, 0, 0, 1))

    def rotate(self, degrees: float, center: Vector2 | None = None) -> Transform:
        """Combine with a rotation around ``center`` (the origin by default)."""
        rad = math.radians(degrees)
        cos, sin = math.cos(rad), math.sin(rad)
        cx, cy = center if center is not None else (0.0, 0.0)
        return self.combine(
            Transform(
                cos, -sin, cx * (1 - cos) + cy * sin,
                sin, cos, cy * (1 - cos) - cx * sin,
                0, 0, 1,
            )
        )

    def scale(self, factors: Vector2, center: Vector2 | None = None) -> Transform:
        """Combine with a scaling around ``center`` (the origin by default)."""
        sx, sy = factors
        cx, cy = center if center is not None else (0.0, 0.0)
        return self.combine(Transform(sx, 0, cx * (1 - sx), 0, sy, cy * (1 - sy), 0, 0, 1))


Transform.IDENTITY = Transform()


class Transformable:
    """An object with a position, rotation, scale and origin."""

    def __init__(self) -> None:
        self.position = Vector2()
        self._rotation = 0.0
        self.scale = Vector2(1.0, 1.0)
        self.origin = Vector2()

    @property
    def rotation(self) -> float:
        """Rotation in degrees, kept in [0, 360)."""
        return self._rotation

    @rotation.setter
    def rotation(self, degrees: float) -> None:
        value = math.fmod(degrees, 360.0)
        if value < 0:
            value += 360.0
        self._rotation = value

    def get_transform(self) -> Transform:
        """The combined transform of origin, scale, rotation and position."""
        rad = math.radians(self._rotation)
        cos, sin = math.cos(rad), math.sin(rad)
        sxc = self.scale.x * cos
        syc = self.scale.y * cos
        sxs = self.scale.x * sin
        sys_ = self.scale.y * sin
        ox, oy = self.origin
        tx = -ox * sxc + oy * sys_ + self.position.x
        ty = -ox * sxs - oy * syc + self.position.y
        return Transform(sxc, -sys_, tx, sxs, syc, ty, 0, 0, 1)

    def move(self, offset: Vector2) -> None:
        """Shift the position by ``offset``."""
        self.position = self.position + offset

    def rotate(self, degrees: float) -> None:
        """Add ``degrees`` to the rotation."""
        self.rotation = self._rotation + degrees