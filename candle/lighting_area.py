"""An off-screen layer used as fog over a scene or as extra ambient light."""

from __future__ import annotations

from enum import Enum, auto
from typing import Iterator

from PIL import Image, ImageChops, ImageDraw

from .color import Color
from .light_source import LightSource
from .radial_light import RadialLight
from .transform import Rect, Transform, Transformable
from .vector2 import Vector2
from .vertex_array import PrimitiveType, Vertex, VertexArray, set_color


class Mode(Enum):
    """How a lighting area affects what is drawn beneath it."""

    FOG = auto()
    """A mask that can only be seen through where light is drawn on it."""
    AMBIENT = auto()
    """An extra layer of light added to the scene."""


def _rgba(c: Color) -> tuple[int, int, int, int]:
    return (c.r, c.g, c.b, c.a)


def _triangles(va: VertexArray) -> Iterator[tuple[Vertex, Vertex, Vertex]]:
    """The filled triangles that a vertex array describes."""
    vertices = list(va)
    if va.primitive_type is PrimitiveType.TRIANGLES:
        yield from zip(vertices[0::3], vertices[1::3], vertices[2::3])
    elif va.primitive_type is PrimitiveType.TRIANGLE_FAN and vertices:
        first = vertices[0]
        for second, third in zip(vertices[1:], vertices[2:]):
            yield first, second, third
    elif va.primitive_type is PrimitiveType.TRIANGLE_STRIP:
        yield from zip(vertices, vertices[1:], vertices[2:])


def _light_transform(light: LightSource) -> Transform:
    """The transform that places a light's polygon in world coordinates."""
    if isinstance(light, RadialLight):
        return light._draw_transform()
    return light.get_transform()


class LightingArea(Transformable):
    """A rectangular layer of fog or ambient light.

    The area is backed by an RGBA image. Changes to its colour, opacity or
    texture take effect after :meth:`clear`, and become visible through
    :attr:`image` and :meth:`render_onto` after :meth:`display`.
    """

    def __init__(self, mode: Mode, position: Vector2, size: Vector2) -> None:
        super().__init__()
        self.mode = mode
        self._color = Color.WHITE
        self._opacity = 1.0
        self._texture: Image.Image | None = None
        self._texture_rect = Rect()
        self.base_triangles = VertexArray(PrimitiveType.TRIANGLES, 6)
        self.area_triangles = VertexArray(PrimitiveType.TRIANGLES, 6)
        self._initialize_canvas(size)
        self.position = position

    @classmethod
    def from_texture(
        cls, mode: Mode, texture: Image.Image, rect: Rect | None = None
    ) -> LightingArea:
        """An area at the origin based on ``texture``, or the ``rect`` part of it."""
        area = cls(mode, Vector2(), Vector2())
        area.set_area_texture(texture, rect)
        return area

    def _initialize_canvas(self, size: Vector2) -> None:
        width, height = int(size.x), int(size.y)
        if width < 0 or height < 0:
            raise ValueError(f"lighting area size cannot be negative: {size!r}")
        self._canvas = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        self._displayed = self._canvas.copy()
        w, h = float(size.x), float(size.y)
        corners = [
            Vector2(0.0, 0.0),
            Vector2(w, 0.0),
            Vector2(w, h),
            Vector2(0.0, 0.0),
            Vector2(w, h),
            Vector2(0.0, h),
        ]
        for i, corner in enumerate(corners):
            self.base_triangles[i].position = corner
            self.area_triangles[i].position = corner
            self.area_triangles[i].tex_coords = corner

    def _actual_color(self) -> Color:
        alpha = max(0, min(255, int(self._color.a * self._opacity)))
        return self._color.with_alpha(alpha)

    def local_bounds(self) -> Rect:
        """Bounding rectangle of the area before any transformation."""
        return self.area_triangles.bounds()

    def global_bounds(self) -> Rect:
        """Bounding rectangle of the area with its transformation applied."""
        return self.get_transform().transform_rect(self.area_triangles.bounds())

    @property
    def area_color(self) -> Color:
        """Plain colour of the fog or light; multiplies the texture if there is one."""
        return self._color

    @area_color.setter
    def area_color(self, value: Color) -> None:
        self._color = value
        set_color(self.base_triangles, self._actual_color())

    @property
    def area_opacity(self) -> float:
        """Factor applied to the alpha of the area colour."""
        return self._opacity

    @area_opacity.setter
    def area_opacity(self, value: float) -> None:
        self._opacity = float(value)
        set_color(self.base_triangles, self._actual_color())

    @property
    def area_texture(self) -> Image.Image | None:
        """The base texture of the area, or None for a plain colour."""
        return self._texture

    def set_area_texture(self, texture: Image.Image | None, rect: Rect | None = None) -> None:
        """Use ``texture`` (or None) as base and resize the area to ``rect``.

        Without a rectangle, or with an empty one, the whole texture is used.
        """
        self._texture = texture
        if rect is None:
            rect = Rect()
        if rect.width == 0 and rect.height == 0 and texture is not None:
            rect = Rect(rect.left, rect.top, float(texture.width), float(texture.height))
        self._initialize_canvas(rect.size)
        self.set_texture_rect(rect)

    @property
    def texture_rect(self) -> Rect:
        """The part of the texture that is used."""
        return self._texture_rect

    def set_texture_rect(self, rect: Rect) -> None:
        """Select the part of the texture to use; the area keeps its size."""
        self._texture_rect = rect
        coords = [
            Vector2(rect.left, rect.top),
            Vector2(rect.right, rect.top),
            Vector2(rect.right, rect.bottom),
            Vector2(rect.left, rect.top),
            Vector2(rect.right, rect.bottom),
            Vector2(rect.left, rect.bottom),
        ]
        for vertex, coord in zip(self.base_triangles, coords):
            vertex.tex_coords = coord

    def clear(self) -> None:
        """Restore the colour or texture of the whole area."""
        size = self._canvas.size
        actual = self._actual_color()
        if self._texture is None:
            self._canvas = Image.new("RGBA", size, _rgba(actual))
            return
        r = self._texture_rect
        box = (int(r.left), int(r.top), int(r.right), int(r.bottom))
        region = self._texture.convert("RGBA").crop(box)
        if 0 in region.size or 0 in size:
            self._canvas = Image.new("RGBA", size, (0, 0, 0, 0))
            return
        if region.size != size:
            region = region.resize(size, Image.Resampling.BILINEAR)
        bands = [
            band.point(lambda x, k=k: x * k // 255)
            for band, k in zip(region.split(), _rgba(actual))
        ]
        self._canvas = Image.merge("RGBA", bands)

    def draw(self, light: LightSource) -> None:
        """In FOG mode, uncover the part of the area lit by ``light``.

        Each triangle of the light is shaded flat with the mean alpha of its
        vertices. In AMBIENT mode, or with zero opacity, nothing happens.
        """
        if self._opacity <= 0 or self.mode is not Mode.FOG:
            return
        to_area = self.get_transform().inverse() @ _light_transform(light)
        mask = Image.new("L", self._canvas.size, 0)
        pen = ImageDraw.Draw(mask)
        for triangle in _triangles(light.polygon):
            points = [tuple(to_area.transform_point(v.position)) for v in triangle]
            alpha = round(sum(v.color.a for v in triangle) / 3)
            pen.polygon(points, fill=alpha)
        r, g, b, a = self._canvas.split()
        a = ImageChops.multiply(a, ImageChops.invert(mask))
        self._canvas = Image.merge("RGBA", (r, g, b, a))

    def display(self) -> None:
        """Publish the changes made since the last :meth:`clear`."""
        self._displayed = self._canvas.copy()

    @property
    def image(self) -> Image.Image:
        """A copy of the displayed contents of the area."""
        return self._displayed.copy()

    def render_onto(self, target: Image.Image) -> None:
        """Draw the displayed area onto an RGBA ``target`` image, in place.

        FOG areas are alpha-blended; AMBIENT areas are added to the target.
        """
        if target.mode != "RGBA":
            raise ValueError(f"target image must be RGBA, not {target.mode}")
        if self._opacity <= 0:
            return
        inv = self.get_transform().inverse()
        data = (inv.a00, inv.a01, inv.a02, inv.a10, inv.a11, inv.a12)
        layer = self._displayed.transform(
            target.size,
            Image.Transform.AFFINE,
            data,
            resample=Image.Resampling.BILINEAR,
        )
        if self.mode is Mode.FOG:
            target.alpha_composite(layer)
            return
        lr, lg, lb, la = layer.split()
        added = [ImageChops.multiply(band, la) for band in (lr, lg, lb)]
        tr, tg, tb, ta = target.split()
        bands = [ImageChops.add(t, s) for t, s in zip((tr, tg, tb), added)]
        bands.append(ImageChops.add(ta, la))
        target.paste(Image.merge("RGBA", bands))