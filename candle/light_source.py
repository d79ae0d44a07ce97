"""Base class for objects that emit light."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from .color import Color
from .line import Line
from .transform import Transformable
from .vertex_array import VertexArray


class LightSource(Transformable, ABC):
    """An object that emits light and computes its lit polygon by ray casting.

    The colour of a light is split in two: the RGB channels are its
    :attr:`color` and the alpha channel is its :attr:`intensity`.
    """

    def __init__(self) -> None:
        super().__init__()
        self._color = Color.WHITE
        self._fade = True
        self._range = 1.0
        self.polygon = VertexArray()

    @abstractmethod
    def _reset_color(self) -> None:
        """Propagate the current colour and fade to the polygon."""

    @property
    def intensity(self) -> float:
        """Intensity in [0, 1]; at 0 the light is invisible."""
        return self._color.a / 255.0

    @intensity.setter
    def intensity(self, value: float) -> None:
        self._color = self._color.with_alpha(int(255 * value))
        self._reset_color()

    @property
    def color(self) -> Color:
        """The RGB colour of the light, always reported fully opaque."""
        c = self._color
        return Color(c.r, c.g, c.b, 255)

    @color.setter
    def color(self, value: Color) -> None:
        self._color = Color(value.r, value.g, value.b, self._color.a)
        self._reset_color()

    @property
    def fade(self) -> bool:
        """Whether the light loses intensity toward the limit of its range."""
        return self._fade

    @fade.setter
    def fade(self, value: bool) -> None:
        self._fade = bool(value)
        self._reset_color()

    @property
    def range(self) -> float:
        """How far a light ray may reach from its origin."""
        return self._range

    @range.setter
    def range(self, value: float) -> None:
        self._range = value

    @abstractmethod
    def cast_light(self, edges: Iterable[Line]) -> None:
        """Recompute the lit polygon against the given shadow-casting edges."""