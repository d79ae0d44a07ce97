import pytest

from candle.color import Color
from candle.light_source import LightSource
from candle.vertex_array import Vertex, VertexArray


class RecordingLight(LightSource):
    def __init__(self):
        super().__init__()
        self.resets = 0
        self.polygon = VertexArray()
        self.polygon.append(Vertex())

    def _reset_color(self):
        self.resets += 1
        for vertex in self.polygon:
            vertex.color = self._color

    def cast_light(self, edges):
        self.cast_edges = list(edges)


def test_abstract_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        LightSource()


def test_defaults():
    light = RecordingLight()
    assert LightSource.intensity.fget(light) == 1.0
    assert LightSource.color.fget(light) == Color.WHITE
    assert LightSource.fade.fget(light) is True


def test_intensity_round_trip_within_one_step():
    light = RecordingLight()
    LightSource.intensity.fset(light, 0.5)
    assert abs(LightSource.intensity.fget(light) - 0.5) < 1 / 255
    assert light.resets == 1


def test_intensity_applies_to_polygon_alpha():
    light = RecordingLight()
    LightSource.intensity.fset(light, 0.25)
    assert light.polygon[0].color.a / 255 == LightSource.intensity.fget(light)


def test_color_setter_keeps_intensity():
    light = RecordingLight()
    LightSource.intensity.fset(light, 0.0)
    LightSource.color.fset(light, Color(10, 20, 30, 40))
    assert LightSource.color.fget(light) == Color(10, 20, 30, 255)
    assert LightSource.intensity.fget(light) == 0.0
    assert light.polygon[0].color == Color(10, 20, 30, 0)


def test_fade_toggle_resets_color():
    light = RecordingLight()
    LightSource.fade.fset(light, False)
    assert LightSource.fade.fget(light) is False
    assert light.resets == 1


def test_range_round_trip():
    light = RecordingLight()
    LightSource.range.fset(light, 150.0)
    assert LightSource.range.fget(light) == 150.0


def test_intensity_out_of_range_is_rejected():
    light = RecordingLight()
    with pytest.raises(ValueError):
        LightSource.intensity.fset(light, 2.0)