import pytest
from PIL import Image

from candle.color import Color
from candle.directed_light import DirectedLight
from candle.lighting_area import LightingArea, Mode
from candle.radial_light import RadialLight
from candle.transform import Rect
from candle.vector2 import Vector2


def _fog(size=100, color=Color.BLACK):
    area = LightingArea(Mode.FOG, Vector2(0, 0), Vector2(size, size))
    area.area_color = color
    area.clear()
    return area


def test_local_bounds_match_size():
    area = LightingArea(Mode.FOG, Vector2(0, 0), Vector2(30, 20))
    assert area.local_bounds() == Rect(0, 0, 30, 20)


def test_global_bounds_follow_position():
    area = LightingArea(Mode.FOG, Vector2(5, 7), Vector2(30, 20))
    assert area.global_bounds() == Rect(5, 7, 30, 20)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        LightingArea(Mode.FOG, Vector2(0, 0), Vector2(-1, 10))


def test_defaults_and_round_trips():
    area = LightingArea(Mode.AMBIENT, Vector2(0, 0), Vector2(10, 10))
    assert area.mode is Mode.AMBIENT
    assert area.area_color == Color.WHITE
    assert area.area_opacity == 1.0
    assert area.area_texture is None
    area.area_color = Color.YELLOW
    assert area.area_color == Color.YELLOW
    area.mode = Mode.FOG
    assert area.mode is Mode.FOG


def test_clear_takes_effect_after_display():
    area = LightingArea(Mode.FOG, Vector2(0, 0), Vector2(8, 8))
    area.area_color = Color(10, 20, 30, 255)
    before = area.image
    area.clear()
    assert area.image.tobytes() == before.tobytes()
    area.display()
    assert area.image.getpixel((3, 3)) == (10, 20, 30, 255)


def test_opacity_scales_alpha():
    area = LightingArea(Mode.FOG, Vector2(0, 0), Vector2(4, 4))
    area.area_color = Color.BLACK
    area.area_opacity = 0.5
    area.clear()
    area.display()
    alpha = area.image.getpixel((0, 0))[3]
    assert 0 < alpha < 255
    assert alpha == 127


def test_radial_light_uncovers_fog():
    area = _fog()
    light = RadialLight()
    light.range = 10
    light.position = Vector2(50, 50)
    light.cast_light([])
    area.draw(light)
    area.display()
    assert area.image.getpixel((50, 50))[3] == 0
    assert area.image.getpixel((2, 2)) == (0, 0, 0, 255)


def test_directed_light_uncovers_fog():
    area = _fog()
    light = DirectedLight()
    light.fade = False
    light.range = 50
    light.beam_width = 20
    light.position = Vector2(10, 50)
    light.cast_light([])
    area.draw(light)
    area.display()
    assert area.image.getpixel((30, 50))[3] == 0
    assert area.image.getpixel((90, 90))[3] == 255


def test_ambient_mode_ignores_lights():
    area = LightingArea(Mode.AMBIENT, Vector2(0, 0), Vector2(100, 100))
    area.area_color = Color.YELLOW
    area.clear()
    light = RadialLight()
    light.range = 10
    light.position = Vector2(50, 50)
    light.cast_light([])
    area.draw(light)
    area.display()
    assert area.image.getpixel((50, 50)) == (255, 255, 0, 255)


def test_zero_opacity_fog_ignores_lights():
    area = _fog()
    area.area_opacity = 0.0
    area.area_color = Color.BLACK
    area.clear()
    before = area._canvas.tobytes()
    light = RadialLight()
    light.range = 10
    light.position = Vector2(50, 50)
    light.cast_light([])
    area.draw(light)
    area.display()
    assert area.image.tobytes() == before


def test_from_texture_uses_whole_texture():
    texture = Image.new("RGBA", (4, 3), (10, 20, 30, 255))
    area = LightingArea.from_texture(Mode.FOG, texture)
    assert area.area_texture is texture
    assert area.local_bounds() == Rect(0, 0, 4, 3)
    assert area.texture_rect == Rect(0, 0, 4, 3)
    area.clear()
    area.display()
    assert area.image.size == (4, 3)
    assert area.image.getpixel((1, 1)) == (10, 20, 30, 255)


def test_texture_subrect_selects_region():
    texture = Image.new("RGBA", (8, 4), (255, 0, 0, 255))
    texture.paste((0, 0, 255, 255), (4, 0, 8, 4))
    rect = Rect(4, 0, 4, 4)
    area = LightingArea.from_texture(Mode.FOG, texture, rect)
    assert area.texture_rect == rect
    assert area.local_bounds() == Rect(0, 0, 4, 4)
    area.clear()
    area.display()
    assert area.image.getpixel((0, 0)) == (0, 0, 255, 255)
    assert area.image.getpixel((3, 3)) == (0, 0, 255, 255)


def test_set_texture_rect_round_trip():
    area = LightingArea(Mode.FOG, Vector2(0, 0), Vector2(10, 10))
    rect = Rect(1, 2, 3, 4)
    area.set_texture_rect(rect)
    assert area.texture_rect == rect
    assert area.base_triangles[2].tex_coords == Vector2(4, 6)
    assert area.local_bounds() == Rect(0, 0, 10, 10)


def test_render_fog_covers_target():
    target = Image.new("RGBA", (10, 10), (200, 100, 50, 255))
    area = _fog(size=10)
    area.display()
    area.render_onto(target)
    assert target.getpixel((4, 4)) == (0, 0, 0, 255)


def test_render_respects_position():
    target = Image.new("RGBA", (10, 10), (255, 255, 255, 255))
    area = LightingArea(Mode.FOG, Vector2(5, 5), Vector2(5, 5))
    area.area_color = Color.BLACK
    area.clear()
    area.display()
    area.render_onto(target)
    assert target.getpixel((2, 2)) == (255, 255, 255, 255)
    assert target.getpixel((7, 7)) == (0, 0, 0, 255)


def test_render_ambient_adds_light():
    target = Image.new("RGBA", (6, 6), (10, 10, 10, 255))
    area = LightingArea(Mode.AMBIENT, Vector2(0, 0), Vector2(6, 6))
    area.area_color = Color(20, 30, 40, 255)
    area.clear()
    area.display()
    area.render_onto(target)
    assert target.getpixel((3, 3)) == (30, 40, 50, 255)


def test_render_zero_opacity_leaves_target():
    target = Image.new("RGBA", (6, 6), (10, 10, 10, 255))
    area = _fog(size=6)
    area.display()
    area.area_opacity = 0.0
    area.render_onto(target)
    assert target.getpixel((3, 3)) == (10, 10, 10, 255)


def test_render_requires_rgba_target():
    area = _fog(size=6)
    with pytest.raises(ValueError):
        area.render_onto(Image.new("RGB", (6, 6)))