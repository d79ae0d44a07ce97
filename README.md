# candle

Lights and shadows for 2D scenes. A light casts rays against a set of edges
and works out the polygon it reaches. A lighting area then shows what the
lights reach. It works either as a fog that only light uncovers or as an extra
layer of ambient light. The area is held as a Pillow image.

## Install

```
pip install .
```

## Building blocks

- `candle.vector2`: the immutable `Vector2` type and the helpers `magnitude`,
  `magnitude2`, `normalize`, `dot`, `angle` and `angle_between`. `angle` gives
  degrees in [0, 360) and `angle_between` gives degrees in [0, 180].
- `candle.color`: the immutable RGBA `Color` type, with named colours such as
  `Color.WHITE` and `Color.BLACK`. It has the helpers `darken`, `lighten`,
  `interpolate` and `complementary`.
- `candle.transform`: the `Rect`, `Transform` and `Transformable` types. A
  `Transformable` has a `position`, a `rotation` in degrees, a `scale` and an
  `origin`. Its `get_transform()` combines all four.
- `candle.line`: the `Line` type, built with `Line.from_points` or
  `Line.from_angle`, and `cast_ray(edges, ray, max_range)`. `cast_ray` returns
  the nearest point where a ray meets one of the edges. If no edge is hit, it
  returns the point at `max_range` along the ray. `Line.intersection` returns
  the two line parameters, or `None`.
- `candle.polygon`: the `Polygon` type, which holds the edges of a closed shape
  in `lines`. It is built from a list of points or with `Polygon.from_rect`.
- `candle.vertex_array`: the `VertexArray`, `Vertex` and `PrimitiveType` types.
  The helpers `set_color`, `transform`, `move`, `darken`, `lighten`,
  `interpolate` and `complementary` work on every vertex of an array in place.

## Lights

Every light is a `LightSource`, and every light is a `Transformable`. Each light
has these properties:

- `intensity`: the alpha of the light, from 0 to 1.
- `color`: the RGB colour of the light, always reported as fully opaque.
- `fade`: whether the light loses intensity toward the end of its range.
- `range`: how far the light reaches.

`cast_light(edges)` recomputes `polygon`, the vertex array of the lit area.

- `RadialLight` shines from its `position`. Its beam is centred on its
  `rotation` and is `beam_angle` degrees wide. The beam angle is wrapped into
  [0, 360). A beam angle of 0, which is what 360 wraps to, means a full circle.
- `DirectedLight` sends parallel rays along its `rotation`. The rays start from
  a segment `beam_width` wide, centred on its `position`.

```python
from candle.line import Line
from candle.polygon import Polygon
from candle.radial_light import RadialLight
from candle.vector2 import Vector2

edges = [Line.from_points(Vector2(200, 100), Vector2(200, 300))]
edges += Polygon([Vector2(50, 50), Vector2(80, 50),
                  Vector2(80, 80), Vector2(50, 80)]).lines

light = RadialLight()
light.range = 150
light.position = Vector2(120, 200)
light.cast_light(edges)

for vertex in light.polygon:
    print(vertex.position)
```

## Lighting areas

`LightingArea` runs in one of two modes, `Mode.FOG` or `Mode.AMBIENT`. Changes
to `area_color`, `area_opacity` or the texture take effect on `clear()`. You
can see them in `image` and through `render_onto(target)` after `display()`.

In fog mode, `draw(light)` takes away opacity where the light shines. Each
triangle of the light is shaded flat with the mean alpha of its vertices. In
ambient mode, or at zero opacity, `draw` does nothing.

`render_onto` draws the area onto an RGBA Pillow image in place. A fog area is
alpha-blended onto the image, and an ambient area is added to it.

```python
from PIL import Image

from candle.color import Color
from candle.lighting_area import LightingArea, Mode
from candle.vector2 import Vector2

scene = Image.new("RGBA", (300, 379), (40, 120, 40, 255))

fog = LightingArea(Mode.FOG, Vector2(0, 0), Vector2(300, 379))
fog.area_color = Color.BLACK
fog.clear()
fog.draw(light)
fog.display()
fog.render_onto(scene)
```

An area can also be built on a Pillow image as its base texture, with
`LightingArea.from_texture(mode, texture, rect)`. If `rect` is left out or is
empty, the whole texture is used, and the area takes the size of the texture.
`set_area_texture` and `set_texture_rect` change the texture later.

## What it does not do

The package only computes and renders into images. It opens no window and has
no interactive demo or command-line program. To show the result on screen, or
to read mouse and keyboard input, use a library of your choice.

## Tests

```
pip install ".[test]"
pytest
```