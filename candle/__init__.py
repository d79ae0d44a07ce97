"""2D lighting: lights that cast rays against edges, and fog or ambient lighting areas rendered with Pillow."""

__version__ = "0.1.0"

__all__ = [
    "vector2",
    "color",
    "transform",
    "line",
    "polygon",
    "vertex_array",
    "light_source",
    "radial_light",
    "directed_light",
    "lighting_area",
]