"""Core data model for polycast: planes, rays, styles, colours and scenes.

Everything is re-exported here so that ``from polycast.model import
Polytope`` works without knowing the submodule layout.
"""

from polycast.model.colour import (
    Colour,
    colour_to_packed,
    normalise_colour,
    pack_rgb,
    pixels_to_rgb,
    unpack_rgb,
)
from polycast.model.polytope import MISS, HitResult, Plane, Polytope, Ray
from polycast.model.render_style import RenderStyle
from polycast.model.polytope_scene import PolytopeScene

__all__ = [
    "Colour",
    "HitResult",
    "MISS",
    "Plane",
    "Polytope",
    "PolytopeScene",
    "Ray",
    "RenderStyle",
    "colour_to_packed",
    "normalise_colour",
    "pack_rgb",
    "pixels_to_rgb",
    "unpack_rgb",
]
