"""Rendering: per-frame ray casting and matplotlib presentation."""

from polycast.rendering.animation import FrameClock, animate_mpl
from polycast.rendering.frame import render_frame, shade_pixel
from polycast.rendering.raycast import intersect, intersect_many
from polycast.rendering.rotation import rotate_polytope
from polycast.rendering.static import render_mpl, save_frame

__all__ = [
    "FrameClock",
    "animate_mpl",
    "intersect",
    "intersect_many",
    "render_frame",
    "render_mpl",
    "rotate_polytope",
    "save_frame",
    "shade_pixel",
]
