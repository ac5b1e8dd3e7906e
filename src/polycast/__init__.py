"""Polycast: ray-cast rendering of convex polytopes from their vertices.

Polycast finds the face planes of a small convex vertex set by brute
force and renders the tumbling solid by intersecting one ray per pixel
with those half-spaces, with no triangle mesh or rasterizer.

Example usage::

    from polycast import PolytopeScene

    scene = PolytopeScene.dodecahedron()
    scene.render_mpl("dodecahedron.png", angle=0.5)
"""

from polycast.defaults import (
    DODECAHEDRON_VERTICES,
    EXPECTED_FACES,
    SOLIDS,
    cube_vertices,
    dodecahedron_vertices,
    octahedron_vertices,
)
from polycast.hull import FaceCountWarning, build_polytope, check_face_count
from polycast.model import (
    MISS,
    Colour,
    HitResult,
    Plane,
    Polytope,
    PolytopeScene,
    Ray,
    RenderStyle,
    normalise_colour,
)
from polycast.rendering import (
    FrameClock,
    animate_mpl,
    intersect,
    render_frame,
    render_mpl,
    rotate_polytope,
    shade_pixel,
)
from polycast.styles import load_style, save_style

__all__ = [
    "Colour",
    "DODECAHEDRON_VERTICES",
    "EXPECTED_FACES",
    "FaceCountWarning",
    "FrameClock",
    "HitResult",
    "MISS",
    "Plane",
    "Polytope",
    "PolytopeScene",
    "Ray",
    "RenderStyle",
    "SOLIDS",
    "animate_mpl",
    "build_polytope",
    "check_face_count",
    "cube_vertices",
    "dodecahedron_vertices",
    "intersect",
    "load_style",
    "normalise_colour",
    "octahedron_vertices",
    "render_frame",
    "render_mpl",
    "rotate_polytope",
    "save_style",
    "shade_pixel",
]
