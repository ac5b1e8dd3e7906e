"""Per-frame orientation of the base polytope."""

from __future__ import annotations

from polycast.model import Polytope
from polycast.model.geometry import rotate


def rotate_polytope(polytope: Polytope, angle: float) -> Polytope:
    """Return a new polytope whose normals are rotated by *angle*.

    Offsets are copied unchanged: the solid is centred on the origin,
    and rotating a plane's normal about the origin keeps its distance
    from the origin.  The input is not modified.
    """
    return Polytope(
        normals=rotate(polytope.normals, angle),
        offsets=polytope.offsets,
    )
