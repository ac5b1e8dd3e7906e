"""Built-in vertex sets for convex solids centred on the origin."""

from __future__ import annotations

import numpy as np

PHI: float = (1.0 + np.sqrt(5.0)) / 2.0
"""The golden ratio."""

_INV_PHI = 1.0 / PHI

#: The 20 vertices of a regular dodecahedron with circumradius
#: ``sqrt(3)``: the eight cube corners ``(+-1, +-1, +-1)`` followed by
#: the cyclic permutations of ``(0, +-1/phi, +-phi)``.
DODECAHEDRON_VERTICES: np.ndarray = np.array([
    [-1.0, -1.0, -1.0], [-1.0, -1.0,  1.0], [-1.0,  1.0, -1.0], [-1.0,  1.0,  1.0],
    [ 1.0, -1.0, -1.0], [ 1.0, -1.0,  1.0], [ 1.0,  1.0, -1.0], [ 1.0,  1.0,  1.0],
    [0.0, -_INV_PHI, -PHI], [0.0, -_INV_PHI,  PHI],
    [0.0,  _INV_PHI, -PHI], [0.0,  _INV_PHI,  PHI],
    [-PHI, 0.0, -_INV_PHI], [-PHI, 0.0,  _INV_PHI],
    [ PHI, 0.0, -_INV_PHI], [ PHI, 0.0,  _INV_PHI],
    [-_INV_PHI, -PHI, 0.0], [-_INV_PHI,  PHI, 0.0],
    [ _INV_PHI, -PHI, 0.0], [ _INV_PHI,  PHI, 0.0],
])
DODECAHEDRON_VERTICES.setflags(write=False)

_CUBE_VERTICES = np.array([
    [(v >> 0) & 1, (v >> 1) & 1, (v >> 2) & 1]
    for v in range(8)
], dtype=float) * 2.0 - 1.0

_OCTAHEDRON_VERTICES = np.array([
    [1.0, 0.0, 0.0], [-1.0, 0.0, 0.0],
    [0.0, 1.0, 0.0], [0.0, -1.0, 0.0],
    [0.0, 0.0, 1.0], [0.0, 0.0, -1.0],
])

DEFAULT_MODEL_SCALE: float = 0.5
"""Scale applied to the unit dodecahedron in the default scene."""

EXPECTED_FACES: dict[str, int] = {
    "dodecahedron": 12,
    "cube": 6,
    "octahedron": 8,
}
"""Face count each built-in solid must produce."""


def _scaled(vertices: np.ndarray, scale: float) -> np.ndarray:
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")
    return vertices * float(scale)


def dodecahedron_vertices(scale: float = DEFAULT_MODEL_SCALE) -> np.ndarray:
    """Return a fresh ``(20, 3)`` copy of :data:`DODECAHEDRON_VERTICES` scaled by *scale*."""
    return _scaled(DODECAHEDRON_VERTICES, scale)


def cube_vertices(scale: float = 1.0) -> np.ndarray:
    """Corners of the cube ``[-scale, scale]^3``, shape ``(8, 3)``."""
    return _scaled(_CUBE_VERTICES, scale)


def octahedron_vertices(scale: float = 1.0) -> np.ndarray:
    """Vertices ``+-scale`` along each axis, shape ``(6, 3)``."""
    return _scaled(_OCTAHEDRON_VERTICES, scale)


SOLIDS = {
    "dodecahedron": dodecahedron_vertices,
    "cube": cube_vertices,
    "octahedron": octahedron_vertices,
}
"""Vertex-set factories by name, each taking a positive scale."""
