"""Half-space (face-plane) extraction from a convex vertex set."""

from __future__ import annotations

import logging
import warnings
from itertools import combinations

import numpy as np

from polycast._constants import DEDUP_TOLERANCE, MAX_FACES, TOLERANCE
from polycast.model import Polytope
from polycast.model.geometry import cross, dot, length, scale, subtract

logger = logging.getLogger(__name__)


class FaceCountWarning(RuntimeWarning):
    """The extracted face count differs from the expected count."""


def build_polytope(
    vertices: np.ndarray,
    max_faces: int = MAX_FACES,
    *,
    tol: float = TOLERANCE,
    dedup_tol: float = DEDUP_TOLERANCE,
    expected_faces: int | None = None,
) -> Polytope:
    """Derive the outward face planes of the convex hull of *vertices*.

    Every triple ``i < j < k`` of vertices is tried in lexicographic
    order.  The triple's plane is a hull face when all vertices lie on
    one side of it (within *tol*); it is then oriented so the solid
    satisfies ``dot(n, p) <= d``.  Collinear triples and planes that
    cut through the vertex set are skipped.  Many triples share a
    face, so each new plane is compared against those already kept
    and dropped when both its normal and offset agree within
    *dedup_tol*.

    This is O(n^4) in the number of vertices (``n choose 3`` triples,
    each tested against all ``n`` vertices).  About 23,000 distance
    evaluations for 20 vertices; unsuitable for hulls of more than a
    few dozen points.

    Args:
        vertices: Array of shape ``(n, 3)``.
        max_faces: Plane capacity.  Extraction stops inserting once
            this many planes have been kept, so a small value can only
            under-report faces.
        tol: Degeneracy threshold for collinear triples and the
            on-plane test.
        dedup_tol: Threshold on normal alignment and offset difference
            below which two planes are the same face.
        expected_faces: If given, a :class:`FaceCountWarning` is
            emitted when the number of planes found differs.

    Returns:
        A :class:`~polycast.model.Polytope` with planes in discovery
        order.

    Raises:
        ValueError: If *vertices* does not have shape ``(n, 3)`` or
            *max_faces* is negative.
    """
    vertices = np.asarray(vertices, dtype=float)
    if vertices.ndim != 2 or vertices.shape[1] != 3:
        raise ValueError(
            f"vertices must have shape (n, 3), got {vertices.shape}"
        )
    if max_faces < 0:
        raise ValueError(f"max_faces must be non-negative, got {max_faces}")

    normals, offsets = _candidate_planes(vertices, tol)

    kept_normals: list[np.ndarray] = []
    kept_offsets: list[float] = []
    for n, d in zip(normals, offsets):
        if _is_duplicate(n, d, kept_normals, kept_offsets, dedup_tol):
            continue
        if len(kept_normals) >= max_faces:
            logger.debug(
                "Plane capacity %d reached; further faces dropped", max_faces,
            )
            break
        kept_normals.append(n)
        kept_offsets.append(float(d))

    polytope = Polytope(
        normals=np.array(kept_normals).reshape(-1, 3),
        offsets=np.array(kept_offsets),
    )
    logger.debug(
        "Extracted %d planes from %d vertices", len(polytope), len(vertices),
    )
    if expected_faces is not None:
        check_face_count(polytope, expected_faces)
    return polytope


def check_face_count(polytope: Polytope, expected: int) -> bool:
    """Warn if *polytope* does not have *expected* planes.

    A mismatch means the input vertex set is malformed or the
    tolerances are wrong for its scale.  It is never fatal.

    Returns:
        ``True`` if the counts agree.
    """
    if len(polytope) == expected:
        return True
    message = f"Expected {expected} planes, but got {len(polytope)}"
    logger.warning(message)
    warnings.warn(message, FaceCountWarning, stacklevel=3)
    return False


def _candidate_planes(
    vertices: np.ndarray, tol: float,
) -> tuple[np.ndarray, np.ndarray]:
    """Return outward planes of every hull-face triple, in triple order.

    Duplicates are kept; see :func:`build_polytope`.
    """
    n = len(vertices)
    if n < 3:
        return np.empty((0, 3)), np.empty(0)

    triples = np.array(list(combinations(range(n), 3)))
    v0 = vertices[triples[:, 0]]
    v1 = vertices[triples[:, 1]]
    v2 = vertices[triples[:, 2]]
    normals = cross(subtract(v1, v0), subtract(v2, v0))
    lengths = length(normals)

    # Collinear triples.
    keep = lengths >= tol
    normals = scale(normals[keep], 1.0 / lengths[keep, np.newaxis])
    offsets = dot(normals, v0[keep])

    side = normals @ vertices.T - offsets[:, np.newaxis]
    all_below = np.all(side <= tol, axis=1)
    all_above = np.all(side >= -tol, axis=1)

    # Planes cutting through the vertex set are interior, not faces.
    face = all_below | all_above
    flip = np.where(all_below, 1.0, -1.0)[face]
    return scale(normals[face], flip[:, np.newaxis]), offsets[face] * flip


def _is_duplicate(
    normal: np.ndarray,
    offset: float,
    kept_normals: list[np.ndarray],
    kept_offsets: list[float],
    dedup_tol: float,
) -> bool:
    for kn, kd in zip(kept_normals, kept_offsets):
        if abs(float(dot(kn, normal)) - 1.0) < dedup_tol and abs(kd - offset) < dedup_tol:
            return True
    return False
