"""Analytic ray / convex polytope intersection (generalised slab test)."""

from __future__ import annotations

import math

import numpy as np

from polycast._constants import TOLERANCE
from polycast.model import MISS, HitResult, Polytope, Ray
from polycast.model.geometry import dot


def intersect(ray: Ray, polytope: Polytope, *, tol: float = TOLERANCE) -> HitResult:
    """Intersect *ray* with the solid bounded by *polytope*.

    The ray's parameter interval starts as ``(-inf, +inf)`` and each
    plane narrows it.  A plane the ray crosses against its outward
    normal (``dot(n, dir) < 0``) is an entry boundary and can raise
    the near bound; one crossed along the normal is an exit boundary
    and can lower the far bound.  Planes within *tol* of parallel to
    the ray are skipped.

    The ray misses when the interval is empty or lies entirely behind
    the origin.  Otherwise the hit is the near bound if it is
    non-negative (the origin is outside and the ray enters the solid),
    or else the far bound (the origin is inside and the ray leaves
    through the far side).  Only entry hits report a face.  An origin
    inside a solid that no plane closes off along the ray, such as an
    empty polytope, gives an exit hit at ``inf``.

    Args:
        ray: The ray to cast.
        polytope: Planes bounding the solid.
        tol: Parallelism threshold.

    Returns:
        A :class:`~polycast.model.HitResult`; :data:`~polycast.model.MISS`
        when there is no intersection.
    """
    origin = ray.origin
    direction = ray.direction
    t_near = -math.inf
    t_far = math.inf
    active_face: int | None = None

    for i, (normal, offset) in enumerate(zip(polytope.normals, polytope.offsets)):
        denom = float(dot(normal, direction))
        if abs(denom) < tol:
            continue
        t = (offset - float(dot(normal, origin))) / denom
        if denom < 0:
            if t > t_near:
                t_near = t
                active_face = i
        elif t < t_far:
            t_far = t

    if t_near > t_far or t_far < 0:
        return MISS
    if t_near >= 0:
        return HitResult(hit=True, distance=t_near, entering=True, face_index=active_face)
    # Origin inside; t_far stays inf when no plane closes the far end.
    return HitResult(hit=True, distance=t_far, entering=False, face_index=None)


def intersect_many(
    origin: np.ndarray,
    directions: np.ndarray,
    polytope: Polytope,
    *,
    tol: float = TOLERANCE,
) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Vectorised :func:`intersect` for rays sharing one origin.

    Applies exactly the same narrowing rules as :func:`intersect`,
    one plane at a time across the whole bundle.

    Args:
        origin: Shared ray origin, shape ``(3,)``.
        directions: Unit directions, shape ``(n, 3)``.
        polytope: Planes bounding the solid.
        tol: Parallelism threshold.

    Returns:
        Tuple of ``(hit, distance, entering, face_index)`` arrays of
        length *n*.  *distance* is ``inf`` for misses (and for exit
        hits never closed off) and *face_index* is ``-1`` where no entry
        face applies.
    """
    origin = np.asarray(origin, dtype=float)
    directions = np.atleast_2d(np.asarray(directions, dtype=float))
    n = len(directions)

    t_near = np.full(n, -np.inf)
    t_far = np.full(n, np.inf)
    face = np.full(n, -1, dtype=np.intp)

    for i, (normal, offset) in enumerate(zip(polytope.normals, polytope.offsets)):
        denom = dot(directions, normal)
        usable = np.abs(denom) >= tol
        safe = np.where(usable, denom, 1.0)
        t = (offset - float(dot(normal, origin))) / safe

        closer = usable & (denom < 0) & (t > t_near)
        t_near = np.where(closer, t, t_near)
        face = np.where(closer, i, face)

        sooner = usable & (denom > 0) & (t < t_far)
        t_far = np.where(sooner, t, t_far)

    hit = ~((t_near > t_far) | (t_far < 0))
    entering = hit & (t_near >= 0)
    distance = np.where(hit, np.where(entering, t_near, t_far), np.inf)
    face = np.where(entering, face, -1)
    return hit, distance, entering, face
