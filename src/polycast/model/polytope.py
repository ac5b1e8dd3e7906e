from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np

from polycast._constants import TOLERANCE
from polycast.model.geometry import add, scale


def _readonly(arr: np.ndarray) -> np.ndarray:
    arr = np.array(arr, dtype=float)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class Plane:
    """A single bounding plane of a convex polytope.

    The plane bounds the half-space ``{p : dot(normal, p) <= offset}``.

    Attributes:
        normal: Outward-pointing unit normal, shape ``(3,)``.
        offset: Signed distance of the plane from the origin along
            *normal*.

    Raises:
        ValueError: If *normal* does not have shape ``(3,)`` or is not
            of unit length.
    """

    normal: np.ndarray
    offset: float

    def __post_init__(self) -> None:
        normal = _readonly(self.normal)
        if normal.shape != (3,):
            raise ValueError(
                f"normal must have shape (3,), got {normal.shape}"
            )
        norm = float(np.linalg.norm(normal))
        if abs(norm - 1.0) > TOLERANCE:
            raise ValueError(f"normal must be unit length, got |n| = {norm}")
        object.__setattr__(self, "normal", normal)
        object.__setattr__(self, "offset", float(self.offset))

    def signed_distance(self, points: np.ndarray) -> np.ndarray | float:
        """Return ``dot(normal, p) - offset`` for one point or a batch.

        Negative values lie inside the half-space, positive outside.
        """
        return np.asarray(points, dtype=float) @ self.normal - self.offset


@dataclass(frozen=True)
class Polytope:
    """An ordered set of planes jointly bounding a convex solid.

    Plane order is the order in which the planes were extracted; it
    carries no geometric meaning but face indices reported by the ray
    caster refer to it.  Both arrays are stored read-only.

    Attributes:
        normals: Outward unit normals, shape ``(k, 3)``.
        offsets: Plane offsets, shape ``(k,)``.

    Raises:
        ValueError: If the array shapes are inconsistent.
    """

    normals: np.ndarray = field(
        default_factory=lambda: np.empty((0, 3), dtype=float)
    )
    offsets: np.ndarray = field(
        default_factory=lambda: np.empty(0, dtype=float)
    )

    def __post_init__(self) -> None:
        normals = _readonly(np.reshape(self.normals, (-1, 3)))
        offsets = _readonly(np.reshape(self.offsets, (-1,)))
        if len(normals) != len(offsets):
            raise ValueError(
                f"got {len(normals)} normals but {len(offsets)} offsets"
            )
        object.__setattr__(self, "normals", normals)
        object.__setattr__(self, "offsets", offsets)

    @classmethod
    def from_planes(cls, planes: list[Plane]) -> Polytope:
        """Assemble a polytope from individual :class:`Plane` objects."""
        if not planes:
            return cls()
        return cls(
            normals=np.array([p.normal for p in planes]),
            offsets=np.array([p.offset for p in planes]),
        )

    def __len__(self) -> int:
        return len(self.offsets)

    def __iter__(self) -> Iterator[Plane]:
        for n, d in zip(self.normals, self.offsets):
            yield Plane(normal=n, offset=d)

    @property
    def planes(self) -> tuple[Plane, ...]:
        return tuple(self)

    def signed_distances(self, points: np.ndarray) -> np.ndarray:
        """Signed distance of every point to every plane.

        Args:
            points: Array of shape ``(n, 3)``.

        Returns:
            Array of shape ``(n, k)``; entry ``[i, j]`` is positive when
            point *i* lies outside plane *j*.
        """
        points = np.atleast_2d(np.asarray(points, dtype=float))
        return points @ self.normals.T - self.offsets

    def contains(self, points: np.ndarray, tol: float = TOLERANCE) -> np.ndarray:
        """Boolean mask of points lying inside (or on) every half-space."""
        return np.all(self.signed_distances(points) <= tol, axis=1)


@dataclass(frozen=True)
class Ray:
    """A half-line ``origin + t * direction`` for ``t >= 0``.

    The direction is normalised on construction.

    Raises:
        ValueError: If *direction* is zero-length.
    """

    origin: np.ndarray
    direction: np.ndarray

    def __post_init__(self) -> None:
        origin = _readonly(self.origin)
        direction = np.asarray(self.direction, dtype=float)
        norm = float(np.linalg.norm(direction))
        if norm < TOLERANCE:
            raise ValueError("direction must be non-zero")
        object.__setattr__(self, "origin", origin)
        object.__setattr__(self, "direction", _readonly(direction / norm))

    def at(self, t: float) -> np.ndarray:
        return add(self.origin, scale(self.direction, t))


@dataclass(frozen=True)
class HitResult:
    """Outcome of casting a ray against a polytope.

    Attributes:
        hit: Whether the ray meets the solid at a non-negative distance.
        distance: Ray parameter of the hit, or ``inf`` on a miss.
        entering: ``True`` when the ray starts outside the solid and
            the hit is where it enters; ``False`` for exit hits from an
            origin inside the solid (and for misses).
        face_index: Index of the plane that constrained an entry hit,
            or ``None`` when no entry face was recorded.
    """

    hit: bool
    distance: float = math.inf
    entering: bool = False
    face_index: int | None = None

    def point(self, ray: Ray) -> np.ndarray | None:
        """World-space hit position along *ray*, or ``None`` on a miss."""
        if not self.hit:
            return None
        return ray.at(self.distance)


MISS = HitResult(hit=False)
