"""Vector arithmetic and the tumbling rotation.

Every function accepts either a single vector of shape ``(3,)`` or a
batch of shape ``(n, 3)`` and operates along the last axis.  Nothing
here holds state.
"""

from __future__ import annotations

import numpy as np

from polycast._constants import TOLERANCE


def dot(a: np.ndarray, b: np.ndarray) -> np.ndarray | float:
    """Dot product along the last axis."""
    return np.sum(np.asarray(a, dtype=float) * np.asarray(b, dtype=float), axis=-1)


def cross(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.cross(np.asarray(a, dtype=float), np.asarray(b, dtype=float))


def length(v: np.ndarray) -> np.ndarray | float:
    return np.linalg.norm(np.asarray(v, dtype=float), axis=-1)


def normalize(v: np.ndarray, tol: float = TOLERANCE) -> np.ndarray:
    """Scale *v* to unit length.

    Vectors shorter than *tol* are returned unchanged rather than
    divided by a near-zero length.
    """
    v = np.asarray(v, dtype=float)
    n = np.linalg.norm(v, axis=-1, keepdims=True)
    safe = np.where(n < tol, 1.0, n)
    return v / safe


def add(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.asarray(a, dtype=float) + np.asarray(b, dtype=float)


def subtract(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.asarray(a, dtype=float) - np.asarray(b, dtype=float)


def scale(v: np.ndarray, s: float | np.ndarray) -> np.ndarray:
    return np.asarray(v, dtype=float) * s


def rotation_x(angle: float) -> np.ndarray:
    """Rotation matrix about the X axis by *angle* radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [1.0, 0.0, 0.0],
        [0.0,   c,  -s],
        [0.0,   s,   c],
    ])


def rotation_y(angle: float) -> np.ndarray:
    """Rotation matrix about the Y axis by *angle* radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [ c,  0.0,  s],
        [0.0, 1.0, 0.0],
        [-s,  0.0,  c],
    ])


def rotation_matrix(angle: float) -> np.ndarray:
    """Combined tumbling rotation for *angle* radians.

    The solid first spins by *angle* about Y (mixing x and z), then
    by ``angle / 2`` about X (mixing the resulting y and z), so the
    motion wanders over two axes instead of a single spin.

    Returns:
        A 3x3 orthonormal matrix ``R`` such that a rotated vector is
        ``R @ v``.
    """
    return rotation_x(0.5 * angle) @ rotation_y(angle)


def rotate(direction: np.ndarray, angle: float) -> np.ndarray:
    """Apply :func:`rotation_matrix` to one vector or an ``(n, 3)`` batch."""
    return np.asarray(direction, dtype=float) @ rotation_matrix(angle).T
