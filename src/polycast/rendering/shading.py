"""Diffuse grey shading of hit faces."""

from __future__ import annotations

import numpy as np

from polycast._constants import BACKGROUND, DEFAULT_NORMAL
from polycast.model import HitResult, Polytope
from polycast.model.colour import pack_rgb
from polycast.model.geometry import dot


def intensity(normal: np.ndarray, light_direction: np.ndarray) -> int:
    """Lambertian term ``max(0, n . l)`` quantised to ``0..255``.

    The value is clamped to ``[0, 1]`` before scaling, and the scaled
    value is truncated rather than rounded.
    """
    diff = float(dot(normal, light_direction))
    diff = min(max(diff, 0.0), 1.0)
    return int(diff * 255)


def shade(normal: np.ndarray, light_direction: np.ndarray) -> int:
    """Packed equal-channel grey for a surface with *normal*."""
    c = intensity(normal, light_direction)
    return pack_rgb(c, c, c)


def shade_hit(
    hit: HitResult,
    polytope: Polytope,
    light_direction: np.ndarray,
    background: int = BACKGROUND,
) -> int:
    """Colour for one ray-cast result.

    Misses get *background*.  Hits use the normal of their entry face,
    or :data:`~polycast._constants.DEFAULT_NORMAL` when none was
    recorded.
    """
    if not hit.hit:
        return background
    if hit.face_index is None:
        normal = np.array(DEFAULT_NORMAL)
    else:
        normal = polytope.normals[hit.face_index]
    return shade(normal, light_direction)


def shade_many(
    hit: np.ndarray,
    face_index: np.ndarray,
    polytope: Polytope,
    light_direction: np.ndarray,
    background: int = BACKGROUND,
) -> np.ndarray:
    """Vectorised :func:`shade_hit` over the output of ``intersect_many``.

    Returns:
        ``uint32`` array of packed colours.
    """
    light_direction = np.asarray(light_direction, dtype=float)
    face_diff = np.clip(dot(polytope.normals, light_direction), 0.0, 1.0)
    default_diff = min(max(float(dot(DEFAULT_NORMAL, light_direction)), 0.0), 1.0)

    # Quantise per face once; faces are few, pixels are many.
    levels = np.append((face_diff * 255).astype(np.uint32), np.uint32(default_diff * 255))
    c = levels[np.where(face_index >= 0, face_index, len(levels) - 1)]
    grey = (c << 16) | (c << 8) | c
    return np.where(hit, grey, np.uint32(background)).astype(np.uint32)
