"""Pixel-to-ray mapping for the fixed +z camera."""

from __future__ import annotations

import numpy as np

from polycast.model import Ray, RenderStyle


def _view_plane(
    xs: np.ndarray, ys: np.ndarray, width: int, height: int, style: RenderStyle,
) -> np.ndarray:
    u = (xs - width / 2.0) / style.screen_scale
    v = (height / 2.0 - ys) / style.screen_scale
    w = np.full(np.broadcast(u, v).shape, style.focal_length)
    return np.stack(np.broadcast_arrays(u, v, w), axis=-1)


def pixel_ray(
    x: float,
    y: float,
    width: int,
    height: int,
    camera_position: np.ndarray,
    style: RenderStyle | None = None,
) -> Ray:
    """Ray from the camera through pixel ``(x, y)``.

    Pixel ``(width / 2, height / 2)`` looks straight down +z; x grows
    to the right and y grows downwards.
    """
    style = style if style is not None else RenderStyle()
    direction = _view_plane(np.float64(x), np.float64(y), width, height, style)
    return Ray(origin=camera_position, direction=direction)


def pixel_directions(
    width: int,
    height: int,
    rows: range,
    style: RenderStyle | None = None,
) -> np.ndarray:
    """Unit ray directions for every pixel in *rows*.

    Returns:
        Array of shape ``(len(rows) * width, 3)`` in row-major order.
    """
    style = style if style is not None else RenderStyle()
    xs, ys = np.meshgrid(
        np.arange(width, dtype=float),
        np.asarray(rows, dtype=float),
    )
    d = _view_plane(xs.ravel(), ys.ravel(), width, height, style)
    return d / np.linalg.norm(d, axis=1, keepdims=True)
