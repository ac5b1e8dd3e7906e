"""Per-frame entry point: rotate, cast one ray per pixel, shade."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from polycast.model import Polytope, RenderStyle
from polycast.rendering.camera import pixel_directions, pixel_ray
from polycast.rendering.raycast import intersect, intersect_many
from polycast.rendering.rotation import rotate_polytope
from polycast.rendering.shading import shade_hit, shade_many

logger = logging.getLogger(__name__)

# Bands per worker; a few extra keeps threads busy when the solid
# covers only the middle rows.
_BANDS_PER_WORKER = 4


def shade_pixel(
    x: int,
    y: int,
    rotated: Polytope,
    camera_position: np.ndarray,
    light_direction: np.ndarray,
    width: int,
    height: int,
    style: RenderStyle | None = None,
) -> int:
    """Packed colour of pixel ``(x, y)`` for an already-rotated polytope.

    Pure: depends only on its arguments.  :func:`render_frame`
    evaluates the same thing for whole bands of pixels at once.
    """
    style = style if style is not None else RenderStyle()
    light = np.asarray(light_direction, dtype=float)
    light = light / np.linalg.norm(light)
    ray = pixel_ray(x, y, width, height, camera_position, style)
    hit = intersect(ray, rotated, tol=style.tolerance)
    return shade_hit(hit, rotated, light, style.background_packed)


def render_frame(
    polytope: Polytope,
    angle: float,
    camera_position: np.ndarray,
    light_direction: np.ndarray,
    width: int,
    height: int,
    *,
    style: RenderStyle | None = None,
    n_workers: int | None = None,
) -> np.ndarray:
    """Render one frame of *polytope* rotated by *angle*.

    The base planes are rotated once, then every pixel is ray cast
    against the rotated set and shaded.  Rows are split into disjoint
    bands; with more than one worker the bands are evaluated on a
    thread pool, each writing only its own slice of the buffer.

    Args:
        polytope: Base (unrotated) planes.
        angle: Rotation angle in radians.
        camera_position: Shared ray origin.
        light_direction: Direction towards the light; normalised here.
        width: Output width in pixels.
        height: Output height in pixels.
        style: Supplies the view-plane mapping, background colour and
            tolerance.  Its own size, camera and light are ignored in
            favour of the explicit arguments.
        n_workers: Thread count for the pixel pass.  ``None`` uses
            ``style.n_workers``.

    Returns:
        Flat ``uint32`` array of packed ``0xRRGGBB`` values, row-major,
        length ``width * height``.

    Raises:
        ValueError: If *width* or *height* is not positive, or the
            light direction is zero.
    """
    if width <= 0 or height <= 0:
        raise ValueError(
            f"width and height must be positive, got {width}x{height}"
        )
    style = style if style is not None else RenderStyle()
    n_workers = n_workers if n_workers is not None else style.n_workers
    if n_workers < 1:
        raise ValueError(f"n_workers must be at least 1, got {n_workers}")

    light = np.asarray(light_direction, dtype=float)
    norm = np.linalg.norm(light)
    if norm < style.tolerance:
        raise ValueError("light_direction must be non-zero")
    light = light / norm
    camera = np.asarray(camera_position, dtype=float)
    background = style.background_packed

    # Must be complete before any pixel is evaluated.
    rotated = rotate_polytope(polytope, angle)

    pixels = np.empty(width * height, dtype=np.uint32)

    def render_band(rows: np.ndarray) -> None:
        if len(rows) == 0:
            return
        band = range(int(rows[0]), int(rows[-1]) + 1)
        directions = pixel_directions(width, height, band, style)
        hit, _, _, face = intersect_many(
            camera, directions, rotated, tol=style.tolerance,
        )
        pixels[band.start * width:band.stop * width] = shade_many(
            hit, face, rotated, light, background,
        )

    if n_workers == 1:
        render_band(np.arange(height))
    else:
        bands = np.array_split(np.arange(height), n_workers * _BANDS_PER_WORKER)
        with ThreadPoolExecutor(max_workers=n_workers) as pool:
            # list() re-raises any worker exception here.
            list(pool.map(render_band, bands))

    logger.debug(
        "Rendered %dx%d frame at angle %.3f with %d planes",
        width, height, angle, len(rotated),
    )
    return pixels
