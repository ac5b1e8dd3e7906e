"""Static matplotlib presentation: :func:`render_mpl` entry point."""

from __future__ import annotations

from dataclasses import fields, replace
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.image import AxesImage

from polycast.model import PolytopeScene, RenderStyle, pixels_to_rgb
from polycast.rendering.frame import render_frame

_STYLE_FIELDS = frozenset(f.name for f in fields(RenderStyle))


def _resolve_style(
    style: RenderStyle | None,
    **kwargs: Any,
) -> RenderStyle:
    """Build a :class:`RenderStyle` from an optional base plus overrides.

    Any kwarg whose name matches a ``RenderStyle`` field replaces that
    field's value.  Passing ``None`` is treated as "not provided" and
    preserves the base value.

    Raises:
        TypeError: If a kwarg name does not match any ``RenderStyle`` field.
    """
    unknown = kwargs.keys() - _STYLE_FIELDS
    if unknown:
        raise TypeError(
            f"Unknown style keyword argument(s): {', '.join(sorted(unknown))}"
        )

    s = style if style is not None else RenderStyle()
    overrides = {k: v for k, v in kwargs.items() if v is not None}
    if overrides:
        s = replace(s, **overrides)
    return s


def _draw_frame(
    ax: Axes, pixels: np.ndarray, width: int, height: int,
) -> AxesImage:
    """Show a flat packed-RGB buffer on *ax*, one image pixel per pixel."""
    ax.set_axis_off()
    return ax.imshow(
        pixels_to_rgb(pixels, width, height),
        interpolation="nearest",
        origin="upper",
    )


def _frame_figure(style: RenderStyle, dpi: int) -> tuple[Figure, Axes]:
    """A borderless figure sized so the frame maps 1:1 onto screen pixels."""
    fig = plt.figure(figsize=(style.width / dpi, style.height / dpi), dpi=dpi)
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    return fig, ax


def render_mpl(
    scene: PolytopeScene,
    output: str | Path | None = None,
    *,
    angle: float = 0.0,
    ax: Axes | None = None,
    style: RenderStyle | None = None,
    dpi: int = 100,
    show: bool | None = None,
    **style_kwargs: Any,
) -> Figure:
    """Render one frame of *scene* as a matplotlib figure.

    Example usage::

        scene = PolytopeScene.dodecahedron()

        # Save a single frame:
        scene.render_mpl("dodecahedron.png", angle=0.7)

        # Smaller frame, dark background:
        scene.render_mpl("small.png", width=200, height=150,
                         screen_scale=75.0, background="black")

    Args:
        scene: The scene to render.
        output: Optional file path to save the figure.  The format is
            inferred from the extension.  Ignored when *ax* is
            provided.
        angle: Rotation angle in radians.
        ax: Optional existing axes to draw into.  The caller then owns
            the figure; *output*, *dpi* and *show* are ignored.
        style: Base :class:`RenderStyle`; defaults to ``scene.style``.
            Any field may also be overridden by keyword argument.
        dpi: Figure resolution.  The figure is sized so that each
            frame pixel covers one output pixel at this resolution.
        show: Whether to call ``plt.show()``.  Defaults to ``True``
            when *output* is ``None``.
        **style_kwargs: Any :class:`RenderStyle` field name.  Unknown
            names raise :class:`TypeError`.

    Returns:
        The matplotlib :class:`~matplotlib.figure.Figure` object.
    """
    resolved = _resolve_style(
        style if style is not None else scene.style, **style_kwargs,
    )
    pixels = render_frame(
        scene.polytope, angle, resolved.camera, resolved.light_direction,
        resolved.width, resolved.height, style=resolved,
    )

    if ax is not None:
        fig = ax.get_figure()
        if not isinstance(fig, Figure):
            raise ValueError("ax is not attached to a Figure")
        _draw_frame(ax, pixels, resolved.width, resolved.height)
        return fig

    fig, ax = _frame_figure(resolved, dpi)
    _draw_frame(ax, pixels, resolved.width, resolved.height)

    if output is not None:
        fig.savefig(str(output), dpi=dpi)

    if show is None:
        show = output is None

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig


def save_frame(
    pixels: np.ndarray, width: int, height: int, output: str | Path,
) -> None:
    """Write a flat packed-RGB buffer straight to an image file."""
    plt.imsave(str(output), pixels_to_rgb(pixels, width, height))
