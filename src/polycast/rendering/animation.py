"""Animated matplotlib presentation of the tumbling solid."""

from __future__ import annotations

import itertools
import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from polycast.model import PolytopeScene, RenderStyle, pixels_to_rgb
from polycast.rendering.frame import render_frame
from polycast.rendering.static import _draw_frame, _frame_figure, _resolve_style

logger = logging.getLogger(__name__)


class FrameClock:
    """Elapsed-time source and frame-rate counter for a render loop.

    Each :meth:`tick` reads the underlying clock once.  Once at least
    *report_interval* seconds have passed since the last report, the
    tick also returns the frame rate over that window and the counter
    restarts.

    Args:
        clock: Monotonic time source in seconds.
        report_interval: Seconds between frame-rate reports.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.perf_counter,
        report_interval: float = 1.0,
    ) -> None:
        if report_interval <= 0:
            raise ValueError(
                f"report_interval must be positive, got {report_interval}"
            )
        self._clock = clock
        self.report_interval = report_interval
        self._start = clock()
        self._last_report = self._start
        self._window_frames = 0
        self.total_frames = 0

    def tick(self) -> tuple[float, float | None]:
        """Count a frame.

        Returns:
            Tuple of ``(elapsed, fps)`` where *elapsed* is the seconds
            since the clock was created and *fps* is the frame rate of
            the window just closed, or ``None`` if no report is due.
        """
        now = self._clock()
        self._window_frames += 1
        self.total_frames += 1
        window = now - self._last_report
        fps = None
        if window >= self.report_interval:
            fps = self._window_frames / window
            self._last_report = now
            self._window_frames = 0
        return now - self._start, fps


class StepClock:
    """A clock advancing a fixed step per call, for reproducible output.

    Used when saving an animation, where wall-clock time would make the
    rotation depend on how fast frames are encoded.
    """

    def __init__(self, fps: float) -> None:
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self._step = 1.0 / fps
        self._calls = 0

    def __call__(self) -> float:
        t = self._calls * self._step
        self._calls += 1
        return t


def animate_mpl(
    scene: PolytopeScene,
    *,
    n_frames: int | None = None,
    interval: int = 1,
    style: RenderStyle | None = None,
    output: str | Path | None = None,
    fps: float = 30.0,
    show: bool | None = None,
    clock: Callable[[], float] | None = None,
    dpi: int = 100,
    **style_kwargs: Any,
) -> FuncAnimation:
    """Animate *scene*, re-rendering one frame per timer tick.

    The rotation angle is the clock's elapsed time multiplied by
    ``style.angular_speed``.  Frame-rate diagnostics are logged at
    INFO level once per second of clock time.  The loop ends when the
    window is closed or after *n_frames* frames.

    Args:
        scene: The scene to animate.
        n_frames: Number of frames, or ``None`` to run until the
            window is closed.  Required when saving.
        interval: Delay between frames in milliseconds.
        style: Base style; defaults to ``scene.style``.
        output: Optional file to save the animation to (e.g. ``.gif``).
        fps: Frame rate of the saved file.
        show: Whether to call ``plt.show()``.  Defaults to ``True``
            when *output* is ``None``.
        clock: Time source in seconds.  Defaults to
            :func:`time.perf_counter` on screen and to a
            :class:`StepClock` at *fps* when saving.
        dpi: Figure resolution.
        **style_kwargs: Any :class:`RenderStyle` field name.

    Returns:
        The :class:`~matplotlib.animation.FuncAnimation`.  Keep a
        reference to it while the window is open.

    Raises:
        ValueError: If *output* is given without *n_frames*.
    """
    if output is not None and n_frames is None:
        raise ValueError("n_frames is required when saving an animation")
    if clock is None:
        clock = StepClock(fps) if output is not None else time.perf_counter

    resolved = _resolve_style(
        style if style is not None else scene.style, **style_kwargs,
    )
    polytope = scene.polytope
    frame_clock = FrameClock(clock)

    def draw(angle: float):
        return render_frame(
            polytope, angle, resolved.camera, resolved.light_direction,
            resolved.width, resolved.height, style=resolved,
        )

    fig, ax = _frame_figure(resolved, dpi)
    image = _draw_frame(ax, draw(0.0), resolved.width, resolved.height)

    def update(_frame: int):
        elapsed, rate = frame_clock.tick()
        angle = elapsed * resolved.angular_speed
        image.set_data(
            pixels_to_rgb(draw(angle), resolved.width, resolved.height)
        )
        if rate is not None:
            logger.info(
                "FPS: %.2f | Angle: %.2f rad | Frames: %d | Planes: %d",
                rate, angle, frame_clock.total_frames, len(polytope),
            )
        return (image,)

    frames = n_frames if n_frames is not None else itertools.count()
    anim = FuncAnimation(
        fig, update, frames=frames, interval=interval,
        blit=True, cache_frame_data=False, repeat=False,
    )

    if output is not None:
        writer = "pillow" if Path(output).suffix.lower() == ".gif" else None
        anim.save(str(output), writer=writer, fps=fps, dpi=dpi)

    if show is None:
        show = output is None

    if show:
        plt.show()
    else:
        plt.close(fig)

    return anim
