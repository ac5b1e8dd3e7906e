"""Tests for the animation loop and its frame clock."""

import itertools
import logging

import pytest
from matplotlib.animation import FuncAnimation

from polycast.model import PolytopeScene, RenderStyle
from polycast.rendering.animation import FrameClock, StepClock, animate_mpl


def _fake_clock(times):
    """A clock returning successive values from *times*."""
    it = iter(times)
    return lambda: next(it)


class TestFrameClock:
    def test_elapsed_since_creation(self):
        clock = FrameClock(_fake_clock([10.0, 10.25, 10.5]))
        assert clock.tick()[0] == pytest.approx(0.25)
        assert clock.tick()[0] == pytest.approx(0.5)

    def test_no_report_within_interval(self):
        clock = FrameClock(_fake_clock([0.0, 0.1, 0.2, 0.3]))
        assert [clock.tick()[1] for _ in range(3)] == [None, None, None]

    def test_reports_rate_over_window(self):
        times = [0.0] + [0.25 * i for i in range(1, 6)]
        clock = FrameClock(_fake_clock(times))
        rates = [clock.tick()[1] for _ in range(5)]
        assert rates[:3] == [None, None, None]
        assert rates[3] == pytest.approx(4.0)
        assert rates[4] is None

    def test_window_restarts_after_report(self):
        clock = FrameClock(_fake_clock([0.0, 2.0, 2.5, 3.0]), report_interval=1.0)
        assert clock.tick()[1] == pytest.approx(0.5)
        assert clock.tick()[1] is None
        assert clock.tick()[1] == pytest.approx(2.0)

    def test_total_frames(self):
        clock = FrameClock(_fake_clock(itertools.count()))
        for _ in range(7):
            clock.tick()
        assert clock.total_frames == 7

    def test_invalid_interval(self):
        with pytest.raises(ValueError, match="report_interval"):
            FrameClock(report_interval=0.0)


class TestStepClock:
    def test_fixed_steps(self):
        clock = StepClock(4.0)
        assert [clock() for _ in range(4)] == pytest.approx([0.0, 0.25, 0.5, 0.75])

    def test_invalid_fps(self):
        with pytest.raises(ValueError, match="fps"):
            StepClock(0.0)


@pytest.fixture
def scene():
    style = RenderStyle(width=32, height=24, screen_scale=12.0)
    return PolytopeScene.dodecahedron(style=style)


class TestAnimateMpl:
    def test_saves_gif(self, scene, tmp_path):
        path = tmp_path / "spin.gif"
        anim = animate_mpl(scene, n_frames=3, output=path, fps=10.0)
        assert isinstance(anim, FuncAnimation)
        assert path.exists()
        assert path.read_bytes()[:3] == b"GIF"

    def test_output_requires_frame_count(self, scene, tmp_path):
        with pytest.raises(ValueError, match="n_frames"):
            animate_mpl(scene, output=tmp_path / "spin.gif")

    def test_unknown_style_kwarg(self, scene):
        with pytest.raises(TypeError, match="Unknown style"):
            animate_mpl(scene, n_frames=1, show=False, atom_scale=1.0)

    def test_logs_frame_rate(self, scene, tmp_path, caplog):
        caplog.set_level(logging.INFO, logger="polycast")
        # Two seconds between ticks, so every frame closes a window.
        clock = _fake_clock(itertools.count(0.0, 2.0))
        animate_mpl(
            scene, n_frames=3, output=tmp_path / "spin.gif", clock=clock,
        )
        messages = [r.getMessage() for r in caplog.records]
        fps_lines = [m for m in messages if m.startswith("FPS:")]
        assert fps_lines
        assert "Planes: 12" in fps_lines[0]
        assert "FPS: 0.50" in fps_lines[0]
