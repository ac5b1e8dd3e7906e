"""Tests for polycast public API."""

import numpy as np

import polycast


class TestPublicAPI:
    def test_all_names_importable(self):
        for name in polycast.__all__:
            assert hasattr(polycast, name), f"{name} not importable from polycast"

    def test_default_scene_has_twelve_planes(self):
        scene = polycast.PolytopeScene.dodecahedron()
        assert len(scene.polytope) == 12

    def test_end_to_end_to_png(self, tmp_path):
        style = polycast.RenderStyle(width=80, height=60, screen_scale=30.0)
        scene = polycast.PolytopeScene.dodecahedron(style=style)
        out = tmp_path / "dodecahedron.png"
        scene.render_mpl(output=out)
        assert out.exists()
        assert out.stat().st_size > 0

    def test_top_level_render_frame(self):
        polytope = polycast.build_polytope(polycast.dodecahedron_vertices())
        pixels = polycast.render_frame(
            polytope, 0.0, np.array([0.0, 0.0, -5.0]), np.array([1.0, 1.0, -1.0]),
            40, 30,
        )
        assert pixels.shape == (1200,)
