"""Tests for PolytopeScene: vertex set, cached planes, convenience rendering."""

import warnings

import numpy as np
import pytest

from polycast._constants import BACKGROUND
from polycast.defaults import cube_vertices, dodecahedron_vertices
from polycast.hull import FaceCountWarning
from polycast.model import PolytopeScene, RenderStyle


class TestConstruction:
    def test_dodecahedron(self):
        scene = PolytopeScene.dodecahedron()
        assert scene.vertices.shape == (20, 3)
        assert scene.expected_faces == 12
        assert scene.title == "dodecahedron"
        np.testing.assert_allclose(scene.vertices, dodecahedron_vertices(0.5))

    def test_model_scale(self):
        scene = PolytopeScene.dodecahedron(model_scale=2.0)
        np.testing.assert_allclose(scene.vertices, dodecahedron_vertices(2.0))

    def test_from_solid(self):
        scene = PolytopeScene.from_solid("cube", 1.0)
        assert scene.expected_faces == 6
        assert len(scene.polytope) == 6

    def test_unknown_solid_raises(self):
        with pytest.raises(ValueError, match="unknown solid"):
            PolytopeScene.from_solid("torus")

    def test_bad_vertices_raise(self):
        with pytest.raises(ValueError, match="shape"):
            PolytopeScene(vertices=np.zeros((4, 2)))


class TestPolytopeCache:
    def test_twelve_faces_without_warning(self):
        scene = PolytopeScene.dodecahedron()
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert len(scene.polytope) == 12

    def test_cached(self):
        scene = PolytopeScene.dodecahedron()
        assert scene.polytope is scene.polytope

    def test_new_vertices_invalidate_cache(self):
        scene = PolytopeScene(vertices=cube_vertices(1.0))
        assert len(scene.polytope) == 6
        scene.vertices = dodecahedron_vertices(0.5)
        assert len(scene.polytope) == 12

    def test_new_capacity_invalidates_cache(self):
        scene = PolytopeScene(vertices=dodecahedron_vertices(0.5))
        assert len(scene.polytope) == 12
        scene.max_faces = 4
        assert len(scene.polytope) == 4

    def test_mismatch_warns(self):
        scene = PolytopeScene(vertices=cube_vertices(1.0), expected_faces=12)
        with pytest.warns(FaceCountWarning):
            assert len(scene.polytope) == 6


class TestRenderFrame:
    def test_uses_style(self, small_style):
        scene = PolytopeScene.dodecahedron(style=small_style)
        pixels = scene.render_frame(0.4)
        assert pixels.shape == (80 * 60,)
        assert pixels[0] == BACKGROUND
        assert pixels[30 * 80 + 40] != BACKGROUND

    def test_background_from_style(self):
        style = RenderStyle(width=40, height=30, screen_scale=15.0, background="black")
        pixels = PolytopeScene.dodecahedron(style=style).render_frame()
        assert pixels[0] == 0x000000
