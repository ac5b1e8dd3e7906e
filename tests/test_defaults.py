"""Tests for the built-in vertex sets."""

import numpy as np
import pytest

from polycast.defaults import (
    DEFAULT_MODEL_SCALE,
    DODECAHEDRON_VERTICES,
    EXPECTED_FACES,
    PHI,
    SOLIDS,
    cube_vertices,
    dodecahedron_vertices,
    octahedron_vertices,
)


class TestDodecahedronVertices:
    def test_shape(self):
        assert DODECAHEDRON_VERTICES.shape == (20, 3)

    def test_all_on_circumsphere(self):
        radii = np.linalg.norm(DODECAHEDRON_VERTICES, axis=1)
        np.testing.assert_allclose(radii, np.sqrt(3.0))

    def test_distinct(self):
        assert len(np.unique(DODECAHEDRON_VERTICES.round(9), axis=0)) == 20

    def test_starts_with_cube_corners(self):
        np.testing.assert_array_equal(DODECAHEDRON_VERTICES[0], [-1.0, -1.0, -1.0])
        np.testing.assert_array_equal(DODECAHEDRON_VERTICES[7], [1.0, 1.0, 1.0])
        np.testing.assert_allclose(
            DODECAHEDRON_VERTICES[8], [0.0, -1.0 / PHI, -PHI],
        )

    def test_read_only(self):
        with pytest.raises(ValueError):
            DODECAHEDRON_VERTICES[0, 0] = 5.0

    def test_scaled_copy_is_writable(self):
        v = dodecahedron_vertices()
        v[0, 0] = 5.0
        assert DODECAHEDRON_VERTICES[0, 0] == -1.0

    def test_default_scale(self):
        np.testing.assert_allclose(
            dodecahedron_vertices(), DODECAHEDRON_VERTICES * DEFAULT_MODEL_SCALE,
        )

    def test_centroid_at_origin(self):
        np.testing.assert_allclose(DODECAHEDRON_VERTICES.mean(axis=0), 0.0, atol=1e-12)


class TestOtherSolids:
    def test_cube_corners(self):
        v = cube_vertices(2.0)
        assert v.shape == (8, 3)
        np.testing.assert_array_equal(np.abs(v), 2.0)
        assert len(np.unique(v, axis=0)) == 8

    def test_octahedron(self):
        v = octahedron_vertices(0.5)
        assert v.shape == (6, 3)
        np.testing.assert_allclose(np.linalg.norm(v, axis=1), 0.5)

    @pytest.mark.parametrize("factory", [
        dodecahedron_vertices, cube_vertices, octahedron_vertices,
    ])
    @pytest.mark.parametrize("scale", [0.0, -1.0])
    def test_non_positive_scale_raises(self, factory, scale):
        with pytest.raises(ValueError, match="scale"):
            factory(scale)


class TestRegistry:
    def test_every_solid_has_expected_faces(self):
        assert set(SOLIDS) == set(EXPECTED_FACES)

    def test_dodecahedron_expects_twelve(self):
        assert EXPECTED_FACES["dodecahedron"] == 12
