"""Tests for polycast.model.geometry: vector kernel and rotation."""

import numpy as np
import pytest

from polycast.model.geometry import (
    add,
    cross,
    dot,
    length,
    normalize,
    rotate,
    rotation_matrix,
    rotation_x,
    rotation_y,
    scale,
    subtract,
)


class TestVectorOps:
    def test_dot(self):
        assert dot([1.0, 2.0, 3.0], [4.0, -5.0, 6.0]) == pytest.approx(12.0)

    def test_dot_batch(self):
        a = np.array([[1.0, 0.0, 0.0], [0.0, 2.0, 0.0]])
        np.testing.assert_allclose(dot(a, [1.0, 1.0, 1.0]), [1.0, 2.0])

    def test_cross_right_handed(self):
        np.testing.assert_allclose(
            cross([1.0, 0.0, 0.0], [0.0, 1.0, 0.0]), [0.0, 0.0, 1.0],
        )

    def test_length(self):
        assert length([3.0, 4.0, 0.0]) == pytest.approx(5.0)

    def test_add_subtract_scale(self):
        a = np.array([1.0, 2.0, 3.0])
        b = np.array([0.5, 0.5, 0.5])
        np.testing.assert_allclose(add(a, b), [1.5, 2.5, 3.5])
        np.testing.assert_allclose(subtract(a, b), [0.5, 1.5, 2.5])
        np.testing.assert_allclose(scale(a, -2.0), [-2.0, -4.0, -6.0])

    def test_batch_ops_per_row(self):
        """Batches of triangle edges, as the hull extractor uses them."""
        v0 = np.zeros((2, 3))
        v1 = np.array([[2.0, 0.0, 0.0], [0.0, 3.0, 0.0]])
        v2 = np.array([[0.0, 2.0, 0.0], [0.0, 0.0, 3.0]])
        n = cross(subtract(v1, v0), subtract(v2, v0))
        lengths = length(n)
        np.testing.assert_allclose(lengths, [4.0, 9.0])
        unit = scale(n, 1.0 / lengths[:, np.newaxis])
        np.testing.assert_allclose(unit, [[0.0, 0.0, 1.0], [1.0, 0.0, 0.0]])
        np.testing.assert_allclose(dot(unit, v1), [0.0, 0.0])


class TestNormalize:
    def test_unit_length(self):
        np.testing.assert_allclose(normalize([0.0, 3.0, 4.0]), [0.0, 0.6, 0.8])

    def test_tiny_vector_unchanged(self):
        v = np.array([1e-9, 0.0, 0.0])
        np.testing.assert_array_equal(normalize(v), v)

    def test_zero_vector_unchanged(self):
        np.testing.assert_array_equal(normalize(np.zeros(3)), np.zeros(3))

    def test_batch_mixed(self):
        v = np.array([[2.0, 0.0, 0.0], [0.0, 0.0, 0.0]])
        np.testing.assert_allclose(normalize(v), [[1.0, 0.0, 0.0], [0.0, 0.0, 0.0]])


class TestRotation:
    def test_zero_angle_is_identity(self):
        np.testing.assert_allclose(rotation_matrix(0.0), np.eye(3))

    @pytest.mark.parametrize("angle", [0.3, 1.0, 2.5, -4.0, 100.0])
    def test_orthonormal(self, angle):
        r = rotation_matrix(angle)
        np.testing.assert_allclose(r @ r.T, np.eye(3), atol=1e-12)
        assert np.linalg.det(r) == pytest.approx(1.0)

    def test_y_rotation_mixes_x_and_z(self):
        np.testing.assert_allclose(
            rotation_y(np.pi / 2) @ [1.0, 0.0, 0.0], [0.0, 0.0, -1.0], atol=1e-12,
        )

    def test_x_rotation_mixes_y_and_z(self):
        np.testing.assert_allclose(
            rotation_x(np.pi / 2) @ [0.0, 1.0, 0.0], [0.0, 0.0, 1.0], atol=1e-12,
        )

    def test_tumble_applies_half_angle_second(self):
        """Quarter turn about Y, then an eighth turn about X."""
        h = np.sqrt(0.5)
        np.testing.assert_allclose(
            rotate([1.0, 0.0, 0.0], np.pi / 2), [0.0, h, -h], atol=1e-12,
        )

    def test_y_axis_only_sees_second_rotation(self):
        angle = 0.8
        np.testing.assert_allclose(
            rotate([0.0, 1.0, 0.0], angle),
            [0.0, np.cos(angle / 2), np.sin(angle / 2)],
            atol=1e-12,
        )

    def test_not_a_single_axis_spin(self):
        """Two tumbles do not compose to the sum of their angles."""
        a, b = 0.7, 1.1
        assert not np.allclose(
            rotation_matrix(a) @ rotation_matrix(b), rotation_matrix(a + b),
        )

    def test_batch_matches_single(self, rng):
        vs = rng.normal(size=(10, 3))
        batch = rotate(vs, 1.3)
        for v, r in zip(vs, batch):
            np.testing.assert_allclose(rotate(v, 1.3), r)

    def test_preserves_length(self, rng):
        vs = rng.normal(size=(10, 3))
        np.testing.assert_allclose(
            length(rotate(vs, 2.2)), length(vs),
        )
