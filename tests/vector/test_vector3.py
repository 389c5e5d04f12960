"""
Tests for Vector3.
"""

import math

import numpy as np
import pytest

from pymatrix import Matrix, Vector, Vector3
from pymatrix.core.exceptions import DimensionError, ShapeError


# ═══════════════════════════════════════════════════════════════════════
# Construction and access
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_components(self):
        v = Vector3(1, 2, 3)
        assert (v.x, v.y, v.z) == (1, 2, 3)
        assert v.dtype == np.float32

    def test_default_zero(self):
        assert Vector3() == Vector3(0, 0, 0)

    def test_dtype(self):
        assert Vector3(1, 2, 3, dtype=np.float64).dtype == np.float64

    def test_splat(self):
        assert Vector3.splat(2) == Vector3(2, 2, 2)

    def test_from_sequence(self):
        assert Vector3.from_sequence([4, 5, 6]) == Vector3(4, 5, 6)

    def test_wrong_component_count(self):
        with pytest.raises(DimensionError):
            Vector3(1, 2)
        with pytest.raises(DimensionError):
            Vector3.from_sequence([1, 2, 3, 4])

    def test_set_components(self):
        v = Vector3()
        v.x = 5
        v[2] = 7
        assert v == Vector3(5, 0, 7)

    def test_index_out_of_range(self):
        with pytest.raises(IndexError):
            Vector3()[3]
        with pytest.raises(IndexError):
            Vector3()[-1]

    def test_iter_and_len(self):
        assert list(Vector3(1, 2, 3)) == [1, 2, 3]
        assert len(Vector3()) == 3

    def test_bool(self):
        assert not Vector3()
        assert Vector3(0, 0, 1)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Vector3())

    def test_str_and_repr(self):
        v = Vector3(1, 2.5, -3)
        assert str(v) == "{1, 2.5, -3}"
        assert repr(v) == "Vector3(1, 2.5, -3, dtype=float32)"


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_add_sub(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)

    def test_scalar(self):
        v = Vector3(1, 2, 3)
        assert v * 2 == Vector3(2, 4, 6)
        assert 2 * v == Vector3(2, 4, 6)
        assert np.float32(2) * v == Vector3(2, 4, 6)
        assert v / 2 == Vector3(0.5, 1, 1.5)

    def test_negate(self):
        assert -Vector3(1, -2, 0) == Vector3(-1, 2, 0)

    def test_compound_mutates(self):
        v = Vector3(1, 1, 1)
        alias = v
        v += Vector3(1, 2, 3)
        v *= 2
        v -= Vector3(1, 1, 1)
        v /= 3
        assert alias is v
        np.testing.assert_allclose(list(v), [1, 5 / 3, 7 / 3], rtol=1e-6)

    def test_divide_by_zero(self):
        v = Vector3(1, -1, 0) / 0
        assert np.isposinf(v.x) and np.isneginf(v.y) and np.isnan(v.z)

    def test_mixed_with_vector2_rejected(self):
        from pymatrix import Vector2
        with pytest.raises(TypeError):
            Vector3() + Vector2()

    def test_eq_with_other_type(self):
        assert Vector3() != (0, 0, 0)


# ═══════════════════════════════════════════════════════════════════════
# Magnitude
# ═══════════════════════════════════════════════════════════════════════


class TestMagnitude:

    def test_hypot(self):
        v = Vector3(2, 3, 6)
        assert v.magnitude() == 7
        assert v.magnitude_sqr() == 49

    def test_normalized(self):
        n = Vector3(2, 3, 6, dtype=np.float64).normalized()
        np.testing.assert_allclose(list(n), [2 / 7, 3 / 7, 6 / 7])

    def test_normalize(self):
        v = Vector3(0, 0, -4)
        v.normalize()
        assert v == Vector3(0, 0, -1)

    def test_set_and_clamp_magnitude(self):
        v = Vector3(2, 3, 6, dtype=np.float64)
        v.set_magnitude(14)
        np.testing.assert_allclose(list(v), [4, 6, 12])
        v.clamp_magnitude(7)
        np.testing.assert_allclose(list(v), [2, 3, 6])

    def test_max_is_absolute(self):
        assert Vector3(1, -5, 3).max() == 5

    def test_with_max(self):
        v = Vector3(1, -4, 2)
        w = v.with_max(2)
        np.testing.assert_allclose(list(w), [0.5, -2, 1])
        assert v == Vector3(1, -4, 2)

    def test_set_max(self):
        v = Vector3(1, -4, 2)
        v.set_max(8)
        assert v == Vector3(2, -8, 4)


# ═══════════════════════════════════════════════════════════════════════
# Vector algebra
# ═══════════════════════════════════════════════════════════════════════


class TestAlgebra:

    def test_dot(self):
        assert Vector3.dot(Vector3(1, 2, 3), Vector3(4, 5, 6)) == 32

    def test_cross(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert Vector3.cross(x, y) == Vector3(0, 0, 1)
        assert Vector3.cross(y, x) == Vector3(0, 0, -1)

    def test_cross_is_perpendicular(self, rng):
        a = Vector3.from_sequence(rng.standard_normal(3), dtype=np.float64)
        b = Vector3.from_sequence(rng.standard_normal(3), dtype=np.float64)
        c = Vector3.cross(a, b)
        assert Vector3.dot(a, c) == pytest.approx(0, abs=1e-12)
        assert Vector3.dot(b, c) == pytest.approx(0, abs=1e-12)

    def test_rotate_about_z(self):
        r = Vector3.rotate(Vector3(1, 0, 0), Vector3(0, 0, 1), math.pi / 2)
        np.testing.assert_allclose(list(r), [0, 1, 0], atol=1e-6)

    def test_rotate_unnormalized_axis(self):
        r = Vector3.rotate(Vector3(0, 1, 0, dtype=np.float64),
                           Vector3(5, 0, 0, dtype=np.float64), math.pi / 2)
        np.testing.assert_allclose(list(r), [0, 0, 1], atol=1e-12)

    def test_rotate_preserves_length(self, rng):
        p = Vector3.from_sequence(rng.standard_normal(3), dtype=np.float64)
        axis = Vector3.from_sequence(rng.standard_normal(3), dtype=np.float64)
        r = Vector3.rotate(p, axis, 1.234)
        assert r.magnitude() == pytest.approx(p.magnitude())

    def test_angle_between(self):
        a = Vector3(1, 0, 0, dtype=np.float64)
        b = Vector3(1, 1, 0, dtype=np.float64)
        assert Vector3.angle_between(a, b) == pytest.approx(math.pi / 4)

    def test_angle_between_cos_zero_vector_is_nan(self):
        assert np.isnan(Vector3.angle_between_cos(Vector3(), Vector3(1, 0, 0)))

    def test_projection(self):
        v = Vector3(3, 4, 5, dtype=np.float64)
        onto = Vector3(0, 2, 0, dtype=np.float64)
        assert Vector3.projection_length(v, onto) == pytest.approx(4)
        assert Vector3.projection(v, onto) == Vector3(0, 4, 0, dtype=np.float64)

    def test_projection_on_plane(self):
        v = Vector3(3, 4, 5, dtype=np.float64)
        p = Vector3.projection_on_plane(v, Vector3(0, 0, 2, dtype=np.float64))
        np.testing.assert_allclose(list(p), [3, 4, 0])

    def test_lerp_and_distance(self):
        a = Vector3(0, 0, 0)
        b = Vector3(2, 4, 4)
        assert Vector3.lerp(a, b, 0.5) == Vector3(1, 2, 2)
        assert Vector3.distance(a, b) == 6

    def test_pair_type_mismatch(self):
        from pymatrix import Vector2
        with pytest.raises(ShapeError):
            Vector3.dot(Vector3(), Vector2())


# ═══════════════════════════════════════════════════════════════════════
# Matrix bridges
# ═══════════════════════════════════════════════════════════════════════


class TestMatrixBridges:

    def test_to_vector(self):
        v = Vector3(1, 2, 3).to_vector()
        assert type(v) is Vector[3]
        assert list(v) == [1, 2, 3]

    def test_homogeneous(self):
        h = Vector3(1, 2, 3).homogeneous(1)
        assert type(h) is Vector[4]
        assert list(h) == [1, 2, 3, 1]

    def test_translation_matrix(self):
        t = Vector3(1, 2, 3).translation_matrix()
        assert type(t) is Matrix[4, 4]
        moved = t @ Vector3(10, 20, 30).homogeneous(1)
        assert list(moved) == [11, 22, 33, 1]

    def test_scale_matrix(self):
        s = Vector3(2, 3, 4).scale_matrix()
        np.testing.assert_array_equal(s.to_numpy(), np.diag([2, 3, 4, 1]))
