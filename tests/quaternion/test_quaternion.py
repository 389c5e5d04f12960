"""
Tests for Quaternion rotations.

Validates:
    - Construction (identity, axis-angle, Euler angles)
    - Hamilton product and conjugate inverse
    - Point rotation and agreement with the 4x4 rotation matrix
"""

import math

import numpy as np
import pytest

from pymatrix import Matrix, Quaternion, Vector3
from pymatrix.core.exceptions import ValidationError


def _components(q):
    return [float(q.s), *(float(c) for c in q.v)]


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_identity(self):
        q = Quaternion.identity()
        assert _components(q) == [1, 0, 0, 0]
        assert q.dtype == np.float32

    def test_scalar_takes_vector_dtype(self):
        q = Quaternion(1, Vector3(0, 0, 0, dtype=np.float64))
        assert q.s.dtype == np.float64

    def test_vector_part_is_copied(self):
        v = Vector3(1, 2, 3)
        q = Quaternion(0, v)
        v.x = 100
        assert q.v.x == 1

    def test_rejects_non_vector3(self):
        with pytest.raises(ValidationError, match="Vector3"):
            Quaternion(1, (0, 0, 0))

    def test_rotation_normalizes_axis(self):
        a = Quaternion.rotation(1.0, Vector3(0, 0, 10, dtype=np.float64))
        b = Quaternion.rotation_n(1.0, Vector3(0, 0, 1, dtype=np.float64))
        np.testing.assert_allclose(_components(a), _components(b))

    def test_rotation_components(self):
        q = Quaternion.rotation_n(math.pi, Vector3(1, 0, 0, dtype=np.float64))
        np.testing.assert_allclose(_components(q), [0, 1, 0, 0], atol=1e-15)

    def test_euler_zero_is_identity(self):
        np.testing.assert_allclose(_components(Quaternion.euler(0, 0, 0)), [1, 0, 0, 0])

    def test_euler_single_axis_matches_rotation(self):
        e = Quaternion.euler(0.7, 0, 0, dtype=np.float64)
        r = Quaternion.rotation_n(0.7, Vector3(1, 0, 0, dtype=np.float64))
        np.testing.assert_allclose(_components(e), _components(r), atol=1e-15)

    def test_euler_from_vector(self):
        angles = Vector3(0.1, 0.2, 0.3, dtype=np.float64)
        a = Quaternion.euler(angles)
        b = Quaternion.euler(0.1, 0.2, 0.3, dtype=np.float64)
        np.testing.assert_allclose(_components(a), _components(b))
        assert a.dtype == np.float64

    def test_euler_is_unit(self):
        q = Quaternion.euler(0.4, -1.1, 2.5, dtype=np.float64)
        assert sum(c * c for c in _components(q)) == pytest.approx(1)

    def test_euler_argument_errors(self):
        with pytest.raises(ValidationError):
            Quaternion.euler(0.1, 0.2)
        with pytest.raises(ValidationError):
            Quaternion.euler(Vector3(), 0.2, 0.3)


# ═══════════════════════════════════════════════════════════════════════
# Algebra
# ═══════════════════════════════════════════════════════════════════════


class TestAlgebra:

    def test_basis_products(self):
        i = Quaternion(0, Vector3(1, 0, 0))
        j = Quaternion(0, Vector3(0, 1, 0))
        k = Quaternion(0, Vector3(0, 0, 1))
        assert _components(i * j) == _components(k)
        assert _components(j * i) == _components(Quaternion(0, -k.v))
        assert _components(i * i) == [-1, 0, 0, 0]

    def test_identity_is_neutral(self):
        q = Quaternion.euler(0.3, 0.2, 0.1)
        assert _components(Quaternion.identity() * q) == _components(q)

    def test_inverse_is_conjugate(self):
        q = Quaternion(0.5, Vector3(1, -2, 3))
        assert _components(q.inverse()) == [0.5, -1, 2, -3]

    def test_unit_times_inverse_is_identity(self):
        q = Quaternion.rotation(0.9, Vector3(1, 2, 3, dtype=np.float64))
        np.testing.assert_allclose(_components(q * q.inverse()), [1, 0, 0, 0], atol=1e-15)

    def test_multiply_non_quaternion(self):
        with pytest.raises(TypeError):
            Quaternion.identity() * 2


# ═══════════════════════════════════════════════════════════════════════
# Rotation
# ═══════════════════════════════════════════════════════════════════════


class TestRotation:

    def test_rotate_quarter_turn(self):
        q = Quaternion.rotation(math.pi / 2, Vector3(0, 0, 1))
        r = q.rotate(Vector3(1, 0, 0))
        np.testing.assert_allclose(list(r), [0, 1, 0], atol=1e-6)

    def test_composition(self):
        axis = Vector3(0, 1, 0, dtype=np.float64)
        half = Quaternion.rotation(math.pi / 4, axis)
        full = Quaternion.rotation(math.pi / 2, axis)
        p = Vector3(1, 2, 3, dtype=np.float64)
        np.testing.assert_allclose(list((half * half).rotate(p)), list(full.rotate(p)),
                                   atol=1e-12)

    def test_rotation_matrix_agrees_with_rotate(self, rng):
        axis = Vector3.from_sequence(rng.standard_normal(3), dtype=np.float64)
        q = Quaternion.rotation(2.1, axis)
        p = Vector3.from_sequence(rng.standard_normal(3), dtype=np.float64)
        m = q.rotation_matrix()
        assert type(m) is Matrix[4, 4, np.float64]
        moved = m @ p.homogeneous(1)
        np.testing.assert_allclose(list(moved)[:3], list(q.rotate(p)), atol=1e-12)
        assert moved[3] == 1

    def test_rotation_matrix_is_orthonormal(self):
        q = Quaternion.euler(0.3, -0.8, 1.9, dtype=np.float64)
        r = q.rotation_matrix().submatrix(3, 3)
        np.testing.assert_allclose((r @ r.transposed()).to_numpy(), np.eye(3), atol=1e-12)

    def test_identity_rotation_matrix(self):
        assert Quaternion.identity().rotation_matrix().data_equal(Matrix[4, 4].identity())


class TestRendering:

    def test_str(self):
        assert str(Quaternion(1, Vector3(0, 0.5, 0))) == "1 {0, 0.5, 0}"

    def test_repr(self):
        assert repr(Quaternion.identity()) == "Quaternion(1, Vector3(0, 0, 0, dtype=float32))"
