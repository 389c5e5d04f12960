"""
Tests for Matrix.inverse().

Validates:
    - Reference inverses, with and without a row swap
    - A @ A^-1 = I for random well-conditioned matrices
    - Agreement with scipy.linalg.inv
    - Non-square input is rejected; singular input is not detected
"""

import numpy as np
import pytest
from scipy import linalg

from pymatrix import Matrix
from pymatrix.core.exceptions import ShapeError


class TestReferenceInverses:

    def test_float32(self, invertible_3x3, invertible_3x3_inverse):
        inv = invertible_3x3.inverse()
        assert type(inv) is Matrix[3, 3]
        np.testing.assert_allclose(inv.to_numpy(), invertible_3x3_inverse, atol=1e-6)

    def test_float64(self, invertible_3x3, invertible_3x3_inverse):
        inv = invertible_3x3.astype(np.float64).inverse()
        np.testing.assert_allclose(inv.to_numpy(), invertible_3x3_inverse, atol=1e-6)

    def test_row_swap_required(self):
        m = Matrix[3, 3, np.float64].from_rows([[0, 4, -1], [7, 2, 1], [-3, 4, -2]])
        np.testing.assert_allclose(m.inverse().to_numpy(), [
            [-0.8, 0.4, 0.6],
            [1.1, -0.3, -0.7],
            [3.4, -1.2, -2.8],
        ], atol=1e-6)

    def test_identity(self):
        assert Matrix[4, 4].identity().inverse().data_equal(Matrix[4, 4].identity())

    def test_does_not_mutate(self, invertible_3x3):
        before = invertible_3x3.copy()
        invertible_3x3.inverse()
        assert invertible_3x3.data_equal(before)


class TestRandomInverses:

    @pytest.mark.parametrize("n", [1, 2, 5, 8])
    def test_product_is_identity(self, well_conditioned, n):
        a = well_conditioned(n)
        np.testing.assert_allclose((a @ a.inverse()).to_numpy(), np.eye(n), atol=1e-10)

    @pytest.mark.parametrize("n", [3, 6])
    def test_matches_scipy(self, well_conditioned, n):
        a = well_conditioned(n)
        np.testing.assert_allclose(a.inverse().to_numpy(), linalg.inv(a.to_numpy()),
                                   rtol=1e-10, atol=1e-12)

    def test_inverse_of_inverse(self, well_conditioned):
        a = well_conditioned(4)
        assert a.inverse().inverse().allclose(a)


class TestInverseErrors:

    def test_non_square(self):
        with pytest.raises(ShapeError, match="square"):
            Matrix[2, 3]().inverse()

    def test_singular_is_silent(self, singular_3x3):
        result = singular_3x3.inverse()
        assert type(result) is type(singular_3x3)
