"""
Tests for human-readable rendering.
"""

import numpy as np

from pymatrix import Matrix
from pymatrix.matrix._format import format_grid, format_scalar, format_tuple


class TestFormatScalar:

    def test_float_g_style(self):
        assert format_scalar(np.float32(2.5)) == "2.5"
        assert format_scalar(3.0) == "3"
        assert format_scalar(1 / 3) == "0.333333"

    def test_int(self):
        assert format_scalar(np.int32(-7)) == "-7"

    def test_bool(self):
        assert format_scalar(np.bool_(True)) == "1"


class TestMatrixStr:

    def test_aligned_columns(self):
        m = Matrix.from_rows([[1, 2], [-10, 4]])
        assert str(m) == "|  1   2|\n|-10   4|"

    def test_single_row(self):
        assert str(Matrix[1, 3]([1, 2.5, 3])) == "|  1 2.5   3|"

    def test_format_grid_direct(self):
        assert format_grid([1, 22, 333, 4], 2, 2) == "|  1  22|\n|333   4|"

    def test_repr(self):
        m = Matrix[1, 2, np.int32]([1, 2])
        assert repr(m) == "Matrix[1, 2, int32]([1, 2])"


class TestFormatTuple:

    def test_braces(self):
        assert format_tuple([1.0, 2.5, -3.0]) == "{1, 2.5, -3}"
