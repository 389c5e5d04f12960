"""
Vector2: two-component mutable vector for planar geometry.
"""

from __future__ import annotations

import numpy as np

from pymatrix.core.compute.precision import real_dtype
from pymatrix.vector._common import ComponentVector, component


class Vector2(ComponentVector):
    """Mutable (x, y) vector with a numpy element type."""

    __slots__ = ()

    size = 2

    x = component(0, "First component.")
    y = component(1, "Second component.")

    @staticmethod
    def rotate(point: 'Vector2', angle: float) -> 'Vector2':
        """Rotate `point` counter-clockwise about the origin by `angle` radians."""
        real = real_dtype(point.dtype).type
        c = np.cos(real(angle))
        s = np.sin(real(angle))
        x, y = point._real()
        return point._like((x * c - y * s, x * s + y * c))
