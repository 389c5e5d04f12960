"""
Vector3: three-component mutable vector for 3-D geometry.
"""

from __future__ import annotations

from pymatrix.core.compute.precision import ieee_divide, real_dtype
from pymatrix.vector._common import ComponentVector, component


class Vector3(ComponentVector):
    """
    Mutable (x, y, z) vector with a numpy element type.

        >>> v = Vector3(1, 2, 3)
        >>> v.x = 5
        >>> str(v)
        '{5, 2, 3}'
    """

    __slots__ = ()

    size = 3

    x = component(0, "First component.")
    y = component(1, "Second component.")
    z = component(2, "Third component.")

    @staticmethod
    def cross(v1: 'Vector3', v2: 'Vector3') -> 'Vector3':
        ComponentVector._check_pair(v1, v2, 'cross')
        a = v1._data
        b = v2._data.astype(v1.dtype, copy=False)
        return v1._like((
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        ))

    @staticmethod
    def rotate(point: 'Vector3', axis: 'Vector3', angle: float) -> 'Vector3':
        """
        Rotate `point` about `axis` by `angle` radians (right-handed).

        The axis does not need to be unit length. The rotation is the
        quaternion product q * p * q^-1 evaluated in the point's real
        element type.
        """
        from pymatrix.quaternion.quaternion import Quaternion

        real = real_dtype(point.dtype)
        q = Quaternion.rotation(angle, axis.astype(real))
        return point._like(q.rotate(point.astype(real))._data)

    @staticmethod
    def projection_on_plane(v: 'Vector3', plane_normal: 'Vector3') -> 'Vector3':
        """Component of v perpendicular to `plane_normal`."""
        real = real_dtype(v.dtype).type
        scale = ieee_divide(real(Vector3.dot(plane_normal, v)),
                            real(plane_normal.magnitude_sqr()))
        return v._like(v._real() - plane_normal._real() * scale)
