"""
Quaternion: rotations in 3-D space.

A quaternion is stored as a scalar part s and a vector part v. Unit
quaternions represent rotations; inverse() is the conjugate and is only
a true inverse for them.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import DTypeLike

from pymatrix.core.compute.precision import DEFAULT_DTYPE, real_dtype
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import check_dtype
from pymatrix.matrix._format import format_scalar
from pymatrix.matrix.matrix import Matrix
from pymatrix.vector.vector3 import Vector3


class Quaternion:
    """
    Quaternion s + v.x i + v.y j + v.z k.

    The scalar part takes the element type of the vector part.

        >>> q = Quaternion.rotation(math.pi / 2, Vector3(0, 0, 1))
        >>> q.rotate(Vector3(1, 0, 0))   # ~ {0, 1, 0}
    """

    __slots__ = ('s', 'v')

    def __init__(self, s: Any, v: Vector3):
        if not isinstance(v, Vector3):
            raise ValidationError(
                f"v: vector part must be a Vector3, got {type(v).__name__}"
            )
        self.v = v.copy()
        self.s = v.dtype.type(s)

    @property
    def dtype(self) -> np.dtype:
        return self.v.dtype

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def euler(
        cls,
        pitch: float | Vector3,
        yaw: float | None = None,
        roll: float | None = None,
        *,
        dtype: DTypeLike | None = None,
    ) -> 'Quaternion':
        """
        Rotation from Euler angles in radians.

        Accepts either three angles or one Vector3 of (pitch, yaw, roll).
        A Vector3 argument also supplies the element type.
        """
        if isinstance(pitch, Vector3):
            if yaw is not None or roll is not None:
                raise ValidationError(
                    "euler: pass either a Vector3 or three angles, not both"
                )
            dt = real_dtype(pitch.dtype if dtype is None else dtype)
            pitch, yaw, roll = pitch.astype(dt)
        else:
            if yaw is None or roll is None:
                raise ValidationError("euler: pitch, yaw and roll are all required")
            dt = check_dtype(DEFAULT_DTYPE if dtype is None else dtype, 'dtype')

        real = real_dtype(dt).type
        half = np.array([pitch, yaw, roll], dtype=real) / real(2)
        cx, cy, cz = np.cos(half)
        sx, sy, sz = np.sin(half)
        return cls(
            cx * cy * cz + sx * sy * sz,
            Vector3(
                sx * cy * cz - cx * sy * sz,
                cx * sy * cz + sx * cy * sz,
                cx * cy * sz - sx * sy * cz,
                dtype=dt,
            ),
        )

    @classmethod
    def identity(cls, dtype: DTypeLike = DEFAULT_DTYPE) -> 'Quaternion':
        return cls(1, Vector3(0, 0, 0, dtype=dtype))

    @classmethod
    def rotation(cls, angle: float, axis: Vector3) -> 'Quaternion':
        """Rotation by `angle` radians about `axis`, which is normalized first."""
        return cls.rotation_n(angle, axis.normalized())

    @classmethod
    def rotation_n(cls, angle: float, unit_axis: Vector3) -> 'Quaternion':
        """Rotation by `angle` radians about an axis that is already unit length."""
        real = real_dtype(unit_axis.dtype).type
        half = real(angle) / real(2)
        return cls(np.cos(half), unit_axis * np.sin(half))

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def __mul__(self, other: Any) -> 'Quaternion':
        """Hamilton product."""
        if not isinstance(other, Quaternion):
            return NotImplemented
        t = self.dtype.type
        a_s = self.s
        ax, ay, az = self.v
        b_s = t(other.s)
        bx, by, bz = other.v.astype(self.dtype)
        return Quaternion(
            a_s * b_s - ax * bx - ay * by - az * bz,
            Vector3(
                a_s * bx + ax * b_s + ay * bz - az * by,
                a_s * by + ay * b_s + az * bx - ax * bz,
                a_s * bz + az * b_s + ax * by - ay * bx,
                dtype=self.dtype,
            ),
        )

    def inverse(self) -> 'Quaternion':
        """Conjugate (s, -v); the inverse of a unit quaternion."""
        return Quaternion(self.s, -self.v)

    def rotate(self, point: Vector3) -> Vector3:
        """Rotate `point` by this (unit) quaternion: q * p * q^-1."""
        p = Quaternion(0, point.astype(self.dtype))
        return (self * p * self.inverse()).v

    def rotation_matrix(self) -> Matrix:
        """Homogeneous 4 x 4 rotation matrix of this (unit) quaternion."""
        s = self.s
        x, y, z = self.v
        return Matrix[4, 4, self.dtype]([
            1 - 2*y*y - 2*z*z, 2*x*y - 2*z*s,     2*x*z + 2*y*s,     0,
            2*x*y + 2*z*s,     1 - 2*x*x - 2*z*z, 2*y*z - 2*x*s,     0,
            2*x*z - 2*y*s,     2*y*z + 2*x*s,     1 - 2*x*x - 2*y*y, 0,
            0,                 0,                 0,                 1,
        ])

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{format_scalar(self.s)} {self.v}"

    def __repr__(self) -> str:
        return f"Quaternion({format_scalar(self.s)}, {self.v!r})"
