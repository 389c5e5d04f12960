"""
Vector: N-dimensional column vector built on the matrix core.

Vector[N] is a Matrix[N, 1] specialization with vector algebra on top.
Any N x 1 matrix converts to a Vector[N] by construction, and a vector is
usable anywhere a column matrix is (matrix products, from_columns, ...).

Operations that divide by a magnitude do not check for zero; the result
then follows IEEE semantics (inf/NaN).
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import DTypeLike

from pymatrix.core.compute.precision import DEFAULT_DTYPE, ieee_divide, real_dtype
from pymatrix.core.exceptions import ShapeError
from pymatrix.core.validation import check_same_shape
from pymatrix.matrix._format import format_tuple
from pymatrix.matrix.matrix import Matrix


class Vector(Matrix):
    """
    Column vector of N elements.

    Specialize with Vector[N] or Vector[N, dtype]; dtype defaults to
    float32.

    Unlike Matrix, == and != compare elements exactly, and a vector is
    truthy when any element is non-zero.
    """

    __slots__ = ()

    def __class_getitem__(cls, params: Any) -> type:
        if isinstance(params, tuple):
            if len(params) != 2:
                raise ShapeError(
                    f"{cls.__name__}[...] takes N or (N, dtype), got {params!r}"
                )
            n, dtype = params
        else:
            n, dtype = params, DEFAULT_DTYPE
        return cls._specialize(n, 1, dtype)

    @classmethod
    def _specialize(cls, rows: Any, cols: Any, dtype: DTypeLike) -> type:
        if cols != 1:
            raise ShapeError(
                f"{cls._generic().__name__} is a single column, got {cols} columns",
                expected=(rows, 1),
                actual=(rows, cols),
            )
        return super()._specialize(rows, cols, dtype)

    @classmethod
    def _specialized_name(cls, rows: int, cols: int, dtype: np.dtype) -> str:
        return f"{cls.__name__}[{rows}, {dtype.name}]"

    @property
    def size(self) -> int:
        return self.rows

    def appended(self, last: Any) -> 'Vector':
        """Vector[N+1] with `last` after this vector's elements."""
        target = type(self)._specialize(self.rows + 1, 1, self.dtype)
        data = np.empty(self.rows + 1, dtype=self.dtype)
        data[:-1] = self._data
        data[-1] = last
        return target._from_storage(data)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __bool__(self) -> bool:
        return bool(np.any(self._data != 0))

    def __eq__(self, other: object) -> bool:  # type: ignore[override]
        if not isinstance(other, Vector):
            return NotImplemented
        return self.data_equal(other)

    def __ne__(self, other: object) -> bool:  # type: ignore[override]
        if not isinstance(other, Vector):
            return NotImplemented
        return not self.data_equal(other)

    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Magnitude
    # ------------------------------------------------------------------

    def magnitude(self) -> Any:
        return real_dtype(self.dtype).type(math.sqrt(self.magnitude_sqr()))

    def magnitude_sqr(self) -> Any:
        return (self._data * self._data).sum(dtype=self.dtype)

    def normalized(self) -> 'Vector':
        """Unit vector in the same direction. Check for zero magnitude first."""
        result = self.copy()
        result.normalize()
        return result

    def normalize(self) -> None:
        """Scale to unit length in place. Check for zero magnitude first."""
        self /= self.magnitude()

    def set_magnitude(self, mag: Any) -> None:
        """Scale to length `mag` in place. Check for zero magnitude first."""
        self *= ieee_divide(mag, self.magnitude())

    def clamp_magnitude(self, mag: Any) -> None:
        """Shorten to length `mag` if longer."""
        current = self.magnitude()
        if current > mag:
            self *= ieee_divide(mag, current)

    def max(self) -> Any:
        """Largest element (signed)."""
        return self._data.max()

    def set_max(self, mag: Any) -> None:
        """Scale so the largest element becomes `mag`. Check max() for zero first."""
        self *= ieee_divide(mag, self.max())

    # ------------------------------------------------------------------
    # Vector algebra
    # ------------------------------------------------------------------

    @staticmethod
    def _check_pair(v1: 'Vector', v2: 'Vector', operation: str) -> None:
        check_same_shape(v1.shape, v2.shape, operation)

    @staticmethod
    def dot(v1: 'Vector', v2: 'Vector') -> Any:
        Vector._check_pair(v1, v2, 'dot')
        return (v1._data * v2._data.astype(v1.dtype, copy=False)).sum(dtype=v1.dtype)

    @staticmethod
    def angle_between_cos(v1: 'Vector', v2: 'Vector') -> Any:
        """Cosine of the angle between two vectors, 0 if either has zero length."""
        real = real_dtype(v1.dtype).type
        lenlen = real(v1.magnitude() * v2.magnitude())
        if lenlen == 0:
            return real(0)
        return real(Vector.dot(v1, v2) / lenlen)

    @staticmethod
    def angle_between(v1: 'Vector', v2: 'Vector') -> Any:
        """Angle in radians between two vectors."""
        cos = Vector.angle_between_cos(v1, v2)
        return type(cos)(math.acos(max(-1.0, min(1.0, float(cos)))))

    @staticmethod
    def projection_length(v: 'Vector', onto: 'Vector') -> Any:
        """Signed length of v projected onto `onto`. Check `onto` for zero first."""
        real = real_dtype(v.dtype).type
        return real(ieee_divide(real(Vector.dot(v, onto)), onto.magnitude()))

    @staticmethod
    def projection(v: 'Vector', onto: 'Vector') -> 'Vector':
        """Component of v along `onto`."""
        real = real_dtype(v.dtype).type
        scale = ieee_divide(real(Vector.dot(v, onto)), real(onto.magnitude_sqr()))
        return onto * scale

    @staticmethod
    def projection_on_plane(v: 'Vector', plane_normal: 'Vector') -> 'Vector':
        """Component of v perpendicular to `plane_normal`."""
        real = real_dtype(v.dtype).type
        scale = ieee_divide(real(Vector.dot(plane_normal, v)),
                            real(plane_normal.magnitude_sqr()))
        return v - plane_normal * scale

    @staticmethod
    def lerp(start: 'Vector', end: 'Vector', t: float) -> 'Vector':
        """Linear interpolation, t = 0 gives start and t = 1 gives end."""
        Vector._check_pair(start, end, 'lerp')
        result = start.copy()
        step = (end._data.astype(start.dtype, copy=False) - start._data) * t
        np.add(result._data, step, out=result._data, casting='unsafe')
        return result

    def __str__(self) -> str:
        return format_tuple(self._data)
