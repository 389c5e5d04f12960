"""
Shared implementation of the fixed-size component vectors.

Vector3 and Vector2 are small mutable structs that hold their components
in a private numpy array of their element type. Everything that does not
depend on the number of components lives here.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, ClassVar, Iterator, Sequence

import numpy as np
from numpy.typing import DTypeLike, NDArray

from pymatrix.core.compute.precision import DEFAULT_DTYPE, ieee_divide, real_dtype
from pymatrix.core.exceptions import ShapeError
from pymatrix.core.validation import check_dtype, check_elements, check_index
from pymatrix.matrix._format import format_scalar, format_tuple
from pymatrix.matrix.matrix import Matrix
from pymatrix.vector.vector import Vector


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (numbers.Real, np.bool_))


def component(index: int, doc: str) -> property:
    """Read/write property for one stored component."""
    def fget(self: 'ComponentVector') -> Any:
        return self._data[index]

    def fset(self: 'ComponentVector', value: Any) -> None:
        self._data[index] = value

    return property(fget, fset, doc=doc)


class ComponentVector:
    """
    Base for Vector3 and Vector2.

    Subclasses set `size` and add the operations that only
    make sense for their dimension (cross products, rotations).
    """

    __slots__ = ('_data',)

    size: ClassVar[int]

    # Make numpy scalars defer to our reflected operators
    __array_ufunc__ = None

    _data: NDArray[Any]

    def __init__(self, *components: Any, dtype: DTypeLike = DEFAULT_DTYPE):
        dt = check_dtype(dtype, 'dtype')
        if components:
            self._data = check_elements(components, self.size, dt, type(self).__name__)
        else:
            self._data = np.zeros(self.size, dtype=dt)

    @classmethod
    def splat(cls, value: Any, dtype: DTypeLike = DEFAULT_DTYPE) -> 'ComponentVector':
        """All components set to `value`."""
        return cls(*([value] * cls.size), dtype=dtype)

    @classmethod
    def from_sequence(
        cls,
        values: Sequence[Any],
        dtype: DTypeLike = DEFAULT_DTYPE,
    ) -> 'ComponentVector':
        dt = check_dtype(dtype, 'dtype')
        return cls._from_storage(check_elements(values, cls.size, dt, cls.__name__))

    @classmethod
    def _from_storage(cls, data: NDArray[Any]) -> 'ComponentVector':
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    def _like(self, values: Any) -> 'ComponentVector':
        """New vector of this type and dtype holding `values`, cast unsafely."""
        data = np.empty(self.size, dtype=self.dtype)
        np.copyto(data, values, casting='unsafe')
        return type(self)._from_storage(data)

    def _assign(self, values: Any) -> None:
        np.copyto(self._data, values, casting='unsafe')

    def _real(self) -> NDArray[Any]:
        return self._data.astype(real_dtype(self.dtype))

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def copy(self) -> 'ComponentVector':
        return type(self)._from_storage(self._data.copy())

    def astype(self, dtype: DTypeLike) -> 'ComponentVector':
        dt = check_dtype(dtype, 'dtype')
        return type(self)._from_storage(self._data.astype(dt))

    def to_numpy(self) -> NDArray[Any]:
        return self._data.copy()

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def __getitem__(self, index: int) -> Any:
        return self._data[check_index(index, self.size, 'index')]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[check_index(index, self.size, 'index')] = value

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __bool__(self) -> bool:
        return bool(np.any(self._data != 0))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return not np.array_equal(self._data, other._data)

    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __iadd__(self, other: Any) -> 'ComponentVector':
        if not isinstance(other, type(self)):
            return NotImplemented
        np.add(self._data, other._data, out=self._data, casting='unsafe')
        return self

    def __isub__(self, other: Any) -> 'ComponentVector':
        if not isinstance(other, type(self)):
            return NotImplemented
        np.subtract(self._data, other._data, out=self._data, casting='unsafe')
        return self

    def __imul__(self, other: Any) -> 'ComponentVector':
        if not _is_scalar(other):
            return NotImplemented
        np.multiply(self._data, self.dtype.type(other), out=self._data, casting='unsafe')
        return self

    def __itruediv__(self, other: Any) -> 'ComponentVector':
        if not _is_scalar(other):
            return NotImplemented
        self._assign(ieee_divide(self._data, self.dtype.type(other)))
        return self

    def __add__(self, other: Any) -> 'ComponentVector':
        if not isinstance(other, type(self)):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __sub__(self, other: Any) -> 'ComponentVector':
        if not isinstance(other, type(self)):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __mul__(self, other: Any) -> 'ComponentVector':
        if not _is_scalar(other):
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> 'ComponentVector':
        if not _is_scalar(other):
            return NotImplemented
        result = self.copy()
        result /= other
        return result

    def __neg__(self) -> 'ComponentVector':
        return type(self)._from_storage(np.negative(self._data))

    # ------------------------------------------------------------------
    # Magnitude
    #
    # Nothing below checks for a zero magnitude or zero max(); dividing
    # by it yields inf/NaN components.
    # ------------------------------------------------------------------

    def magnitude(self) -> Any:
        """Euclidean length, computed with hypot."""
        return real_dtype(self.dtype).type(math.hypot(*(float(c) for c in self._data)))

    def magnitude_sqr(self) -> Any:
        return (self._data * self._data).sum(dtype=self.dtype)

    def normalized(self) -> 'ComponentVector':
        return self._like(ieee_divide(self._real(), self.magnitude()))

    def normalize(self) -> None:
        self._assign(ieee_divide(self._real(), self.magnitude()))

    def set_magnitude(self, mag: float) -> None:
        self._assign(self._real() * ieee_divide(mag, self.magnitude()))

    def clamp_magnitude(self, mag: float) -> None:
        """Shorten to length `mag` if longer."""
        current = self.magnitude()
        if current > mag:
            self._assign(self._real() * ieee_divide(mag, current))

    def max(self) -> Any:
        """Largest absolute component."""
        return np.abs(self._data).max()

    def with_max(self, mag: float) -> 'ComponentVector':
        """Copy scaled so its largest absolute component is `mag`."""
        result = self.copy()
        result.set_max(mag)
        return result

    def set_max(self, mag: float) -> None:
        real = real_dtype(self.dtype).type
        self._assign(self._real() * ieee_divide(real(mag), real(self.max())))

    # ------------------------------------------------------------------
    # Vector algebra
    # ------------------------------------------------------------------

    @staticmethod
    def _check_pair(v1: 'ComponentVector', v2: 'ComponentVector', operation: str) -> None:
        if not (isinstance(v1, ComponentVector) and isinstance(v2, ComponentVector)):
            raise ShapeError(
                f"{operation}: expected two component vectors, got "
                f"{type(v1).__name__} and {type(v2).__name__}"
            )
        if type(v1) is not type(v2):
            raise ShapeError(
                f"{operation}: {type(v1).__name__} and {type(v2).__name__} differ in size",
                expected=(v1.size,),
                actual=(v2.size,),
            )

    @staticmethod
    def dot(v1: 'ComponentVector', v2: 'ComponentVector') -> Any:
        ComponentVector._check_pair(v1, v2, 'dot')
        return (v1._data * v2._data.astype(v1.dtype, copy=False)).sum(dtype=v1.dtype)

    @staticmethod
    def angle_between_cos(v1: 'ComponentVector', v2: 'ComponentVector') -> Any:
        """Cosine of the angle between v1 and v2. NaN if either has zero length."""
        real = real_dtype(v1.dtype).type
        lenlen = real(math.sqrt(float(v1.magnitude_sqr()) * float(v2.magnitude_sqr())))
        return real(ieee_divide(real(ComponentVector.dot(v1, v2)), lenlen))

    @staticmethod
    def angle_between(v1: 'ComponentVector', v2: 'ComponentVector') -> Any:
        """Angle in radians between v1 and v2."""
        cos = ComponentVector.angle_between_cos(v1, v2)
        return type(cos)(np.arccos(np.clip(cos, -1, 1)))

    @staticmethod
    def projection_length(v: 'ComponentVector', onto: 'ComponentVector') -> Any:
        """Signed length of v along `onto`."""
        real = real_dtype(v.dtype).type
        return real(ieee_divide(real(ComponentVector.dot(v, onto)), onto.magnitude()))

    @staticmethod
    def projection(v: 'ComponentVector', onto: 'ComponentVector') -> 'ComponentVector':
        real = real_dtype(v.dtype).type
        scale = ieee_divide(real(ComponentVector.dot(v, onto)), real(onto.magnitude_sqr()))
        return onto._like(onto._real() * scale)

    @staticmethod
    def lerp(start: 'ComponentVector', end: 'ComponentVector', t: float) -> 'ComponentVector':
        """Linear interpolation, t = 0 gives start and t = 1 gives end."""
        ComponentVector._check_pair(start, end, 'lerp')
        real = real_dtype(start.dtype)
        a = start._real()
        b = end._data.astype(real)
        return start._like(a + (b - a) * real.type(t))

    @staticmethod
    def distance(a: 'ComponentVector', b: 'ComponentVector') -> Any:
        ComponentVector._check_pair(a, b, 'distance')
        return (b - a).magnitude()

    # ------------------------------------------------------------------
    # Matrix bridges
    # ------------------------------------------------------------------

    def to_vector(self) -> Vector:
        """Vector[size] with the same components and dtype."""
        return Vector[self.size, self.dtype](self._data)

    def homogeneous(self, w: Any) -> Vector:
        """Vector[size + 1] in homogeneous coordinates, w appended."""
        return self.to_vector().appended(w)

    def translation_matrix(self) -> Matrix:
        """Homogeneous transform that translates by this vector."""
        k = self.size
        grid = np.identity(k + 1, dtype=self.dtype)
        grid[:k, k] = self._data
        return Matrix[k + 1, k + 1, self.dtype](grid.reshape(-1))

    def scale_matrix(self) -> Matrix:
        """Homogeneous transform that scales each axis by one component."""
        k = self.size
        grid = np.identity(k + 1, dtype=self.dtype)
        grid[np.arange(k), np.arange(k)] = self._data
        return Matrix[k + 1, k + 1, self.dtype](grid.reshape(-1))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return format_tuple(self._data)

    def __repr__(self) -> str:
        parts = ', '.join(format_scalar(c) for c in self._data)
        return f"{type(self).__name__}({parts}, dtype={self.dtype.name})"
