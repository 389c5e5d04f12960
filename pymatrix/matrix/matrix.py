"""
Matrix: fixed-shape dense matrix value type.

The shape is part of the class. Matrix[3, 2] and Matrix[2, 3] are distinct
classes, created once and cached, so shape compatibility is a property of
the operand types and is checked before any element is touched:

    >>> A = Matrix[3, 2]([1, 2, 3, 4, 5, 6])
    >>> B = Matrix[2, 5].zero()
    >>> (A @ B).shape
    (3, 5)
    >>> A + B
    Traceback (most recent call last):
    ...
    pymatrix.core.exceptions.ShapeError: +: shape mismatch, expected 3x2, got 2x5

ShapeError is a TypeError, so incompatible operands read as a type error
at the call site.

Storage is a private, contiguous, row-major numpy array owned by the value.
Every operation that returns a matrix returns a fresh value; gauss(),
fill(), item assignment and the compound operators mutate only the
receiver.

Concurrency: there is no shared state between values. A single value that
is mutated in place (e.g. by gauss()) must not be accessed concurrently
without external synchronization.
"""

from __future__ import annotations

import numbers
import threading
from typing import Any, ClassVar, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymatrix.core.compute.precision import (
    DEFAULT_DTYPE,
    ieee_divide,
    is_close,
    real_dtype,
)
from pymatrix.core.compute.tolerances import select_tolerance
from pymatrix.core.exceptions import DimensionError, ShapeError
from pymatrix.core.validation import (
    check_dimension,
    check_dtype,
    check_elements,
    check_index,
    check_rows,
    check_same_shape,
    check_square,
)
from pymatrix.matrix._elimination import gauss_jordan, invert_square
from pymatrix.matrix._format import format_grid


_SPECIALIZATIONS: dict[tuple[type, int, int, np.dtype], type] = {}
_SPECIALIZATIONS_LOCK = threading.Lock()


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (numbers.Real, np.bool_))


def _rebuild(origin: type, rows: int, cols: int, dtype: str, values: list) -> 'Matrix':
    """Unpickle helper: specialized classes are created on demand."""
    return origin._specialize(rows, cols, dtype)(values)


class Matrix:
    """
    Dense rows x cols matrix with a fixed element type.

    Specialize with Matrix[rows, cols] or Matrix[rows, cols, dtype];
    dtype defaults to float32.

    Construction:
        Matrix[2, 2]()                      zero matrix
        Matrix[2, 2]([1, 2, 3, 4])          flat row-major elements
        Matrix[2, 2, np.int32](other)       copy / element-type conversion
        Matrix.from_rows([[1, 2], [3, 4]])  shape inferred from nested rows
        Matrix[3, 3].identity()
        Matrix[3, 3].zero()
        Matrix[3, 2].from_columns([c0, c1])

    Equality:
        == and != raise TypeError. Use data_equal() for exact storage
        comparison or allclose() for tolerance-based comparison.
    """

    __slots__ = ('_data',)

    rows: ClassVar[int]
    cols: ClassVar[int]
    n: ClassVar[int]
    dtype: ClassVar[np.dtype]
    _origin: ClassVar[type | None] = None

    # Make numpy scalars and arrays defer to our reflected operators
    __array_ufunc__ = None

    _data: NDArray[Any]

    # ------------------------------------------------------------------
    # Specialization
    # ------------------------------------------------------------------

    def __class_getitem__(cls, params: Any) -> type:
        if not isinstance(params, tuple) or len(params) not in (2, 3):
            raise ShapeError(
                f"{cls.__name__}[...] takes (rows, cols) or (rows, cols, dtype), got {params!r}"
            )
        rows, cols = params[0], params[1]
        dtype = params[2] if len(params) == 3 else DEFAULT_DTYPE
        return cls._specialize(rows, cols, dtype)

    @classmethod
    def _generic(cls) -> type:
        return cls._origin or cls

    @classmethod
    def _specialize(cls, rows: Any, cols: Any, dtype: DTypeLike) -> type:
        """Return the cached class for (rows, cols, dtype)."""
        base = cls._generic()
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        dt = check_dtype(dtype, 'dtype')
        key = (base, rows, cols, dt)

        specialized = _SPECIALIZATIONS.get(key)
        if specialized is not None:
            return specialized

        with _SPECIALIZATIONS_LOCK:
            specialized = _SPECIALIZATIONS.get(key)
            if specialized is None:
                name = base._specialized_name(rows, cols, dt)
                specialized = type(base)(name, (base,), {
                    '__slots__': (),
                    '__module__': base.__module__,
                    '__qualname__': name,
                    'rows': rows,
                    'cols': cols,
                    'n': rows * cols,
                    'dtype': dt,
                    '_origin': base,
                })
                _SPECIALIZATIONS[key] = specialized
        return specialized

    @classmethod
    def _specialized_name(cls, rows: int, cols: int, dtype: np.dtype) -> str:
        return f"{cls.__name__}[{rows}, {cols}, {dtype.name}]"

    @classmethod
    def _require_shape(cls, operation: str) -> None:
        if cls._origin is None:
            raise ShapeError(
                f"{operation}: {cls.__name__} has no shape, specialize it first "
                f"(e.g. {cls.__name__}[3, 3])"
            )

    @classmethod
    def _from_storage(cls, data: NDArray[Any]) -> 'Matrix':
        """Wrap an owned 1-D array of cls.n elements of cls.dtype without copying."""
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def __init__(self, values: ArrayLike | 'Matrix' | None = None):
        cls = type(self)
        cls._require_shape('construction')
        if values is None:
            self._data = np.zeros(cls.n, dtype=cls.dtype)
        elif isinstance(values, Matrix):
            check_same_shape(
                (cls.rows, cls.cols), values.shape,
                f"{cls.__name__} from {type(values).__name__}",
            )
            self._data = values._data.astype(cls.dtype, copy=True)
        else:
            self._data = check_elements(values, cls.n, cls.dtype, cls.__name__)

    @classmethod
    def zero(cls) -> 'Matrix':
        """All elements set to zero."""
        cls._require_shape('zero')
        return cls._from_storage(np.zeros(cls.n, dtype=cls.dtype))

    @classmethod
    def identity(cls) -> 'Matrix':
        """Square identity matrix."""
        cls._require_shape('identity')
        check_square((cls.rows, cls.cols), 'identity')
        data = np.zeros(cls.n, dtype=cls.dtype)
        data[::cls.rows + 1] = 1
        return cls._from_storage(data)

    @classmethod
    def from_columns(cls, columns: Sequence['Matrix']) -> 'Matrix':
        """
        Build a matrix from exactly cols column matrices of shape rows x 1.

        Raises:
            ShapeError: If the number of columns or any column's shape is wrong
        """
        cls._require_shape('from_columns')
        columns = list(columns)
        if len(columns) != cls.cols:
            raise ShapeError(
                f"from_columns: {cls.__name__} needs {cls.cols} columns, got {len(columns)}",
                expected=(cls.cols,),
                actual=(len(columns),),
            )
        grid = np.zeros((cls.rows, cls.cols), dtype=cls.dtype)
        for j, column in enumerate(columns):
            if not isinstance(column, Matrix):
                raise ShapeError(
                    f"from_columns: column {j} is {type(column).__name__}, expected a matrix"
                )
            check_same_shape((cls.rows, 1), column.shape, f"from_columns column {j}")
            grid[:, j] = column._data
        return cls._from_storage(grid.reshape(-1))

    @classmethod
    def from_rows(cls, rows: ArrayLike, dtype: DTypeLike | None = None) -> 'Matrix':
        """
        Build a matrix from nested row sequences.

        On the bare class the shape is inferred; on a specialized class
        the rows must match its shape.
        """
        arr = check_rows(rows, 'rows')
        if cls._origin is None:
            target = cls._specialize(arr.shape[0], arr.shape[1],
                                     DEFAULT_DTYPE if dtype is None else dtype)
        else:
            if arr.shape != (cls.rows, cls.cols):
                raise DimensionError(
                    f"rows: {cls.__name__} needs {cls.rows}x{cls.cols} rows, "
                    f"got {arr.shape[0]}x{arr.shape[1]}"
                )
            target = cls if dtype is None else cls._specialize(cls.rows, cls.cols, dtype)
        return target(arr.reshape(-1))

    def copy(self) -> 'Matrix':
        """Independent copy of this value."""
        return type(self)._from_storage(self._data.copy())

    def astype(self, dtype: DTypeLike) -> 'Matrix':
        """Element-wise conversion to another element type, same shape."""
        return type(self)._specialize(self.rows, self.cols, dtype)(self)

    def __reduce__(self):
        return (_rebuild, (self._generic(), self.rows, self.cols,
                           self.dtype.str, self._data.tolist()))

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def data(self) -> NDArray[Any]:
        """Read-only view of the flat row-major storage."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def _flat_index(self, key: Any) -> int:
        if isinstance(key, tuple):
            if len(key) != 2:
                raise IndexError(f"expected (row, col), got {len(key)} indices")
            r = check_index(key[0], self.rows, 'row')
            c = check_index(key[1], self.cols, 'col')
            return r * self.cols + c
        return check_index(key, self.n, 'index')

    def __getitem__(self, key: Any) -> Any:
        return self._data[self._flat_index(key)]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._data[self._flat_index(key)] = value

    def __len__(self) -> int:
        return self.n

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def fill(self, value: Any) -> None:
        self._data.fill(value)

    def r_of(self, i: int) -> int:
        """Row of linear index i."""
        return i // self.cols

    def c_of(self, i: int) -> int:
        """Column of linear index i."""
        return i % self.cols

    def to_numpy(self) -> NDArray[Any]:
        """2-D copy of the elements."""
        return self._data.reshape(self.rows, self.cols).copy()

    def _grid(self) -> NDArray[Any]:
        # Reshaping contiguous storage yields a view, so writes land in _data
        return self._data.reshape(self.rows, self.cols)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        raise TypeError(
            f"{type(self).__name__} does not support ==; "
            f"use data_equal() for exact or allclose() for approximate comparison"
        )

    def __ne__(self, other: object) -> bool:
        raise TypeError(
            f"{type(self).__name__} does not support !=; "
            f"use data_equal() for exact or allclose() for approximate comparison"
        )

    __hash__ = None  # type: ignore[assignment]

    def data_equal(self, other: 'Matrix') -> bool:
        """Exact comparison of shape and raw storage."""
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def allclose(
        self,
        other: 'Matrix',
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Element-wise comparison within tolerance.

        Defaults come from the tolerance tier of this matrix's dtype.
        Both sides are compared in their common real dtype; equal
        infinities count as close and NaN is never close.

        Raises:
            ShapeError: If the shapes differ
        """
        check_same_shape(self.shape, other.shape, 'allclose')
        tier = select_tolerance(self.dtype)
        real = real_dtype(np.result_type(self.dtype, other.dtype))
        a = self._data.astype(real)
        b = other._data.astype(real)
        with np.errstate(invalid='ignore'):
            close = is_close(
                a, b,
                rtol=tier.rtol if rtol is None else rtol,
                atol=tier.atol if atol is None else atol,
            )
        # Non-finite elements are close only when equal
        close &= np.isfinite(a) & np.isfinite(b)
        return bool(np.all(close | (a == b)))

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _element(self, value: Any) -> Any:
        return self.dtype.type(value)

    def __iadd__(self, other: Any) -> 'Matrix':
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, '+')
        np.add(self._data, other._data, out=self._data, casting='unsafe')
        return self

    def __isub__(self, other: Any) -> 'Matrix':
        if not isinstance(other, Matrix):
            return NotImplemented
        check_same_shape(self.shape, other.shape, '-')
        np.subtract(self._data, other._data, out=self._data, casting='unsafe')
        return self

    def __imul__(self, other: Any) -> 'Matrix':
        if not _is_scalar(other):
            return NotImplemented
        np.multiply(self._data, self._element(other), out=self._data, casting='unsafe')
        return self

    def __itruediv__(self, other: Any) -> 'Matrix':
        if not _is_scalar(other):
            return NotImplemented
        np.copyto(self._data, ieee_divide(self._data, self._element(other)),
                  casting='unsafe')
        return self

    def __add__(self, other: Any) -> 'Matrix':
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __sub__(self, other: Any) -> 'Matrix':
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __mul__(self, other: Any) -> 'Matrix':
        if isinstance(other, Matrix):
            return self.__matmul__(other)
        if not _is_scalar(other):
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    def __rmul__(self, other: Any) -> 'Matrix':
        if not _is_scalar(other):
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    def __truediv__(self, other: Any) -> 'Matrix':
        if not _is_scalar(other):
            return NotImplemented
        result = self.copy()
        result /= other
        return result

    def __neg__(self) -> 'Matrix':
        return type(self)._from_storage(np.negative(self._data))

    def __matmul__(self, other: Any) -> 'Matrix':
        """
        Matrix product (rows x k) @ (k x cols2) -> rows x cols2.

        Accumulates in this matrix's element type.

        Raises:
            ShapeError: If self.cols != other.rows
        """
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.cols != other.rows:
            raise ShapeError(
                f"@: inner dimensions differ, {self.rows}x{self.cols} @ "
                f"{other.rows}x{other.cols}",
                expected=(self.cols, other.cols),
                actual=other.shape,
            )
        right = other._grid().astype(self.dtype, copy=False)
        product = np.matmul(self._grid(), right)
        target = Matrix._specialize(self.rows, other.cols, self.dtype)
        return target._from_storage(np.ascontiguousarray(product).reshape(-1))

    # ------------------------------------------------------------------
    # Shape operations
    # ------------------------------------------------------------------

    def _plain(self, rows: int, cols: int) -> type:
        return Matrix._specialize(rows, cols, self.dtype)

    def row(self, r: int) -> 'Matrix':
        """Copy of row r as a 1 x cols matrix."""
        r = check_index(r, self.rows, 'row')
        return self._plain(1, self.cols)._from_storage(self._grid()[r].copy())

    def column(self, c: int) -> 'Matrix':
        """Copy of column c as a rows x 1 matrix."""
        c = check_index(c, self.cols, 'col')
        return self._plain(self.rows, 1)._from_storage(self._grid()[:, c].copy())

    def transposed(self) -> 'Matrix':
        """cols x rows matrix with (j, i) = self(i, j)."""
        data = np.ascontiguousarray(self._grid().T).reshape(-1)
        return self._plain(self.cols, self.rows)._from_storage(data)

    def submatrix(self, rows: int, cols: int) -> 'Matrix':
        """
        Copy of the top-left rows x cols block.

        Raises:
            ShapeError: If the block is larger than this matrix
        """
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        if rows > self.rows or cols > self.cols:
            raise ShapeError(
                f"submatrix: {rows}x{cols} does not fit in {self.rows}x{self.cols}",
                expected=self.shape,
                actual=(rows, cols),
            )
        data = self._grid()[:rows, :cols].copy().reshape(-1)
        return self._plain(rows, cols)._from_storage(data)

    def resized(self, rows: int, cols: int) -> 'Matrix':
        """
        rows x cols matrix holding the overlapping top-left region of this
        one, zero-padded where it grows and truncated where it shrinks.
        """
        target = self._plain(rows, cols)
        grid = np.zeros((target.rows, target.cols), dtype=self.dtype)
        r = min(self.rows, target.rows)
        c = min(self.cols, target.cols)
        grid[:r, :c] = self._grid()[:r, :c]
        return target._from_storage(grid.reshape(-1))

    # ------------------------------------------------------------------
    # Algorithms
    # ------------------------------------------------------------------

    def trace(self) -> Any:
        """
        Sum of the main diagonal, widened to at least float32.

        Raises:
            ShapeError: If the matrix is not square
        """
        check_square(self.shape, 'trace')
        real = real_dtype(self.dtype)
        return self._data[::self.rows + 1].astype(real).sum(dtype=real)

    def gauss(self) -> None:
        """
        Gauss-Jordan elimination in place.

        Reduces toward row-echelon form with leading entries of exactly 1.
        Stops at the first row that is entirely zero.
        """
        gauss_jordan(self._grid())

    def inverse(self) -> 'Matrix':
        """
        Inverse by elimination of the augmented matrix [A | I].

        Singular input is not detected; the result is then not meaningful.
        Use pymatrix.matrix.invert() for a singularity report.

        Raises:
            ShapeError: If the matrix is not square
        """
        check_square(self.shape, 'inverse')
        inverse, _ = invert_square(self._grid())
        return type(self)._from_storage(inverse.reshape(-1))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return format_grid(self._data, self.rows, self.cols)

    def __repr__(self) -> str:
        if self._origin is None:
            return object.__repr__(self)
        return f"{type(self).__name__}({self._data.tolist()!r})"
