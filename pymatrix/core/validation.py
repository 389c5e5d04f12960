"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent reshaping or padding of element data
    - Type-level shape problems raise ShapeError, data problems
      raise ValidationError/DimensionError
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray
from typing import Any

from pymatrix.core.exceptions import DimensionError, ShapeError, ValidationError


def check_dtype(dtype: DTypeLike, name: str) -> np.dtype:
    """
    Validate an element type.

    Element types must be real numeric scalars: booleans, integers or
    floating point.

    Args:
        dtype: Candidate element type
        name: Parameter name for error messages

    Returns:
        The normalized numpy dtype

    Raises:
        ValidationError: If dtype is not a real numeric type
    """
    try:
        dt = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"{name}: not a dtype: {dtype!r}") from e

    if not (np.issubdtype(dt, np.integer)
            or np.issubdtype(dt, np.floating)
            or np.issubdtype(dt, np.bool_)):
        raise ValidationError(
            f"{name}: element type must be integer or floating point, got {dt}"
        )
    return dt


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a shape dimension is a strictly positive integer.

    Args:
        value: Candidate dimension
        name: Parameter name for error messages

    Returns:
        The dimension as int

    Raises:
        ShapeError: If value is not a positive integer
    """
    if isinstance(value, bool):
        raise ShapeError(f"{name}: dimension must be an integer, got bool")
    try:
        dim = operator.index(value)
    except TypeError as e:
        raise ShapeError(
            f"{name}: dimension must be an integer, got {type(value).__name__}"
        ) from e
    if dim <= 0:
        raise ShapeError(f"{name}: dimension must be positive, got {dim}")
    return dim


def check_elements(
    values: ArrayLike,
    count: int,
    dtype: np.dtype,
    name: str,
) -> NDArray[Any]:
    """
    Validate flat element data and convert it to owned storage.

    Args:
        values: Flat, row-major element sequence
        count: Required number of elements
        dtype: Target element type
        name: Parameter name for error messages

    Returns:
        A fresh 1-D array of `count` elements of `dtype`

    Raises:
        ValidationError: If values are not numeric
        DimensionError: If values are not flat or have the wrong length
    """
    try:
        arr = np.asarray(values)
    except (ValueError, TypeError) as e:
        raise DimensionError(f"{name}: cannot convert to array: {e}") from e

    if arr.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    if arr.size > 0 and not (np.issubdtype(arr.dtype, np.number)
                             or np.issubdtype(arr.dtype, np.bool_)):
        raise ValidationError(
            f"{name}: non-numeric dtype {arr.dtype}, expected numeric data"
        )
    if np.issubdtype(arr.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex elements are not supported")
    if arr.ndim != 1:
        raise DimensionError(
            f"{name}: expected a flat sequence, got {arr.ndim}D with shape {arr.shape}"
        )
    if arr.shape[0] != count:
        raise DimensionError(
            f"{name}: expected {count} elements, got {arr.shape[0]}"
        )
    return np.array(arr, dtype=dtype, copy=True)


def check_rows(rows: ArrayLike, name: str) -> NDArray[Any]:
    """
    Validate nested row data as a rectangular 2-D array.

    Args:
        rows: Sequence of equal-length row sequences
        name: Parameter name for error messages

    Returns:
        2-D numpy array

    Raises:
        DimensionError: If rows are ragged, empty or not 2-D
    """
    try:
        arr = np.asarray(rows)
    except (ValueError, TypeError) as e:
        raise DimensionError(f"{name}: rows are ragged: {e}") from e

    if arr.dtype == object:
        raise DimensionError(f"{name}: rows are ragged or non-numeric")
    if arr.ndim != 2:
        raise DimensionError(
            f"{name}: expected nested rows (2D), got {arr.ndim}D with shape {arr.shape}"
        )
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise DimensionError(f"{name}: rows must be non-empty, got shape {arr.shape}")
    return arr


def check_same_shape(
    expected: tuple[int, int],
    actual: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shape.

    Raises:
        ShapeError: If the shapes differ
    """
    if expected != actual:
        raise ShapeError(
            f"{operation}: shape mismatch, expected {expected[0]}x{expected[1]}, "
            f"got {actual[0]}x{actual[1]}",
            expected=expected,
            actual=actual,
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a shape is square.

    Raises:
        ShapeError: If rows != cols
    """
    rows, cols = shape
    if rows != cols:
        raise ShapeError(
            f"{operation}: requires a square matrix, got {rows}x{cols}",
            expected="square",
            actual=shape,
        )


def check_index(index: Any, size: int, name: str) -> int:
    """
    Verify an element/row/column index lies in [0, size).

    Negative indices are rejected rather than wrapped.

    Args:
        index: Candidate index
        size: Exclusive upper bound
        name: Parameter name for error messages

    Returns:
        The index as int

    Raises:
        TypeError: If index is not an integer
        IndexError: If index is out of range
    """
    if isinstance(index, bool):
        raise TypeError(f"{name}: index must be an integer, got bool")
    i = operator.index(index)
    if not 0 <= i < size:
        raise IndexError(f"{name}: index {i} out of range [0, {size})")
    return i
