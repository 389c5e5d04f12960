"""
Numerical precision constants and utilities.

Provides the default element type, the "widen to at least single float"
mapping used for traces, magnitudes and angles, and the division and
comparison helpers used across all value types.
"""

import numpy as np
from numpy.typing import DTypeLike, NDArray
from typing import Any


# Element type used when a shape is specialised without an explicit dtype
DEFAULT_DTYPE: np.dtype = np.dtype(np.float32)

# Narrowest floating type a derived real-valued quantity is reported in
MIN_REAL_DTYPE: np.dtype = np.dtype(np.float32)


def real_dtype(dtype: DTypeLike) -> np.dtype:
    """
    Map an element type to the type its real-valued results use.

    Floating types at least as wide as MIN_REAL_DTYPE map to themselves;
    integers, booleans and half precision map to MIN_REAL_DTYPE.

    Args:
        dtype: NumPy dtype or type

    Returns:
        The dtype for traces, magnitudes, angles and elimination factors

    Examples:
        >>> real_dtype(np.float64)
        dtype('float64')
        >>> real_dtype(np.int32)
        dtype('float32')
        >>> real_dtype(np.float16)
        dtype('float32')
    """
    dt = np.dtype(dtype)
    if np.issubdtype(dt, np.floating) and dt.itemsize >= MIN_REAL_DTYPE.itemsize:
        return dt
    return MIN_REAL_DTYPE


def ieee_divide(numerator: Any, denominator: Any) -> Any:
    """
    Division that follows IEEE semantics silently.

    Division by zero yields inf/NaN for floating types without emitting
    RuntimeWarning; callers that need protection must check magnitudes
    themselves.

    Args:
        numerator: Scalar or array
        denominator: Scalar or array

    Returns:
        numerator / denominator
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return numerator / denominator


def is_close(
    a: float | NDArray[np.floating[Any]],
    b: float | NDArray[np.floating[Any]],
    *,
    rtol: float,
    atol: float,
) -> bool | NDArray[np.bool_]:
    """
    Check if values are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|

    Args:
        a: First value(s)
        b: Second value(s)
        rtol: Relative tolerance
        atol: Absolute tolerance

    Returns:
        Boolean or boolean array indicating closeness
    """
    return np.abs(a - b) <= atol + rtol * np.abs(b)
