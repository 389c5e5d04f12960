"""
Core infrastructure for pymatrix.

This module provides shared abstractions, utilities, and compute
infrastructure used by the value-type subpackages (matrix, vector,
quaternion).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Precision helpers, tolerance tiers, timing
"""

from pymatrix.core.protocols import Backend
from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    ShapeError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "ShapeError",
    "NumericalError",
    "SingularMatrixError",
]
