"""
Shared compute infrastructure for pymatrix.

IMPORTANT: This is NOT where solver backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    precision: Default dtype, real-dtype widening, safe division
    tolerances: Tolerance tiers per element type
"""

from pymatrix.core.compute.precision import (
    DEFAULT_DTYPE,
    MIN_REAL_DTYPE,
    ieee_divide,
    is_close,
    real_dtype,
)
from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Precision
    "DEFAULT_DTYPE",
    "MIN_REAL_DTYPE",
    "ieee_divide",
    "is_close",
    "real_dtype",
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
