"""
Tolerance tiers for numerical comparison.

Defines precision expectations for each element type:
- FP64: double precision round-off
- FP32: relaxed for single-precision arithmetic (the default element type)
- INTEGER: exact

Used by Matrix.allclose() defaults and the test suite.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import DTypeLike


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision elements
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, a few ulps of accumulated round-off',
)

# Single precision elements (default Matrix dtype)
FP32 = ToleranceTier(
    rtol=1e-5,
    atol=1e-6,
    name='fp32',
    description='Single precision, matches results to ~1e-6',
)

# Half precision elements
FP16 = ToleranceTier(
    rtol=1e-2,
    atol=1e-3,
    name='fp16',
    description='Half precision, storage-only accuracy',
)

# Integer and boolean elements
INTEGER = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='integer',
    description='Exact comparison',
)


def select_tolerance(dtype: DTypeLike) -> ToleranceTier:
    """Select the tolerance tier for a given element type."""
    dt = np.dtype(dtype)
    if not np.issubdtype(dt, np.floating):
        return INTEGER
    if dt.itemsize >= 8:
        return FP64
    if dt.itemsize >= 4:
        return FP32
    return FP16
