"""
Fixed-shape matrix module.

Public API:
    Matrix[rows, cols, dtype]  - Dense matrix value type
    reduce(m)                  - Gauss-Jordan elimination with diagnostics
    invert(m, strict=False)    - Inverse with a singularity report
"""

from pymatrix.matrix.matrix import Matrix
from pymatrix.matrix.design import EliminationDesign
from pymatrix.matrix.solution import (
    EliminationParams,
    EliminationSolution,
    InverseParams,
    InverseSolution,
)
from pymatrix.matrix.solvers import reduce, invert

__all__ = [
    "Matrix",
    "reduce",
    "invert",
    "EliminationDesign",
    "EliminationParams",
    "EliminationSolution",
    "InverseParams",
    "InverseSolution",
]
