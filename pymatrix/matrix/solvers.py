"""
Solver dispatch for elimination and inversion diagnostics.

Matrix.gauss() and Matrix.inverse() are the fast paths: they never report
anything. reduce() and invert() run the same kernel on a snapshot of the
input and return a solution with rank, pivot columns, timing and, for
inversion, an explicit singularity report.
"""

from __future__ import annotations

import warnings
from typing import Literal

from pymatrix.core.exceptions import SingularMatrixError, ValidationError
from pymatrix.matrix.backends.cpu import CPUGaussJordanBackend, CPUInverseBackend
from pymatrix.matrix.design import EliminationDesign
from pymatrix.matrix.matrix import Matrix
from pymatrix.matrix.solution import EliminationSolution, InverseSolution


BackendChoice = Literal['auto', 'cpu']


def _check_backend(backend: BackendChoice) -> None:
    if backend not in ('auto', 'cpu'):
        raise ValidationError(f"Unknown backend: {backend!r}")


def reduce(
    matrix: Matrix | EliminationDesign,
    *,
    name: str = 'A',
    backend: BackendChoice = 'auto',
) -> EliminationSolution:
    """
    Gauss-Jordan elimination with diagnostics.

    The input is not mutated; the reduced matrix is available as
    solution.matrix.

    Parameters
    ----------
    matrix : Matrix or EliminationDesign
        Any shape.
    name : str
        Label used in diagnostics.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    EliminationSolution
    """
    _check_backend(backend)
    design = (matrix if isinstance(matrix, EliminationDesign)
              else EliminationDesign.from_matrix(matrix, name=name))
    result = CPUGaussJordanBackend().solve(design)
    return EliminationSolution(_result=result, _design=design)


def invert(
    matrix: Matrix | EliminationDesign,
    *,
    strict: bool = False,
    name: str = 'A',
    backend: BackendChoice = 'auto',
) -> InverseSolution:
    """
    Invert a square matrix and report whether it was singular.

    Singularity means the left block of [A | I] did not reduce to the
    identity under exact-zero pivot tests; nearly singular matrices with
    tiny non-zero pivots are not flagged.

    Parameters
    ----------
    matrix : Matrix or EliminationDesign
        Square matrix.
    strict : bool
        If True, a singular matrix raises SingularMatrixError. If False,
        a UserWarning is emitted and the (not meaningful) right block is
        still returned.
    name : str
        Label used in diagnostics and error messages.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    InverseSolution

    Raises
    ------
    ShapeError
        If the matrix is not square.
    SingularMatrixError
        If strict is True and the matrix is singular.
    """
    _check_backend(backend)
    design = (matrix if isinstance(matrix, EliminationDesign)
              else EliminationDesign.for_inverse(matrix, name=name))
    result = CPUInverseBackend().solve(design)

    if result.params.singular:
        if strict:
            raise SingularMatrixError(
                f"{design.name}: matrix is singular, rank {result.params.rank} "
                f"of {design.rows}",
                matrix_name=design.name,
                rank=result.params.rank,
                expected_rank=design.rows,
            )
        for message in result.warnings:
            warnings.warn(message, UserWarning, stacklevel=2)

    return InverseSolution(_result=result, _design=design)
