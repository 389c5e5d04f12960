"""
Elimination and inversion solution types.

Contains the parameter payloads and user-facing solution wrappers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.result import Result
from pymatrix.matrix.matrix import Matrix

if TYPE_CHECKING:
    from pymatrix.matrix.design import EliminationDesign


@dataclass(frozen=True, eq=False)
class EliminationParams:
    """
    Parameter payload for Gauss-Jordan elimination.

    reduced has the input's shape and dtype. pivot_columns holds the
    pivot column of each reduced row in row order; its length is
    reduced_rows, the number of rows reduced before elimination stopped.
    rank counts the non-zero rows left below the stop as well, so it can
    exceed reduced_rows when an all-zero row sits above a non-zero one.
    """
    reduced: NDArray[Any]
    pivot_columns: tuple[int, ...]
    rank: int
    reduced_rows: int
    terminated_early: bool


@dataclass(frozen=True, eq=False)
class InverseParams:
    """
    Parameter payload for inversion via the augmented matrix [A | I].

    inverse is the right block after elimination. When singular is True
    it is structurally valid but not meaningful.
    """
    inverse: NDArray[Any]
    pivot_columns: tuple[int, ...]
    rank: int
    singular: bool


def _as_matrix(array: NDArray[Any]) -> Matrix:
    rows, cols = array.shape
    target = Matrix[rows, cols, array.dtype]
    return target(np.ascontiguousarray(array).reshape(-1))


class _SolutionBase:
    """Accessors shared by both solution wrappers."""

    _result: Result[Any]
    _design: 'EliminationDesign'

    @property
    def pivot_columns(self) -> tuple[int, ...]:
        return self._result.params.pivot_columns

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def design(self) -> 'EliminationDesign':
        return self._design


@dataclass
class EliminationSolution(_SolutionBase):
    """
    User-facing Gauss-Jordan elimination result.

    Wraps Result[EliminationParams] and provides convenient accessors.
    """
    _result: Result[EliminationParams]
    _design: 'EliminationDesign'

    @property
    def params(self) -> EliminationParams:
        return self._result.params

    @property
    def matrix(self) -> Matrix:
        """The reduced matrix (a fresh value on every access)."""
        return _as_matrix(self._result.params.reduced)

    @property
    def terminated_early(self) -> bool:
        """True if elimination stopped at an all-zero row."""
        return self._result.params.terminated_early

    @property
    def reduced_rows(self) -> int:
        """Rows reduced before elimination stopped."""
        return self._result.params.reduced_rows

    def summary(self) -> str:
        d = self._design
        lines = [
            f"Gauss-Jordan elimination of {d.name} ({d.rows}x{d.cols}, {d.dtype.name})",
            f"  rank:          {self.rank}",
            f"  reduced rows:  {self.reduced_rows}",
            f"  pivot columns: {list(self.pivot_columns)}",
            f"  early stop:    {self.terminated_early}",
            f"  backend:       {self.backend_name}",
            "",
            str(self.matrix),
        ]
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return (f"EliminationSolution(shape={self._design.shape}, rank={self.rank}, "
                f"pivot_columns={self.pivot_columns})")


@dataclass
class InverseSolution(_SolutionBase):
    """
    User-facing inversion result.

    Wraps Result[InverseParams] and provides convenient accessors.
    """
    _result: Result[InverseParams]
    _design: 'EliminationDesign'

    @property
    def params(self) -> InverseParams:
        return self._result.params

    @property
    def inverse(self) -> Matrix:
        """The inverse (a fresh value on every access)."""
        return _as_matrix(self._result.params.inverse)

    @property
    def is_singular(self) -> bool:
        return self._result.params.singular

    def summary(self) -> str:
        d = self._design
        status = 'SINGULAR (inverse not meaningful)' if self.is_singular else 'invertible'
        lines = [
            f"Inverse of {d.name} ({d.rows}x{d.cols}, {d.dtype.name})",
            f"  status:        {status}",
            f"  rank:          {self.rank} of {d.rows}",
            f"  backend:       {self.backend_name}",
        ]
        if not self.is_singular:
            lines.append("")
            lines.append(str(self.inverse))
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return (f"InverseSolution(shape={self._design.shape}, rank={self.rank}, "
                f"singular={self.is_singular})")
