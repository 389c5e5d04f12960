"""
EliminationDesign: input snapshot for the elimination solvers.

Captures a matrix's elements, shape and dtype at the moment a solver is
called, so backends can work on their own copy and never mutate the
caller's value. Follows the pymatrix Design pattern.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import check_square
from pymatrix.matrix.matrix import Matrix


@dataclass(frozen=True, eq=False)
class EliminationDesign:
    """
    Design for Gauss-Jordan elimination and inversion.

    Immutable after construction.

    Construction:
        EliminationDesign.from_matrix(m)
        EliminationDesign.for_inverse(m)    # square only
    """
    _data: NDArray[Any]
    _name: str

    @classmethod
    def from_matrix(cls, matrix: Matrix, *, name: str = 'A') -> EliminationDesign:
        """
        Snapshot a matrix for elimination.

        Parameters
        ----------
        matrix : Matrix
            Any shape.
        name : str
            Label used in diagnostics and error messages.
        """
        if not isinstance(matrix, Matrix):
            raise ValidationError(
                f"{name}: expected a Matrix, got {type(matrix).__name__}"
            )
        data = matrix.to_numpy()
        data.flags.writeable = False
        return cls(_data=data, _name=name)

    @classmethod
    def for_inverse(cls, matrix: Matrix, *, name: str = 'A') -> EliminationDesign:
        """Snapshot a square matrix for inversion."""
        design = cls.from_matrix(matrix, name=name)
        check_square(design.shape, 'invert')
        return design

    @property
    def data(self) -> NDArray[Any]:
        """Read-only 2-D elements."""
        return self._data

    @property
    def shape(self) -> tuple[int, int]:
        return (int(self._data.shape[0]), int(self._data.shape[1]))

    @property
    def rows(self) -> int:
        return self.shape[0]

    @property
    def cols(self) -> int:
        return self.shape[1]

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    @property
    def metadata(self) -> dict[str, Any]:
        return {
            'name': self._name,
            'rows': self.rows,
            'cols': self.cols,
            'dtype': self.dtype.name,
        }
