"""
CPU backends for Gauss-Jordan elimination and inversion.

Both run the same in-place kernel that Matrix.gauss() and
Matrix.inverse() use, so results are identical element for element.
"""

from __future__ import annotations

from pymatrix.core.compute.timing import Timer
from pymatrix.core.result import Result
from pymatrix.core.validation import check_square
from pymatrix.matrix._elimination import (
    augment_identity,
    gauss_jordan,
    is_full_reduction,
    row_rank,
)
from pymatrix.matrix.design import EliminationDesign
from pymatrix.matrix.solution import EliminationParams, InverseParams


class CPUGaussJordanBackend:
    """Reduces a design toward row-echelon form."""

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def solve(self, design: EliminationDesign) -> Result[EliminationParams]:
        timer = Timer()
        timer.start()

        with timer.section('copy'):
            work = design.data.copy()

        with timer.section('eliminate'):
            pivots = gauss_jordan(work)

        timer.stop()

        reduced_rows = len(pivots)
        # Rows left below the stop are already clear in every pivot column
        rank = reduced_rows + row_rank(work[reduced_rows:])
        params = EliminationParams(
            reduced=work,
            pivot_columns=tuple(pivots),
            rank=rank,
            reduced_rows=reduced_rows,
            terminated_early=reduced_rows < design.rows,
        )
        return Result(
            params=params,
            info={
                'method': 'gauss_jordan',
                'rank': rank,
                'reduced_rows': reduced_rows,
                'terminated_early': reduced_rows < design.rows,
                **design.metadata,
            },
            timing=timer.result(),
            backend_name=self.name,
        )


class CPUInverseBackend:
    """Inverts a square design through the augmented matrix [A | I]."""

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan_inverse'

    def solve(self, design: EliminationDesign) -> Result[InverseParams]:
        check_square(design.shape, 'invert')
        n = design.rows
        warnings_list: list[str] = []

        timer = Timer()
        timer.start()

        with timer.section('augment'):
            augmented = augment_identity(design.data)

        with timer.section('eliminate'):
            pivots = gauss_jordan(augmented)

        with timer.section('extract'):
            inverse = augmented[:, n:].copy()

        timer.stop()

        singular = not is_full_reduction(pivots, n)
        # Pivots past column n belong to the identity block, not to A
        rank = sum(1 for p in pivots if p < n)
        if singular:
            warnings_list.append(
                f"{design.name} is singular (rank {rank} of {n}); "
                f"the inverse is not meaningful"
            )

        params = InverseParams(
            inverse=inverse,
            pivot_columns=tuple(pivots),
            rank=rank,
            singular=singular,
        )
        return Result(
            params=params,
            info={
                'method': 'gauss_jordan_augmented',
                'rank': rank,
                'singular': singular,
                **design.metadata,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
