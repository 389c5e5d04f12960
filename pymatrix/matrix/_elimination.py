"""
Gauss-Jordan elimination kernel.

Operates in place on a 2-D numpy view of a matrix's storage. Shared by
Matrix.gauss(), Matrix.inverse() and the CPU solver backend so every entry
point reduces with exactly the same pivot policy.

Pivot policy, per row in order:
    1. The lead is the first non-zero column of the row. An all-zero row
       stops the whole elimination; later rows are left untouched.
    2. If the lead is not on the diagonal, the rows below are searched for
       a non-zero entry left of the lead. The row with the leftmost such
       entry (first found on ties) is swapped in from that column onward
       and its column becomes the lead.
    3. The pivot row is divided by its pivot from the column after the
       pivot, then the pivot itself is set to exactly 1.
    4. The lead column is cleared from every other row by subtracting
       f * pivot_row across all columns.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.precision import ieee_divide, real_dtype


def _first_nonzero(row: NDArray[Any]) -> int | None:
    """Index of the first non-zero entry of a 1-D array, or None."""
    nz = np.flatnonzero(row)
    if nz.size == 0:
        return None
    return int(nz[0])


def _find_smaller_lead(
    m: NDArray[Any],
    current_row: int,
    cur_lead: int,
) -> tuple[int, int]:
    """
    Find the row below current_row with the leftmost lead left of cur_lead.

    Only columns [0, cur_lead) are scanned; leads at or right of cur_lead
    are not candidates.

    Returns:
        (row, lead) of the best candidate, or (current_row, cur_lead)
        when no row below has a smaller lead.
    """
    min_lead_row = current_row
    min_lead = cur_lead
    for ii in range(current_row + 1, m.shape[0]):
        lead = _first_nonzero(m[ii, :cur_lead])
        if lead is not None and lead < min_lead:
            min_lead_row = ii
            min_lead = lead
    return min_lead_row, min_lead


def gauss_jordan(m: NDArray[Any]) -> list[int]:
    """
    Reduce a 2-D array toward row-echelon form in place.

    Args:
        m: 2-D array, mutated in place. Its dtype is preserved; integer
           arrays truncate toward zero on every division and subtraction.

    Returns:
        The pivot column of each reduced row, in row order. Its length is
        the number of rows reduced before elimination stopped.
    """
    rows, cols = m.shape
    factor_type = real_dtype(m.dtype).type
    pivots: list[int] = []

    for current_row in range(rows):
        cur_lead = _first_nonzero(m[current_row])
        if cur_lead is None:
            break

        if cur_lead != current_row:
            min_lead_row, min_lead = _find_smaller_lead(m, current_row, cur_lead)
            if min_lead_row != current_row:
                # Columns left of min_lead are zero in both rows
                m[[current_row, min_lead_row], min_lead:] = \
                    m[[min_lead_row, current_row], min_lead:]
                cur_lead = min_lead

        lead_val = m[current_row, cur_lead]
        if lead_val != 1:
            m[current_row, cur_lead] = 1
            tail = m[current_row, cur_lead + 1:]
            np.copyto(tail, ieee_divide(tail, lead_val), casting='unsafe')

        pivot_row = m[current_row]
        for other_row in range(rows):
            if other_row == current_row:
                continue
            if m[other_row, cur_lead] == 0:
                continue
            f = factor_type(m[other_row, cur_lead]) / factor_type(pivot_row[cur_lead])
            np.copyto(m[other_row], m[other_row] - pivot_row * f, casting='unsafe')

        pivots.append(cur_lead)

    return pivots


def row_rank(a: NDArray[Any]) -> int:
    """
    Rank of a 2-D array by forward elimination with exact zero tests.

    Works on a copy in the real dtype; a is not mutated. Zero rows in
    any position are skipped rather than ending the count.
    """
    work = a.astype(real_dtype(a.dtype))
    rows, cols = work.shape
    rank = 0
    for col in range(cols):
        if rank == rows:
            break
        candidates = np.flatnonzero(work[rank:, col])
        if candidates.size == 0:
            continue
        pivot = rank + int(candidates[0])
        if pivot != rank:
            work[[rank, pivot]] = work[[pivot, rank]]
        below = work[rank + 1:]
        below -= np.outer(below[:, col] / work[rank, col], work[rank])
        below[:, col] = 0
        rank += 1
    return rank


def augment_identity(a: NDArray[Any]) -> NDArray[Any]:
    """Fresh n x 2n array [A | I] in a's dtype."""
    n = a.shape[0]
    augmented = np.zeros((n, 2 * n), dtype=a.dtype)
    augmented[:, :n] = a
    augmented[:, n:] = np.eye(n, dtype=a.dtype)
    return augmented


def is_full_reduction(pivots: list[int], n: int) -> bool:
    """True when the left n x n block of an augmented matrix reduced to I."""
    return pivots == list(range(n))


def invert_square(a: NDArray[Any]) -> tuple[NDArray[Any], list[int]]:
    """
    Invert a square 2-D array by eliminating the augmented [A | I].

    No singularity check is performed: for a singular input the returned
    block is whatever the right half holds when elimination stops.

    Args:
        a: Square 2-D array (not mutated)

    Returns:
        (inverse, pivots) where inverse is a fresh array of a's dtype and
        pivots are the pivot columns found on the augmented matrix.
    """
    n = a.shape[0]
    augmented = augment_identity(a)
    pivots = gauss_jordan(augmented)
    return augmented[:, n:].copy(), pivots
