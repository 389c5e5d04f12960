"""
Human-readable rendering of matrices and vectors.

Output is for people, never parsed back. Floats use %g style (six
significant digits, no trailing zeros), integers print plainly.
"""

from __future__ import annotations

from typing import Any, Iterable

import numpy as np


def format_scalar(value: Any) -> str:
    """Render a single element."""
    if isinstance(value, (float, np.floating)):
        return f"{float(value):g}"
    if isinstance(value, (bool, np.bool_)):
        return str(int(value))
    return str(value)


def format_grid(values: Iterable[Any], rows: int, cols: int) -> str:
    """
    Render row-major values as aligned fixed-width columns.

    Every cell is right-aligned to the width of the widest cell:

        |  1 2|
        |-10 4|
    """
    cells = [format_scalar(v) for v in values]
    width = max(len(c) for c in cells)
    lines = []
    for r in range(rows):
        row_cells = cells[r * cols:(r + 1) * cols]
        lines.append('|' + ' '.join(c.rjust(width) for c in row_cells) + '|')
    return '\n'.join(lines)


def format_tuple(values: Iterable[Any]) -> str:
    """Render values as {a, b, c}."""
    return '{' + ', '.join(format_scalar(v) for v in values) + '}'
