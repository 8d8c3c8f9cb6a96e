"""
Gauss-Jordan elimination with partial pivoting.

Provides the reduction kernel and solution extraction used by the linear
system backends. Both functions work on float64 NumPy arrays and return
structured result dataclasses; neither raises for inconsistent or
underdetermined systems. Those are reported as fields so the caller can
decide how to surface them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinsys.core.compute.tolerances import ZERO_TOLERANCE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EliminationResult:
    """
    Result of Gauss-Jordan elimination on an augmented matrix.

    Attributes:
        reduced: Row-reduced augmented matrix (n x (m + 1)), a private copy
        pivot_columns: Pivot column of each pivot row, in row order
        row_swaps: (row, pivot_row) pairs in the order they were applied
        n_variables: Number of coefficient columns m
    """
    reduced: NDArray[np.floating[Any]]
    pivot_columns: tuple[int, ...]
    row_swaps: tuple[tuple[int, int], ...]
    n_variables: int

    @property
    def rank(self) -> int:
        """Numerical rank of the coefficient block."""
        return len(self.pivot_columns)


@dataclass(frozen=True)
class ExtractionResult:
    """
    Solution read off a row-reduced augmented matrix.

    Attributes:
        values: One value per variable; unpinned variables hold 0.0
        pinned: Variables that some row pivots on, ascending
        free_variables: Variables no row pivots on, ascending
        inconsistent_rows: Rows reading 0 = c with c non-negligible
        redundant_rows: Rows reading 0 = 0
    """
    values: NDArray[np.floating[Any]]
    pinned: tuple[int, ...]
    free_variables: tuple[int, ...]
    inconsistent_rows: tuple[int, ...]
    redundant_rows: tuple[int, ...]

    @property
    def is_consistent(self) -> bool:
        return not self.inconsistent_rows

    @property
    def is_unique(self) -> bool:
        return self.is_consistent and not self.free_variables


def gauss_jordan(
    augmented: NDArray[np.floating[Any]],
    n_variables: int,
    tol: float = ZERO_TOLERANCE,
) -> EliminationResult:
    """
    Reduce an augmented matrix with partial pivoting.

    For each column, the row with the largest absolute entry at or below
    the current pivot row is swapped into place (the first such row wins
    ties). A column whose best candidate does not exceed ``tol`` yields no
    pivot and the pivot row stays put. Otherwise the column is eliminated
    from every other row, above and below.

    Args:
        augmented: Matrix of shape (n, n_variables + 1); never modified
        n_variables: Number of coefficient columns
        tol: Zero threshold for pivot magnitudes

    Returns:
        EliminationResult holding a reduced copy and the pivot bookkeeping
    """
    matrix = np.array(augmented, dtype=np.float64, copy=True)
    n_rows = matrix.shape[0]

    pivot_columns: list[int] = []
    row_swaps: list[tuple[int, int]] = []

    row = 0
    for col in range(n_variables):
        if row >= n_rows:
            break

        best = row + int(np.argmax(np.abs(matrix[row:, col])))
        if best != row:
            matrix[[row, best]] = matrix[[best, row]]
            row_swaps.append((row, best))

        pivot = matrix[row, col]
        if abs(pivot) <= tol:
            logger.debug("column %d has no usable pivot (|%g| <= %g)", col, pivot, tol)
            continue

        factors = matrix[:, col] / pivot
        factors[row] = 0.0
        matrix[:, col:] -= np.outer(factors, matrix[row, col:])

        pivot_columns.append(col)
        row += 1

    return EliminationResult(
        reduced=matrix,
        pivot_columns=tuple(pivot_columns),
        row_swaps=tuple(row_swaps),
        n_variables=n_variables,
    )


def extract_solution(
    elimination: EliminationResult,
    tol: float = ZERO_TOLERANCE,
) -> ExtractionResult:
    """
    Read the solution off a reduced matrix.

    Each row's pivot is its first entry with magnitude above ``tol``. A row
    without one is either contradictory (constant above ``tol``) or
    redundant. Every other row already has a single non-negligible entry
    left of the constant column, so the value is a direct quotient.

    A variable that no row pivots on is free: the system then has either no
    solution or infinitely many, and a 0.0 placeholder is left in its slot.
    """
    reduced = elimination.reduced
    m = elimination.n_variables

    values = np.zeros(m, dtype=np.float64)
    pinned: set[int] = set()
    inconsistent: list[int] = []
    redundant: list[int] = []

    for i, row in enumerate(reduced):
        nonzero = np.flatnonzero(np.abs(row[:m]) > tol)
        constant = row[m]

        if nonzero.size == 0:
            if abs(constant) > tol:
                inconsistent.append(i)
            else:
                redundant.append(i)
            continue

        pivot_col = int(nonzero[0])
        values[pivot_col] = constant / row[pivot_col]
        pinned.add(pivot_col)

    free = tuple(j for j in range(m) if j not in pinned)

    return ExtractionResult(
        values=values,
        pinned=tuple(sorted(pinned)),
        free_variables=free,
        inconsistent_rows=tuple(inconsistent),
        redundant_rows=tuple(redundant),
    )


def max_residual(
    coefficients: NDArray[np.floating[Any]],
    constants: NDArray[np.floating[Any]],
    values: NDArray[np.floating[Any]],
) -> float:
    """Largest |A x - b| over all equations."""
    if coefficients.shape[0] == 0:
        return 0.0
    return float(np.max(np.abs(coefficients @ values - constants)))
