"""
CPU reference backend for linear systems.

Gauss-Jordan elimination with partial pivoting in float64 NumPy. Works
for any shape: square, over- and underdetermined grids all go through
the same reduction, and the reduced form decides the outcome.
"""

import logging
import warnings
from typing import Any

from pylinsys.core.result import Result
from pylinsys.core.compute.timing import Timer
from pylinsys.core.compute.tolerances import ZERO_TOLERANCE, VERIFY_TOLERANCE
from pylinsys.core.compute.linalg.gauss import gauss_jordan, extract_solution, max_residual
from pylinsys.core.exceptions import InconsistentSystemError, UnderdeterminedSystemError
from pylinsys.linsys.design import SystemDesign
from pylinsys.linsys.solution import (
    SystemParams,
    STATUS_SOLVED,
    STATUS_INCONSISTENT,
    STATUS_UNDERDETERMINED,
)

logger = logging.getLogger(__name__)


class CPUGaussBackend:
    """
    CPU backend using Gauss-Jordan elimination.

    Implements the Backend protocol for SystemDesign -> SystemParams.
    Degenerate systems come back as failure-tagged params rather than
    exceptions. Inconsistency is checked before underdetermination, so a
    system that is both reports "no solution".
    """

    def __init__(
        self,
        tolerance: float = ZERO_TOLERANCE,
        verify_tolerance: float = VERIFY_TOLERANCE,
    ):
        self._tol = tolerance
        self._verify_tol = verify_tolerance

    @property
    def name(self) -> str:
        return 'cpu_gauss'

    def solve(self, design: SystemDesign) -> Result[SystemParams]:
        """
        Solve A x = b by row reduction.

        Algorithm:
            1. Build a private augmented matrix [A | b]
            2. Reduce it with partial pivoting
            3. Read each row's pivot value; flag 0 = c rows and unpinned columns
            4. Substitute the solution back into the original system

        Args:
            design: Design whose cells all parsed

        Returns:
            Result containing SystemParams

        Raises:
            ParseError: If the design still holds unparsable cells
        """
        timer = Timer()
        timer.start()

        m = design.n_variables

        with timer.section('build'):
            augmented = design.augmented()

        with timer.section('elimination'):
            elimination = gauss_jordan(augmented, m, tol=self._tol)

        with timer.section('extraction'):
            extraction = extract_solution(elimination, tol=self._tol)

        warnings_list: list[str] = []
        info: dict[str, Any] = {
            'method': 'gauss_jordan',
            'pivoting': 'partial',
            'tolerance': self._tol,
            'rank': elimination.rank,
            'pivot_columns': list(elimination.pivot_columns),
            'row_swaps': [list(s) for s in elimination.row_swaps],
            'redundant_rows': list(extraction.redundant_rows),
        }

        if not extraction.is_consistent:
            row = extraction.inconsistent_rows[0]
            params = SystemParams(
                status=STATUS_INCONSISTENT,
                rank=elimination.rank,
                free_variables=extraction.free_variables,
                inconsistent_rows=extraction.inconsistent_rows,
                error=InconsistentSystemError(
                    row=row,
                    residual=float(elimination.reduced[row, m]),
                ),
            )
        elif extraction.free_variables:
            params = SystemParams(
                status=STATUS_UNDERDETERMINED,
                rank=elimination.rank,
                free_variables=extraction.free_variables,
                error=UnderdeterminedSystemError(
                    free_variables=extraction.free_variables,
                    rank=elimination.rank,
                    n_variables=m,
                ),
            )
        else:
            with timer.section('verification'):
                residual = max_residual(augmented[:, :m], augmented[:, m], extraction.values)
            info['max_residual'] = residual
            if residual > self._verify_tol:
                msg = (
                    f"Solution residual {residual:.3e} exceeds {self._verify_tol:.0e}; "
                    f"the system may be ill-conditioned"
                )
                warnings_list.append(msg)
                warnings.warn(msg, RuntimeWarning, stacklevel=2)
            params = SystemParams(
                status=STATUS_SOLVED,
                values=extraction.values,
                rank=elimination.rank,
            )

        timer.stop()

        logger.debug(
            "solved %dx%d system: status=%s rank=%d pivots=%s",
            design.n_equations, m, params.status, elimination.rank,
            elimination.pivot_columns,
        )

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
