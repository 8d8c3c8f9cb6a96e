"""
Solver dispatch for linear systems.

This module provides solve(), solve_text() and solve_design() (public API)
and backend selection.
"""

from __future__ import annotations

import logging
from typing import Iterable, Literal, Sequence
from numpy.typing import ArrayLike

from pylinsys.core.result import Result
from pylinsys.core.compute.tolerances import ZERO_TOLERANCE
from pylinsys.core.exceptions import ValidationError
from pylinsys.linsys.design import SystemDesign
from pylinsys.linsys.solution import SystemParams, SystemSolution, STATUS_INVALID_INPUT
from pylinsys.linsys.backends.cpu import CPUGaussBackend

logger = logging.getLogger(__name__)


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_gauss']


def solve(
    coefficients: ArrayLike,
    constants: ArrayLike,
    *,
    backend: BackendChoice = 'auto',
    tolerance: float = ZERO_TOLERANCE,
) -> SystemSolution:
    """
    Solve a linear system given as numbers.

    Solves A x = b where A is (n_equations x n_variables) and b is
    (n_equations,). Any shape is accepted; the outcome is one of
    'solved', 'inconsistent' or 'underdetermined'.

    Args:
        coefficients: Coefficient matrix A. Any array-like.
        constants: Constant vector b. Any array-like.
        backend: 'auto', 'cpu' or 'cpu_gauss' (all the same today)
        tolerance: Zero threshold for elimination decisions

    Returns:
        SystemSolution; check ``ok`` or call ``raise_for_status()``

    Raises:
        ValidationError: If inputs are not finite numeric arrays
        DimensionError: If A and b disagree on the number of equations

    Example:
        >>> from pylinsys.linsys import solve
        >>> result = solve([[1, 1], [1, -1]], [3, 1])
        >>> result.formatted
        ('2', '1')
    """
    design = SystemDesign.from_arrays(coefficients, constants)
    return solve_design(design, backend=backend, tolerance=tolerance)


def solve_text(
    rows: Iterable[Sequence[str | None]],
    *,
    backend: BackendChoice = 'auto',
    tolerance: float = ZERO_TOLERANCE,
) -> SystemSolution:
    """
    Solve a linear system given as a grid of cell text.

    Each row is the coefficient texts followed by the constant text, e.g.
    ``[['1/2', '', '3'], ['1', '-0.25', '1']]``. Blank cells count as 0.
    Unparsable cells produce an 'invalid_input' solution naming the first
    offending text; no elimination is attempted.
    """
    design = SystemDesign.from_text(rows)
    return solve_design(design, backend=backend, tolerance=tolerance)


def solve_design(
    design: SystemDesign,
    *,
    backend: BackendChoice = 'auto',
    tolerance: float = ZERO_TOLERANCE,
) -> SystemSolution:
    """
    Solve a prepared SystemDesign.

    Cell validation runs first; the backend only sees fully parsed designs.
    """
    if not isinstance(design, SystemDesign):
        raise ValidationError(
            f"design: expected SystemDesign, got {type(design).__name__}"
        )

    backend_impl = _get_backend(backend, tolerance)

    # This is the boundary - validate here, trust everywhere else
    errors = design.parse_errors()
    if errors:
        logger.debug("rejecting %r: %s", design, errors[0])
        result = Result(
            params=SystemParams(status=STATUS_INVALID_INPUT, error=errors[0]),
            info={
                'method': 'validation',
                'invalid_cells': [(e.row, e.column, e.text) for e in errors],
            },
            timing=None,
            backend_name=backend_impl.name,
        )
        return SystemSolution(_result=result, _design=design)

    result = backend_impl.solve(design)
    return SystemSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice, tolerance: float):
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValidationError: If unknown backend specified or tolerance is not positive
    """
    if not tolerance > 0:
        raise ValidationError(f"tolerance: must be positive, got {tolerance!r}")

    if choice in ('auto', 'cpu', 'cpu_gauss'):
        return CPUGaussBackend(tolerance=tolerance)

    raise ValidationError(f"Unknown backend: {choice!r}")
