"""
Linear system solution types.

Contains the parameter payload and the user-facing solution wrapper.
A solution is a tagged result: either ``status == 'solved'`` with a
value per variable, or one of the failure statuses with the error that
explains it. Nothing here raises unless ``raise_for_status()`` is called.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinsys.core.result import Result
from pylinsys.core.exceptions import PyLinSysError
from pylinsys.linsys._format import format_value, exact_text

if TYPE_CHECKING:
    from pylinsys.linsys.design import SystemDesign


STATUS_SOLVED = 'solved'
STATUS_INVALID_INPUT = 'invalid_input'
STATUS_INCONSISTENT = 'inconsistent'
STATUS_UNDERDETERMINED = 'underdetermined'

ALL_STATUSES = frozenset({
    STATUS_SOLVED,
    STATUS_INVALID_INPUT,
    STATUS_INCONSISTENT,
    STATUS_UNDERDETERMINED,
})


@dataclass(frozen=True)
class SystemParams:
    """
    Parameter payload for a linear system solve.

    This is the immutable data computed by backends.

    Attributes
    ----------
    status : str
        One of ALL_STATUSES.
    values : ndarray or None
        Solution vector, shape (n_variables,). None unless solved.
    rank : int or None
        Numerical rank of the coefficient matrix. None when elimination
        never ran (invalid input).
    free_variables : tuple of int
        Variables without a pivot.
    inconsistent_rows : tuple of int
        Reduced rows reading ``0 = c`` with ``c != 0``.
    error : PyLinSysError or None
        The failure, as a value.
    """
    status: str
    values: NDArray[np.floating[Any]] | None = None
    rank: int | None = None
    free_variables: tuple[int, ...] = field(default_factory=tuple)
    inconsistent_rows: tuple[int, ...] = field(default_factory=tuple)
    error: PyLinSysError | None = None

    def __post_init__(self):
        if self.status not in ALL_STATUSES:
            raise ValueError(f"Unknown status: {self.status!r}")


@dataclass
class SystemSolution:
    """
    User-facing linear system results.

    Wraps the backend Result and provides convenient accessors for the
    solution vector, its formatted text, and failure details.
    """
    _result: Result[SystemParams]
    _design: 'SystemDesign'

    # Cached computations
    _formatted: tuple[str, ...] | None = None

    @property
    def status(self) -> str:
        return self._result.params.status

    @property
    def ok(self) -> bool:
        return self.status == STATUS_SOLVED

    @property
    def values(self) -> NDArray[np.floating[Any]] | None:
        """Solution vector (n_variables,), or None on failure."""
        return self._result.params.values

    @property
    def formatted(self) -> tuple[str, ...] | None:
        """Each value as a grouped integer or simplified fraction."""
        if self.values is None:
            return None
        if self._formatted is None:
            self._formatted = tuple(format_value(v) for v in self.values)
        return self._formatted

    def format(self, **kwargs) -> tuple[str, ...] | None:
        """Formatted values with custom options (see format_value)."""
        if self.values is None:
            return None
        return tuple(format_value(v, **kwargs) for v in self.values)

    @property
    def exact(self) -> tuple[str, ...] | None:
        """Values as ungrouped text the parser reads back unchanged."""
        if self.values is None:
            return None
        return tuple(exact_text(v) for v in self.values)

    @property
    def error(self) -> PyLinSysError | None:
        return self._result.params.error

    @property
    def reason(self) -> str | None:
        """Human-readable failure reason, or None when solved."""
        return str(self.error) if self.error is not None else None

    def raise_for_status(self) -> SystemSolution:
        """Raise the stored error if the solve failed; return self otherwise."""
        if self.error is not None:
            raise self.error
        return self

    @property
    def rank(self) -> int | None:
        return self._result.params.rank

    @property
    def free_variables(self) -> tuple[int, ...]:
        return self._result.params.free_variables

    @property
    def inconsistent_rows(self) -> tuple[int, ...]:
        return self._result.params.inconsistent_rows

    @property
    def design(self) -> 'SystemDesign':
        return self._design

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

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view for JSON serialization."""
        return {
            "status": self.status,
            "values": None if self.values is None else self.values.tolist(),
            "formatted": None if self.formatted is None else list(self.formatted),
            "reason": self.reason,
            "rank": self.rank,
        }

    def summary(self) -> str:
        """Plain-text report of the solve."""
        lines = [
            "Linear System Results",
            "=" * 60,
            f"Equations: {self._design.n_equations}",
            f"Variables: {self._design.n_variables}",
            f"Status: {self.status}",
        ]
        if self.rank is not None:
            lines.append(f"Rank: {self.rank}")

        lines.append("-" * 60)
        if self.ok:
            for i, (v, text) in enumerate(zip(self.values, self.formatted)):
                lines.append(f"  x{i + 1} = {text:>20}   ({v:.10g})")
        else:
            lines.append(f"  {self.reason}")
            if self.free_variables and self.status == STATUS_UNDERDETERMINED:
                free = ", ".join(f"x{j + 1}" for j in self.free_variables)
                lines.append(f"  Free variables: {free}")

        lines.append("-" * 60)
        if 'max_residual' in self.info:
            lines.append(f"Max residual: {self.info['max_residual']:.3e}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.6f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"SystemSolution(n_equations={self._design.n_equations}, "
            f"n_variables={self._design.n_variables}, status={self.status!r})"
        )
