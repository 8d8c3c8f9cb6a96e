"""
Exception hierarchy for PyLinSys.

All exceptions inherit from PyLinSysError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable and quote the offending input
    - Solver failures are returned as values; raising is opt-in
"""


class PyLinSysError(Exception):
    """Base exception for all PyLinSys errors."""
    pass


class ValidationError(PyLinSysError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when a grid row has the wrong number of cells.
    """
    pass


class ParseError(ValidationError):
    """
    Cell text is not a valid decimal or fraction.

    Attributes:
        text: The raw text that failed to parse
        role: 'coefficient' or 'constant'
        row: Equation index, if known
        column: Variable index (None for a constant), if known
    """

    def __init__(
        self,
        message: str,
        text: str,
        role: str = 'coefficient',
        row: int | None = None,
        column: int | None = None,
    ):
        super().__init__(message)
        self.text = text
        self.role = role
        self.row = row
        self.column = column

    @classmethod
    def for_cell(
        cls,
        text: str,
        role: str = 'coefficient',
        row: int | None = None,
        column: int | None = None,
    ) -> 'ParseError':
        """Build the standard 'invalid <role> text: <text>' error."""
        return cls(f"invalid {role} text: {text}", text, role, row, column)


class NumericalError(PyLinSysError):
    """
    Numerical computation failed.

    Base class for errors arising from the row-reduced form of a system.
    """
    pass


class InconsistentSystemError(NumericalError):
    """
    The system has no solution.

    Elimination produced a row whose coefficients are all negligible
    while its constant is not.

    Attributes:
        row: Index of the contradictory row in the reduced matrix
        residual: The non-zero constant left in that row
    """

    def __init__(
        self,
        message: str = "inconsistent system (no solution)",
        row: int | None = None,
        residual: float | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.residual = residual


class UnderdeterminedSystemError(NumericalError):
    """
    The system has infinitely many solutions.

    At least one variable has no pivot after elimination.

    Attributes:
        free_variables: Indices of the unpinned variables
        rank: Numerical rank of the coefficient matrix
        n_variables: Number of unknowns
    """

    def __init__(
        self,
        message: str = "underdetermined system (infinitely many solutions)",
        free_variables: tuple[int, ...] = (),
        rank: int | None = None,
        n_variables: int | None = None,
    ):
        super().__init__(message)
        self.free_variables = tuple(free_variables)
        self.rank = rank
        self.n_variables = n_variables
