"""
SystemDesign: the input side of a linear system.

A design is a fixed-shape grid of cells, one row per equation, holding
the raw text of each coefficient and constant together with its parsed
value. It knows how to turn itself into an augmented matrix; it does not
know how to solve.

Designs are immutable. Changing the number of equations or variables
means building a new, blank design with ``SystemDesign.reshape``; editing
one cell returns a copy via ``with_cell``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsys.core.exceptions import ParseError, ValidationError
from pylinsys.core.validation import (
    check_array,
    check_1d,
    check_2d,
    check_count,
    check_consistent_length,
    check_finite,
    check_row_width,
)
from pylinsys.linsys._parser import Coefficient


@dataclass(frozen=True)
class Equation:
    """
    One row of the grid: ``n_variables`` coefficients and a constant.

    Reads as ``a_1 x_1 + ... + a_m x_m = c``.
    """
    coefficients: tuple[Coefficient, ...]
    constant: Coefficient = Coefficient()

    @classmethod
    def blank(cls, n_variables: int) -> Equation:
        return cls(
            coefficients=tuple(Coefficient() for _ in range(n_variables)),
            constant=Coefficient(),
        )

    @classmethod
    def from_text(cls, cells: Sequence[str | None]) -> Equation:
        """Build from ``n_variables + 1`` cells; the last is the constant."""
        if len(cells) < 2:
            raise ValidationError(
                f"equation needs at least one coefficient and a constant, got {len(cells)} cells"
            )
        *coefficients, constant = cells
        return cls(
            coefficients=tuple(Coefficient.from_text(c) for c in coefficients),
            constant=Coefficient.from_text(constant),
        )

    @property
    def n_variables(self) -> int:
        return len(self.coefficients)

    @property
    def cells(self) -> tuple[Coefficient, ...]:
        """Coefficients followed by the constant."""
        return self.coefficients + (self.constant,)

    def replace_cell(self, column: int, cell: Coefficient) -> Equation:
        """Copy with one cell swapped; ``column == n_variables`` is the constant."""
        if column == self.n_variables:
            return Equation(coefficients=self.coefficients, constant=cell)
        coefficients = list(self.coefficients)
        coefficients[column] = cell
        return Equation(coefficients=tuple(coefficients), constant=self.constant)

    def parse_errors(self, row: int | None = None) -> list[ParseError]:
        """Errors for every non-blank cell that failed to parse, left to right."""
        errors = []
        for column, cell in enumerate(self.coefficients):
            if not cell.is_valid:
                errors.append(ParseError.for_cell(cell.text, 'coefficient', row, column))
        if not self.constant.is_valid:
            errors.append(ParseError.for_cell(self.constant.text, 'constant', row, None))
        return errors


@dataclass(frozen=True)
class SystemDesign:
    """
    Linear system specification.

    Holds ``n_equations`` equations over ``n_variables`` unknowns, both
    at least 1 and fixed for the life of the design.

    Construction:
        SystemDesign.reshape(2, 3)                      # blank 2 x 3 grid
        SystemDesign.from_text([['1', '1', '3'],
                                ['1', '-1', '1']])      # text cells
        SystemDesign.from_arrays(A, b)                  # numeric input
    """
    _equations: tuple[Equation, ...]
    _n_equations: int
    _n_variables: int

    @classmethod
    def reshape(cls, n_equations: int, n_variables: int) -> SystemDesign:
        """
        Blank design of the given shape.

        Every cell is empty. Nothing carries over from any earlier design.
        """
        n_equations = check_count(n_equations, 'n_equations')
        n_variables = check_count(n_variables, 'n_variables')
        equations = tuple(Equation.blank(n_variables) for _ in range(n_equations))
        return cls(_equations=equations, _n_equations=n_equations, _n_variables=n_variables)

    @classmethod
    def from_text(cls, rows: Iterable[Sequence[str | None]]) -> SystemDesign:
        """
        Build from rows of raw cell text.

        Each row holds the coefficient texts followed by the constant
        text. ``None`` is read as a blank cell. Unparsable text is kept
        and reported when solving, not here.
        """
        rows = [list(row) for row in rows]
        if not rows:
            raise ValidationError("n_equations: must be at least 1, got 0")
        width = len(rows[0])
        for i, row in enumerate(rows):
            check_row_width(row, width, i, 'rows')
        return cls._build(tuple(Equation.from_text(row) for row in rows))

    @classmethod
    def from_equations(cls, equations: Iterable[Equation]) -> SystemDesign:
        return cls._build(tuple(equations))

    @classmethod
    def from_arrays(cls, coefficients: ArrayLike, constants: ArrayLike) -> SystemDesign:
        """
        Build from a numeric coefficient matrix and constant vector.

        Args:
            coefficients: (n_equations x n_variables); 1D input is one variable
            constants: (n_equations,)
        """
        A = check_array(coefficients, 'coefficients')
        b = check_array(constants, 'constants')

        if A.ndim == 1:
            A = A.reshape(-1, 1)
        if b.ndim == 2 and b.shape[1] == 1:
            b = b.ravel()

        check_2d(A, 'coefficients')
        check_1d(b, 'constants')
        check_finite(A, 'coefficients')
        check_finite(b, 'constants')
        check_consistent_length(A, b, names=('coefficients', 'constants'))

        equations = tuple(
            Equation(
                coefficients=tuple(Coefficient.from_value(float(a)) for a in row),
                constant=Coefficient.from_value(float(c)),
            )
            for row, c in zip(A, b)
        )
        return cls._build(equations)

    @classmethod
    def _build(cls, equations: tuple[Equation, ...]) -> SystemDesign:
        """Internal builder with shape validation."""
        n_equations = check_count(len(equations), 'n_equations')
        n_variables = check_count(equations[0].n_variables, 'n_variables')
        for i, eq in enumerate(equations):
            check_row_width(eq.coefficients, n_variables, i, 'coefficients')
        return cls(_equations=equations, _n_equations=n_equations, _n_variables=n_variables)

    # === Properties ===

    @property
    def equations(self) -> tuple[Equation, ...]:
        return self._equations

    @property
    def n_equations(self) -> int:
        """Number of equations (rows)."""
        return self._n_equations

    @property
    def n_variables(self) -> int:
        """Number of unknowns (coefficient columns)."""
        return self._n_variables

    @property
    def shape(self) -> tuple[int, int]:
        return (self._n_equations, self._n_variables)

    # === Editing ===

    def with_cell(self, row: int, column: int, text: str | None) -> SystemDesign:
        """
        Copy of this design with one cell's text replaced.

        ``column`` runs over the coefficients and then the constant, so
        ``column == n_variables`` addresses the constant of ``row``.
        """
        if not 0 <= row < self._n_equations:
            raise ValidationError(f"row: expected 0..{self._n_equations - 1}, got {row}")
        if not 0 <= column <= self._n_variables:
            raise ValidationError(f"column: expected 0..{self._n_variables}, got {column}")

        equations = list(self._equations)
        equations[row] = equations[row].replace_cell(column, Coefficient.from_text(text))
        return SystemDesign(
            _equations=tuple(equations),
            _n_equations=self._n_equations,
            _n_variables=self._n_variables,
        )

    # === Validation ===

    def parse_errors(self) -> tuple[ParseError, ...]:
        """All unparsable cells, in row-major order."""
        errors: list[ParseError] = []
        for i, eq in enumerate(self._equations):
            errors.extend(eq.parse_errors(row=i))
        return tuple(errors)

    def first_parse_error(self) -> ParseError | None:
        errors = self.parse_errors()
        return errors[0] if errors else None

    @property
    def is_valid(self) -> bool:
        return self.first_parse_error() is None

    # === Matrices ===

    def coefficient_matrix(self) -> NDArray[np.floating[Any]]:
        """
        Coefficients as a fresh (n_equations x n_variables) float array.

        Blank cells are 0.0.

        Raises:
            ParseError: If any coefficient cell is unparsable
        """
        self._raise_on_invalid()
        return np.array(
            [[c.as_float() for c in eq.coefficients] for eq in self._equations],
            dtype=np.float64,
        ).reshape(self._n_equations, self._n_variables)

    def constant_vector(self) -> NDArray[np.floating[Any]]:
        """Constants as a fresh (n_equations,) float array; blanks are 0.0."""
        self._raise_on_invalid()
        return np.array([eq.constant.as_float() for eq in self._equations], dtype=np.float64)

    def augmented(self) -> NDArray[np.floating[Any]]:
        """
        Augmented matrix [A | b], shape (n_equations, n_variables + 1).

        Always a new array; solving never writes back into the design.
        """
        return np.column_stack([self.coefficient_matrix(), self.constant_vector()])

    def _raise_on_invalid(self) -> None:
        error = self.first_parse_error()
        if error is not None:
            raise error

    def __repr__(self) -> str:
        invalid = len(self.parse_errors())
        suffix = f", invalid={invalid}" if invalid else ""
        return f"SystemDesign(n_equations={self._n_equations}, n_variables={self._n_variables}{suffix})"
