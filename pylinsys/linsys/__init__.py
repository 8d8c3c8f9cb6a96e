"""
Systems of linear equations.

Solves A x = b over decimal and fractional input using Gauss-Jordan
elimination with partial pivoting, and renders the answer back as
integers or simplified fractions.

Public API:
    solve(A, b)           - Numeric coefficients and constants
    solve_text(rows)      - Grid of cell text ("1/2", "-0.25", "")
    solve_design(design)  - Prepared SystemDesign
    parse_number(text)    - Cell text -> Fraction
    format_value(x)       - Float -> "3", "1/2", "1,234/5"

Every solver returns a SystemSolution. Failures ('invalid_input',
'inconsistent', 'underdetermined') are reported through its ``status``
and ``error`` rather than raised.

Example:
    >>> from pylinsys.linsys import solve_text
    >>> result = solve_text([['2', '1']])
    >>> result.formatted
    ('1/2',)
"""

from pylinsys.linsys._parser import Coefficient, parse_number
from pylinsys.linsys._format import format_value, format_values, exact_text, group_digits, to_fraction
from pylinsys.linsys.design import Equation, SystemDesign
from pylinsys.linsys.solution import SystemParams, SystemSolution
from pylinsys.linsys.solvers import solve, solve_text, solve_design

__all__ = [
    "solve",
    "solve_text",
    "solve_design",
    "parse_number",
    "format_value",
    "format_values",
    "exact_text",
    "group_digits",
    "to_fraction",
    "Coefficient",
    "Equation",
    "SystemDesign",
    "SystemParams",
    "SystemSolution",
]
