"""
PyLinSys: systems of linear equations from decimal and fractional text.

Gauss-Jordan elimination with partial pivoting over float64, with exact
parsing of cell text on the way in and simplified fractions on the way
out.

Submodules:
    linsys: Parsing, system designs, solvers and result formatting
    core: Exceptions, Result envelope, validation, elimination kernels
"""

import logging

__version__ = "0.1.0"
__author__ = "Hai-Shuo"
__email__ = "contact@sgcx.org"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from pylinsys import linsys
from pylinsys.linsys import solve, solve_text, solve_design, SystemDesign, SystemSolution

__all__ = [
    "__version__",
    "linsys",
    "solve",
    "solve_text",
    "solve_design",
    "SystemDesign",
    "SystemSolution",
]
