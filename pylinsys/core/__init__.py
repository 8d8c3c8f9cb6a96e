"""
Core infrastructure for PyLinSys.

This module provides shared abstractions, utilities, and numeric
infrastructure used by the domain-specific submodules.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerance constants, elimination kernels
"""

from pylinsys.core.protocols import Backend
from pylinsys.core.result import Result
from pylinsys.core.exceptions import (
    PyLinSysError,
    ValidationError,
    DimensionError,
    ParseError,
    NumericalError,
    InconsistentSystemError,
    UnderdeterminedSystemError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLinSysError",
    "ValidationError",
    "DimensionError",
    "ParseError",
    "NumericalError",
    "InconsistentSystemError",
    "UnderdeterminedSystemError",
]
