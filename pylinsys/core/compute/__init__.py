"""
Shared compute infrastructure for PyLinSys.

This module provides timing utilities, tolerance constants and linear
algebra kernels that are shared across domain-specific backends.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Zero and verification thresholds
    linalg: Linear algebra kernels (Gauss-Jordan elimination)
"""

from pylinsys.core.compute.timing import Timer
from pylinsys.core.compute.tolerances import (
    ZERO_TOLERANCE,
    VERIFY_TOLERANCE,
    MAX_DENOMINATOR,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ZERO_TOLERANCE",
    "VERIFY_TOLERANCE",
    "MAX_DENOMINATOR",
]
