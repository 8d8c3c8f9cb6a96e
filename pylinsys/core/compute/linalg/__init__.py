"""
Linear algebra kernels for PyLinSys.

All functions follow these conventions:
    - Inputs are float64 NumPy arrays and are never modified in place
    - Each operation returns a structured result dataclass
    - Degenerate systems are reported in the result, not raised

Submodules:
    gauss: Gauss-Jordan elimination with partial pivoting
"""

from pylinsys.core.compute.linalg.gauss import (
    EliminationResult,
    ExtractionResult,
    gauss_jordan,
    extract_solution,
    max_residual,
)

__all__ = [
    "EliminationResult",
    "ExtractionResult",
    "gauss_jordan",
    "extract_solution",
    "max_residual",
]
