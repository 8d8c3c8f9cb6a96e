"""
Linear system backends.

Available backends:
    CPUGaussBackend: CPU reference implementation using Gauss-Jordan elimination
"""

from pylinsys.linsys.backends.cpu import CPUGaussBackend

__all__ = [
    "CPUGaussBackend",
]
