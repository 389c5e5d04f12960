"""Solver backends for elimination and inversion."""

from pymatrix.matrix.backends.cpu import CPUGaussJordanBackend, CPUInverseBackend

__all__ = [
    "CPUGaussJordanBackend",
    "CPUInverseBackend",
]
