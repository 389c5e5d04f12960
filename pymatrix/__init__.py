"""
pymatrix: fixed-shape matrices, vectors and quaternions for Python.

Shapes are part of the type. Matrix[3, 2] and Matrix[2, 3] are distinct
classes, and combining incompatible shapes raises ShapeError (a
TypeError) before any arithmetic happens.

Submodules:
    matrix: Matrix value type, Gauss-Jordan elimination and inversion
    vector: Vector[N], Vector3 and Vector2
    quaternion: Quaternion rotations
    core: Exceptions, result envelope, precision and tolerance helpers

Concurrency:
    Values share no state, so independent values may be used from
    several threads. A single value mutated in place (gauss(), fill(),
    item assignment, compound operators) must be guarded by the caller.
"""

__version__ = "0.1.0"

from pymatrix.matrix import Matrix, reduce, invert
from pymatrix.vector import Vector, Vector3, Vector2
from pymatrix.quaternion import Quaternion
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    ShapeError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    "__version__",
    # Value types
    "Matrix",
    "Vector",
    "Vector3",
    "Vector2",
    "Quaternion",
    # Diagnostic solvers
    "reduce",
    "invert",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "ShapeError",
    "NumericalError",
    "SingularMatrixError",
]
