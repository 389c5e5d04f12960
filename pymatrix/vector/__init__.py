"""
Vector types.

Public API:
    Vector[N, dtype]  - N x 1 matrix with vector algebra
    Vector3           - Mutable (x, y, z) struct
    Vector2           - Mutable (x, y) struct
"""

from pymatrix.vector.vector import Vector
from pymatrix.vector.vector3 import Vector3
from pymatrix.vector.vector2 import Vector2

__all__ = [
    "Vector",
    "Vector3",
    "Vector2",
]
