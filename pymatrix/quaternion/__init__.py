"""
Quaternion rotations.

Public API:
    Quaternion(s, v)  - Scalar part s, Vector3 part v
"""

from pymatrix.quaternion.quaternion import Quaternion

__all__ = [
    "Quaternion",
]
