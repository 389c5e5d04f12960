"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Shape mismatches are type errors, raised before any arithmetic
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Numeric degeneracy is never reported by the value types themselves
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided values fail validation checks, e.g.
    non-numeric element data.
    """
    pass


class DimensionError(ValidationError):
    """
    Element data is inconsistent with the declared shape.

    Raised when a flat sequence has the wrong number of elements for
    the matrix class it is given to, or nested rows are ragged.
    """
    pass


class ShapeError(PyMatrixError, TypeError):
    """
    Operand shapes are incompatible at the type level.

    Shape is part of a matrix's class, so combining incompatible shapes
    (adding a 3x2 to a 2x3, multiplying with mismatched inner dimensions,
    asking a non-square matrix for its inverse) is a type error. It is
    raised at the operation boundary, before any element is touched.

    Attributes:
        expected: Shape (or description) the operation required
        actual: Shape the operation received
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | str | None = None,
        actual: tuple[int, ...] | str | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Only raised by the diagnostic solver layer when explicitly asked to
    (invert(..., strict=True)). Matrix.inverse() never raises it.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Number of pivots found during elimination
        expected_rank: Rank required for invertibility (the matrix order)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank
