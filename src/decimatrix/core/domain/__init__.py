"""
Domain models and value objects.

Matrix (immutable), MatrixHandle (mutable) и таксономия ошибок.
"""

from decimatrix.core.domain.errors import (
    DimensionMismatchError,
    DivideByZeroError,
    IncompatibleDimensionsError,
    InconsistentColumnsError,
    IndexOutOfBoundsError,
    InvalidDimensionError,
    InvalidFormatError,
    MatrixError,
    NotSquareError,
    QuadOverflowError,
    SingularMatrixError,
)
from decimatrix.core.domain.matrix import Matrix, MatrixHandle, MatrixLike, as_matrix

__all__ = [
    # Models
    "Matrix",
    "MatrixHandle",
    "MatrixLike",
    "as_matrix",
    # Errors
    "MatrixError",
    "InvalidFormatError",
    "InconsistentColumnsError",
    "InvalidDimensionError",
    "IndexOutOfBoundsError",
    "DimensionMismatchError",
    "IncompatibleDimensionsError",
    "NotSquareError",
    "SingularMatrixError",
    "DivideByZeroError",
    "QuadOverflowError",
]
