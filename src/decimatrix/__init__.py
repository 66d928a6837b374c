"""
decimatrix — детерминированная матричная арифметика на decimal128

Матрицы Quad-значений (IEEE 754-2008 decimal128), текстовые литералы
"[(1,2),(3,4)]", сложение, вычитание, умножение, транспонирование,
обращение Гаусса-Жордана и решение СЛАУ методом Гаусса.
"""

from decimatrix.core.domain import (
    DimensionMismatchError,
    DivideByZeroError,
    IncompatibleDimensionsError,
    InconsistentColumnsError,
    IndexOutOfBoundsError,
    InvalidDimensionError,
    InvalidFormatError,
    Matrix,
    MatrixError,
    MatrixHandle,
    NotSquareError,
    QuadOverflowError,
    SingularMatrixError,
)
from decimatrix.core.math import quad_to_string, string_to_quad, uint_to_string
from decimatrix.engine import (
    add_matrices,
    clear_matrix,
    create_empty_matrix,
    create_identity_matrix,
    create_matrix,
    create_vector,
    gaussian_elimination,
    get_matrix,
    invert_matrix,
    matrix_from_document,
    matrix_to_document,
    multiply_matrices,
    new_handle,
    perform_gaussian_elimination,
    read_matrix_quad,
    read_matrix_value,
    subtract_matrices,
    transpose_matrix,
    update_matrix_value,
)

__version__ = "0.1.0"

__all__ = [
    # Models
    "Matrix",
    "MatrixHandle",
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
    # Codec
    "quad_to_string",
    "string_to_quad",
    "uint_to_string",
    # Engine
    "create_empty_matrix",
    "create_identity_matrix",
    "create_matrix",
    "create_vector",
    "new_handle",
    "clear_matrix",
    "get_matrix",
    "read_matrix_quad",
    "read_matrix_value",
    "update_matrix_value",
    "add_matrices",
    "subtract_matrices",
    "multiply_matrices",
    "transpose_matrix",
    "invert_matrix",
    "perform_gaussian_elimination",
    "gaussian_elimination",
    "matrix_to_document",
    "matrix_from_document",
]
