"""
Matrix Engine — операции над матрицами

Все операции, кроме update_matrix_value и clear_matrix, чистые.
"""

from decimatrix.engine.arithmetic import (
    add_matrices,
    create_identity_matrix,
    multiply_matrices,
    subtract_matrices,
    transpose_matrix,
)
from decimatrix.engine.documents import matrix_from_document, matrix_to_document
from decimatrix.engine.elimination import (
    gaussian_elimination,
    invert_matrix,
    perform_gaussian_elimination,
)
from decimatrix.engine.literals import (
    clear_matrix,
    create_empty_matrix,
    create_matrix,
    create_vector,
    get_matrix,
    new_handle,
    read_matrix_quad,
    read_matrix_value,
    update_matrix_value,
)

__all__ = [
    # Creation
    "create_empty_matrix",
    "create_identity_matrix",
    "create_matrix",
    "create_vector",
    "new_handle",
    # Access / mutation
    "clear_matrix",
    "get_matrix",
    "read_matrix_quad",
    "read_matrix_value",
    "update_matrix_value",
    # Arithmetic
    "add_matrices",
    "subtract_matrices",
    "multiply_matrices",
    "transpose_matrix",
    # Elimination
    "invert_matrix",
    "perform_gaussian_elimination",
    "gaussian_elimination",
    # Documents
    "matrix_to_document",
    "matrix_from_document",
]
