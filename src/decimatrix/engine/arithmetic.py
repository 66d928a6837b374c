"""
Matrix Arithmetic — сложение, вычитание, умножение, транспонирование

Все операции чистые: аргументы не изменяются, результат — новая Matrix.
Проверки размерностей выполняются до любых вычислений.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Поэлементная арифметика только через quad-примитив (decimal128)
2. Скалярное произведение накапливается от Quad-нуля в порядке
   возрастания индекса (порядок влияет на округление)
"""

import logging
from decimal import Decimal
from typing import Callable, List

from decimatrix.core.domain.errors import (
    DimensionMismatchError,
    IncompatibleDimensionsError,
    InvalidDimensionError,
)
from decimatrix.core.domain.matrix import Matrix, MatrixLike, as_matrix
from decimatrix.core.math.quad import QUAD_ONE, QUAD_ZERO, quad_add, quad_mul, quad_sub

_LOG: logging.Logger = logging.getLogger(__name__)


def _elementwise(
    a: MatrixLike, b: MatrixLike, op: Callable[[Decimal, Decimal], Decimal]
) -> Matrix:
    left = as_matrix(a)
    right = as_matrix(b)
    if left.shape != right.shape:
        raise DimensionMismatchError(left.shape, right.shape)

    data = tuple(
        tuple(op(x, y) for x, y in zip(row_a, row_b))
        for row_a, row_b in zip(left.data, right.data)
    )
    return Matrix(rows=left.rows, cols=left.cols, data=data)


def add_matrices(a: MatrixLike, b: MatrixLike) -> Matrix:
    """
    Поэлементная сумма a + b.

    Raises:
        DimensionMismatchError: Если формы a и b различаются
    """
    return _elementwise(a, b, quad_add)


def subtract_matrices(a: MatrixLike, b: MatrixLike) -> Matrix:
    """
    Поэлементная разность a - b.

    Raises:
        DimensionMismatchError: Если формы a и b различаются
    """
    return _elementwise(a, b, quad_sub)


def multiply_matrices(a: MatrixLike, b: MatrixLike) -> Matrix:
    """
    Матричное произведение a x b.

    result[i][j] = sum_k a[i][k] * b[k][j], k = 0..a.cols-1 по возрастанию.

    Args:
        a: Матрица m x n
        b: Матрица n x p

    Returns:
        Матрица m x p

    Raises:
        IncompatibleDimensionsError: Если a.cols != b.rows
    """
    left = as_matrix(a)
    right = as_matrix(b)
    if left.cols != right.rows:
        raise IncompatibleDimensionsError(left.shape, right.shape)

    _LOG.debug(
        "multiply_matrices: %dx%d by %dx%d", left.rows, left.cols, right.rows, right.cols
    )
    data: List[tuple] = []
    for i in range(left.rows):
        row: List[Decimal] = []
        for j in range(right.cols):
            total = QUAD_ZERO
            for k in range(left.cols):
                total = quad_add(total, quad_mul(left.data[i][k], right.data[k][j]))
            row.append(total)
        data.append(tuple(row))
    return Matrix(rows=left.rows, cols=right.cols, data=tuple(data))


def transpose_matrix(m: MatrixLike) -> Matrix:
    """Транспонирование: result[j][i] = m[i][j], форма cols x rows."""
    source = as_matrix(m)
    data = tuple(
        tuple(source.data[i][j] for i in range(source.rows)) for j in range(source.cols)
    )
    return Matrix(rows=source.cols, cols=source.rows, data=data)


def create_identity_matrix(n: int) -> Matrix:
    """
    Единичная матрица n x n.

    Raises:
        InvalidDimensionError: Если n == 0
    """
    if n <= 0:
        raise InvalidDimensionError(n, n)
    data = tuple(
        tuple(QUAD_ONE if i == j else QUAD_ZERO for j in range(n)) for i in range(n)
    )
    return Matrix(rows=n, cols=n, data=data)
