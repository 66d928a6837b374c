"""
Elimination — обращение Гаусса-Жордана и решение СЛАУ методом Гаусса

Оба алгоритма работают без выбора главного элемента (без перестановки
строк). Нулевой диагональный пивот — ошибка, даже если матрица
невырождена и перестановка строк её бы устранила. Это известное
ограничение; результаты для матриц без нулевых пивотов совпадают
бит-в-бит с эталонными.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входные матрицы не изменяются; рабочая копия — локальные списки
2. Пивоты обрабатываются строго по возрастанию индекса
3. Обратная подстановка — строго по убыванию индекса
4. Сравнение пивота с нулём точное (без epsilon)
"""

import logging
from decimal import Decimal
from typing import List, Tuple

from decimatrix.core.domain.errors import (
    DivideByZeroError,
    IncompatibleDimensionsError,
    NotSquareError,
    SingularMatrixError,
)
from decimatrix.core.domain.matrix import Matrix, MatrixLike, as_matrix
from decimatrix.core.math.codec import quad_to_string
from decimatrix.core.math.quad import (
    QUAD_ONE,
    QUAD_ZERO,
    is_zero,
    quad_div,
    quad_mul,
    quad_sub,
)

_LOG: logging.Logger = logging.getLogger(__name__)


# =============================================================================
# ОБРАЩЕНИЕ (GAUSS-JORDAN)
# =============================================================================


def invert_matrix(m: MatrixLike) -> Matrix:
    """
    Обратная матрица методом Гаусса-Жордана.

    Строится расширенная матрица [m | I] размера n x 2n. Для каждого пивота i:
    1. augmented[i][i] == 0 → SingularMatrixError
    2. строка i делится на пивот
    3. из всех остальных строк r вычитается factor * строка i,
       где factor = augmented[r][i]
    Правая половина после обработки всех пивотов — обратная матрица.

    Args:
        m: Квадратная матрица n x n

    Returns:
        Обратная матрица n x n

    Raises:
        NotSquareError: Если rows != cols
        SingularMatrixError: Если встретился нулевой пивот
    """
    source = as_matrix(m)
    if not source.is_square:
        raise NotSquareError(source.rows, source.cols)

    n = source.rows
    augmented: List[List[Decimal]] = [
        list(row) + [QUAD_ONE if i == j else QUAD_ZERO for j in range(n)]
        for i, row in enumerate(source.data)
    ]

    for i in range(n):
        pivot_row = augmented[i]
        pivot = pivot_row[i]
        if is_zero(pivot):
            raise SingularMatrixError(i)

        for j in range(2 * n):
            pivot_row[j] = quad_div(pivot_row[j], pivot)

        for r in range(n):
            if r == i:
                continue
            row = augmented[r]
            factor = row[i]
            for j in range(2 * n):
                row[j] = quad_sub(row[j], quad_mul(factor, pivot_row[j]))

    _LOG.debug("invert_matrix: inverted %dx%d matrix", n, n)
    data = tuple(tuple(row[n:]) for row in augmented)
    return Matrix(rows=n, cols=n, data=data)


# =============================================================================
# РЕШЕНИЕ СЛАУ (GAUSS)
# =============================================================================


def perform_gaussian_elimination(augmented_matrix: MatrixLike) -> Tuple[Decimal, ...]:
    """
    Решение системы A x = b по расширенной матрице [A | b].

    Прямой ход: для каждого пивота i из всех строк ниже вычитается
    ratio * строка i (ratio = row[i] / pivot), включая столбец b.
    Обратный ход: x[i] = (b[i] - sum_{j>i} a[i][j] * x[j]) / a[i][i]
    для i = n-1..0.

    Args:
        augmented_matrix: Матрица n x (n+1), последний столбец — правая часть

    Returns:
        Неизвестные x[0..n-1] как Quad

    Raises:
        IncompatibleDimensionsError: Если cols != rows + 1
        DivideByZeroError: Если встретился нулевой пивот
    """
    source = as_matrix(augmented_matrix)
    n = source.rows
    if source.cols != n + 1:
        raise IncompatibleDimensionsError(
            source.shape, (n, 1), reason="augmented matrix must have rows + 1 columns"
        )

    work: List[List[Decimal]] = [list(row) for row in source.data]

    for i in range(n):
        pivot_row = work[i]
        pivot = pivot_row[i]
        if is_zero(pivot):
            raise DivideByZeroError(i)

        for r in range(i + 1, n):
            row = work[r]
            ratio = quad_div(row[i], pivot)
            for j in range(n + 1):
                row[j] = quad_sub(row[j], quad_mul(ratio, pivot_row[j]))

    solution: List[Decimal] = [QUAD_ZERO] * n
    for i in range(n - 1, -1, -1):
        row = work[i]
        acc = row[n]
        for j in range(i + 1, n):
            acc = quad_sub(acc, quad_mul(row[j], solution[j]))
        solution[i] = quad_div(acc, row[i])

    _LOG.debug("perform_gaussian_elimination: solved system of %d unknowns", n)
    return tuple(solution)


def gaussian_elimination(augmented_matrix: MatrixLike) -> Tuple[str, ...]:
    """
    Решение системы [A | b] в канонической текстовой форме.

    Raises:
        IncompatibleDimensionsError: Если cols != rows + 1
        DivideByZeroError: Если встретился нулевой пивот

    Examples:
        >>> gaussian_elimination(create_matrix("[(2,1,5),(1,3,10)]"))
        ('1.00', '3.00')
    """
    return tuple(quad_to_string(x) for x in perform_gaussian_elimination(augmented_matrix))
