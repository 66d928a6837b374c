"""
Matrix Literals — создание, чтение и изменение матриц

Грамматика литерала:
    матрица: [(v,v,...),(v,v,...),...]
    вектор:  [v,v,...]  → столбец N x 1

Разбор: внешние скобки снимаются, остаток режется по "),(" на строки,
каждая строка — по "," на элементы, каждый элемент — через codec.
Остатки скобок в крайних элементах codec пропускает сам.
"""

import logging
from decimal import Decimal
from typing import Final, Union

from decimatrix.core.domain.errors import (
    InconsistentColumnsError,
    InvalidFormatError,
)
from decimatrix.core.domain.matrix import Matrix, MatrixHandle, MatrixLike, as_matrix
from decimatrix.core.math.codec import quad_to_string, string_to_quad
from decimatrix.core.text.tokenizer import split, substring

_LOG: logging.Logger = logging.getLogger(__name__)

# =============================================================================
# ГРАММАТИКА ЛИТЕРАЛОВ
# =============================================================================

LITERAL_OPEN: Final[str] = "["
LITERAL_CLOSE: Final[str] = "]"
ROW_OPEN: Final[str] = "("
ROW_CLOSE: Final[str] = ")"
ROW_DELIMITER: Final[str] = "),("
ELEMENT_DELIMITER: Final[str] = ","


def _strip_brackets(literal: str) -> str:
    if len(literal) < 2 or not literal.startswith(LITERAL_OPEN) or not literal.endswith(LITERAL_CLOSE):
        raise InvalidFormatError(literal)
    return substring(literal, 1, len(literal) - 2)


# =============================================================================
# СОЗДАНИЕ
# =============================================================================


def create_empty_matrix(rows: int, cols: int) -> Matrix:
    """
    Матрица rows x cols из нулей.

    Raises:
        InvalidDimensionError: Если rows == 0 или cols == 0
    """
    return Matrix.zeros(rows, cols)


def create_matrix(literal: str) -> Matrix:
    """
    Разбор матричного литерала.

    Число столбцов фиксируется по первой строке; остальные строки
    обязаны иметь столько же элементов.

    Args:
        literal: Например "[(1,2),(3,4)]"

    Returns:
        Новая Matrix

    Raises:
        InvalidFormatError: Нет внешних скобок [ ]
        InconsistentColumnsError: Строка с иным числом элементов

    Examples:
        >>> create_matrix("[(1,2),(3,4)]").shape
        (2, 2)
    """
    inner = _strip_brackets(literal)
    row_texts = split(inner, ROW_DELIMITER)
    num_cols = len(split(row_texts[0], ELEMENT_DELIMITER))

    data = []
    for index, row_text in enumerate(row_texts):
        elements = split(row_text, ELEMENT_DELIMITER)
        if len(elements) != num_cols:
            raise InconsistentColumnsError(index, num_cols, len(elements))
        data.append(tuple(string_to_quad(element) for element in elements))

    _LOG.debug("create_matrix: parsed %dx%d literal", len(data), num_cols)
    return Matrix(rows=len(data), cols=num_cols, data=tuple(data))


def create_vector(literal: str) -> Matrix:
    """
    Разбор векторного литерала [v1,v2,...] в столбец N x 1.

    Каждое значение оборачивается в отдельную строку "(v)",
    после чего литерал разбирается как матричный.

    Raises:
        InvalidFormatError: Нет внешних скобок [ ]
    """
    inner = _strip_brackets(literal)
    wrapped = ELEMENT_DELIMITER.join(
        ROW_OPEN + value + ROW_CLOSE for value in split(inner, ELEMENT_DELIMITER)
    )
    return create_matrix(LITERAL_OPEN + wrapped + LITERAL_CLOSE)


# =============================================================================
# ЧТЕНИЕ / СЕРИАЛИЗАЦИЯ
# =============================================================================


def get_matrix(matrix: MatrixLike) -> str:
    """
    Каноническая текстовая форма "[(v1,v2),(v3,v4)]".

    Очищенный MatrixHandle сериализуется как "[]".
    """
    if isinstance(matrix, MatrixHandle) and matrix.is_cleared:
        return LITERAL_OPEN + LITERAL_CLOSE

    rows = (
        ROW_OPEN + ELEMENT_DELIMITER.join(quad_to_string(value) for value in row) + ROW_CLOSE
        for row in as_matrix(matrix).data
    )
    return LITERAL_OPEN + ELEMENT_DELIMITER.join(rows) + LITERAL_CLOSE


def read_matrix_quad(matrix: MatrixLike, row: int, col: int) -> Decimal:
    """
    Raises:
        IndexOutOfBoundsError: Если (row, col) вне матрицы
    """
    if isinstance(matrix, MatrixHandle):
        return matrix.read(row, col)
    return matrix.element(row, col)


def read_matrix_value(matrix: MatrixLike, row: int, col: int) -> str:
    """
    Элемент (row, col) в канонической текстовой форме.

    Raises:
        IndexOutOfBoundsError: Если (row, col) вне матрицы
    """
    return quad_to_string(read_matrix_quad(matrix, row, col))


# =============================================================================
# ИЗМЕНЕНИЕ НА МЕСТЕ (только MatrixHandle)
# =============================================================================


def update_matrix_value(
    handle: MatrixHandle, row: int, col: int, value: Union[Decimal, str]
) -> None:
    """
    Замена элемента (row, col).

    Строковое значение разбирается через codec; значение любого вида
    округляется до decimal128. Все проверки выполняются до изменения.

    Raises:
        IndexOutOfBoundsError: Если (row, col) вне матрицы
        QuadOverflowError: Если значение вне диапазона decimal128
    """
    quad = string_to_quad(value) if isinstance(value, str) else value
    handle.update(row, col, quad)


def clear_matrix(handle: MatrixHandle) -> None:
    """Сброс handle: данные удаляются, rows = cols = 0."""
    handle.clear()


def new_handle(rows: int, cols: int) -> MatrixHandle:
    """
    Handle с нулевой матрицей rows x cols.

    Raises:
        InvalidDimensionError: Если rows == 0 или cols == 0
    """
    return MatrixHandle(create_empty_matrix(rows, cols))
