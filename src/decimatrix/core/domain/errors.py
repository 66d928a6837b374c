"""
Matrix Errors — таксономия ошибок матричного движка

Каждая ошибка прерывает текущий вызов без частичного эффекта.
Атрибуты исключений несут контекст нарушения (размерности, индексы),
чтобы вызывающий код различал случаи без разбора текста сообщения.

Каждый класс, кроме MatrixError, также наследует встроенное исключение
с тем же смыслом:
- ValueError: формат литерала и размерности операндов
- IndexError: индекс вне матрицы
- ZeroDivisionError: нулевой пивот (обращение и решение СЛАУ)
- OverflowError: значение вне диапазона decimal128
"""

from typing import Tuple

Shape = Tuple[int, int]


class MatrixError(Exception):
    """Базовая ошибка матричного движка."""
    pass


# =============================================================================
# ОШИБКИ ЛИТЕРАЛОВ
# =============================================================================


class InvalidFormatError(MatrixError, ValueError):
    """Литерал не обрамлён внешними скобками `[` и `]`."""

    def __init__(self, literal: str):
        self.literal = literal
        super().__init__(f"literal must start with '[' and end with ']': {literal!r}")


class InconsistentColumnsError(MatrixError, ValueError):
    """Строка литерала содержит иное число элементов, чем первая строка."""

    def __init__(self, row: int, expected: int, actual: int):
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(f"row {row} has {actual} elements, expected {expected}")


# =============================================================================
# ОШИБКИ РАЗМЕРНОСТЕЙ
# =============================================================================


class InvalidDimensionError(MatrixError, ValueError):
    """Запрошено нулевое число строк или столбцов."""

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        super().__init__(f"matrix dimensions must be positive, got {rows}x{cols}")


class IndexOutOfBoundsError(MatrixError, IndexError):
    """Индекс строки/столбца вне размеров матрицы."""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        self.row = row
        self.col = col
        self.rows = rows
        self.cols = cols
        super().__init__(f"index ({row}, {col}) out of bounds for {rows}x{cols} matrix")


class DimensionMismatchError(MatrixError, ValueError):
    """Операнды сложения/вычитания имеют разную форму."""

    def __init__(self, left: Shape, right: Shape):
        self.left = left
        self.right = right
        super().__init__(
            f"shape mismatch: {left[0]}x{left[1]} vs {right[0]}x{right[1]}"
        )


class IncompatibleDimensionsError(MatrixError, ValueError):
    """Внутренние размерности операндов не совпадают."""

    def __init__(self, left: Shape, right: Shape, reason: str = "left.cols != right.rows"):
        self.left = left
        self.right = right
        self.reason = reason
        super().__init__(
            f"incompatible dimensions {left[0]}x{left[1]} and {right[0]}x{right[1]} ({reason})"
        )


class NotSquareError(MatrixError, ValueError):
    """Обращение неквадратной матрицы."""

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        super().__init__(f"matrix must be square, got {rows}x{cols}")


# =============================================================================
# ОШИБКИ ИСКЛЮЧЕНИЯ (НУЛЕВОЙ ПИВОТ)
# =============================================================================


class SingularMatrixError(MatrixError, ZeroDivisionError):
    """
    Нулевой пивот при обращении.

    Перестановка строк не выполняется: матрица, которой нужен обмен строк,
    тоже сообщается как сингулярная.
    """

    def __init__(self, pivot: int):
        self.pivot = pivot
        super().__init__(f"matrix is singular: zero pivot at ({pivot}, {pivot})")


class DivideByZeroError(MatrixError, ZeroDivisionError):
    """Нулевой пивот при решении системы методом Гаусса."""

    def __init__(self, pivot: int):
        self.pivot = pivot
        super().__init__(f"division by zero: zero pivot at ({pivot}, {pivot})")


# =============================================================================
# ОШИБКИ ДИАПАЗОНА
# =============================================================================


class QuadOverflowError(MatrixError, OverflowError):
    """
    Значение не представимо в decimal128 (|x| > 9.99...E+6144).

    Возникает при записи элемента в матрицу и при разборе текста,
    чьё значение (или дробный масштаб) выходит за диапазон.
    """

    def __init__(self, value: str):
        self.value = value
        shown = value if len(value) <= 40 else value[:37] + "..."
        super().__init__(f"value out of decimal128 range: {shown}")
