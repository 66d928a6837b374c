"""
Matrix — модель матрицы Quad-значений

Две формы доступа:
- Matrix: immutable Pydantic модель (frozen=True). Результат и аргумент
  всех чистых операций (add, subtract, multiply, transpose, invert, solve).
- MatrixHandle: изменяемая ссылка, удерживаемая вызывающим кодом.
  Только она поддерживает update и clear.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. rows >= 1, cols >= 1 для любого Matrix
2. len(data) == rows, len(data[i]) == cols
3. Matrix никогда не изменяется на месте; MatrixHandle заменяет ссылку
   целиком только после всех проверок (all-or-nothing)
4. Очищенный MatrixHandle имеет rows == cols == 0 и не содержит данных
5. Каждый элемент — значение decimal128: при построении Matrix элементы
   округляются до 34 цифр, значения вне диапазона — QuadOverflowError
"""

from decimal import Decimal, Overflow
from typing import Iterable, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from decimatrix.core.domain.errors import (
    IndexOutOfBoundsError,
    InvalidDimensionError,
    QuadOverflowError,
)
from decimatrix.core.math.quad import QUAD_ZERO, quad_round


# =============================================================================
# MATRIX VALUE
# =============================================================================


class Matrix(BaseModel):
    """
    Immutable матрица Quad-значений.

    Все изменения создают новый экземпляр (см. with_element).
    """

    rows: int = Field(..., ge=1, description="Число строк")
    cols: int = Field(..., ge=1, description="Число столбцов")
    data: Tuple[Tuple[Decimal, ...], ...] = Field(
        ..., description="Элементы по строкам (rows x cols)"
    )

    model_config = {"frozen": True}

    @field_validator("data")
    @classmethod
    def round_to_quad(
        cls, v: Tuple[Tuple[Decimal, ...], ...]
    ) -> Tuple[Tuple[Decimal, ...], ...]:
        """
        Каждый элемент приводится к decimal128.

        Raises:
            QuadOverflowError: Элемент больше наибольшего конечного decimal128
        """
        rounded = []
        for row in v:
            values = []
            for x in row:
                try:
                    values.append(quad_round(x))
                except Overflow as e:
                    raise QuadOverflowError(str(x)) from e
            rounded.append(tuple(values))
        return tuple(rounded)

    @model_validator(mode="after")
    def validate_shape(self) -> "Matrix":
        """Форма data должна совпадать с rows x cols."""
        if len(self.data) != self.rows:
            raise ValueError(f"data has {len(self.data)} rows, expected {self.rows}")
        for index, row in enumerate(self.data):
            if len(row) != self.cols:
                raise ValueError(f"row {index} has {len(row)} elements, expected {self.cols}")
        return self

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Matrix":
        """Матрица rows x cols из Quad-нулей."""
        if rows <= 0 or cols <= 0:
            raise InvalidDimensionError(rows, cols)
        row = (QUAD_ZERO,) * cols
        return cls(rows=rows, cols=cols, data=(row,) * rows)

    @classmethod
    def from_rows(cls, rows: Sequence[Iterable[Decimal]]) -> "Matrix":
        """
        Построение из последовательности строк.

        Форма выводится из данных; несогласованные строки отклоняются
        валидатором модели.
        """
        data = tuple(tuple(row) for row in rows)
        if not data or not data[0]:
            raise InvalidDimensionError(len(data), len(data[0]) if data else 0)
        return cls(rows=len(data), cols=len(data[0]), data=data)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def check_index(self, row: int, col: int) -> None:
        """
        Raises:
            IndexOutOfBoundsError: Если (row, col) вне матрицы
        """
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexOutOfBoundsError(row, col, self.rows, self.cols)

    def element(self, row: int, col: int) -> Decimal:
        self.check_index(row, col)
        return self.data[row][col]

    def row(self, index: int) -> Tuple[Decimal, ...]:
        self.check_index(index, 0)
        return self.data[index]

    def column(self, index: int) -> Tuple[Decimal, ...]:
        self.check_index(0, index)
        return tuple(row[index] for row in self.data)

    def with_element(self, row: int, col: int, value: Decimal) -> "Matrix":
        """
        Новая матрица с заменённым элементом (row, col).

        Raises:
            IndexOutOfBoundsError: Если (row, col) вне матрицы
            QuadOverflowError: Если value вне диапазона decimal128
        """
        self.check_index(row, col)
        updated = list(self.data[row])
        updated[col] = value
        data = self.data[:row] + (tuple(updated),) + self.data[row + 1:]
        return Matrix(rows=self.rows, cols=self.cols, data=data)


# =============================================================================
# MUTABLE HANDLE
# =============================================================================


class MatrixHandle:
    """
    Изменяемая ссылка на Matrix.

    Хранит текущее значение и подменяет его целиком при update,
    поэтому ранее выданные снапшоты (Matrix) никогда не меняются.
    """

    def __init__(self, matrix: Optional[Matrix] = None):
        self._matrix = matrix

    def __repr__(self) -> str:
        return f"MatrixHandle({self.rows}x{self.cols})"

    @property
    def rows(self) -> int:
        return self._matrix.rows if self._matrix is not None else 0

    @property
    def cols(self) -> int:
        return self._matrix.cols if self._matrix is not None else 0

    @property
    def is_cleared(self) -> bool:
        return self._matrix is None

    def snapshot(self) -> Matrix:
        """
        Текущее immutable значение.

        Raises:
            InvalidDimensionError: Если handle очищен
        """
        if self._matrix is None:
            raise InvalidDimensionError(0, 0)
        return self._matrix

    def read(self, row: int, col: int) -> Decimal:
        if self._matrix is None:
            raise IndexOutOfBoundsError(row, col, 0, 0)
        return self._matrix.element(row, col)

    def update(self, row: int, col: int, value: Decimal) -> None:
        """
        Замена элемента на месте.

        Raises:
            IndexOutOfBoundsError: Если (row, col) вне матрицы
                (включая очищенный handle); состояние не меняется
            QuadOverflowError: Если value вне диапазона decimal128;
                состояние не меняется
        """
        if self._matrix is None:
            raise IndexOutOfBoundsError(row, col, 0, 0)
        self._matrix = self._matrix.with_element(row, col, value)

    def clear(self) -> None:
        """Сброс в пустое состояние (rows = cols = 0)."""
        self._matrix = None


MatrixLike = Union[Matrix, MatrixHandle]


def as_matrix(value: MatrixLike) -> Matrix:
    """Matrix или снапшот MatrixHandle."""
    if isinstance(value, MatrixHandle):
        return value.snapshot()
    return value
