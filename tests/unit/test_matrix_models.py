"""
Тесты для доменных моделей Matrix и MatrixHandle

Проверяет:
1. Инварианты формы (rows, cols, len(data))
2. Immutability Matrix (frozen=True)
3. MatrixHandle: update/clear на месте, all-or-nothing при ошибке
4. Снапшоты не меняются после update
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from decimatrix.core.domain import (
    IndexOutOfBoundsError,
    InvalidDimensionError,
    Matrix,
    MatrixHandle,
    QuadOverflowError,
    as_matrix,
)

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def matrix_2x3() -> Matrix:
    """Матрица 2x3 с различимыми элементами"""
    return Matrix.from_rows(
        [
            [Decimal(1), Decimal(2), Decimal(3)],
            [Decimal(4), Decimal(5), Decimal(6)],
        ]
    )


# =============================================================================
# MATRIX
# =============================================================================


class TestMatrix:
    """Тесты для модели Matrix"""

    def test_zeros_shape(self) -> None:
        m = Matrix.zeros(3, 2)
        assert m.shape == (3, 2)
        assert len(m.data) == 3
        assert all(len(row) == 2 for row in m.data)
        assert all(value == 0 for row in m.data for value in row)

    @pytest.mark.parametrize("rows,cols", [(0, 1), (1, 0), (0, 0)])
    def test_zeros_invalid_dimensions(self, rows: int, cols: int) -> None:
        with pytest.raises(InvalidDimensionError) as exc_info:
            Matrix.zeros(rows, cols)
        assert (exc_info.value.rows, exc_info.value.cols) == (rows, cols)

    def test_from_rows(self, matrix_2x3: Matrix) -> None:
        assert matrix_2x3.rows == 2
        assert matrix_2x3.cols == 3
        assert matrix_2x3.row(1) == (Decimal(4), Decimal(5), Decimal(6))
        assert matrix_2x3.column(2) == (Decimal(3), Decimal(6))
        assert not matrix_2x3.is_square

    def test_from_rows_empty_rejected(self) -> None:
        with pytest.raises(InvalidDimensionError):
            Matrix.from_rows([])
        with pytest.raises(InvalidDimensionError):
            Matrix.from_rows([[]])

    def test_ragged_rows_rejected(self) -> None:
        """Строки разной длины нарушают инвариант формы"""
        with pytest.raises(ValidationError, match="row 1 has 1 elements"):
            Matrix(rows=2, cols=2, data=((Decimal(1), Decimal(2)), (Decimal(3),)))

    def test_row_count_mismatch_rejected(self) -> None:
        with pytest.raises(ValidationError, match="data has 1 rows"):
            Matrix(rows=2, cols=1, data=((Decimal(1),),))

    def test_frozen(self, matrix_2x3: Matrix) -> None:
        with pytest.raises(ValidationError):
            matrix_2x3.rows = 5

    def test_element_bounds(self, matrix_2x3: Matrix) -> None:
        assert matrix_2x3.element(1, 2) == Decimal(6)
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            matrix_2x3.element(2, 0)
        assert exc_info.value.row == 2
        assert exc_info.value.rows == 2
        with pytest.raises(IndexOutOfBoundsError):
            matrix_2x3.element(0, 3)
        with pytest.raises(IndexOutOfBoundsError):
            matrix_2x3.element(-1, 0)

    def test_with_element_returns_new_value(self, matrix_2x3: Matrix) -> None:
        updated = matrix_2x3.with_element(0, 1, Decimal("9.5"))
        assert updated.element(0, 1) == Decimal("9.5")
        assert matrix_2x3.element(0, 1) == Decimal(2)
        assert updated.row(1) == matrix_2x3.row(1)

    def test_equality(self, matrix_2x3: Matrix) -> None:
        same = Matrix.from_rows([list(row) for row in matrix_2x3.data])
        assert same == matrix_2x3

    def test_elements_rounded_to_quad(self) -> None:
        """Элементы приводятся к decimal128 при построении"""
        m = Matrix.from_rows([[Decimal("0." + "3" * 50), Decimal("1.50")]])
        assert m.element(0, 0) == Decimal("0." + "3" * 34)
        assert str(m.element(0, 1)) == "1.50"

    def test_element_beyond_range_rejected(self) -> None:
        with pytest.raises(QuadOverflowError) as exc_info:
            Matrix(rows=1, cols=2, data=((Decimal(1), Decimal("-1E+6145")),))
        assert exc_info.value.value == "-1E+6145"

    def test_with_element_beyond_range_rejected(self, matrix_2x3: Matrix) -> None:
        with pytest.raises(QuadOverflowError):
            matrix_2x3.with_element(0, 0, Decimal("1E+9000"))


# =============================================================================
# MATRIX HANDLE
# =============================================================================


class TestMatrixHandle:
    """Тесты для изменяемой ссылки MatrixHandle"""

    def test_dimensions_follow_value(self, matrix_2x3: Matrix) -> None:
        handle = MatrixHandle(matrix_2x3)
        assert (handle.rows, handle.cols) == (2, 3)
        assert not handle.is_cleared

    def test_update_in_place(self, matrix_2x3: Matrix) -> None:
        handle = MatrixHandle(matrix_2x3)
        handle.update(1, 1, Decimal(-1))
        assert handle.read(1, 1) == Decimal(-1)

    def test_snapshot_not_affected_by_update(self, matrix_2x3: Matrix) -> None:
        """Ранее выданный снапшот не меняется"""
        handle = MatrixHandle(matrix_2x3)
        before = handle.snapshot()
        handle.update(0, 0, Decimal(100))
        assert before.element(0, 0) == Decimal(1)
        assert handle.snapshot().element(0, 0) == Decimal(100)

    def test_failed_update_leaves_state_unchanged(self, matrix_2x3: Matrix) -> None:
        handle = MatrixHandle(matrix_2x3)
        with pytest.raises(IndexOutOfBoundsError):
            handle.update(5, 0, Decimal(7))
        assert handle.snapshot() == matrix_2x3
        with pytest.raises(QuadOverflowError):
            handle.update(0, 0, Decimal("1E+9000"))
        assert handle.snapshot() == matrix_2x3

    def test_clear(self, matrix_2x3: Matrix) -> None:
        handle = MatrixHandle(matrix_2x3)
        handle.clear()
        assert handle.is_cleared
        assert (handle.rows, handle.cols) == (0, 0)

    def test_cleared_handle_rejects_access(self) -> None:
        handle = MatrixHandle(Matrix.zeros(1, 1))
        handle.clear()
        with pytest.raises(InvalidDimensionError):
            handle.snapshot()
        with pytest.raises(IndexOutOfBoundsError):
            handle.read(0, 0)
        with pytest.raises(IndexOutOfBoundsError):
            handle.update(0, 0, Decimal(1))

    def test_as_matrix(self, matrix_2x3: Matrix) -> None:
        assert as_matrix(matrix_2x3) is matrix_2x3
        assert as_matrix(MatrixHandle(matrix_2x3)) is matrix_2x3
