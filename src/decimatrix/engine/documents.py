"""
Matrix Documents — JSON-представление матриц

В отличие от литерала (2 дробные цифры), документ хранит точную
строковую запись каждого Decimal, поэтому export → import
восстанавливает матрицу без потерь.

Формат: {"rows": 2, "cols": 2, "data": [["1", "2"], ["3", "4.5"]]}
"""

import json
import logging
from decimal import Decimal
from typing import Any, Dict

from jsonschema.exceptions import best_match

from decimatrix.core.contracts import MatrixDocumentValidator
from decimatrix.core.domain.errors import InconsistentColumnsError, InvalidDimensionError
from decimatrix.core.domain.matrix import Matrix, MatrixLike, as_matrix

_LOG: logging.Logger = logging.getLogger(__name__)


def matrix_to_document(m: MatrixLike) -> Dict[str, Any]:
    """Точное JSON-совместимое представление матрицы."""
    return as_matrix(m).model_dump(mode="json")


def matrix_from_document(document: Dict[str, Any]) -> Matrix:
    """
    Построение Matrix из документа.

    Значения приводятся к decimal128 (34 значащие цифры). При нарушении
    контракта в лог пишется число нарушений, а выбрасывается наиболее
    релевантное из них (jsonschema best_match).

    Raises:
        jsonschema.ValidationError: Документ не соответствует схеме
        InvalidDimensionError: len(data) != rows
        InconsistentColumnsError: Строка длины != cols
        QuadOverflowError: Значение вне диапазона decimal128
    """
    validator = MatrixDocumentValidator()
    if not validator.is_valid(document):
        errors = list(validator.iter_errors(document))
        _LOG.debug("matrix_from_document: %d contract violations", len(errors))
        raise best_match(errors)

    rows = document["rows"]
    cols = document["cols"]
    data = document["data"]
    if len(data) != rows:
        raise InvalidDimensionError(len(data), cols)
    for index, row in enumerate(data):
        if len(row) != cols:
            raise InconsistentColumnsError(index, cols, len(row))

    values = tuple(tuple(Decimal(text) for text in row) for row in data)
    return Matrix(rows=rows, cols=cols, data=values)


def dumps(m: MatrixLike) -> str:
    return json.dumps(matrix_to_document(m))


def loads(text: str) -> Matrix:
    return matrix_from_document(json.loads(text))
