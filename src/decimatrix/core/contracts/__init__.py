"""
Contract Validation Module

Валидация JSON-контрактов матричных документов.
"""

from .validators import (
    ContractValidator,
    MatrixDocumentValidator,
    SchemaLoader,
    validate_matrix_document,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MatrixDocumentValidator",
    # Functions
    "validate_matrix_document",
]
