"""
Text utilities — разбиение строк и срезы без регулярных выражений.
"""

from decimatrix.core.text.tokenizer import (
    count_occurrences,
    slice_bytes,
    split,
    substring,
)

__all__ = [
    "count_occurrences",
    "slice_bytes",
    "split",
    "substring",
]
