"""
String Tokenizer — разбиение строк по разделителю

Побайтовое (посимвольное) разбиение без регулярных выражений и без
экранирования. Работает одинаково для `str` и `bytes`.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Совпадения не перекрываются: после совпадения длины L сканирование
   продвигается на L
2. Совпадения ищутся слева направо (leftmost-first)
3. Хвост после последнего совпадения всегда добавляется —
   результат split содержит минимум один элемент
"""

from typing import List, TypeVar

# str или bytes
S = TypeVar("S", str, bytes)


def count_occurrences(source: S, delimiter: S) -> int:
    """
    Количество непересекающихся вхождений разделителя.

    Raises:
        ValueError: Если разделитель пустой
    """
    if not delimiter:
        raise ValueError("delimiter must be non-empty")

    count = 0
    pos = source.find(delimiter)
    while pos >= 0:
        count += 1
        pos = source.find(delimiter, pos + len(delimiter))
    return count


def split(source: S, delimiter: S) -> List[S]:
    """
    Разбиение строки по разделителю.

    Первый проход считает совпадения (для предварительного размера
    результата), второй вырезает подстроки между ними.

    Args:
        source: Исходная строка (str или bytes)
        delimiter: Непустой разделитель того же типа

    Returns:
        Список подстрок длиной count_occurrences + 1

    Raises:
        ValueError: Если разделитель пустой

    Examples:
        >>> split("(1,2),(3,4)", "),(")
        ['(1,2', '3,4)']
        >>> split("abc", ",")
        ['abc']
        >>> split("aaa", "aa")
        ['', 'a']
    """
    count = count_occurrences(source, delimiter)
    parts: List[S] = [source[:0]] * (count + 1)

    start = 0
    for index in range(count):
        match = source.find(delimiter, start)
        parts[index] = source[start:match]
        start = match + len(delimiter)
    parts[count] = source[start:]
    return parts


def slice_bytes(data: bytes, start: int, length: int) -> bytes:
    """
    Точная копия `length` байт начиная со `start`.

    Raises:
        IndexError: Если start + length выходит за границы данных
    """
    _check_range(len(data), start, length)
    return bytes(data[start:start + length])


def substring(text: str, start: int, length: int) -> str:
    """
    Подстрока из `length` символов начиная со `start`.

    Raises:
        IndexError: Если start + length выходит за границы строки
    """
    _check_range(len(text), start, length)
    return text[start:start + length]


def _check_range(size: int, start: int, length: int) -> None:
    if start < 0 or length < 0:
        raise IndexError(f"negative range: start={start}, length={length}")
    if start + length > size:
        raise IndexError(f"range [{start}, {start + length}) exceeds source length {size}")
