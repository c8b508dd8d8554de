"""
Unique — объединение двух последовательностей без дубликатов

Порядок результата: порядок первого вхождения в конкатенации seq1 + seq2.
Равенство точное: без нормализации и без приведения регистра.

Проверка "уже в результате" выполняется через set, а не линейным
просмотром результата. Для str / int / float хеш согласован с ==,
поэтому результат совпадает с линейным просмотром.

Исключение — NaN: он не равен сам себе, но set (как и оператор in)
сначала сравнивает объекты по identity и схлопнул бы повторный объект NaN.
Поэтому каждый NaN попадает в результат без проверки.
"""

from typing import Iterable, List, Set, TypeVar, Union

T = TypeVar("T", bound=Union[str, int, float])


def _is_nan(value: object) -> bool:
    # NaN — единственное значение домена, не равное самому себе
    return value != value


def get_unique_values(seq1: Iterable[T], seq2: Iterable[T]) -> List[T]:
    """
    Уникальные значения двух последовательностей в порядке первого вхождения.

    Args:
        seq1: Первая последовательность
        seq2: Вторая последовательность

    Returns:
        Новый список без дубликатов (каждый NaN сохраняется)

    Examples:
        >>> get_unique_values([1, 2, 2, 3], [3, 4])
        [1, 2, 3, 4]
        >>> get_unique_values([], [])
        []
    """
    result: List[T] = []
    seen: Set[T] = set()

    for seq in (seq1, seq2):
        for value in seq:
            if _is_nan(value):
                result.append(value)
            elif value not in seen:
                seen.add(value)
                result.append(value)

    return result
