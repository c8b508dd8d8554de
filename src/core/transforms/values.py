"""
Values — форматирование значений и вычисление длины

format_value: тег значения (str / number / bool) сохраняется,
              значение преобразуется по правилу своего тега.
get_length:   длина строки или последовательности, 0 для всего остального.
"""

import logging
from typing import Any, Final, Union

logger = logging.getLogger(__name__)


# Тип входа format_value: ровно одно из str / number / bool
FormatInput = Union[str, int, float, bool]

# Множитель для числовых значений
NUMBER_MULTIPLIER: Final[int] = 10

# Длина для значений, не являющихся строкой или последовательностью
LENGTH_FALLBACK: Final[int] = 0


def format_value(value: FormatInput) -> FormatInput:
    """
    Преобразование значения с сохранением тега.

    - str   → value.upper()
    - number → value * 10
    - bool  → not value

    bool проверяется до чисел: в Python bool является подклассом int.

    Args:
        value: Строка, число или bool

    Returns:
        Новое значение того же тега

    Raises:
        TypeError: Если значение вне домена str / int / float / bool

    Examples:
        >>> format_value("abc")
        'ABC'
        >>> format_value(3)
        30
        >>> format_value(True)
        False
    """
    if isinstance(value, str):
        return value.upper()

    if isinstance(value, bool):
        return not value

    if isinstance(value, (int, float)):
        return value * NUMBER_MULTIPLIER

    raise TypeError(
        f"format_value expects str, int, float or bool, got {type(value).__name__}"
    )


def get_length(value: Any) -> int:
    """
    Длина строки или упорядоченной последовательности.

    Для любых других значений возвращает LENGTH_FALLBACK (0) без ошибки.
    Последовательностью считаются list и tuple.

    Args:
        value: Строка, list/tuple или любое другое значение

    Returns:
        Количество символов, количество элементов или 0
    """
    if isinstance(value, str):
        return len(value)

    if isinstance(value, (list, tuple)):
        return len(value)

    logger.debug(
        "get_length: unsupported type %s, returning %d",
        type(value).__name__,
        LENGTH_FALLBACK,
    )
    return LENGTH_FALLBACK
