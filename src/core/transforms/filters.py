"""
Filters — фильтрация записей по предикату

Все фильтры возвращают новый список, сохраняют порядок и не изменяют вход.
Повторное применение фильтра к собственному результату ничего не меняет.
"""

from dataclasses import dataclass
from typing import Final, Iterable, List, Optional

from src.core.domain.records import RatedItem, User


# Порог рейтинга по умолчанию (включительно)
MIN_RATING_DEFAULT: Final[float] = 4.0


@dataclass(frozen=True)
class RatingFilterConfig:
    """Конфигурация фильтра по рейтингу."""

    # Минимальный рейтинг (сравнение >=, без округления)
    min_rating: float = MIN_RATING_DEFAULT


def filter_by_rating(
    items: Iterable[RatedItem],
    config: Optional[RatingFilterConfig] = None,
) -> List[RatedItem]:
    """
    Элементы с рейтингом не ниже порога.

    Args:
        items: Последовательность RatedItem
        config: Конфигурация (по умолчанию порог 4)

    Returns:
        Подпоследовательность items с rating >= min_rating
    """
    cfg = config or RatingFilterConfig()
    return [item for item in items if item.rating >= cfg.min_rating]


def filter_active_users(users: Iterable[User]) -> List[User]:
    """Пользователи с is_active, строго равным True."""
    return [user for user in users if user.is_active is True]
