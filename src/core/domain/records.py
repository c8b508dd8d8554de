"""
Records — модели записей: RatedItem, User, Book, Product

Immutable Pydantic модели. Имена полей в snake_case, wire-форма (JSON) в
camelCase принимается через alias (populate_by_name=True).
Соответствуют схемам src/core/contracts/schema/*.json: лишние поля
запрещены (extra="forbid"), как и additionalProperties=false в схемах.

Инвариантов на значения нет: рейтинг, цена, количество и скидка
не проверяются на диапазон.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field


# =============================================================================
# RATED ITEM
# =============================================================================


class RatedItem(BaseModel):
    """Элемент с рейтингом."""

    title: str = Field(..., description="Название")
    rating: Union[int, float] = Field(..., description="Рейтинг (любое число)")

    model_config = {"frozen": True, "extra": "forbid"}


# =============================================================================
# USER
# =============================================================================


class User(BaseModel):
    """
    Пользователь.

    id предполагается уникальным на стороне вызывающего кода, но не проверяется.
    """

    id: int = Field(..., description="Идентификатор пользователя")
    name: str = Field(..., description="Имя")
    email: str = Field(..., description="Email (формат не проверяется)")
    is_active: bool = Field(..., alias="isActive", description="Активен ли пользователь")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "forbid"}


# =============================================================================
# BOOK
# =============================================================================


class Book(BaseModel):
    """Книга."""

    title: str = Field(..., description="Название")
    author: str = Field(..., description="Автор")
    published_year: int = Field(..., alias="publishedYear", description="Год издания")
    is_available: bool = Field(..., alias="isAvailable", description="Доступна ли книга")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "forbid"}


# =============================================================================
# PRODUCT
# =============================================================================


class Product(BaseModel):
    """
    Товар для расчёта итоговой стоимости.

    discount: скидка в процентах (ожидается 0-100, не проверяется).
    None означает отсутствие скидки; ноль подставляется в месте расчёта
    (см. src.core.transforms.pricing).
    """

    name: str = Field(..., description="Название товара")
    price: Union[int, float] = Field(..., description="Цена за единицу")
    quantity: Union[int, float] = Field(..., description="Количество")
    discount: Optional[Union[int, float]] = Field(
        default=None, description="Скидка в процентах (опционально)"
    )

    model_config = {"frozen": True, "extra": "forbid"}
