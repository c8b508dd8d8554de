"""
Pricing — итоговая стоимость списка товаров со скидками

Для каждого товара:
    base  = price * quantity
    final = base - (base * discount) / 100

Отсутствующая скидка (None) считается нулевой.
Округление не выполняется: обычная float-арифметика, суммирование слева
направо. Отрицательные цена, количество и скидка не проверяются.
"""

import logging
from typing import Final, Sequence, Union

from src.core.domain.records import Product

logger = logging.getLogger(__name__)


# Скидка, подставляемая при discount=None (проценты)
DISCOUNT_DEFAULT_PCT: Final[float] = 0.0

Number = Union[int, float]


def line_total(product: Product) -> Number:
    """
    Стоимость одной позиции с учётом скидки.

    Args:
        product: Товар

    Returns:
        base - base * discount / 100
    """
    base = product.price * product.quantity
    discount = product.discount if product.discount is not None else DISCOUNT_DEFAULT_PCT
    return base - (base * discount) / 100


def calculate_total_price(products: Sequence[Product]) -> Number:
    """
    Сумма стоимостей всех позиций.

    Args:
        products: Последовательность товаров

    Returns:
        0 для пустого списка, иначе сумма line_total по всем товарам

    Examples:
        >>> calculate_total_price([])
        0
        >>> calculate_total_price([Product(name="x", price=10, quantity=2, discount=50)])
        10.0
    """
    if len(products) == 0:
        return 0

    total: Number = 0
    for product in products:
        total += line_total(product)

    logger.debug("calculate_total_price: %d products, total=%r", len(products), total)
    return total
