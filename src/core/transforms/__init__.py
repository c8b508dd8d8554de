"""
Transforms — чистые операции над значениями и записями.

Все функции синхронные, без общего состояния и побочных эффектов.
"""

from src.core.transforms.display import availability_label, print_book_details
from src.core.transforms.filters import (
    MIN_RATING_DEFAULT,
    RatingFilterConfig,
    filter_active_users,
    filter_by_rating,
)
from src.core.transforms.pricing import (
    DISCOUNT_DEFAULT_PCT,
    calculate_total_price,
    line_total,
)
from src.core.transforms.unique import get_unique_values
from src.core.transforms.values import (
    LENGTH_FALLBACK,
    NUMBER_MULTIPLIER,
    FormatInput,
    format_value,
    get_length,
)

__all__ = [
    # Values
    "FormatInput",
    "NUMBER_MULTIPLIER",
    "LENGTH_FALLBACK",
    "format_value",
    "get_length",
    # Filters
    "MIN_RATING_DEFAULT",
    "RatingFilterConfig",
    "filter_by_rating",
    "filter_active_users",
    # Display
    "availability_label",
    "print_book_details",
    # Unique
    "get_unique_values",
    # Pricing
    "DISCOUNT_DEFAULT_PCT",
    "line_total",
    "calculate_total_price",
]
