"""
Domain models and value objects.

Contains the immutable records: Person, RatedItem, User, Book, Product.
"""

from src.core.domain.person import Person
from src.core.domain.records import Book, Product, RatedItem, User

__all__ = [
    # Person model
    "Person",
    # Record models
    "RatedItem",
    "User",
    "Book",
    "Product",
]
