"""
Display — строки для отображения записей
"""

from src.core.domain.records import Book


def availability_label(is_available: bool) -> str:
    return "Yes" if is_available else "No"


def print_book_details(book: Book) -> str:
    """
    Описание книги одной строкой.

    Несмотря на имя, ничего не печатает: возвращает строку
    "Title: {t}, Author: {a}, Published: {y}, Available: {Yes|No}".
    """
    return (
        f"Title: {book.title}, Author: {book.author}, "
        f"Published: {book.published_year}, "
        f"Available: {availability_label(book.is_available)}"
    )
