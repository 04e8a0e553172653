from booklend.domain.book.book import Book, BookStatistics, BookStatus
from booklend.domain.book.book_service import BookService
from booklend.domain.book.exceptions import (
    BookAlreadyLentError,
    BookNotFoundError,
    DuplicateIsbnError,
)

__all__ = [
    "Book",
    "BookAlreadyLentError",
    "BookNotFoundError",
    "BookService",
    "BookStatistics",
    "BookStatus",
    "DuplicateIsbnError",
]
