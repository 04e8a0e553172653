from abc import ABC, abstractmethod
from uuid import UUID

from booklend.domain.book.book import Book, BookStatus


class BookService(ABC):
    """Persistence port for books."""

    @abstractmethod
    async def find_by_id(self, book_id: UUID) -> Book | None:
        pass

    @abstractmethod
    async def find_by_title(self, title: str) -> list[Book]:
        """Case-insensitive substring match on the title."""

    @abstractmethod
    async def search(self, term: str) -> list[Book]:
        """Case-insensitive substring match on the title or the publisher."""

    @abstractmethod
    async def find_by_isbn(self, isbn: int) -> Book | None:
        pass

    @abstractmethod
    async def find_by_status(self, status: BookStatus) -> list[Book]:
        pass

    @abstractmethod
    async def find_all(self) -> list[Book]:
        pass

    @abstractmethod
    async def find_popular_books(self) -> list[Book]:
        pass

    @abstractmethod
    async def count_by_status(self) -> dict[BookStatus, int]:
        """Number of books per status. Statuses with no books may be absent."""

    @abstractmethod
    async def save(self, book: Book) -> Book:
        """Insert or update a book and return the stored record."""

    @abstractmethod
    async def delete(self, book_id: UUID) -> None:
        pass
