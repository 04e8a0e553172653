from booklend.application.dtos import BookListResult
from booklend.domain.book import BookService


class GetPopularBooksQuery:
    """Books flagged as popular. Always succeeds, even when none are found."""

    def __init__(self, book_service: BookService):
        self._book_service = book_service

    async def execute(self) -> BookListResult:
        books = await self._book_service.find_popular_books()
        message = (
            "Popular books retrieved successfully" if books else "No popular books found"
        )
        return BookListResult.ok(message, books=books, total=len(books))
