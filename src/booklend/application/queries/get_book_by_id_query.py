from uuid import UUID

from booklend.application.dtos import BookResult
from booklend.domain.book import BookNotFoundError, BookService


class GetBookByIdQuery:
    def __init__(self, book_service: BookService):
        self._book_service = book_service

    async def execute(self, book_id: UUID) -> BookResult:
        book = await self._book_service.find_by_id(book_id)
        if book is None:
            return BookResult.failed(BookNotFoundError(book_id))
        return BookResult.ok("Book retrieved successfully", book=book)
