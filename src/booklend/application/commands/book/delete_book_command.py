import logging
from uuid import UUID

from booklend.application.dtos import OperationResult
from booklend.domain.book import BookNotFoundError, BookService
from booklend.domain.shared.exceptions import DomainException

logger = logging.getLogger(__name__)


class DeleteBookCommand:
    def __init__(self, book_service: BookService):
        self._book_service = book_service

    async def execute(self, book_id: UUID) -> OperationResult:
        try:
            if await self._book_service.find_by_id(book_id) is None:
                raise BookNotFoundError(book_id)

            await self._book_service.delete(book_id)
        except DomainException as e:
            return OperationResult.failed(e)

        logger.info("Deleted book %s", book_id)
        return OperationResult.ok("Book deleted successfully")
