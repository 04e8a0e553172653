import logging
from dataclasses import replace
from uuid import UUID

from booklend.application.dtos import BookResult
from booklend.domain.book import (
    BookAlreadyLentError,
    BookNotFoundError,
    BookService,
    BookStatus,
)
from booklend.domain.shared.exceptions import DomainException, ErrorCode

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


class LendBookCommand:
    """Lend an available book: AVAILABLE becomes BORROWED.

    Unlike the other commands, any exception raised by the book service is
    also turned into a failure result. ``total_loans`` is not incremented.
    """

    def __init__(self, book_service: BookService):
        self._book_service = book_service

    async def execute(self, book_id: UUID, borrower_id: UUID) -> BookResult:
        try:
            book = await self._book_service.find_by_id(book_id)
            if book is None:
                raise BookNotFoundError(book_id)

            if not book.is_available:
                raise BookAlreadyLentError(book_id)

            saved = await self._book_service.save(
                replace(book, status=BookStatus.BORROWED),
            )
        except DomainException as e:
            logger.debug("Lending book %s rejected: %s", book_id, e.message)
            return BookResult.failed(e)
        except Exception as e:
            logger.exception("Lending book %s failed", book_id)
            return BookResult.failed_with(
                str(e) or UNKNOWN_ERROR_MESSAGE,
                ErrorCode.INTERNAL_ERROR,
            )

        logger.info("Book %s lent to user %s", book_id, borrower_id)
        return BookResult.ok("Book lent successfully", book=saved)
