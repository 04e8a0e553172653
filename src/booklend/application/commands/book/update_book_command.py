import logging
from dataclasses import replace
from datetime import date
from uuid import UUID

from booklend.application.dtos import BookResult
from booklend.domain.book import (
    BookNotFoundError,
    BookService,
    BookStatus,
    DuplicateIsbnError,
)
from booklend.domain.shared.exceptions import DomainException

logger = logging.getLogger(__name__)


class UpdateBookCommand:
    """Partial update of a book; None means "keep the stored value"."""

    def __init__(self, book_service: BookService):
        self._book_service = book_service

    async def execute(  # NOQA: PLR0913
        self,
        book_id: UUID,
        *,
        title: str | None = None,
        isbn: int | None = None,
        pages: int | None = None,
        publication_date: date | None = None,
        publisher: str | None = None,
        status: BookStatus | None = None,
        is_popular: bool | None = None,
    ) -> BookResult:
        try:
            existing = await self._book_service.find_by_id(book_id)
            if existing is None:
                raise BookNotFoundError(book_id)

            if isbn is not None and isbn != existing.isbn:
                owner = await self._book_service.find_by_isbn(isbn)
                if owner is not None and owner.id != book_id:
                    raise DuplicateIsbnError(isbn)

            updated = replace(
                existing,
                title=existing.title if title is None else title,
                isbn=existing.isbn if isbn is None else isbn,
                pages=existing.pages if pages is None else pages,
                publication_date=publication_date or existing.publication_date,
                publisher=existing.publisher if publisher is None else publisher,
                status=status or existing.status,
                is_popular=existing.is_popular if is_popular is None else is_popular,
            )
            saved = await self._book_service.save(updated)
        except DomainException as e:
            logger.debug("Book update rejected: %s", e.message)
            return BookResult.failed(e)

        logger.info("Updated book %s", book_id)
        return BookResult.ok("Book updated successfully", book=saved)
