import logging
from datetime import date

from booklend.application.dtos import BookResult
from booklend.domain.book import Book, BookService, BookStatus, DuplicateIsbnError
from booklend.domain.security import CryptoService
from booklend.domain.shared.exceptions import DomainException
from booklend.domain.shared.time import utc_now
from booklend.domain.validation import validate_required_field

logger = logging.getLogger(__name__)


class AddBookCommand:
    """Add a new, available book to the catalogue."""

    def __init__(self, book_service: BookService, crypto_service: CryptoService):
        self._book_service = book_service
        self._crypto_service = crypto_service

    async def execute(
        self,
        title: str,
        isbn: int | None,
        pages: int,
        publication_date: date,
        publisher: str,
    ) -> BookResult:
        try:
            # 0 is a valid ISBN, only a missing one is rejected
            validate_required_field(isbn, "ISBN").raise_if_failed()

            if await self._book_service.find_by_isbn(isbn) is not None:  # type: ignore[arg-type]
                raise DuplicateIsbnError(isbn)

            book = Book(
                id=await self._crypto_service.generate_uuid(),
                title=title,
                isbn=isbn,
                pages=pages,
                publication_date=publication_date,
                publisher=publisher,
                status=BookStatus.AVAILABLE,
                total_loans=0,
                is_popular=False,
                entry_date=utc_now(),
            )
            saved = await self._book_service.save(book)
        except DomainException as e:
            logger.debug("Book creation rejected: %s", e.message)
            return BookResult.failed(e)

        logger.info("Added book %s (ISBN %s)", saved.id, saved.isbn)
        return BookResult.ok("Book created successfully", book=saved)
