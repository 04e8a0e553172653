"""SQLAlchemy implementation of BookService."""

import logging
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from booklend.domain.book import Book, BookService, BookStatus, DuplicateIsbnError
from booklend.domain.shared.time import ensure_tz_aware
from booklend.infrastructure.persistence.sqlalchemy.models import BookModel

logger = logging.getLogger(__name__)


class BookServiceSQLAlchemy(BookService):
    """SQLAlchemy implementation of the BookService interface.

    ``find_popular_books`` returns at most ``popular_limit`` books, most
    borrowed first.
    """

    DEFAULT_POPULAR_LIMIT = 10

    def __init__(
        self,
        session: AsyncSession,
        popular_limit: int = DEFAULT_POPULAR_LIMIT,
    ) -> None:
        self._session = session
        self._popular_limit = popular_limit

    async def find_by_id(self, book_id: UUID) -> Book | None:
        model = await self._find_model_by_id(book_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_title(self, title: str) -> list[Book]:
        stmt = (
            select(BookModel)
            .where(func.lower(BookModel.title).like(f"%{title.lower()}%"))
            .order_by(BookModel.title)
        )
        return await self._fetch(stmt)

    async def search(self, term: str) -> list[Book]:
        pattern = f"%{term.lower()}%"
        stmt = (
            select(BookModel)
            .where(
                or_(
                    func.lower(BookModel.title).like(pattern),
                    func.lower(BookModel.publisher).like(pattern),
                ),
            )
            .order_by(BookModel.title)
        )
        return await self._fetch(stmt)

    async def find_by_isbn(self, isbn: int) -> Book | None:
        stmt = select(BookModel).where(BookModel.isbn == isbn)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_status(self, status: BookStatus) -> list[Book]:
        stmt = (
            select(BookModel)
            .where(BookModel.status == status.value)
            .order_by(BookModel.title)
        )
        return await self._fetch(stmt)

    async def find_all(self) -> list[Book]:
        return await self._fetch(select(BookModel).order_by(BookModel.title))

    async def find_popular_books(self) -> list[Book]:
        stmt = (
            select(BookModel)
            .where(BookModel.is_popular.is_(True))
            .order_by(BookModel.total_loans.desc(), BookModel.title)
            .limit(self._popular_limit)
        )
        return await self._fetch(stmt)

    async def count_by_status(self) -> dict[BookStatus, int]:
        stmt = select(BookModel.status, func.count()).group_by(BookModel.status)
        result = await self._session.execute(stmt)
        return {BookStatus(status): count for status, count in result.all()}

    async def save(self, book: Book) -> Book:
        existing = await self._find_model_by_id(book.id)

        try:
            if existing:
                self._update_model(existing, book)
                logger.debug("Updated book: %s", book.id)
            else:
                model = BookModel(id=book.id)
                self._update_model(model, book)
                self._session.add(model)
                logger.debug("Created book: %s", book.id)

            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise DuplicateIsbnError(book.isbn) from e
            raise

        return book

    async def delete(self, book_id: UUID) -> None:
        model = await self._find_model_by_id(book_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.debug("Deleted book: %s", book_id)

    async def _fetch(self, stmt) -> list[Book]:
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def _find_model_by_id(self, book_id: UUID) -> BookModel | None:
        stmt = select(BookModel).where(BookModel.id == book_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: BookModel) -> Book:
        return Book(
            id=model.id,
            title=model.title,
            isbn=model.isbn,
            pages=model.pages,
            publication_date=model.publication_date,
            publisher=model.publisher,
            status=BookStatus(model.status),
            total_loans=model.total_loans,
            is_popular=model.is_popular,
            entry_date=ensure_tz_aware(model.entry_date),
        )

    def _update_model(self, model: BookModel, book: Book) -> None:
        model.title = book.title
        model.isbn = book.isbn
        model.pages = book.pages
        model.publication_date = book.publication_date
        model.publisher = book.publisher
        model.status = book.status.value
        model.total_loans = book.total_loans
        model.is_popular = book.is_popular
        model.entry_date = book.entry_date
