from booklend.application.dtos import BookListResult
from booklend.domain.book import Book, BookService, BookStatus


class ListBooksQuery:
    """List the catalogue, optionally narrowed by a search term, title or status.

    ``query`` matches the title or the publisher and takes precedence over
    ``title``. The status filter is applied to the text matches when both
    kinds of filter are given.
    """

    def __init__(self, book_service: BookService):
        self._book_service = book_service

    async def execute(
        self,
        title: str | None = None,
        status: BookStatus | None = None,
        query: str | None = None,
    ) -> BookListResult:
        query = query.strip() if query else None
        title = title.strip() if title else None

        if not query and not title and status is None:
            books = await self._book_service.find_all()
            return BookListResult.ok(
                "Books retrieved successfully",
                books=books,
                total=len(books),
            )

        books: list[Book]
        if query:
            books = await self._book_service.search(query)
        elif title:
            books = await self._book_service.find_by_title(title)
        else:
            books = await self._book_service.find_by_status(status)  # type: ignore[arg-type]

        if status is not None and (query or title):
            books = [b for b in books if b.status == status]

        return BookListResult.ok(
            "Books search completed successfully",
            books=books,
            total=len(books),
        )
