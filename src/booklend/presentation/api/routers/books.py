"""Book catalogue and lending endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Query, status

from booklend.application.commands.book import (
    AddBookCommand,
    DeleteBookCommand,
    LendBookCommand,
    UpdateBookCommand,
)
from booklend.application.queries import (
    GetBookByIdQuery,
    GetBookStatisticsQuery,
    GetPopularBooksQuery,
    ListBooksQuery,
)
from booklend.domain.book import BookStatus
from booklend.presentation.api.dependencies import (
    AdminUser,
    Books,
    Crypto,
    CurrentUser,
    DBSession,
)
from booklend.presentation.api.schemas import (
    BookCreateRequest,
    BookResponse,
    BookStatisticsResponse,
    BookUpdateRequest,
    DataResponse,
    ListResponse,
    MessageResponse,
)
from booklend.presentation.api.unit_of_work import finish

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", summary="List or search books")
async def list_books(
    books: Books,
    q: str | None = Query(None, description="Substring of the title or publisher"),
    title: str | None = Query(None, description="Substring of the title"),
    book_status: BookStatus | None = Query(None, alias="status"),
) -> ListResponse[BookResponse]:
    result = await ListBooksQuery(books).execute(
        title=title,
        status=book_status,
        query=q,
    )
    return ListResponse(
        message=result.message,
        data=[BookResponse.model_validate(b) for b in result.books],
        total=result.total,
    )


@router.get("/popular", summary="Popular books")
async def popular_books(books: Books) -> ListResponse[BookResponse]:
    result = await GetPopularBooksQuery(books).execute()
    return ListResponse(
        message=result.message,
        data=[BookResponse.model_validate(b) for b in result.books],
        total=result.total,
    )


@router.get("/statistics", summary="Book counts by status")
async def book_statistics(books: Books) -> DataResponse[BookStatisticsResponse]:
    result = await GetBookStatisticsQuery(books).execute()
    return DataResponse(
        message=result.message,
        data=BookStatisticsResponse.model_validate(result.statistics),
    )


@router.get(
    "/{book_id}",
    summary="Get a book",
    responses={404: {"description": "Book not found"}},
)
async def get_book(book_id: UUID, books: Books) -> DataResponse[BookResponse]:
    result = await GetBookByIdQuery(books).execute(book_id)
    result.raise_for_failure()
    return DataResponse(message=result.message, data=BookResponse.model_validate(result.book))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Add a book (admin)",
    responses={
        400: {"description": "ISBN is required"},
        403: {"description": "Admin access required"},
        409: {"description": "Book with this ISBN already exists"},
    },
)
async def add_book(
    request: BookCreateRequest,
    admin: AdminUser,
    session: DBSession,
    books: Books,
    crypto: Crypto,
) -> DataResponse[BookResponse]:
    command = AddBookCommand(book_service=books, crypto_service=crypto)
    result = await command.execute(
        title=request.title,
        isbn=request.isbn,
        pages=request.pages,
        publication_date=request.publication_date,
        publisher=request.publisher,
    )
    await finish(session, result)
    logger.info("Admin %s added book %s", admin.email, result.book.id)  # type: ignore[union-attr]
    return DataResponse(message=result.message, data=BookResponse.model_validate(result.book))


@router.patch(
    "/{book_id}",
    summary="Update a book (admin)",
    responses={
        403: {"description": "Admin access required"},
        404: {"description": "Book not found"},
        409: {"description": "Book with this ISBN already exists"},
    },
)
async def update_book(
    book_id: UUID,
    request: BookUpdateRequest,
    _admin: AdminUser,
    session: DBSession,
    books: Books,
) -> DataResponse[BookResponse]:
    command = UpdateBookCommand(book_service=books)
    result = await command.execute(book_id, **request.model_dump())
    await finish(session, result)
    return DataResponse(message=result.message, data=BookResponse.model_validate(result.book))


@router.delete(
    "/{book_id}",
    summary="Delete a book (admin)",
    responses={
        403: {"description": "Admin access required"},
        404: {"description": "Book not found"},
    },
)
async def delete_book(
    book_id: UUID,
    _admin: AdminUser,
    session: DBSession,
    books: Books,
) -> MessageResponse:
    result = await DeleteBookCommand(book_service=books).execute(book_id)
    await finish(session, result)
    return MessageResponse(message=result.message)


@router.post(
    "/{book_id}/lend",
    summary="Borrow a book",
    responses={
        404: {"description": "Book not found"},
        422: {"description": "Book is already lent"},
    },
)
async def lend_book(
    book_id: UUID,
    current_user: CurrentUser,
    session: DBSession,
    books: Books,
) -> DataResponse[BookResponse]:
    command = LendBookCommand(book_service=books)
    result = await command.execute(book_id=book_id, borrower_id=current_user.id)
    await finish(session, result)
    return DataResponse(message=result.message, data=BookResponse.model_validate(result.book))
