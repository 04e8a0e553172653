from booklend.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class BookNotFoundError(EntityNotFoundError):
    def __init__(self, book_id: object = None):
        super().__init__(
            "Book not found",
            ErrorCode.BOOK_NOT_FOUND,
            {"book_id": str(book_id)} if book_id else None,
        )


class DuplicateIsbnError(ConflictError):
    def __init__(self, isbn: int | None = None):
        super().__init__(
            "Book with this ISBN already exists",
            ErrorCode.DUPLICATE_ISBN,
            {"isbn": isbn} if isbn is not None else None,
        )


class BookAlreadyLentError(BusinessRuleViolation):
    def __init__(self, book_id: object = None):
        super().__init__(
            "Book is already lent",
            ErrorCode.BOOK_NOT_AVAILABLE,
            {"book_id": str(book_id)} if book_id else None,
        )
