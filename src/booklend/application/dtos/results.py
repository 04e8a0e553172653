"""Result objects returned by every command and query.

A use case never raises for expected failures. It returns a result with
``success=False``, the user-facing ``message`` and a stable ``code``.
"""

from dataclasses import dataclass, field
from typing import Any, TypeVar

from booklend.domain.author import Author
from booklend.domain.book import Book, BookStatistics
from booklend.domain.shared.exceptions import DomainException, ErrorCode
from booklend.domain.user import SecureUser

R = TypeVar("R", bound="OperationResult")


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a use case without a payload."""

    success: bool
    message: str
    code: ErrorCode | None = None

    @classmethod
    def ok(cls: type[R], message: str, **payload: Any) -> R:
        return cls(success=True, message=message, **payload)

    @classmethod
    def failed(cls: type[R], error: DomainException) -> R:
        return cls(success=False, message=error.message, code=error.code)

    @classmethod
    def failed_with(cls: type[R], message: str, code: ErrorCode) -> R:
        return cls(success=False, message=message, code=code)

    def raise_for_failure(self) -> None:
        """Re-raise a failed result as a DomainException (used by the API layer)."""
        if not self.success:
            raise DomainException(self.message, self.code or ErrorCode.INTERNAL_ERROR)


@dataclass(frozen=True)
class EmailVerificationResult(OperationResult):
    email: str | None = None


@dataclass(frozen=True)
class RegistrationResult(OperationResult):
    user: SecureUser | None = None


@dataclass(frozen=True)
class AuthorResult(OperationResult):
    author: Author | None = None


@dataclass(frozen=True)
class AuthorListResult(OperationResult):
    authors: list[Author] = field(default_factory=list)
    total: int = 0


@dataclass(frozen=True)
class BookResult(OperationResult):
    book: Book | None = None


@dataclass(frozen=True)
class BookListResult(OperationResult):
    books: list[Book] = field(default_factory=list)
    total: int = 0


@dataclass(frozen=True)
class BookStatisticsResult(OperationResult):
    statistics: BookStatistics | None = None


@dataclass(frozen=True)
class LoginResult(OperationResult):
    access_token: str | None = None
    expires_in: int | None = None
    user: SecureUser | None = None


@dataclass(frozen=True)
class ProfileResult(OperationResult):
    user: SecureUser | None = None
