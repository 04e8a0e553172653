"""Dictionary-backed implementations of the persistence ports.

They keep records in process memory and are used by the unit tests and for
running use cases without a database. Production wiring uses the
SQLAlchemy implementations behind the same interfaces.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from booklend.domain.author import Author, AuthorService
from booklend.domain.book import Book, BookService, BookStatus
from booklend.domain.user import (
    AuthService,
    EmailVerificationService,
    EmailVerificationToken,
    User,
)

logger = logging.getLogger(__name__)


class InMemoryAuthService(AuthService):
    def __init__(self, users: list[User] | None = None):
        self._users: dict[UUID, User] = {u.id: u for u in users or []}

    async def find_by_email(self, email: str) -> User | None:
        wanted = email.strip().lower()
        return next((u for u in self._users.values() if u.email == wanted), None)

    async def find_by_id(self, user_id: UUID) -> User | None:
        return self._users.get(user_id)

    async def save(self, user: User) -> User:
        self._users[user.id] = user
        return user

    async def delete(self, user_id: UUID) -> None:
        self._users.pop(user_id, None)

    async def list_all(self) -> list[User]:
        return sorted(self._users.values(), key=lambda u: u.registration_date)


class InMemoryAuthorService(AuthorService):
    def __init__(self, authors: list[Author] | None = None):
        self._authors: dict[UUID, Author] = {a.id: a for a in authors or []}

    async def find_by_id(self, author_id: UUID) -> Author | None:
        return self._authors.get(author_id)

    async def find_by_name(self, name: str) -> list[Author]:
        needle = name.lower()
        return [
            a
            for a in self._authors.values()
            if needle in a.first_name.lower() or needle in a.last_name.lower()
        ]

    async def find_by_nationality(self, nationality: str) -> list[Author]:
        return [
            a
            for a in self._authors.values()
            if a.nationality.lower() == nationality.lower()
        ]

    async def find_popular_authors(self) -> list[Author]:
        return [a for a in self._authors.values() if a.is_popular]

    async def find_all(self) -> list[Author]:
        return list(self._authors.values())

    async def save(self, author: Author) -> Author:
        self._authors[author.id] = author
        return author

    async def delete(self, author_id: UUID) -> None:
        self._authors.pop(author_id, None)


class InMemoryBookService(BookService):
    def __init__(self, books: list[Book] | None = None):
        self._books: dict[UUID, Book] = {b.id: b for b in books or []}

    async def find_by_id(self, book_id: UUID) -> Book | None:
        return self._books.get(book_id)

    async def find_by_title(self, title: str) -> list[Book]:
        return [b for b in self._books.values() if title.lower() in b.title.lower()]

    async def search(self, term: str) -> list[Book]:
        term = term.lower()
        return [
            b
            for b in self._books.values()
            if term in b.title.lower() or term in b.publisher.lower()
        ]

    async def find_by_isbn(self, isbn: int) -> Book | None:
        return next((b for b in self._books.values() if b.isbn == isbn), None)

    async def find_by_status(self, status: BookStatus) -> list[Book]:
        return [b for b in self._books.values() if b.status == status]

    async def find_all(self) -> list[Book]:
        return list(self._books.values())

    async def find_popular_books(self) -> list[Book]:
        return [b for b in self._books.values() if b.is_popular]

    async def count_by_status(self) -> dict[BookStatus, int]:
        return dict(Counter(b.status for b in self._books.values()))

    async def save(self, book: Book) -> Book:
        self._books[book.id] = book
        return book

    async def delete(self, book_id: UUID) -> None:
        self._books.pop(book_id, None)


@dataclass(frozen=True)
class SentVerificationEmail:
    email: str
    token: str


@dataclass
class InMemoryEmailVerificationService(EmailVerificationService):
    """Token store keyed by token; records sends instead of mailing."""

    tokens: dict[str, EmailVerificationToken] = field(default_factory=dict)
    sent_emails: list[SentVerificationEmail] = field(default_factory=list)

    async def save_email_verification_token(
        self,
        email: str,
        token: str,
        expires_at: datetime,
    ) -> None:
        self.tokens = {t: v for t, v in self.tokens.items() if v.email != email}
        self.tokens[token] = EmailVerificationToken(
            token=token,
            email=email,
            expires_at=expires_at,
        )

    async def find_email_verification_token(
        self,
        token: str,
    ) -> EmailVerificationToken | None:
        return self.tokens.get(token)

    async def delete_email_verification_token(self, token: str) -> None:
        self.tokens.pop(token, None)

    async def send_verification_email(self, email: str, token: str) -> None:
        logger.debug("Recording verification email to %s", email)
        self.sent_emails.append(SentVerificationEmail(email=email, token=token))
