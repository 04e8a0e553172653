from booklend.infrastructure.persistence.sqlalchemy.repositories.auth_service import (
    AuthServiceSQLAlchemy,
)
from booklend.infrastructure.persistence.sqlalchemy.repositories.author_service import (
    AuthorServiceSQLAlchemy,
)
from booklend.infrastructure.persistence.sqlalchemy.repositories.book_service import (
    BookServiceSQLAlchemy,
)
from booklend.infrastructure.persistence.sqlalchemy.repositories.email_verification_service import (
    EmailVerificationServiceSQLAlchemy,
)

__all__ = [
    "AuthServiceSQLAlchemy",
    "AuthorServiceSQLAlchemy",
    "BookServiceSQLAlchemy",
    "EmailVerificationServiceSQLAlchemy",
]
