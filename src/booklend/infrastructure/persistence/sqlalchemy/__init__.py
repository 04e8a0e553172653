from booklend.infrastructure.persistence.sqlalchemy.models import Base
from booklend.infrastructure.persistence.sqlalchemy.repositories import (
    AuthorServiceSQLAlchemy,
    AuthServiceSQLAlchemy,
    BookServiceSQLAlchemy,
    EmailVerificationServiceSQLAlchemy,
)

__all__ = [
    "AuthServiceSQLAlchemy",
    "AuthorServiceSQLAlchemy",
    "Base",
    "BookServiceSQLAlchemy",
    "EmailVerificationServiceSQLAlchemy",
]
