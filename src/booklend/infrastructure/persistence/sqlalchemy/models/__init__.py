from booklend.infrastructure.persistence.sqlalchemy.models.author_model import (
    AuthorModel,
)
from booklend.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from booklend.infrastructure.persistence.sqlalchemy.models.book_model import BookModel
from booklend.infrastructure.persistence.sqlalchemy.models.email_verification_token_model import (
    EmailVerificationTokenModel,
)
from booklend.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "AuthorModel",
    "Base",
    "BookModel",
    "EmailVerificationTokenModel",
    "TimestampMixin",
    "UserModel",
]
