from booklend.infrastructure.persistence.memory.services import (
    InMemoryAuthorService,
    InMemoryAuthService,
    InMemoryBookService,
    InMemoryEmailVerificationService,
    SentVerificationEmail,
)

__all__ = [
    "InMemoryAuthService",
    "InMemoryAuthorService",
    "InMemoryBookService",
    "InMemoryEmailVerificationService",
    "SentVerificationEmail",
]
