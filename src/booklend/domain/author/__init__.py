from booklend.domain.author.author import Author
from booklend.domain.author.author_service import AuthorService
from booklend.domain.author.exceptions import AuthorNotFoundError

__all__ = [
    "Author",
    "AuthorNotFoundError",
    "AuthorService",
]
