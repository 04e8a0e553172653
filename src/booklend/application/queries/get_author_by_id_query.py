from uuid import UUID

from booklend.application.dtos import AuthorResult
from booklend.domain.author import AuthorNotFoundError, AuthorService


class GetAuthorByIdQuery:
    def __init__(self, author_service: AuthorService):
        self._author_service = author_service

    async def execute(self, author_id: UUID) -> AuthorResult:
        author = await self._author_service.find_by_id(author_id)
        if author is None:
            return AuthorResult.failed(AuthorNotFoundError(author_id))
        return AuthorResult.ok("Author retrieved successfully", author=author)
