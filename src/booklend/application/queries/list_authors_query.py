from booklend.application.dtos import AuthorListResult
from booklend.domain.author import AuthorService


class ListAuthorsQuery:
    """List authors, optionally filtered.

    Filters are exclusive and checked in order: ``popular``, ``name``,
    ``nationality``.
    """

    def __init__(self, author_service: AuthorService):
        self._author_service = author_service

    async def execute(
        self,
        name: str | None = None,
        nationality: str | None = None,
        popular: bool = False,
    ) -> AuthorListResult:
        if popular:
            authors = await self._author_service.find_popular_authors()
        elif name and name.strip():
            authors = await self._author_service.find_by_name(name.strip())
        elif nationality and nationality.strip():
            authors = await self._author_service.find_by_nationality(nationality.strip())
        else:
            authors = await self._author_service.find_all()

        return AuthorListResult.ok(
            "Authors retrieved successfully",
            authors=authors,
            total=len(authors),
        )
