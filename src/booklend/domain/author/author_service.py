from abc import ABC, abstractmethod
from uuid import UUID

from booklend.domain.author.author import Author


class AuthorService(ABC):
    """Persistence port for authors."""

    @abstractmethod
    async def find_by_id(self, author_id: UUID) -> Author | None:
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> list[Author]:
        """Case-insensitive substring match on first or last name."""

    @abstractmethod
    async def find_by_nationality(self, nationality: str) -> list[Author]:
        """Case-insensitive exact match on nationality."""

    @abstractmethod
    async def find_popular_authors(self) -> list[Author]:
        pass

    @abstractmethod
    async def find_all(self) -> list[Author]:
        pass

    @abstractmethod
    async def save(self, author: Author) -> Author:
        """Insert or update an author and return the stored record."""

    @abstractmethod
    async def delete(self, author_id: UUID) -> None:
        pass
