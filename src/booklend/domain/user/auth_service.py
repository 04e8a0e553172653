from abc import ABC, abstractmethod
from uuid import UUID

from booklend.domain.user.user import User


class AuthService(ABC):
    """Persistence port for user accounts."""

    @abstractmethod
    async def find_by_email(self, email: str) -> User | None:
        """Find a user by email (exact match on the normalized address)."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find a user by id."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert or update a user and return the stored record."""

    @abstractmethod
    async def delete(self, user_id: UUID) -> None:
        """Remove a user; missing ids are ignored."""

    @abstractmethod
    async def list_all(self) -> list[User]:
        """Return every user ordered by registration date."""
