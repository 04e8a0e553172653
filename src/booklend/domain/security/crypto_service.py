from abc import ABC, abstractmethod
from uuid import UUID


class CryptoService(ABC):
    """Port for password hashing and identifier/token generation."""

    @abstractmethod
    async def hash_password(self, password: str) -> str:
        pass

    @abstractmethod
    async def compare_password(self, password: str, hashed_password: str) -> bool:
        pass

    @abstractmethod
    async def generate_uuid(self) -> UUID:
        pass

    @abstractmethod
    async def generate_random_token(self) -> str:
        """Return an unguessable token suitable for a verification link."""
