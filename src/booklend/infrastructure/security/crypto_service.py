"""bcrypt-backed implementation of the CryptoService port."""

import asyncio
import secrets
import uuid
from uuid import UUID

import bcrypt

from booklend.domain.security import CryptoService


class BcryptCryptoService(CryptoService):
    """Password hashing with bcrypt, ids with uuid4, tokens from ``secrets``.

    Hashing runs in a worker thread so the event loop is not blocked for
    the duration of the bcrypt work factor.

    Examples
    --------
    >>> service = BcryptCryptoService(rounds=4)
    >>> hashed = await service.hash_password("my_secure_password")
    >>> await service.compare_password("my_secure_password", hashed)
    True
    """

    TOKEN_BYTES = 32

    def __init__(self, rounds: int = 12):
        """Initialize the crypto service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12.
        """
        self._rounds = rounds

    async def hash_password(self, password: str) -> str:
        return await asyncio.to_thread(self._hash, password)

    async def compare_password(self, password: str, hashed_password: str) -> bool:
        return await asyncio.to_thread(self._verify, password, hashed_password)

    async def generate_uuid(self) -> UUID:
        return uuid.uuid4()

    async def generate_random_token(self) -> str:
        return secrets.token_hex(self.TOKEN_BYTES)

    def _hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def _verify(self, password: str, hashed_password: str) -> bool:
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                hashed_password.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format
            return False
