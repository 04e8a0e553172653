from booklend.infrastructure.security.crypto_service import BcryptCryptoService
from booklend.infrastructure.security.jwt_service import (
    InvalidAccessTokenError,
    JWTService,
    TokenPayload,
)

__all__ = [
    "BcryptCryptoService",
    "InvalidAccessTokenError",
    "JWTService",
    "TokenPayload",
]
