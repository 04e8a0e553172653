"""JWT token service.

Provides access token creation and verification for authentication.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from booklend.domain.shared.exceptions import AuthenticationError


class InvalidAccessTokenError(AuthenticationError):
    """Raised when a bearer token cannot be decoded or has expired."""


@dataclass(frozen=True)
class TokenPayload:
    user_id: UUID
    email: str
    role: str
    exp: datetime
    token_type: str = "access"

    def is_access_token(self) -> bool:
        return self.token_type == "access"


class JWTService:
    """Service for JWT token creation and verification.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_access_token(user_id, "user@example.com", "USER")
    >>> payload = service.verify_token(token)
    >>> print(payload.user_id)
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 24
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_expire_hours
            Hours until an access token expires (default 24)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = timedelta(hours=access_token_expire_hours)

    @property
    def access_token_lifetime(self) -> timedelta:
        return self._access_expire

    def create_access_token(
        self,
        user_id: UUID,
        email: str,
        role: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed access token.

        Parameters
        ----------
        user_id
            The user's unique identifier
        email
            The user's email address
        role
            The user's role, embedded for clients
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        payload = {
            "sub": str(user_id),
            "email": email,
            "role": role,
            "type": "access",
            "iat": now,
            "exp": now + (expires_delta or self._access_expire),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Raises
        ------
        InvalidAccessTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
            )

            return TokenPayload(
                user_id=UUID(payload["sub"]),
                email=payload["email"],
                role=payload.get("role", ""),
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
                token_type=payload.get("type", "access"),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidAccessTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidAccessTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError) as e:
            raise InvalidAccessTokenError(f"Malformed token payload: {e}") from e
