"""FastAPI dependency injection for the BookLend API.

Provides dependencies for:
- Database sessions
- Persistence services bound to the request session
- Crypto, JWT and email services
- Authentication (current user from JWT)
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from booklend.application.services import AuthenticationService
from booklend.domain.author import AuthorService
from booklend.domain.book import BookService
from booklend.domain.security import CryptoService
from booklend.domain.user import AuthService, EmailVerificationService, User
from booklend.infrastructure.email import EmailService
from booklend.infrastructure.persistence.sqlalchemy import (
    AuthorServiceSQLAlchemy,
    AuthServiceSQLAlchemy,
    BookServiceSQLAlchemy,
    EmailVerificationServiceSQLAlchemy,
)
from booklend.infrastructure.security import (
    BcryptCryptoService,
    InvalidAccessTokenError,
    JWTService,
)
from booklend.presentation.api.config import get_api_settings
from booklend_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


@lru_cache()
def get_database_url() -> str:
    """Get database URL from application settings."""
    url = get_settings().database_url

    # Ensure data directory exists for SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(get_database_url(), echo=False)


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Get the shared async session maker (singleton)."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Security & Email Services
# -----------------------------------------------------------------------------


def get_jwt_service(
    settings: Settings = Depends(get_api_settings),
) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_crypto_service(
    settings: Settings = Depends(get_api_settings),
) -> CryptoService:
    return BcryptCryptoService(rounds=settings.bcrypt_rounds)


def get_email_service(
    settings: Settings = Depends(get_api_settings),
) -> EmailService:
    return EmailService(settings)


Crypto = Annotated[CryptoService, Depends(get_crypto_service)]


# -----------------------------------------------------------------------------
# Persistence Services (bound to the request session)
# -----------------------------------------------------------------------------


def get_auth_service(session: DBSession) -> AuthService:
    return AuthServiceSQLAlchemy(session)


def get_author_service(session: DBSession) -> AuthorService:
    return AuthorServiceSQLAlchemy(session)


def get_book_service(
    session: DBSession,
    settings: Settings = Depends(get_api_settings),
) -> BookService:
    return BookServiceSQLAlchemy(session, popular_limit=settings.popular_books_limit)


def get_email_verification_service(
    session: DBSession,
    email_service: EmailService = Depends(get_email_service),
    settings: Settings = Depends(get_api_settings),
) -> EmailVerificationService:
    return EmailVerificationServiceSQLAlchemy(
        session,
        email_service=email_service,
        verification_base_url=settings.verification_base_url,
    )


Users = Annotated[AuthService, Depends(get_auth_service)]
Authors = Annotated[AuthorService, Depends(get_author_service)]
Books = Annotated[BookService, Depends(get_book_service)]
Verifications = Annotated[
    EmailVerificationService,
    Depends(get_email_verification_service),
]


def get_authentication_service(
    users: Users,
    crypto: Crypto,
    jwt_service: JWTService = Depends(get_jwt_service),
) -> AuthenticationService:
    """Get authentication service with all dependencies."""
    return AuthenticationService(
        auth_service=users,
        crypto_service=crypto,
        jwt_service=jwt_service,
    )


Authentication = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_user(
    users: Users,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> User:
    """
    FastAPI dependency to get the current authenticated user from JWT.

    Raises
    ------
    HTTPException
        401 if token is missing, invalid, or user not found
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidAccessTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    if not payload.is_access_token():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token type",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = await users.find_by_id(payload.user_id)
    if user is None:
        logger.warning("User not found for token: %s", payload.user_id)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user


# Type alias for injected current user
CurrentUser = Annotated[User, Depends(get_current_user)]


async def require_admin(user: User = Depends(get_current_user)) -> User:
    """Require admin user."""
    if not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied. Admin role required",
        )
    return user


# Type alias for admin user
AdminUser = Annotated[User, Depends(require_admin)]
