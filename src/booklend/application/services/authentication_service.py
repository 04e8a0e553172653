"""Authentication service for login, token refresh and profile lookup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from booklend.application.dtos import LoginResult, ProfileResult
from booklend.domain.shared.exceptions import DomainException
from booklend.domain.user import (
    InactiveAccountError,
    InvalidCredentialsError,
    User,
    UserNotFoundError,
)
from booklend.domain.validation import validate_required_fields

if TYPE_CHECKING:
    from booklend.domain.security import CryptoService
    from booklend.domain.user import AuthService
    from booklend.infrastructure.security import JWTService

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for signed-in users.

    Registration happens through the email verification commands; this
    service only deals with accounts that already exist:
    - Login with email and password
    - Issuing a fresh access token
    - Reading the caller's profile
    """

    def __init__(
        self,
        auth_service: AuthService,
        crypto_service: CryptoService,
        jwt_service: JWTService,
    ):
        self._auth_service = auth_service
        self._crypto_service = crypto_service
        self._jwt_service = jwt_service

    def _issue(self, user: User, message: str) -> LoginResult:
        token = self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
            role=user.role.value,
        )
        return LoginResult.ok(
            message,
            access_token=token,
            expires_in=int(self._jwt_service.access_token_lifetime.total_seconds()),
            user=user.to_secure(),
        )

    async def login(self, email: str | None, password: str | None) -> LoginResult:
        try:
            result = validate_required_fields([(email, "Email"), (password, "Password")])
            if not result.success:
                return LoginResult.failed_with(
                    "Email and password are required",
                    result.code,  # type: ignore[arg-type]
                )

            user = await self._auth_service.find_by_email(email.strip().lower())  # type: ignore[union-attr]
            if user is None:
                raise InvalidCredentialsError

            if not await self._crypto_service.compare_password(
                password,  # type: ignore[arg-type]
                user.hashed_password,
            ):
                raise InvalidCredentialsError

            if not user.is_active:
                raise InactiveAccountError
        except DomainException as e:
            logger.info("Login rejected for %s: %s", email, e.message)
            return LoginResult.failed(e)

        logger.info("User logged in: %s", user.email)
        return self._issue(user, "Login successful")

    async def refresh(self, user_id: UUID) -> LoginResult:
        user = await self._auth_service.find_by_id(user_id)
        if user is None or not user.is_active:
            return LoginResult.failed(UserNotFoundError("User not found or inactive"))

        logger.debug("Token refreshed for user: %s", user.email)
        return self._issue(user, "Token refreshed successfully")

    async def profile(self, user_id: UUID) -> ProfileResult:
        user = await self._auth_service.find_by_id(user_id)
        if user is None:
            return ProfileResult.failed(UserNotFoundError())
        return ProfileResult.ok("Profile retrieved successfully", user=user.to_secure())
