"""Admin gate used before author mutations.

Only the role is consulted. A disabled or suspended admin still passes.
"""

import logging
from dataclasses import dataclass
from uuid import UUID

from booklend.domain.shared.exceptions import DomainException, ErrorCode
from booklend.domain.user import (
    AdminRoleRequiredError,
    AuthService,
    User,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthorizationResult:
    success: bool
    message: str
    code: ErrorCode | None = None


async def require_admin(auth_service: AuthService, user_id: UUID) -> User:
    """Return the admin user or raise.

    Raises
    ------
    UserNotFoundError
        If no user exists for ``user_id``
    AdminRoleRequiredError
        If the user does not have the ADMIN role
    """
    user = await auth_service.find_by_id(user_id)
    if user is None:
        raise UserNotFoundError

    if not user.is_admin:
        logger.warning("Non-admin user %s attempted an admin operation", user_id)
        raise AdminRoleRequiredError

    return user


async def verify_admin_role(
    auth_service: AuthService,
    user_id: UUID,
) -> AuthorizationResult:
    """Check that ``user_id`` belongs to an admin, as a result value."""
    try:
        await require_admin(auth_service, user_id)
    except DomainException as e:
        return AuthorizationResult(success=False, message=e.message, code=e.code)

    return AuthorizationResult(success=True, message="Authorization successful")
