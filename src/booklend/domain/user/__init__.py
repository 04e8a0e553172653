from booklend.domain.user.auth_service import AuthService
from booklend.domain.user.email_verification import (
    EmailVerificationService,
    EmailVerificationToken,
)
from booklend.domain.user.exceptions import (
    AdminRoleRequiredError,
    EmailAlreadyRegisteredError,
    InactiveAccountError,
    InvalidCredentialsError,
    InvalidVerificationTokenError,
    UserNotFoundError,
    VerificationTokenExpiredError,
)
from booklend.domain.user.user import DEFAULT_BOOK_LIMIT, SecureUser, User
from booklend.domain.user.value_objects import UserRole, UserStatus

__all__ = [
    "DEFAULT_BOOK_LIMIT",
    "AdminRoleRequiredError",
    "AuthService",
    "EmailAlreadyRegisteredError",
    "EmailVerificationService",
    "EmailVerificationToken",
    "InactiveAccountError",
    "InvalidCredentialsError",
    "InvalidVerificationTokenError",
    "SecureUser",
    "User",
    "UserNotFoundError",
    "UserRole",
    "UserStatus",
    "VerificationTokenExpiredError",
]
