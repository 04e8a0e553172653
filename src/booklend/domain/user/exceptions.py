"""User and registration domain exceptions."""

from booklend.domain.shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class UserNotFoundError(EntityNotFoundError):
    def __init__(self, message: str = "User not found"):
        super().__init__(message, ErrorCode.USER_NOT_FOUND)


class AdminRoleRequiredError(AuthorizationError):
    def __init__(self) -> None:
        super().__init__("Access denied. Admin role required")


class EmailAlreadyRegisteredError(ConflictError):
    def __init__(self, email: str | None = None):
        super().__init__(
            "Email already registered",
            ErrorCode.EMAIL_ALREADY_REGISTERED,
            {"email": email} if email else None,
        )


class InvalidVerificationTokenError(ValidationError):
    def __init__(self) -> None:
        super().__init__("Invalid token", ErrorCode.INVALID_TOKEN)


class VerificationTokenExpiredError(ValidationError):
    def __init__(self) -> None:
        super().__init__("Token has expired", ErrorCode.TOKEN_EXPIRED)


class InvalidCredentialsError(AuthenticationError):
    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class InactiveAccountError(AuthorizationError):
    def __init__(self, message: str = "Account is not active"):
        super().__init__(message, ErrorCode.ACCOUNT_INACTIVE)
