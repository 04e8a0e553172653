from booklend.domain.shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from booklend.domain.shared.time import ensure_tz_aware, utc_now
from booklend.domain.shared.unset import UNSET, Patch, Unset

__all__ = [
    "UNSET",
    "AuthenticationError",
    "AuthorizationError",
    "BusinessRuleViolation",
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "Patch",
    "Unset",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
