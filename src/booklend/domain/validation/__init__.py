from booklend.domain.validation.date_validator import validate_birth_death_dates
from booklend.domain.validation.email_validator import (
    InvalidEmailError,
    is_valid_email,
    validate_and_normalize_email,
)
from booklend.domain.validation.field_validator import (
    validate_required_field,
    validate_required_fields,
)
from booklend.domain.validation.result import ValidationResult
from booklend.domain.validation.text import trim_or_default, trim_or_none

__all__ = [
    "InvalidEmailError",
    "ValidationResult",
    "is_valid_email",
    "trim_or_default",
    "trim_or_none",
    "validate_and_normalize_email",
    "validate_birth_death_dates",
    "validate_required_field",
    "validate_required_fields",
]
