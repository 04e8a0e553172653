"""Required-field checks shared by all use cases."""

from collections.abc import Iterable
from typing import Any

from booklend.domain.shared.exceptions import ErrorCode
from booklend.domain.validation.result import ValidationResult


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def validate_required_field(value: Any, field_name: str) -> ValidationResult:
    """Fail with ``"<field_name> is required"`` for None or blank strings.

    Non-string values (dates, numbers) only fail when they are None, so
    ``0`` and ``False`` count as supplied.
    """
    if _is_blank(value):
        return ValidationResult.failure(
            f"{field_name} is required",
            ErrorCode.REQUIRED_FIELD,
        )
    return ValidationResult.ok("Field is valid")


def validate_required_fields(fields: Iterable[tuple[Any, str]]) -> ValidationResult:
    """Validate ``(value, field_name)`` pairs in order; the first failure wins."""
    for value, field_name in fields:
        result = validate_required_field(value, field_name)
        if not result.success:
            return result
    return ValidationResult.ok("All fields are valid")
