from datetime import date

from booklend.domain.shared.exceptions import ErrorCode
from booklend.domain.validation.result import ValidationResult


def validate_birth_death_dates(
    birth_date: date | None,
    death_date: date | None,
) -> ValidationResult:
    """Death date, when present, must fall strictly after the birth date."""
    if death_date is None or birth_date is None:
        return ValidationResult.ok("Dates are valid")

    if death_date <= birth_date:
        return ValidationResult.failure(
            "Death date must be after birth date",
            ErrorCode.INVALID_DATE,
        )

    return ValidationResult.ok("Dates are valid")
