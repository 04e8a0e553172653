"""Email address validation and normalization."""

import re

from booklend.domain.shared.exceptions import ErrorCode, ValidationError

# local@domain.tld with no whitespace and a single @
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]{2,}")


class InvalidEmailError(ValidationError):
    """Raised when an email address is structurally invalid."""

    def __init__(self, message: str = "Invalid email format"):
        super().__init__(message, ErrorCode.INVALID_FORMAT)


def _has_bad_dots(part: str) -> bool:
    return ".." in part or part.startswith(".") or part.endswith(".")


def is_valid_email(email: str | None) -> bool:
    """Check the structure of an email address.

    Rejects whitespace, a missing or repeated ``@``, a domain without a
    two-letter (or longer) TLD, and doubled, leading or trailing dots in
    either the local part or the domain.
    """
    if not email or not EMAIL_PATTERN.fullmatch(email):
        return False

    local_part, _, domain = email.partition("@")
    return not (_has_bad_dots(local_part) or _has_bad_dots(domain))


def validate_and_normalize_email(email: str | None) -> str | None:
    """Return the trimmed, lower-cased address, or None for blank input.

    Raises
    ------
    InvalidEmailError
        If the trimmed value is not a valid email address
    """
    if email is None:
        return None

    trimmed = email.strip()
    if not trimmed:
        return None

    if not is_valid_email(trimmed):
        raise InvalidEmailError

    return trimmed.lower()
