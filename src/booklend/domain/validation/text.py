"""String helpers used when building and merging records."""

from typing import TypeVar

T = TypeVar("T")


def trim_or_none(value: str | None) -> str | None:
    """Strip surrounding whitespace; blank input becomes None."""
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


def trim_or_default(value: str | None, default: T) -> str | T:
    """Strip surrounding whitespace; blank input falls back to ``default``."""
    trimmed = trim_or_none(value)
    return default if trimmed is None else trimmed
