from dataclasses import dataclass

from booklend.domain.shared.exceptions import ErrorCode, ValidationError


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a single validator call."""

    success: bool
    message: str
    code: ErrorCode | None = None

    @classmethod
    def ok(cls, message: str) -> "ValidationResult":
        return cls(success=True, message=message)

    @classmethod
    def failure(
        cls,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
    ) -> "ValidationResult":
        return cls(success=False, message=message, code=code)

    def raise_if_failed(self) -> None:
        """Raise the matching ValidationError when this result is a failure."""
        if not self.success:
            raise ValidationError(self.message, self.code or ErrorCode.VALIDATION_ERROR)
