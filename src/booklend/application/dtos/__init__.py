from booklend.application.dtos.results import (
    AuthorListResult,
    AuthorResult,
    BookListResult,
    BookResult,
    BookStatisticsResult,
    EmailVerificationResult,
    LoginResult,
    OperationResult,
    ProfileResult,
    RegistrationResult,
)

__all__ = [
    "AuthorListResult",
    "AuthorResult",
    "BookListResult",
    "BookResult",
    "BookStatisticsResult",
    "EmailVerificationResult",
    "LoginResult",
    "OperationResult",
    "ProfileResult",
    "RegistrationResult",
]
