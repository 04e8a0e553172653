from booklend.presentation.api.schemas.auth import (
    CompleteRegistrationRequest,
    EmailResponse,
    LoginRequest,
    SendVerificationRequest,
    TokenResponse,
    UserResponse,
)
from booklend.presentation.api.schemas.authors import (
    AuthorCreateRequest,
    AuthorResponse,
    AuthorUpdateRequest,
)
from booklend.presentation.api.schemas.books import (
    BookCreateRequest,
    BookResponse,
    BookStatisticsResponse,
    BookUpdateRequest,
)
from booklend.presentation.api.schemas.common import (
    DataResponse,
    ErrorResponse,
    ListResponse,
    MessageResponse,
)

__all__ = [
    "AuthorCreateRequest",
    "AuthorResponse",
    "AuthorUpdateRequest",
    "BookCreateRequest",
    "BookResponse",
    "BookStatisticsResponse",
    "BookUpdateRequest",
    "CompleteRegistrationRequest",
    "DataResponse",
    "EmailResponse",
    "ErrorResponse",
    "ListResponse",
    "LoginRequest",
    "MessageResponse",
    "SendVerificationRequest",
    "TokenResponse",
    "UserResponse",
]
