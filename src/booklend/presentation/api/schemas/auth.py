from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from booklend.domain.user import UserRole, UserStatus


class SendVerificationRequest(BaseModel):
    """Request schema for starting a registration."""

    email: str | None = None


class CompleteRegistrationRequest(BaseModel):
    token: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    password: str | None = None


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class EmailResponse(BaseModel):
    email: str


class UserResponse(BaseModel):
    """A user without credentials."""

    id: UUID
    email: str
    first_name: str
    last_name: str
    phone_number: str | None
    status: UserStatus
    enabled: bool
    book_limit: int
    registration_date: datetime
    role: UserRole

    model_config = ConfigDict(from_attributes=True)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse
