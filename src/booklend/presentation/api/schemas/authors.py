from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class AuthorCreateRequest(BaseModel):
    """Request schema for creating an author.

    Required fields are checked by the use case so that clients get its
    ``"<Field> is required"`` messages.
    """

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    biography: str | None = None
    nationality: str | None = None
    birth_date: date | None = None
    death_date: date | None = None


class AuthorUpdateRequest(BaseModel):
    """Partial update; omitted fields are left untouched.

    Sending ``null`` for death_date, email or phone_number clears them.
    """

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    biography: str | None = None
    nationality: str | None = None
    birth_date: date | None = None
    death_date: date | None = None
    is_popular: bool | None = None


class AuthorResponse(BaseModel):
    id: UUID
    first_name: str
    last_name: str
    email: str | None
    phone_number: str | None
    biography: str
    nationality: str
    birth_date: date
    death_date: date | None
    is_popular: bool

    model_config = ConfigDict(from_attributes=True)
