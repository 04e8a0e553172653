from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from booklend.domain.book import BookStatus


class BookCreateRequest(BaseModel):
    title: str
    isbn: int | None = None
    pages: int = Field(..., ge=0)
    publication_date: date
    publisher: str


class BookUpdateRequest(BaseModel):
    """Partial update; omitted or null fields keep their stored value."""

    title: str | None = None
    isbn: int | None = None
    pages: int | None = Field(default=None, ge=0)
    publication_date: date | None = None
    publisher: str | None = None
    status: BookStatus | None = None
    is_popular: bool | None = None


class BookResponse(BaseModel):
    id: UUID
    title: str
    isbn: int | None
    pages: int
    publication_date: date
    publisher: str
    status: BookStatus
    total_loans: int
    is_popular: bool
    entry_date: datetime

    model_config = ConfigDict(from_attributes=True)


class BookStatisticsResponse(BaseModel):
    total: int
    available: int
    borrowed: int
    reserved: int
    maintenance: int
    lost: int

    model_config = ConfigDict(from_attributes=True)
