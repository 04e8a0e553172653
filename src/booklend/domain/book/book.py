from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from uuid import UUID


class BookStatus(str, Enum):
    """Circulation state of a copy.

    Lending moves AVAILABLE to BORROWED; the other states are set manually.
    """

    AVAILABLE = "available"
    BORROWED = "borrowed"
    RESERVED = "reserved"
    MAINTENANCE = "maintenance"
    LOST = "lost"


@dataclass(frozen=True)
class Book:
    """A catalogued book. The ISBN is unique among books when present."""

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

    @property
    def is_available(self) -> bool:
        return self.status == BookStatus.AVAILABLE


@dataclass(frozen=True)
class BookStatistics:
    """Catalogue size and the number of books in each status."""

    total: int
    available: int
    borrowed: int
    reserved: int
    maintenance: int
    lost: int

    @classmethod
    def from_counts(cls, counts: Mapping[BookStatus, int]) -> "BookStatistics":
        return cls(
            total=sum(counts.values()),
            **{s.value: counts.get(s, 0) for s in BookStatus},
        )
