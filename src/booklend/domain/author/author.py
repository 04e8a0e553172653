from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class Author:
    """An author in the catalogue.

    ``death_date``, when present, is strictly after ``birth_date``.
    """

    id: UUID
    first_name: str
    last_name: str
    biography: str
    nationality: str
    birth_date: date
    death_date: date | None = None
    email: str | None = None
    phone_number: str | None = None
    is_popular: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
