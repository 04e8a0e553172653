from datetime import date
from uuid import UUID

from sqlalchemy import Boolean, Date, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from booklend.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class AuthorModel(Base, TimestampMixin):
    __tablename__ = "authors"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    biography: Mapped[str] = mapped_column(Text, nullable=False)
    nationality: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
    death_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_popular: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<AuthorModel(id={self.id}, "
            f"name={self.first_name} {self.last_name})>"
        )
