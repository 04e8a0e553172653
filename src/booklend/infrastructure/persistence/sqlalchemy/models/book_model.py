from datetime import date, datetime
from uuid import UUID

from sqlalchemy import BigInteger, Boolean, Date, DateTime, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from booklend.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class BookModel(Base, TimestampMixin):
    __tablename__ = "books"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    isbn: Mapped[int | None] = mapped_column(BigInteger, unique=True, nullable=True)
    pages: Mapped[int] = mapped_column(Integer, nullable=False)
    publication_date: Mapped[date] = mapped_column(Date, nullable=False)
    publisher: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20),
        default="available",
        nullable=False,
        index=True,
    )
    total_loans: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_popular: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    entry_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        return f"<BookModel(id={self.id}, title={self.title}, isbn={self.isbn})>"
