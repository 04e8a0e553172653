from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from booklend.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class EmailVerificationTokenModel(Base, TimestampMixin):
    """Pending registration tokens; at most one row per email."""

    __tablename__ = "email_verification_tokens"

    token: Mapped[str] = mapped_column(String(128), primary_key=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
