"""User record and its password-free projection."""

from dataclasses import dataclass, fields
from datetime import datetime
from uuid import UUID

from booklend.domain.shared.time import utc_now
from booklend.domain.user.value_objects import UserRole, UserStatus

DEFAULT_BOOK_LIMIT = 3


@dataclass(frozen=True)
class SecureUser:
    """A user as it may leave the application: no password hash."""

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


@dataclass(frozen=True)
class User:
    """A registered library member.

    Email addresses are stored lower-cased and are unique across users.
    """

    id: UUID
    email: str
    first_name: str
    last_name: str
    hashed_password: str
    status: UserStatus
    enabled: bool
    book_limit: int
    registration_date: datetime
    role: UserRole = UserRole.USER
    phone_number: str | None = None

    @classmethod
    def register(  # NOQA: PLR0913
        cls,
        user_id: UUID,
        email: str,
        first_name: str,
        last_name: str,
        hashed_password: str,
        phone_number: str | None = None,
        book_limit: int = DEFAULT_BOOK_LIMIT,
    ) -> "User":
        """Create an active, enabled member with the USER role."""
        return cls(
            id=user_id,
            email=email,
            first_name=first_name,
            last_name=last_name,
            hashed_password=hashed_password,
            status=UserStatus.ACTIVE,
            enabled=True,
            book_limit=book_limit,
            registration_date=utc_now(),
            role=UserRole.USER,
            phone_number=phone_number,
        )

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_active(self) -> bool:
        return self.enabled and self.status == UserStatus.ACTIVE

    def to_secure(self) -> SecureUser:
        return SecureUser(
            **{f.name: getattr(self, f.name) for f in fields(SecureUser)},
        )
