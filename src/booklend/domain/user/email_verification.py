from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from booklend.domain.shared.time import ensure_tz_aware, utc_now


@dataclass(frozen=True)
class EmailVerificationToken:
    """A pending registration: one active token per email address."""

    token: str
    email: str
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        current = now or utc_now()
        return ensure_tz_aware(self.expires_at) < current


class EmailVerificationService(ABC):
    """Stores registration tokens and delivers verification emails."""

    @abstractmethod
    async def save_email_verification_token(
        self,
        email: str,
        token: str,
        expires_at: datetime,
    ) -> None:
        """Store a token for the email, replacing any earlier token for it."""

    @abstractmethod
    async def find_email_verification_token(
        self,
        token: str,
    ) -> EmailVerificationToken | None:
        """Look up a token; returns None if it was never issued or was deleted."""

    @abstractmethod
    async def delete_email_verification_token(self, token: str) -> None:
        """Delete a token; unknown tokens are ignored."""

    @abstractmethod
    async def send_verification_email(self, email: str, token: str) -> None:
        """Deliver the verification link for ``token`` to ``email``."""
