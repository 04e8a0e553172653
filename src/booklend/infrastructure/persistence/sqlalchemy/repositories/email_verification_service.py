"""Database-backed token store that mails links through EmailService."""

import logging
from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from booklend.domain.shared.time import ensure_tz_aware
from booklend.domain.user import EmailVerificationService, EmailVerificationToken
from booklend.infrastructure.email import EmailService
from booklend.infrastructure.persistence.sqlalchemy.models import (
    EmailVerificationTokenModel,
)

logger = logging.getLogger(__name__)


class EmailVerificationServiceSQLAlchemy(EmailVerificationService):
    def __init__(
        self,
        session: AsyncSession,
        email_service: EmailService,
        verification_base_url: str,
    ) -> None:
        self._session = session
        self._email_service = email_service
        self._verification_base_url = verification_base_url.rstrip("/")

    async def save_email_verification_token(
        self,
        email: str,
        token: str,
        expires_at: datetime,
    ) -> None:
        # One active token per email: drop the previous one first.
        await self._session.execute(
            delete(EmailVerificationTokenModel).where(
                EmailVerificationTokenModel.email == email,
            ),
        )
        self._session.add(
            EmailVerificationTokenModel(token=token, email=email, expires_at=expires_at),
        )
        await self._session.flush()
        logger.debug("Stored verification token for %s (expires %s)", email, expires_at)

    async def find_email_verification_token(
        self,
        token: str,
    ) -> EmailVerificationToken | None:
        stmt = select(EmailVerificationTokenModel).where(
            EmailVerificationTokenModel.token == token,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return EmailVerificationToken(
            token=model.token,
            email=model.email,
            expires_at=ensure_tz_aware(model.expires_at),
        )

    async def delete_email_verification_token(self, token: str) -> None:
        await self._session.execute(
            delete(EmailVerificationTokenModel).where(
                EmailVerificationTokenModel.token == token,
            ),
        )
        await self._session.flush()

    async def send_verification_email(self, email: str, token: str) -> None:
        link = f"{self._verification_base_url}/{token}"
        self._email_service.send_verification_email(email, link)
