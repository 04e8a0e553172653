import logging
from datetime import timedelta

from booklend.application.dtos import OperationResult
from booklend.domain.security import CryptoService
from booklend.domain.shared.exceptions import DomainException, ErrorCode
from booklend.domain.shared.time import utc_now
from booklend.domain.user import (
    AuthService,
    EmailAlreadyRegisteredError,
    EmailVerificationService,
)
from booklend.domain.validation import validate_required_field

logger = logging.getLogger(__name__)

SEND_FAILED_MESSAGE = "Failed to send verification email"


class SendEmailVerificationCommand:
    """Start a registration by emailing a verification token.

    A delivery error is reported as an ``INTERNAL_ERROR`` failure so the
    caller discards the stored token along with the rest of the request.
    """

    DEFAULT_EXPIRE_HOURS = 24

    def __init__(
        self,
        auth_service: AuthService,
        email_verification_service: EmailVerificationService,
        crypto_service: CryptoService,
        token_expire_hours: int = DEFAULT_EXPIRE_HOURS,
    ):
        self._auth_service = auth_service
        self._verification_service = email_verification_service
        self._crypto_service = crypto_service
        self._token_lifetime = timedelta(hours=token_expire_hours)

    async def execute(self, email: str | None) -> OperationResult:
        try:
            validate_required_field(email, "Email").raise_if_failed()
            normalized = email.strip().lower()  # type: ignore[union-attr]

            if await self._auth_service.find_by_email(normalized):
                raise EmailAlreadyRegisteredError(normalized)

            token = await self._crypto_service.generate_random_token()
            expires_at = utc_now() + self._token_lifetime

            await self._verification_service.save_email_verification_token(
                normalized,
                token,
                expires_at,
            )
        except DomainException as e:
            logger.debug("Verification email rejected: %s", e.message)
            return OperationResult.failed(e)

        try:
            await self._verification_service.send_verification_email(normalized, token)
        except Exception as e:
            logger.error("Failed to send verification email to %s: %s", normalized, e)
            return OperationResult.failed_with(
                SEND_FAILED_MESSAGE,
                ErrorCode.INTERNAL_ERROR,
            )

        logger.info("Verification email sent to %s", normalized)
        return OperationResult.ok("Verification email sent successfully")
