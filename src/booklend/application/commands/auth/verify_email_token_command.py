import logging

from booklend.application.commands.auth.token_lookup import load_unexpired_token
from booklend.application.dtos import EmailVerificationResult
from booklend.domain.shared.exceptions import DomainException
from booklend.domain.user import EmailVerificationService
from booklend.domain.validation import validate_required_field

logger = logging.getLogger(__name__)


class VerifyEmailTokenCommand:
    """Check a verification token without consuming it."""

    def __init__(self, email_verification_service: EmailVerificationService):
        self._verification_service = email_verification_service

    async def execute(self, token: str | None) -> EmailVerificationResult:
        try:
            validate_required_field(token, "Token").raise_if_failed()
            stored = await load_unexpired_token(self._verification_service, token)  # type: ignore[arg-type]
        except DomainException as e:
            logger.debug("Token verification failed: %s", e.message)
            return EmailVerificationResult.failed(e)

        return EmailVerificationResult.ok("Token is valid", email=stored.email)
