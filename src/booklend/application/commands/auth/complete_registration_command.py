import logging

from booklend.application.commands.auth.token_lookup import load_unexpired_token
from booklend.application.dtos import RegistrationResult
from booklend.domain.security import CryptoService
from booklend.domain.shared.exceptions import DomainException
from booklend.domain.user import (
    DEFAULT_BOOK_LIMIT,
    AuthService,
    EmailAlreadyRegisteredError,
    EmailVerificationService,
    User,
)
from booklend.domain.validation import trim_or_none, validate_required_fields

logger = logging.getLogger(__name__)


class CompleteRegistrationCommand:
    """Turn a valid verification token into an active user account."""

    def __init__(
        self,
        auth_service: AuthService,
        email_verification_service: EmailVerificationService,
        crypto_service: CryptoService,
        default_book_limit: int = DEFAULT_BOOK_LIMIT,
    ):
        self._auth_service = auth_service
        self._verification_service = email_verification_service
        self._crypto_service = crypto_service
        self._book_limit = default_book_limit

    async def execute(  # NOQA: PLR0913
        self,
        token: str | None,
        first_name: str | None,
        last_name: str | None,
        password: str | None,
        phone_number: str | None = None,
    ) -> RegistrationResult:
        try:
            validate_required_fields(
                [
                    (token, "Token"),
                    (first_name, "First name"),
                    (last_name, "Last name"),
                    (password, "Password"),
                ],
            ).raise_if_failed()

            stored = await load_unexpired_token(self._verification_service, token)  # type: ignore[arg-type]

            if await self._auth_service.find_by_email(stored.email):
                raise EmailAlreadyRegisteredError(stored.email)

            user = User.register(
                user_id=await self._crypto_service.generate_uuid(),
                email=stored.email,
                first_name=first_name.strip(),  # type: ignore[union-attr]
                last_name=last_name.strip(),  # type: ignore[union-attr]
                hashed_password=await self._crypto_service.hash_password(password),  # type: ignore[arg-type]
                phone_number=trim_or_none(phone_number),
                book_limit=self._book_limit,
            )

            saved = await self._auth_service.save(user)
            await self._verification_service.delete_email_verification_token(stored.token)
        except DomainException as e:
            logger.debug("Registration rejected: %s", e.message)
            return RegistrationResult.failed(e)

        logger.info("Registered user %s (%s)", saved.id, saved.email)
        return RegistrationResult.ok(
            "Registration completed successfully",
            user=saved.to_secure(),
        )
