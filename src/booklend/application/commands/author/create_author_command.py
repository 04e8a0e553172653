import logging
from datetime import date
from uuid import UUID

from booklend.application.authorization import require_admin
from booklend.application.dtos import AuthorResult
from booklend.domain.author import Author, AuthorService
from booklend.domain.security import CryptoService
from booklend.domain.shared.exceptions import DomainException
from booklend.domain.user import AuthService
from booklend.domain.validation import (
    trim_or_none,
    validate_and_normalize_email,
    validate_birth_death_dates,
    validate_required_field,
    validate_required_fields,
)

logger = logging.getLogger(__name__)


class CreateAuthorCommand:
    """Admin-only: add an author to the catalogue."""

    def __init__(
        self,
        auth_service: AuthService,
        author_service: AuthorService,
        crypto_service: CryptoService,
    ):
        self._auth_service = auth_service
        self._author_service = author_service
        self._crypto_service = crypto_service

    async def execute(  # NOQA: PLR0913
        self,
        admin_user_id: UUID,
        first_name: str | None,
        last_name: str | None,
        biography: str | None,
        nationality: str | None,
        birth_date: date | None,
        death_date: date | None = None,
        email: str | None = None,
        phone_number: str | None = None,
    ) -> AuthorResult:
        try:
            await require_admin(self._auth_service, admin_user_id)

            validate_required_fields(
                [
                    (first_name, "First name"),
                    (last_name, "Last name"),
                    (biography, "Biography"),
                    (nationality, "Nationality"),
                ],
            ).raise_if_failed()
            validate_required_field(birth_date, "Birth date").raise_if_failed()
            validate_birth_death_dates(birth_date, death_date).raise_if_failed()
            normalized_email = validate_and_normalize_email(email)

            author = Author(
                id=await self._crypto_service.generate_uuid(),
                first_name=first_name.strip(),  # type: ignore[union-attr]
                last_name=last_name.strip(),  # type: ignore[union-attr]
                biography=biography.strip(),  # type: ignore[union-attr]
                nationality=nationality.strip(),  # type: ignore[union-attr]
                birth_date=birth_date,  # type: ignore[arg-type]
                death_date=death_date,
                email=normalized_email,
                phone_number=trim_or_none(phone_number),
                is_popular=False,
            )
            saved = await self._author_service.save(author)
        except DomainException as e:
            logger.debug("Author creation rejected: %s", e.message)
            return AuthorResult.failed(e)

        logger.info("Admin %s created author %s (%s)", admin_user_id, saved.id, saved.full_name)
        return AuthorResult.ok("Author created successfully", author=saved)
