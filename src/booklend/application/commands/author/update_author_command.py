import logging
from dataclasses import replace
from datetime import date
from uuid import UUID

from booklend.application.authorization import require_admin
from booklend.application.dtos import AuthorResult
from booklend.domain.author import AuthorNotFoundError, AuthorService
from booklend.domain.shared.exceptions import DomainException
from booklend.domain.shared.unset import UNSET, Patch
from booklend.domain.user import AuthService
from booklend.domain.validation import (
    trim_or_default,
    trim_or_none,
    validate_and_normalize_email,
    validate_birth_death_dates,
)

logger = logging.getLogger(__name__)


class UpdateAuthorCommand:
    """Admin-only partial update of an author.

    Every field defaults to ``UNSET`` (leave untouched). For ``death_date``,
    ``email`` and ``phone_number`` an explicit None clears the value; for
    the other fields None behaves like ``UNSET``. Blank names, biography
    or nationality keep the stored value.
    """

    def __init__(self, auth_service: AuthService, author_service: AuthorService):
        self._auth_service = auth_service
        self._author_service = author_service

    async def execute(  # NOQA: PLR0913
        self,
        admin_user_id: UUID,
        author_id: UUID,
        *,
        first_name: Patch[str] = UNSET,
        last_name: Patch[str] = UNSET,
        biography: Patch[str] = UNSET,
        nationality: Patch[str] = UNSET,
        birth_date: Patch[date] = UNSET,
        death_date: Patch[date] = UNSET,
        email: Patch[str] = UNSET,
        phone_number: Patch[str] = UNSET,
        is_popular: Patch[bool] = UNSET,
    ) -> AuthorResult:
        try:
            await require_admin(self._auth_service, admin_user_id)

            existing = await self._author_service.find_by_id(author_id)
            if existing is None:
                raise AuthorNotFoundError(author_id)

            new_birth = birth_date or existing.birth_date
            new_death = existing.death_date if death_date is UNSET else death_date
            validate_birth_death_dates(new_birth, new_death).raise_if_failed()

            new_email = (
                existing.email if email is UNSET else validate_and_normalize_email(email)
            )

            updated = replace(
                existing,
                first_name=_merge_text(first_name, existing.first_name),
                last_name=_merge_text(last_name, existing.last_name),
                biography=_merge_text(biography, existing.biography),
                nationality=_merge_text(nationality, existing.nationality),
                birth_date=new_birth,
                death_date=new_death,
                email=new_email,
                phone_number=(
                    existing.phone_number
                    if phone_number is UNSET
                    else trim_or_none(phone_number)
                ),
                is_popular=(
                    existing.is_popular
                    if is_popular is UNSET or is_popular is None
                    else is_popular
                ),
            )
            saved = await self._author_service.save(updated)
        except DomainException as e:
            logger.debug("Author update rejected: %s", e.message)
            return AuthorResult.failed(e)

        logger.info("Admin %s updated author %s", admin_user_id, author_id)
        return AuthorResult.ok("Author updated successfully", author=saved)


def _merge_text(value: Patch[str], current: str) -> str:
    if value is UNSET:
        return current
    return trim_or_default(value, current)
