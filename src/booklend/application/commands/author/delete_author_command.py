import logging
from uuid import UUID

from booklend.application.authorization import require_admin
from booklend.application.dtos import OperationResult
from booklend.domain.author import AuthorNotFoundError, AuthorService
from booklend.domain.shared.exceptions import DomainException
from booklend.domain.user import AuthService

logger = logging.getLogger(__name__)


class DeleteAuthorCommand:
    """Admin-only: remove an author."""

    def __init__(self, auth_service: AuthService, author_service: AuthorService):
        self._auth_service = auth_service
        self._author_service = author_service

    async def execute(self, admin_user_id: UUID, author_id: UUID) -> OperationResult:
        try:
            await require_admin(self._auth_service, admin_user_id)

            if await self._author_service.find_by_id(author_id) is None:
                raise AuthorNotFoundError(author_id)

            await self._author_service.delete(author_id)
        except DomainException as e:
            logger.debug("Author deletion rejected: %s", e.message)
            return OperationResult.failed(e)

        logger.info("Admin %s deleted author %s", admin_user_id, author_id)
        return OperationResult.ok("Author deleted successfully")
