"""SQLAlchemy implementation of AuthService."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from booklend.domain.shared.time import ensure_tz_aware
from booklend.domain.user import (
    AuthService,
    EmailAlreadyRegisteredError,
    User,
    UserRole,
    UserStatus,
)
from booklend.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class AuthServiceSQLAlchemy(AuthService):
    """SQLAlchemy implementation of the AuthService interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == email.strip().lower())
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def save(self, user: User) -> User:
        existing = await self._find_model_by_id(user.id)

        try:
            if existing:
                self._update_model(existing, user)
                logger.debug("Updated user: %s", user.id)
            else:
                self._session.add(self._map_to_model(user))
                logger.info("Created user: %s (email: %s)", user.id, user.email)

            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise EmailAlreadyRegisteredError(user.email) from e
            raise

        return user

    async def delete(self, user_id: UUID) -> None:
        model = await self._find_model_by_id(user_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.info("Deleted user: %s", user_id)

    async def list_all(self) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.registration_date)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def _find_model_by_id(self, user_id: UUID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            first_name=model.first_name,
            last_name=model.last_name,
            phone_number=model.phone_number,
            hashed_password=model.hashed_password,
            status=UserStatus(model.status),
            enabled=model.enabled,
            book_limit=model.book_limit,
            registration_date=ensure_tz_aware(model.registration_date),
            role=UserRole(model.role),
        )

    def _map_to_model(self, user: User) -> UserModel:
        model = UserModel(id=user.id)
        self._update_model(model, user)
        return model

    def _update_model(self, model: UserModel, user: User) -> None:
        model.email = user.email
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.phone_number = user.phone_number
        model.hashed_password = user.hashed_password
        model.status = user.status.value
        model.enabled = user.enabled
        model.book_limit = user.book_limit
        model.registration_date = user.registration_date
        model.role = user.role.value
