"""SQLAlchemy implementation of AuthorService."""

import logging
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from booklend.domain.author import Author, AuthorService
from booklend.infrastructure.persistence.sqlalchemy.models import AuthorModel

logger = logging.getLogger(__name__)


class AuthorServiceSQLAlchemy(AuthorService):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, author_id: UUID) -> Author | None:
        model = await self._find_model_by_id(author_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_name(self, name: str) -> list[Author]:
        pattern = f"%{name.lower()}%"
        stmt = (
            select(AuthorModel)
            .where(
                or_(
                    func.lower(AuthorModel.first_name).like(pattern),
                    func.lower(AuthorModel.last_name).like(pattern),
                ),
            )
            .order_by(AuthorModel.last_name, AuthorModel.first_name)
        )
        return await self._fetch(stmt)

    async def find_by_nationality(self, nationality: str) -> list[Author]:
        stmt = (
            select(AuthorModel)
            .where(func.lower(AuthorModel.nationality) == nationality.lower())
            .order_by(AuthorModel.last_name, AuthorModel.first_name)
        )
        return await self._fetch(stmt)

    async def find_popular_authors(self) -> list[Author]:
        stmt = (
            select(AuthorModel)
            .where(AuthorModel.is_popular.is_(True))
            .order_by(AuthorModel.last_name, AuthorModel.first_name)
        )
        return await self._fetch(stmt)

    async def find_all(self) -> list[Author]:
        stmt = select(AuthorModel).order_by(AuthorModel.last_name, AuthorModel.first_name)
        return await self._fetch(stmt)

    async def save(self, author: Author) -> Author:
        existing = await self._find_model_by_id(author.id)

        if existing:
            self._update_model(existing, author)
            logger.debug("Updated author: %s", author.id)
        else:
            model = AuthorModel(id=author.id)
            self._update_model(model, author)
            self._session.add(model)
            logger.debug("Created author: %s", author.id)

        await self._session.flush()
        return author

    async def delete(self, author_id: UUID) -> None:
        model = await self._find_model_by_id(author_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.debug("Deleted author: %s", author_id)

    async def _fetch(self, stmt) -> list[Author]:
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def _find_model_by_id(self, author_id: UUID) -> AuthorModel | None:
        stmt = select(AuthorModel).where(AuthorModel.id == author_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: AuthorModel) -> Author:
        return Author(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            biography=model.biography,
            nationality=model.nationality,
            birth_date=model.birth_date,
            death_date=model.death_date,
            email=model.email,
            phone_number=model.phone_number,
            is_popular=model.is_popular,
        )

    def _update_model(self, model: AuthorModel, author: Author) -> None:
        model.first_name = author.first_name
        model.last_name = author.last_name
        model.biography = author.biography
        model.nationality = author.nationality
        model.birth_date = author.birth_date
        model.death_date = author.death_date
        model.email = author.email
        model.phone_number = author.phone_number
        model.is_popular = author.is_popular
