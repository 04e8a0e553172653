"""Fixtures for HTTP API tests.

The app runs in-process through httpx's ASGI transport. Every request gets
a session from the per-test SQLite database instead of the configured one.
"""

from dataclasses import replace
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from pydantic import SecretStr

from booklend.domain.user import User
from booklend.infrastructure.persistence.sqlalchemy import AuthServiceSQLAlchemy
from booklend.infrastructure.security import BcryptCryptoService
from booklend.presentation.api.app import create_app
from booklend.presentation.api.config import get_api_settings
from booklend.presentation.api.dependencies import get_db_session, get_jwt_service
from booklend_config.settings import Settings
from tests.shared.fixtures import TEST_PASSWORD, TestUserFactory


@pytest_asyncio.fixture
async def app(session_maker):
    settings = Settings(
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        api_debug=True,
    )
    application = create_app(settings)

    async def override_get_db_session() -> AsyncGenerator:
        async with session_maker() as session:
            yield session

    application.dependency_overrides[get_db_session] = override_get_db_session
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def store_user(session_maker):
    """Persist a user whose password is ``TEST_PASSWORD``."""
    crypto = BcryptCryptoService(rounds=4)

    async def _store(user: User) -> User:
        hashed = await crypto.hash_password(TEST_PASSWORD)
        async with session_maker() as session:
            saved = await AuthServiceSQLAlchemy(session).save(
                replace(user, hashed_password=hashed),
            )
            await session.commit()
        return saved

    return _store


def bearer(user: User) -> dict[str, str]:
    """Authorization header for ``user`` signed with the configured secret."""
    token = get_jwt_service(get_api_settings()).create_access_token(
        user_id=user.id,
        email=user.email,
        role=user.role.value,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def admin(store_user) -> User:
    return await store_user(TestUserFactory.admin())


@pytest_asyncio.fixture
async def reader(store_user) -> User:
    return await store_user(TestUserFactory.reader())


@pytest.fixture
def headers_for():
    """Build an Authorization header for a stored user."""
    return bearer
