"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (in-memory services, mocks)
    ├── integration/       # SQLite (aiosqlite) persistence and HTTP API tests
    └── shared/            # Shared fixtures and factories

Settings are read from the environment. The defaults below are applied
before any application module is imported so that ``booklend_config``
finds a JWT secret and bcrypt stays fast.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]

CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.test").exists():
    load_dotenv(CONFIG_DIR / ".env.test")

os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SMTP_ENABLED", "false")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from booklend.presentation.api.config import get_api_settings  # NOQA: E402
from booklend_config import clear_settings_cache  # NOQA: E402


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that use a real SQLite database",
    )


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start and finish the session with freshly loaded settings."""
    clear_settings_cache()
    get_api_settings.cache_clear()
    yield
    clear_settings_cache()
    get_api_settings.cache_clear()
