"""Integration test configuration: every test here runs against SQLite."""

import pytest

from tests.shared.fixtures.database import (  # NOQA: F401
    async_engine,
    db_session,
    session_maker,
)


def pytest_collection_modifyitems(config, items):
    """Mark everything under tests/integration as integration."""
    for item in items:
        if "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
