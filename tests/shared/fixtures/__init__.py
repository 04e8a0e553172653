"""Shared test fixtures and factories."""

from tests.shared.fixtures.factories import (
    FIXED_NOW,
    TEST_PASSWORD,
    TestUserFactory,
    make_author,
    make_book,
)

__all__ = [
    "FIXED_NOW",
    "TEST_PASSWORD",
    "TestUserFactory",
    "make_author",
    "make_book",
]
