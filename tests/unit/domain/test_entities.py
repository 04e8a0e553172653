"""Tests for the domain records and their small behaviours."""

from dataclasses import FrozenInstanceError, fields
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from booklend.domain.book import BookStatistics, BookStatus
from booklend.domain.shared.exceptions import DomainException, ErrorCode
from booklend.domain.shared.unset import UNSET
from booklend.domain.user import (
    EmailVerificationToken,
    SecureUser,
    User,
    UserRole,
    UserStatus,
)
from tests.shared.fixtures import TestUserFactory, make_author, make_book


class TestUser:
    """Tests for User.register and the derived properties."""

    def test_register_creates_active_member(self):
        user = User.register(
            user_id=uuid4(),
            email="new@example.com",
            first_name="New",
            last_name="Member",
            hashed_password="hash",
        )

        assert user.status == UserStatus.ACTIVE
        assert user.enabled is True
        assert user.role == UserRole.USER
        assert user.book_limit == 3
        assert user.phone_number is None
        assert user.registration_date.tzinfo is not None
        assert user.is_active is True
        assert user.is_admin is False

    def test_disabled_user_is_not_active(self):
        assert TestUserFactory.reader(enabled=False).is_active is False

    def test_suspended_user_is_not_active(self):
        user = TestUserFactory.reader(status=UserStatus.SUSPENDED)
        assert user.is_active is False

    def test_admin_role(self):
        assert TestUserFactory.admin().is_admin is True

    def test_to_secure_drops_password_hash(self):
        user = TestUserFactory.reader(phone_number="555-0100")

        secure = user.to_secure()

        assert isinstance(secure, SecureUser)
        assert "hashed_password" not in {f.name for f in fields(secure)}
        assert secure.id == user.id
        assert secure.email == user.email
        assert secure.phone_number == "555-0100"
        assert secure.role == user.role

    def test_user_is_immutable(self):
        user = TestUserFactory.reader()
        with pytest.raises(FrozenInstanceError):
            user.email = "other@example.com"  # type: ignore[misc]


class TestEmailVerificationToken:
    def test_not_expired_before_deadline(self):
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        token = EmailVerificationToken("t", "a@example.com", now + timedelta(seconds=1))

        assert token.is_expired(now) is False

    def test_expired_after_deadline(self):
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        token = EmailVerificationToken("t", "a@example.com", now - timedelta(seconds=1))

        assert token.is_expired(now) is True

    def test_naive_expiry_is_treated_as_utc(self):
        now = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        token = EmailVerificationToken("t", "a@example.com", datetime(2024, 1, 1, 11, 0))

        assert token.is_expired(now) is True


class TestBookAndAuthor:
    def test_book_availability(self):
        assert make_book().is_available is True
        assert make_book(status=BookStatus.BORROWED).is_available is False

    def test_statistics_fill_missing_statuses_with_zero(self):
        stats = BookStatistics.from_counts(
            {BookStatus.AVAILABLE: 4, BookStatus.LOST: 1},
        )

        assert stats == BookStatistics(
            total=5,
            available=4,
            borrowed=0,
            reserved=0,
            maintenance=0,
            lost=1,
        )

    def test_book_status_values_are_lower_case(self):
        assert [s.value for s in BookStatus] == [
            "available",
            "borrowed",
            "reserved",
            "maintenance",
            "lost",
        ]

    def test_author_full_name(self):
        assert make_author(first_name="Jane", last_name="Austen").full_name == "Jane Austen"


class TestSharedPrimitives:
    def test_unset_is_falsy_and_distinct_from_none(self):
        assert not UNSET
        assert UNSET is not None
        assert repr(UNSET) == "UNSET"

    def test_domain_exception_defaults(self):
        error = DomainException("boom")

        assert str(error) == "boom"
        assert error.code == ErrorCode.INTERNAL_ERROR
        assert error.details == {}
        assert "INTERNAL_ERROR" in repr(error)
