"""Integration tests for the SQLAlchemy persistence services."""

from datetime import date, timedelta
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from booklend.domain.book import BookStatus, DuplicateIsbnError
from booklend.domain.shared.time import utc_now
from booklend.domain.user import EmailAlreadyRegisteredError, UserStatus
from booklend.infrastructure.persistence.sqlalchemy import (
    AuthorServiceSQLAlchemy,
    AuthServiceSQLAlchemy,
    BookServiceSQLAlchemy,
    EmailVerificationServiceSQLAlchemy,
)
from tests.shared.fixtures import TestUserFactory, make_author, make_book


class TestAuthServiceSQLAlchemy:
    """Tests for AuthServiceSQLAlchemy."""

    @pytest.mark.asyncio
    async def test_save_and_find(self, db_session):
        service = AuthServiceSQLAlchemy(db_session)
        user = TestUserFactory.reader(phone_number="555-0100")

        await service.save(user)

        by_id = await service.find_by_id(user.id)
        by_email = await service.find_by_email("  Reader@Example.com")
        assert by_id == user
        assert by_email == user
        assert by_id.registration_date.tzinfo is not None

    @pytest.mark.asyncio
    async def test_update_existing(self, db_session):
        service = AuthServiceSQLAlchemy(db_session)
        user = TestUserFactory.reader()
        await service.save(user)

        await service.save(TestUserFactory.reader(status=UserStatus.SUSPENDED))

        assert (await service.find_by_id(user.id)).status == UserStatus.SUSPENDED
        assert len(await service.list_all()) == 1

    @pytest.mark.asyncio
    async def test_duplicate_email_is_a_conflict(self, session_maker):
        async with session_maker() as session:
            await AuthServiceSQLAlchemy(session).save(TestUserFactory.reader())
            await session.commit()

        async with session_maker() as session:
            with pytest.raises(EmailAlreadyRegisteredError):
                await AuthServiceSQLAlchemy(session).save(
                    TestUserFactory.reader(id=uuid4()),
                )

    @pytest.mark.asyncio
    async def test_delete(self, db_session):
        service = AuthServiceSQLAlchemy(db_session)
        user = TestUserFactory.reader()
        await service.save(user)

        await service.delete(user.id)

        assert await service.find_by_id(user.id) is None


class TestAuthorServiceSQLAlchemy:
    """Tests for AuthorServiceSQLAlchemy."""

    @pytest.mark.asyncio
    async def test_create_and_find_round_trip(self, db_session):
        service = AuthorServiceSQLAlchemy(db_session)
        author = make_author(email="ursula@example.com")

        await service.save(author)

        assert await service.find_by_id(author.id) == author

    @pytest.mark.asyncio
    async def test_filters(self, db_session):
        service = AuthorServiceSQLAlchemy(db_session)
        le_guin = make_author(is_popular=True)
        austen = make_author(
            first_name="Jane",
            last_name="Austen",
            nationality="British",
            birth_date=date(1775, 12, 16),
            death_date=date(1817, 7, 18),
        )
        await service.save(le_guin)
        await service.save(austen)

        assert await service.find_by_name("AUST") == [austen]
        assert await service.find_by_name("ursu") == [le_guin]
        assert await service.find_by_nationality("british") == [austen]
        assert await service.find_popular_authors() == [le_guin]
        assert [a.id for a in await service.find_all()] == [austen.id, le_guin.id]

    @pytest.mark.asyncio
    async def test_update_and_delete(self, db_session):
        service = AuthorServiceSQLAlchemy(db_session)
        author = make_author()
        await service.save(author)

        await service.save(make_author(id=author.id, biography="Changed."))
        assert (await service.find_by_id(author.id)).biography == "Changed."

        await service.delete(author.id)
        assert await service.find_by_id(author.id) is None


class TestBookServiceSQLAlchemy:
    """Tests for BookServiceSQLAlchemy."""

    @pytest.mark.asyncio
    async def test_save_and_find(self, db_session):
        service = BookServiceSQLAlchemy(db_session)
        book = make_book(isbn=9780547722023)

        await service.save(book)

        assert await service.find_by_id(book.id) == book
        assert await service.find_by_isbn(9780547722023) == book
        assert await service.find_by_title("wizard") == [book]
        assert await service.find_by_status(BookStatus.AVAILABLE) == [book]
        assert await service.find_by_status(BookStatus.LOST) == []

    @pytest.mark.asyncio
    async def test_search_matches_title_or_publisher(self, db_session):
        service = BookServiceSQLAlchemy(db_session)
        earthsea = make_book(isbn=1, title="A Wizard of Earthsea", publisher="Parnassus")
        kindred = make_book(isbn=2, title="Kindred", publisher="Doubleday")
        for book in (earthsea, kindred):
            await service.save(book)

        assert await service.search("DOUBLE") == [kindred]
        assert await service.search("earthsea") == [earthsea]
        assert await service.search("nothing") == []

    @pytest.mark.asyncio
    async def test_count_by_status(self, db_session):
        service = BookServiceSQLAlchemy(db_session)
        await service.save(make_book(isbn=1))
        await service.save(make_book(isbn=2))
        await service.save(make_book(isbn=3, status=BookStatus.LOST))

        assert await service.count_by_status() == {
            BookStatus.AVAILABLE: 2,
            BookStatus.LOST: 1,
        }

    @pytest.mark.asyncio
    async def test_books_without_isbn_do_not_conflict(self, db_session):
        service = BookServiceSQLAlchemy(db_session)

        await service.save(make_book(isbn=None))
        await service.save(make_book(isbn=None))

        assert len(await service.find_all()) == 2

    @pytest.mark.asyncio
    async def test_duplicate_isbn_is_a_conflict(self, session_maker):
        async with session_maker() as session:
            await BookServiceSQLAlchemy(session).save(make_book(isbn=42))
            await session.commit()

        async with session_maker() as session:
            with pytest.raises(DuplicateIsbnError):
                await BookServiceSQLAlchemy(session).save(make_book(isbn=42))

    @pytest.mark.asyncio
    async def test_popular_books_are_ordered_and_limited(self, db_session):
        service = BookServiceSQLAlchemy(db_session, popular_limit=2)
        low = make_book(isbn=1, title="Low", is_popular=True, total_loans=1)
        high = make_book(isbn=2, title="High", is_popular=True, total_loans=50)
        mid = make_book(isbn=3, title="Mid", is_popular=True, total_loans=10)
        plain = make_book(isbn=4, title="Plain", total_loans=100)
        for book in (low, high, mid, plain):
            await service.save(book)

        popular = await service.find_popular_books()

        assert [b.id for b in popular] == [high.id, mid.id]

    @pytest.mark.asyncio
    async def test_status_update(self, db_session):
        service = BookServiceSQLAlchemy(db_session)
        book = make_book()
        await service.save(book)

        await service.save(make_book(id=book.id, status=BookStatus.BORROWED))

        assert (await service.find_by_id(book.id)).status == BookStatus.BORROWED


class TestEmailVerificationServiceSQLAlchemy:
    """Tests for EmailVerificationServiceSQLAlchemy."""

    def _service(self, session, email_service=None):
        return EmailVerificationServiceSQLAlchemy(
            session,
            email_service=email_service or MagicMock(),
            verification_base_url="http://localhost:3000/auth/verify-token/",
        )

    @pytest.mark.asyncio
    async def test_save_find_delete(self, db_session):
        service = self._service(db_session)
        expires_at = utc_now() + timedelta(hours=24)

        await service.save_email_verification_token("new@example.com", "abc", expires_at)

        stored = await service.find_email_verification_token("abc")
        assert stored.email == "new@example.com"
        assert stored.expires_at.tzinfo is not None
        assert abs((stored.expires_at - expires_at).total_seconds()) < 1

        await service.delete_email_verification_token("abc")
        assert await service.find_email_verification_token("abc") is None

    @pytest.mark.asyncio
    async def test_new_token_replaces_previous_for_same_email(self, db_session):
        service = self._service(db_session)
        expires_at = utc_now() + timedelta(hours=1)

        await service.save_email_verification_token("new@example.com", "first", expires_at)
        await service.save_email_verification_token("new@example.com", "second", expires_at)

        assert await service.find_email_verification_token("first") is None
        assert (await service.find_email_verification_token("second")) is not None

    @pytest.mark.asyncio
    async def test_send_builds_link(self, db_session):
        email_service = MagicMock()
        service = self._service(db_session, email_service)

        await service.send_verification_email("new@example.com", "abc")

        email_service.send_verification_email.assert_called_once_with(
            "new@example.com",
            "http://localhost:3000/auth/verify-token/abc",
        )
