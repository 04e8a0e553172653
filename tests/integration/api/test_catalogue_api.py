"""API tests for the author and book endpoints."""

from uuid import uuid4

import pytest

from booklend.domain.book import BookStatus
from booklend.infrastructure.persistence.sqlalchemy import (
    AuthorServiceSQLAlchemy,
    BookServiceSQLAlchemy,
)
from tests.shared.fixtures import make_author, make_book

AUTHORS = "/api/v1/authors"
BOOKS = "/api/v1/books"

NEW_AUTHOR = {
    "first_name": "Octavia",
    "last_name": "Butler",
    "biography": "Author of Kindred.",
    "nationality": "American",
    "birth_date": "1947-06-22",
    "death_date": "2006-02-24",
    "email": "Octavia@Example.com",
}

NEW_BOOK = {
    "title": "Kindred",
    "isbn": 9780807083697,
    "pages": 264,
    "publication_date": "1979-06-01",
    "publisher": "Doubleday",
}


@pytest.fixture
def store(session_maker):
    """Persist domain records directly, bypassing the API."""

    async def _store(*records):
        async with session_maker() as session:
            authors = AuthorServiceSQLAlchemy(session)
            books = BookServiceSQLAlchemy(session)
            for record in records:
                service = books if hasattr(record, "isbn") else authors
                await service.save(record)
            await session.commit()

    return _store


class TestAuthorsApi:
    """Tests for /authors."""

    @pytest.mark.asyncio
    async def test_admin_creates_author(self, client, admin, headers_for):
        response = await client.post(AUTHORS, json=NEW_AUTHOR, headers=headers_for(admin))

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Author created successfully"
        assert body["data"]["email"] == "octavia@example.com"

        fetched = await client.get(f"{AUTHORS}/{body['data']['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["data"]["last_name"] == "Butler"

    @pytest.mark.asyncio
    async def test_reader_cannot_create_author(self, client, reader, headers_for):
        response = await client.post(AUTHORS, json=NEW_AUTHOR, headers=headers_for(reader))

        assert response.status_code == 403
        assert response.json()["detail"] == "Access denied. Admin role required"

    @pytest.mark.asyncio
    async def test_anonymous_cannot_create_author(self, client):
        response = await client.post(AUTHORS, json=NEW_AUTHOR)

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_create_with_bad_dates(self, client, admin, headers_for):
        payload = {**NEW_AUTHOR, "death_date": "1940-01-01"}

        response = await client.post(AUTHORS, json=payload, headers=headers_for(admin))

        assert response.status_code == 400
        assert response.json()["detail"] == "Death date must be after birth date"
        assert (await client.get(AUTHORS)).json()["total"] == 0

    @pytest.mark.asyncio
    async def test_create_missing_biography(self, client, admin, headers_for):
        payload = {k: v for k, v in NEW_AUTHOR.items() if k != "biography"}

        response = await client.post(AUTHORS, json=payload, headers=headers_for(admin))

        assert response.status_code == 400
        assert response.json()["detail"] == "Biography is required"

    @pytest.mark.asyncio
    async def test_patch_only_touches_sent_fields(self, client, admin, headers_for, store):
        author = make_author(email="ursula@example.com", phone_number="555-0199")
        await store(author)

        response = await client.patch(
            f"{AUTHORS}/{author.id}",
            json={"death_date": None, "is_popular": True},
            headers=headers_for(admin),
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["death_date"] is None
        assert data["is_popular"] is True
        assert data["email"] == "ursula@example.com"
        assert data["phone_number"] == "555-0199"
        assert data["biography"] == author.biography

    @pytest.mark.asyncio
    async def test_list_filters(self, client, store):
        await store(
            make_author(is_popular=True),
            make_author(first_name="Jane", last_name="Austen", nationality="British"),
        )

        everyone = await client.get(AUTHORS)
        british = await client.get(AUTHORS, params={"nationality": "British"})
        popular = await client.get(AUTHORS, params={"popular": "true"})

        assert everyone.json()["total"] == 2
        assert [a["last_name"] for a in british.json()["data"]] == ["Austen"]
        assert [a["last_name"] for a in popular.json()["data"]] == ["Le Guin"]

    @pytest.mark.asyncio
    async def test_delete(self, client, admin, headers_for, store):
        author = make_author()
        await store(author)

        first = await client.delete(f"{AUTHORS}/{author.id}", headers=headers_for(admin))
        second = await client.delete(f"{AUTHORS}/{author.id}", headers=headers_for(admin))

        assert first.status_code == 200
        assert first.json()["message"] == "Author deleted successfully"
        assert second.status_code == 404
        assert second.json()["detail"] == "Author not found"

    @pytest.mark.asyncio
    async def test_get_unknown_author(self, client):
        response = await client.get(f"{AUTHORS}/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["code"] == "AUTHOR_NOT_FOUND"


class TestBooksApi:
    """Tests for /books."""

    @pytest.mark.asyncio
    async def test_admin_adds_book(self, client, admin, headers_for):
        response = await client.post(BOOKS, json=NEW_BOOK, headers=headers_for(admin))

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["status"] == "available"
        assert data["total_loans"] == 0
        assert data["isbn"] == NEW_BOOK["isbn"]

    @pytest.mark.asyncio
    async def test_duplicate_isbn(self, client, admin, headers_for, store):
        await store(make_book(isbn=NEW_BOOK["isbn"]))

        response = await client.post(BOOKS, json=NEW_BOOK, headers=headers_for(admin))

        assert response.status_code == 409
        assert response.json()["detail"] == "Book with this ISBN already exists"

    @pytest.mark.asyncio
    async def test_missing_isbn(self, client, admin, headers_for):
        payload = {k: v for k, v in NEW_BOOK.items() if k != "isbn"}

        response = await client.post(BOOKS, json=payload, headers=headers_for(admin))

        assert response.status_code == 400
        assert response.json()["detail"] == "ISBN is required"

    @pytest.mark.asyncio
    async def test_reader_cannot_add_book(self, client, reader, headers_for):
        response = await client.post(BOOKS, json=NEW_BOOK, headers=headers_for(reader))

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_lend_book(self, client, reader, headers_for, store):
        book = make_book()
        await store(book)

        first = await client.post(f"{BOOKS}/{book.id}/lend", headers=headers_for(reader))
        second = await client.post(f"{BOOKS}/{book.id}/lend", headers=headers_for(reader))

        assert first.status_code == 200
        assert first.json()["message"] == "Book lent successfully"
        assert first.json()["data"]["status"] == "borrowed"
        assert second.status_code == 422
        assert second.json() == {
            "success": False,
            "detail": "Book is already lent",
            "code": "BOOK_NOT_AVAILABLE",
        }

    @pytest.mark.asyncio
    async def test_lend_unknown_book(self, client, reader, headers_for):
        response = await client.post(f"{BOOKS}/{uuid4()}/lend", headers=headers_for(reader))

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_popular_books(self, client, store):
        await store(
            make_book(isbn=1, title="Hit", is_popular=True, total_loans=9),
            make_book(isbn=2, title="Miss"),
        )

        response = await client.get(f"{BOOKS}/popular")

        assert response.status_code == 200
        assert response.json()["message"] == "Popular books retrieved successfully"
        assert [b["title"] for b in response.json()["data"]] == ["Hit"]

    @pytest.mark.asyncio
    async def test_no_popular_books(self, client):
        response = await client.get(f"{BOOKS}/popular")

        assert response.status_code == 200
        assert response.json()["message"] == "No popular books found"
        assert response.json()["total"] == 0

    @pytest.mark.asyncio
    async def test_search_by_title_and_status(self, client, store):
        await store(
            make_book(isbn=1, title="The Left Hand of Darkness"),
            make_book(isbn=2, title="The Lathe of Heaven", status=BookStatus.BORROWED),
        )

        by_title = await client.get(BOOKS, params={"title": "lathe"})
        by_status = await client.get(BOOKS, params={"status": "available"})

        assert by_title.json()["message"] == "Books search completed successfully"
        assert [b["isbn"] for b in by_title.json()["data"]] == [2]
        assert [b["isbn"] for b in by_status.json()["data"]] == [1]

    @pytest.mark.asyncio
    async def test_search_by_publisher(self, client, store):
        await store(
            make_book(isbn=1, title="Kindred", publisher="Doubleday"),
            make_book(isbn=2, title="Dawn", publisher="Warner Books"),
        )

        response = await client.get(BOOKS, params={"q": "doubleday"})

        assert response.status_code == 200
        assert [b["title"] for b in response.json()["data"]] == ["Kindred"]

    @pytest.mark.asyncio
    async def test_statistics(self, client, store):
        await store(
            make_book(isbn=1),
            make_book(isbn=2, status=BookStatus.BORROWED),
            make_book(isbn=3, status=BookStatus.BORROWED),
            make_book(isbn=4, status=BookStatus.RESERVED),
        )

        response = await client.get(f"{BOOKS}/statistics")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Book statistics retrieved successfully",
            "data": {
                "total": 4,
                "available": 1,
                "borrowed": 2,
                "reserved": 1,
                "maintenance": 0,
                "lost": 0,
            },
        }

    @pytest.mark.asyncio
    async def test_update_and_delete(self, client, admin, headers_for, store):
        book = make_book()
        await store(book)

        updated = await client.patch(
            f"{BOOKS}/{book.id}",
            json={"status": "maintenance", "is_popular": True},
            headers=headers_for(admin),
        )
        deleted = await client.delete(f"{BOOKS}/{book.id}", headers=headers_for(admin))
        missing = await client.get(f"{BOOKS}/{book.id}")

        assert updated.status_code == 200
        assert updated.json()["data"]["status"] == "maintenance"
        assert updated.json()["data"]["title"] == book.title
        assert deleted.json()["message"] == "Book deleted successfully"
        assert missing.status_code == 404
