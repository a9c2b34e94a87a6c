"""도서 API 테스트.

Book API tests — CRUD, ISBN uniqueness, and the catalog queries (search,
title/author, ISBN, page-count and publish-date ranges, genre).
"""

import uuid
from datetime import date, timedelta

import pytest
from httpx import AsyncClient

from tests.conftest import book_payload

URL = "/api/books/"


async def _create_catalog(client: AsyncClient) -> None:
    await client.post(URL, json=book_payload())
    await client.post(URL, json=book_payload(
        isbn="0441172717", title="Dune", author="Frank Herbert",
        page_count=412, publish_date="1965-08-01", genre="science_fiction",
    ))
    await client.post(URL, json=book_payload(
        isbn="9789753638029", title="Kürk Mantolu Madonna", author="Sabahattin Ali",
        page_count=160, publish_date="1943-01-01", genre="novel",
    ))


class TestBookCreate:
    """도서 생성 테스트."""

    async def test_create_book(self, client: AsyncClient):
        res = await client.post(URL, json=book_payload(summary="A dystopian classic."))
        assert res.status_code == 201
        data = res.json()
        assert data["title"] == "1984"
        assert data["isbn"] == "9780451524935"
        assert data["genre"] == "dystopia"
        assert data["summary"] == "A dystopian classic."
        assert data["cover_image_url"] is None

    async def test_create_book_lenient_genre(self, client: AsyncClient):
        """장르는 대소문자/하이픈 무관하게 파싱됩니다."""
        res = await client.post(URL, json=book_payload(genre="Science-Fiction"))
        assert res.status_code == 201
        assert res.json()["genre"] == "science_fiction"

    async def test_create_book_duplicate_isbn(self, client: AsyncClient, book):
        res = await client.post(URL, json=book_payload(title="Another"))
        assert res.status_code == 400
        assert res.json()["message"] == "A book with ISBN 9780451524935 already exists."

    async def test_create_book_invalid_isbn(self, client: AsyncClient):
        res = await client.post(URL, json=book_payload(isbn="12345"))
        assert res.status_code == 400

    async def test_create_book_zero_pages(self, client: AsyncClient):
        res = await client.post(URL, json=book_payload(page_count=0))
        assert res.status_code == 400

    async def test_create_book_future_publish_date(self, client: AsyncClient):
        tomorrow = (date.today() + timedelta(days=1)).isoformat()
        res = await client.post(URL, json=book_payload(publish_date=tomorrow))
        assert res.status_code == 400

    async def test_create_book_unknown_genre(self, client: AsyncClient):
        res = await client.post(URL, json=book_payload(genre="cookbook"))
        assert res.status_code == 400

    @pytest.mark.parametrize("genre", ["adventure", "CRIME", "Horror", "romance"])
    async def test_create_book_every_catalog_genre(self, client: AsyncClient, genre):
        res = await client.post(URL, json=book_payload(genre=genre))
        assert res.status_code == 201
        assert res.json()["genre"] == genre.lower()


class TestBookRead:
    """도서 조회 테스트."""

    async def test_get_book(self, client: AsyncClient, book):
        res = await client.get(f"{URL}{book['id']}")
        assert res.status_code == 200
        assert res.json()["author"] == "George Orwell"

    async def test_get_nonexistent_book(self, client: AsyncClient):
        fake_id = uuid.uuid4()
        res = await client.get(f"{URL}{fake_id}")
        assert res.status_code == 404
        assert res.json()["message"] == f"Book not found with ID: {fake_id}"

    async def test_get_book_by_isbn(self, client: AsyncClient, book):
        res = await client.get(f"{URL}isbn/9780451524935")
        assert res.status_code == 200
        assert res.json()["id"] == book["id"]

    async def test_get_book_by_unknown_isbn(self, client: AsyncClient):
        res = await client.get(f"{URL}isbn/0000000000")
        assert res.status_code == 404
        assert res.json()["message"] == "Book not found with ISBN: 0000000000"

    async def test_list_books_sorted_by_title(self, client: AsyncClient):
        await _create_catalog(client)
        res = await client.get(URL, params={"sort": "title,asc"})
        assert [b["title"] for b in res.json()["items"]] == ["1984", "Dune", "Kürk Mantolu Madonna"]

    async def test_search_books(self, client: AsyncClient):
        await _create_catalog(client)
        res = await client.get(f"{URL}search", params={"term": "HERBERT"})
        assert res.status_code == 200
        assert [b["title"] for b in res.json()["items"]] == ["Dune"]

    async def test_search_books_wildcards_are_literal(self, client: AsyncClient):
        """'_' 와 '%' 는 와일드카드가 아닌 문자로 검색됩니다."""
        await _create_catalog(client)
        for term in ("_", "%"):
            res = await client.get(f"{URL}search", params={"term": term})
            assert res.json()["total"] == 0
        await client.post(URL, json=book_payload(isbn="9780000000002", title="100% Fiction"))
        res = await client.get(f"{URL}search", params={"term": "0%"})
        assert [b["title"] for b in res.json()["items"]] == ["100% Fiction"]

    async def test_search_books_blank(self, client: AsyncClient):
        res = await client.get(f"{URL}search", params={"term": ""})
        assert res.status_code == 400

    async def test_search_title_and_author(self, client: AsyncClient):
        await _create_catalog(client)
        res = await client.get(f"{URL}search-title-author", params={"title": "dune", "author": "frank herbert"})
        assert res.json()["total"] == 1

        res = await client.get(f"{URL}search-title-author", params={"title": "dune", "author": "Orwell"})
        assert res.json()["total"] == 0

    async def test_page_count_between_inclusive(self, client: AsyncClient):
        await _create_catalog(client)
        res = await client.get(f"{URL}page-count", params={"min": 160, "max": 328})
        assert res.status_code == 200
        assert [b["page_count"] for b in res.json()["items"]] == [160, 328]

    async def test_page_count_min_greater_than_max(self, client: AsyncClient):
        res = await client.get(f"{URL}page-count", params={"min": 500, "max": 100})
        assert res.status_code == 400
        assert res.json()["message"] == "Minimum page count cannot be greater than maximum page count."

    async def test_publish_date_between(self, client: AsyncClient):
        await _create_catalog(client)
        res = await client.get(f"{URL}publish-date", params={"start": "1940-01-01", "end": "1950-12-31"})
        assert [b["publish_date"] for b in res.json()["items"]] == ["1943-01-01", "1949-06-08"]

    async def test_publish_date_start_after_end(self, client: AsyncClient):
        res = await client.get(f"{URL}publish-date", params={"start": "2000-01-01", "end": "1990-01-01"})
        assert res.status_code == 400

    async def test_books_by_genre(self, client: AsyncClient):
        await _create_catalog(client)
        res = await client.get(f"{URL}genre/SCIENCE-FICTION")
        assert res.status_code == 200
        assert [b["title"] for b in res.json()["items"]] == ["Dune"]


class TestBookUpdate:
    """도서 수정 테스트."""

    async def test_update_book_partial(self, client: AsyncClient, book):
        res = await client.put(f"{URL}{book['id']}", json={"summary": "Updated", "page_count": 330})
        assert res.status_code == 200
        data = res.json()
        assert data["summary"] == "Updated"
        assert data["page_count"] == 330
        assert data["title"] == "1984"

    async def test_update_book_isbn_to_existing(self, client: AsyncClient, book):
        await client.post(URL, json=book_payload(isbn="0441172717", title="Dune"))
        res = await client.put(f"{URL}{book['id']}", json={"isbn": "0441172717"})
        assert res.status_code == 400

    async def test_update_book_same_isbn(self, client: AsyncClient, book):
        res = await client.put(f"{URL}{book['id']}", json={"isbn": book["isbn"]})
        assert res.status_code == 200


class TestBookDelete:
    """도서 삭제 테스트."""

    async def test_delete_book(self, client: AsyncClient, book):
        res = await client.delete(f"{URL}{book['id']}")
        assert res.status_code == 204
        assert (await client.get(f"{URL}{book['id']}")).status_code == 404

    async def test_delete_book_cascades_interactions(self, client: AsyncClient, book, interaction):
        res = await client.delete(f"{URL}{book['id']}")
        assert res.status_code == 204
        assert (await client.get(f"/api/book-interactions/{interaction['id']}")).status_code == 404
