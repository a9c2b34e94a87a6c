"""인용구 API 테스트.

Quote API tests — CRUD with author and book references.
"""

import uuid

from httpx import AsyncClient

URL = "/api/quotes/"


class TestQuote:
    """인용구 CRUD 테스트."""

    async def test_create_quote(self, client: AsyncClient, user, book):
        res = await client.post(URL, json={
            "user_id": user["id"], "book_id": book["id"], "quote_text": "War is peace.",
        })
        assert res.status_code == 201
        assert res.json()["quote_text"] == "War is peace."

    async def test_create_quote_empty_text(self, client: AsyncClient, user, book):
        res = await client.post(URL, json={"user_id": user["id"], "book_id": book["id"], "quote_text": ""})
        assert res.status_code == 400

    async def test_create_quote_missing_user(self, client: AsyncClient, book):
        fake_id = str(uuid.uuid4())
        res = await client.post(URL, json={"user_id": fake_id, "book_id": book["id"], "quote_text": "x"})
        assert res.status_code == 404
        assert res.json()["message"] == f"User not found with ID: {fake_id}"

    async def test_get_and_list_quotes(self, client: AsyncClient, quote):
        res = await client.get(f"{URL}{quote['id']}")
        assert res.status_code == 200
        assert res.json()["quote_text"] == quote["quote_text"]

        res = await client.get(URL)
        assert res.json()["total"] == 1

    async def test_update_quote(self, client: AsyncClient, quote):
        res = await client.put(f"{URL}{quote['id']}", json={"quote_text": "Freedom is slavery."})
        assert res.status_code == 200
        assert res.json()["quote_text"] == "Freedom is slavery."
        assert res.json()["book_id"] == quote["book_id"]

    async def test_update_quote_missing_book(self, client: AsyncClient, quote):
        res = await client.put(f"{URL}{quote['id']}", json={"book_id": str(uuid.uuid4())})
        assert res.status_code == 404

    async def test_delete_quote(self, client: AsyncClient, quote):
        res = await client.delete(f"{URL}{quote['id']}")
        assert res.status_code == 204
        res = await client.get(f"{URL}{quote['id']}")
        assert res.status_code == 404
        assert res.json()["message"] == f"Quote not found with ID: {quote['id']}"
