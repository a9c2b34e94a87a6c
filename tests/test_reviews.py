"""리뷰 API 테스트.

Review API tests — Ratings from 1.0 to 5.0 in half steps, author and book
references, and lookup by exact rating.
"""

import uuid

import pytest
from httpx import AsyncClient

URL = "/api/reviews/"


class TestReviewCreate:
    """리뷰 생성 테스트."""

    async def test_create_review(self, client: AsyncClient, user, book):
        res = await client.post(URL, json={
            "user_id": user["id"], "book_id": book["id"], "review_text": "Great", "rating": 5,
        })
        assert res.status_code == 201
        data = res.json()
        assert data["rating"] == 5.0
        assert data["review_text"] == "Great"

    @pytest.mark.parametrize("rating", [0.5, 5.5, 3.3, 4.25])
    async def test_create_review_invalid_rating(self, client: AsyncClient, user, book, rating):
        res = await client.post(URL, json={
            "user_id": user["id"], "book_id": book["id"], "review_text": "Hmm", "rating": rating,
        })
        assert res.status_code == 400

    async def test_create_review_missing_book(self, client: AsyncClient, user):
        fake_id = str(uuid.uuid4())
        res = await client.post(URL, json={
            "user_id": user["id"], "book_id": fake_id, "review_text": "?", "rating": 3,
        })
        assert res.status_code == 404
        assert res.json()["message"] == f"Book not found with ID: {fake_id}"

    async def test_create_review_missing_user(self, client: AsyncClient, book):
        res = await client.post(URL, json={
            "user_id": str(uuid.uuid4()), "book_id": book["id"], "review_text": "?", "rating": 3,
        })
        assert res.status_code == 404


class TestReviewRead:
    """리뷰 조회 테스트."""

    async def test_get_review(self, client: AsyncClient, review):
        res = await client.get(f"{URL}{review['id']}")
        assert res.status_code == 200
        assert res.json()["rating"] == 4.5

    async def test_get_reviews_by_rating(self, client: AsyncClient, user, book, review):
        await client.post(URL, json={
            "user_id": user["id"], "book_id": book["id"], "review_text": "Meh", "rating": 2,
        })
        res = await client.get(f"{URL}rating", params={"rating": 4.5})
        assert res.status_code == 200
        assert [r["id"] for r in res.json()["items"]] == [review["id"]]

    async def test_get_reviews_by_rating_out_of_range(self, client: AsyncClient):
        res = await client.get(f"{URL}rating", params={"rating": 7})
        assert res.status_code == 400

    async def test_list_reviews(self, client: AsyncClient, review):
        res = await client.get(URL)
        assert res.json()["total"] == 1


class TestReviewUpdateDelete:
    """리뷰 수정/삭제 테스트."""

    async def test_update_rating(self, client: AsyncClient, review):
        res = await client.put(f"{URL}{review['id']}", json={"rating": 3.5})
        assert res.status_code == 200
        data = res.json()
        assert data["rating"] == 3.5
        assert data["review_text"] == review["review_text"]

    async def test_update_rating_not_half_step(self, client: AsyncClient, review):
        res = await client.put(f"{URL}{review['id']}", json={"rating": 3.7})
        assert res.status_code == 400

    async def test_delete_review(self, client: AsyncClient, review):
        res = await client.delete(f"{URL}{review['id']}")
        assert res.status_code == 204
        res = await client.get(f"{URL}{review['id']}")
        assert res.status_code == 404
        assert res.json()["message"] == f"Review not found with ID: {review['id']}"
