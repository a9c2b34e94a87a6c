"""좋아요 API 테스트.

Like API tests — Exactly one target per like, idempotent creation,
retargeting, and the per-target "has liked" checks.
"""

import uuid

from httpx import AsyncClient

URL = "/api/likes/"


class TestLikeCreate:
    """좋아요 생성 테스트."""

    async def test_like_review(self, client: AsyncClient, other_user, review):
        res = await client.post(URL, json={"user_id": other_user["id"], "review_id": review["id"]})
        assert res.status_code == 201
        data = res.json()
        assert data["review_id"] == review["id"]
        assert data["message_id"] is None
        assert data["quote_id"] is None
        assert data["book_interaction_id"] is None

    async def test_like_twice_returns_existing(self, client: AsyncClient, other_user, quote):
        """같은 대상에 두 번 좋아요하면 기존 좋아요를 반환합니다."""
        body = {"user_id": other_user["id"], "quote_id": quote["id"]}
        first = await client.post(URL, json=body)
        second = await client.post(URL, json=body)
        assert second.status_code == 201
        assert second.json()["id"] == first.json()["id"]
        assert (await client.get(URL)).json()["total"] == 1

    async def test_like_without_target(self, client: AsyncClient, user):
        res = await client.post(URL, json={"user_id": user["id"]})
        assert res.status_code == 400
        assert res.json()["message"] == (
            "Only one type of like can be selected. Please choose exactly one type of like."
        )

    async def test_like_two_targets(self, client: AsyncClient, user, review, quote):
        res = await client.post(URL, json={
            "user_id": user["id"], "review_id": review["id"], "quote_id": quote["id"],
        })
        assert res.status_code == 400

    async def test_like_missing_target(self, client: AsyncClient, user):
        fake_id = str(uuid.uuid4())
        res = await client.post(URL, json={"user_id": user["id"], "message_id": fake_id})
        assert res.status_code == 404
        assert res.json()["message"] == f"Message not found with ID: {fake_id}"

    async def test_like_missing_user(self, client: AsyncClient, review):
        res = await client.post(URL, json={"user_id": str(uuid.uuid4()), "review_id": review["id"]})
        assert res.status_code == 404


class TestLikeChecks:
    """좋아요 여부 확인 테스트."""

    async def test_has_liked_each_target(self, client: AsyncClient, user, other_user, interaction, review, quote):
        message = (await client.post("/api/messages/", json={
            "sender_id": user["id"], "content": "hey", "message_type": "personal",
            "receiver_id": other_user["id"],
        })).json()
        targets = {
            "message": ("message_id", message["id"]),
            "book-interaction": ("book_interaction_id", interaction["id"]),
            "review": ("review_id", review["id"]),
            "quote": ("quote_id", quote["id"]),
        }
        for path, (field, target_id) in targets.items():
            params = {"user_id": other_user["id"], field: target_id}
            before = await client.get(f"{URL}check/{path}", params=params)
            assert before.json() == {"exists": False}

            await client.post(URL, json={"user_id": other_user["id"], field: target_id})

            after = await client.get(f"{URL}check/{path}", params=params)
            assert after.json() == {"exists": True}


class TestLikeUpdateDelete:
    """좋아요 수정/삭제 테스트."""

    async def test_retarget_like(self, client: AsyncClient, other_user, review, quote):
        like = (await client.post(URL, json={"user_id": other_user["id"], "review_id": review["id"]})).json()
        res = await client.put(f"{URL}{like['id']}", json={"user_id": other_user["id"], "quote_id": quote["id"]})
        assert res.status_code == 200
        data = res.json()
        assert data["quote_id"] == quote["id"]
        assert data["review_id"] is None

    async def test_retarget_to_already_liked(self, client: AsyncClient, other_user, review, quote):
        like = (await client.post(URL, json={"user_id": other_user["id"], "review_id": review["id"]})).json()
        await client.post(URL, json={"user_id": other_user["id"], "quote_id": quote["id"]})
        res = await client.put(f"{URL}{like['id']}", json={"user_id": other_user["id"], "quote_id": quote["id"]})
        assert res.status_code == 400
        assert res.json()["message"] == "The user has already liked this content."

    async def test_delete_like(self, client: AsyncClient, other_user, review):
        like = (await client.post(URL, json={"user_id": other_user["id"], "review_id": review["id"]})).json()
        assert (await client.delete(f"{URL}{like['id']}")).status_code == 204
        res = await client.get(f"{URL}{like['id']}")
        assert res.status_code == 404
        assert res.json()["message"] == f"Like not found with ID: {like['id']}"

    async def test_likes_removed_with_review(self, client: AsyncClient, other_user, review):
        await client.post(URL, json={"user_id": other_user["id"], "review_id": review["id"]})
        await client.delete(f"/api/reviews/{review['id']}")
        assert (await client.get(URL)).json()["total"] == 0
