"""메시지 API 테스트.

Message API tests — Each message type requires exactly its own target
(receiver, book interaction, review or quote); updates replace the whole
message and clear the previous target.
"""

import uuid

from httpx import AsyncClient

URL = "/api/messages/"


class TestMessageCreate:
    """메시지 생성 테스트."""

    async def test_personal_message(self, client: AsyncClient, user, other_user):
        res = await client.post(URL, json={
            "sender_id": user["id"], "content": "Hi!", "message_type": "personal",
            "receiver_id": other_user["id"],
        })
        assert res.status_code == 201
        data = res.json()
        assert data["message_type"] == "personal"
        assert data["receiver_id"] == other_user["id"]
        assert data["book_interaction_id"] is None
        assert data["review_id"] is None
        assert data["quote_id"] is None

    async def test_review_message(self, client: AsyncClient, other_user, review):
        res = await client.post(URL, json={
            "sender_id": other_user["id"], "content": "Agreed", "message_type": "REVIEW",
            "review_id": review["id"],
        })
        assert res.status_code == 201
        assert res.json()["review_id"] == review["id"]

    async def test_book_message(self, client: AsyncClient, other_user, interaction):
        res = await client.post(URL, json={
            "sender_id": other_user["id"], "content": "Nice pick", "message_type": "book",
            "book_interaction_id": interaction["id"],
        })
        assert res.status_code == 201

    async def test_quote_message(self, client: AsyncClient, other_user, quote):
        res = await client.post(URL, json={
            "sender_id": other_user["id"], "content": "Chills", "message_type": "quote",
            "quote_id": quote["id"],
        })
        assert res.status_code == 201

    async def test_personal_message_without_receiver(self, client: AsyncClient, user):
        res = await client.post(URL, json={
            "sender_id": user["id"], "content": "Hello?", "message_type": "personal",
        })
        assert res.status_code == 400
        assert res.json()["message"] == "A PERSONAL message requires a user reference (receiver_id)."

    async def test_message_with_extra_target(self, client: AsyncClient, user, other_user, review):
        res = await client.post(URL, json={
            "sender_id": user["id"], "content": "Both", "message_type": "personal",
            "receiver_id": other_user["id"], "review_id": review["id"],
        })
        assert res.status_code == 400
        assert res.json()["message"] == "A PERSONAL message must not set: review_id."

    async def test_quote_message_with_receiver(self, client: AsyncClient, user, other_user, quote):
        """QUOTE 메시지에 수신자를 지정하면 400, 아무것도 저장되지 않음."""
        res = await client.post(URL, json={
            "sender_id": user["id"], "content": "Look", "message_type": "quote",
            "quote_id": quote["id"], "receiver_id": other_user["id"],
        })
        assert res.status_code == 400
        assert res.json()["message"] == "A QUOTE message must not set: receiver_id."
        assert (await client.get(URL)).json()["total"] == 0

    async def test_message_to_missing_review(self, client: AsyncClient, user):
        fake_id = str(uuid.uuid4())
        res = await client.post(URL, json={
            "sender_id": user["id"], "content": "?", "message_type": "review", "review_id": fake_id,
        })
        assert res.status_code == 404
        assert res.json()["message"] == f"Review not found with ID: {fake_id}"

    async def test_message_from_missing_sender(self, client: AsyncClient, other_user):
        res = await client.post(URL, json={
            "sender_id": str(uuid.uuid4()), "content": "?", "message_type": "personal",
            "receiver_id": other_user["id"],
        })
        assert res.status_code == 404

    async def test_message_unknown_type(self, client: AsyncClient, user, other_user):
        res = await client.post(URL, json={
            "sender_id": user["id"], "content": "?", "message_type": "telegram",
            "receiver_id": other_user["id"],
        })
        assert res.status_code == 400


class TestMessageQueriesAndUpdate:
    """메시지 조회/수정/삭제 테스트."""

    async def test_messages_by_type(self, client: AsyncClient, user, other_user, review):
        await client.post(URL, json={
            "sender_id": user["id"], "content": "DM", "message_type": "personal",
            "receiver_id": other_user["id"],
        })
        await client.post(URL, json={
            "sender_id": other_user["id"], "content": "On review", "message_type": "review",
            "review_id": review["id"],
        })
        res = await client.get(f"{URL}type/Review")
        assert res.status_code == 200
        assert [m["content"] for m in res.json()["items"]] == ["On review"]

        res = await client.get(URL)
        assert res.json()["total"] == 2

    async def test_update_replaces_target(self, client: AsyncClient, user, other_user, quote):
        created = (await client.post(URL, json={
            "sender_id": user["id"], "content": "DM", "message_type": "personal",
            "receiver_id": other_user["id"],
        })).json()
        res = await client.put(f"{URL}{created['id']}", json={
            "sender_id": user["id"], "content": "About this quote", "message_type": "quote",
            "quote_id": quote["id"],
        })
        assert res.status_code == 200
        data = res.json()
        assert data["message_type"] == "quote"
        assert data["quote_id"] == quote["id"]
        assert data["receiver_id"] is None
        assert data["content"] == "About this quote"

    async def test_update_invalid_target(self, client: AsyncClient, user, other_user):
        created = (await client.post(URL, json={
            "sender_id": user["id"], "content": "DM", "message_type": "personal",
            "receiver_id": other_user["id"],
        })).json()
        res = await client.put(f"{URL}{created['id']}", json={
            "sender_id": user["id"], "content": "x", "message_type": "book",
            "receiver_id": other_user["id"],
        })
        assert res.status_code == 400

    async def test_delete_message(self, client: AsyncClient, user, other_user):
        created = (await client.post(URL, json={
            "sender_id": user["id"], "content": "DM", "message_type": "personal",
            "receiver_id": other_user["id"],
        })).json()
        assert (await client.delete(f"{URL}{created['id']}")).status_code == 204
        res = await client.get(f"{URL}{created['id']}")
        assert res.status_code == 404
        assert res.json()["message"] == f"Message not found with ID: {created['id']}"
