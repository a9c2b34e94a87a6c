"""팔로우 API 테스트.

Follow API tests — Following users and books, self-follow and duplicate
rejection, no-op unfollow, and the following/followers listings.
"""

import uuid

from httpx import AsyncClient

URL = "/api/follows/"


class TestFollowUser:
    """사용자 팔로우 테스트."""

    async def test_follow_user(self, client: AsyncClient, user, other_user):
        res = await client.post(f"{URL}follow-user", json={
            "follower_id": user["id"], "followed_user_id": other_user["id"],
        })
        assert res.status_code == 201
        data = res.json()
        assert data["follower_id"] == user["id"]
        assert data["followed_user_id"] == other_user["id"]
        assert data["followed_book_id"] is None

    async def test_follow_self(self, client: AsyncClient, user):
        res = await client.post(f"{URL}follow-user", json={
            "follower_id": user["id"], "followed_user_id": user["id"],
        })
        assert res.status_code == 400
        assert res.json()["message"] == "Users cannot follow themselves."

    async def test_follow_user_twice(self, client: AsyncClient, user, other_user):
        body = {"follower_id": user["id"], "followed_user_id": other_user["id"]}
        await client.post(f"{URL}follow-user", json=body)
        res = await client.post(f"{URL}follow-user", json=body)
        assert res.status_code == 400
        assert res.json()["message"] == "The user is already following this user."

    async def test_follow_missing_user(self, client: AsyncClient, user):
        fake_id = str(uuid.uuid4())
        res = await client.post(f"{URL}follow-user", json={"follower_id": user["id"], "followed_user_id": fake_id})
        assert res.status_code == 404
        assert res.json()["message"] == f"User not found with ID: {fake_id}"

    async def test_unfollow_user(self, client: AsyncClient, user, other_user):
        body = {"follower_id": user["id"], "followed_user_id": other_user["id"]}
        await client.post(f"{URL}follow-user", json=body)
        res = await client.post(f"{URL}unfollow-user", json=body)
        assert res.status_code == 204
        assert (await client.get(URL)).json()["total"] == 0

    async def test_unfollow_when_not_following(self, client: AsyncClient, user, other_user):
        """팔로우 중이 아니어도 204."""
        res = await client.post(f"{URL}unfollow-user", json={
            "follower_id": user["id"], "followed_user_id": other_user["id"],
        })
        assert res.status_code == 204

    async def test_unfollow_missing_user(self, client: AsyncClient, user):
        res = await client.post(f"{URL}unfollow-user", json={
            "follower_id": user["id"], "followed_user_id": str(uuid.uuid4()),
        })
        assert res.status_code == 404


class TestFollowBook:
    """도서 팔로우 테스트."""

    async def test_follow_book(self, client: AsyncClient, user, book):
        res = await client.post(f"{URL}follow-book", json={"follower_id": user["id"], "followed_book_id": book["id"]})
        assert res.status_code == 201
        data = res.json()
        assert data["followed_book_id"] == book["id"]
        assert data["followed_user_id"] is None

    async def test_follow_book_twice(self, client: AsyncClient, user, book):
        body = {"follower_id": user["id"], "followed_book_id": book["id"]}
        await client.post(f"{URL}follow-book", json=body)
        res = await client.post(f"{URL}follow-book", json=body)
        assert res.status_code == 400
        assert res.json()["message"] == "The user is already following this book."

    async def test_follow_missing_book(self, client: AsyncClient, user):
        res = await client.post(f"{URL}follow-book", json={
            "follower_id": user["id"], "followed_book_id": str(uuid.uuid4()),
        })
        assert res.status_code == 404

    async def test_unfollow_book(self, client: AsyncClient, user, book):
        body = {"follower_id": user["id"], "followed_book_id": book["id"]}
        await client.post(f"{URL}follow-book", json=body)
        assert (await client.post(f"{URL}unfollow-book", json=body)).status_code == 204
        assert (await client.get(f"{URL}books/{book['id']}/followers")).json()["total"] == 0


class TestFollowQueries:
    """팔로우 목록 조회 테스트."""

    async def test_following_and_followers(self, client: AsyncClient, user, other_user, book):
        await client.post(f"{URL}follow-user", json={"follower_id": user["id"], "followed_user_id": other_user["id"]})
        await client.post(f"{URL}follow-book", json={"follower_id": user["id"], "followed_book_id": book["id"]})
        await client.post(f"{URL}follow-book", json={"follower_id": other_user["id"], "followed_book_id": book["id"]})

        following = (await client.get(f"{URL}users/{user['id']}/following")).json()
        assert following["total"] == 2

        followers = (await client.get(f"{URL}users/{other_user['id']}/followers")).json()
        assert [f["follower_id"] for f in followers["items"]] == [user["id"]]

        book_followers = (await client.get(f"{URL}books/{book['id']}/followers")).json()
        assert book_followers["total"] == 2

        assert (await client.get(URL)).json()["total"] == 3

    async def test_follows_removed_with_user(self, client: AsyncClient, user, other_user):
        await client.post(f"{URL}follow-user", json={"follower_id": user["id"], "followed_user_id": other_user["id"]})
        await client.delete(f"/api/users/{other_user['id']}")
        assert (await client.get(f"{URL}users/{user['id']}/following")).json()["total"] == 0
