"""사용자 프로필 API 테스트.

User profile API tests — Read, search by birth date and gender, partial
update with the minimum age rule, and delete (which removes the user).
"""

import uuid

import pytest
from httpx import AsyncClient

from tests.conftest import user_payload

URL = "/api/user-profiles/"


class TestProfileRead:
    """프로필 조회 테스트."""

    async def test_get_profile(self, client: AsyncClient, user):
        res = await client.get(f"{URL}{user['profile']['id']}")
        assert res.status_code == 200
        data = res.json()
        assert data["user_id"] == user["id"]
        assert data["date_of_birth"] == "1995-05-17"

    async def test_get_nonexistent_profile(self, client: AsyncClient):
        fake_id = uuid.uuid4()
        res = await client.get(f"{URL}{fake_id}")
        assert res.status_code == 404
        assert res.json()["message"] == f"User profile not found with ID: {fake_id}"

    async def test_list_profiles(self, client: AsyncClient, user, other_user):
        res = await client.get(URL)
        assert res.status_code == 200
        assert res.json()["total"] == 2

    async def test_search_by_birth_date(self, client: AsyncClient, user):
        payload = user_payload("older")
        payload["profile"]["date_of_birth"] = "1970-01-01"
        await client.post("/api/users/", json=payload)

        res = await client.get(f"{URL}search-birthday", params={"date_of_birth": "1970-01-01"})
        assert res.status_code == 200
        items = res.json()["items"]
        assert len(items) == 1
        assert items[0]["date_of_birth"] == "1970-01-01"

    async def test_search_by_gender_lenient(self, client: AsyncClient, user):
        """성별 파라미터는 대소문자 무관."""
        payload = user_payload("him")
        payload["profile"]["gender"] = "male"
        await client.post("/api/users/", json=payload)

        res = await client.get(f"{URL}search-gender", params={"gender": "FEMALE"})
        assert res.status_code == 200
        assert [p["user_id"] for p in res.json()["items"]] == [user["id"]]

    async def test_search_by_invalid_gender(self, client: AsyncClient):
        res = await client.get(f"{URL}search-gender", params={"gender": "robot"})
        assert res.status_code == 400


class TestProfileUpdate:
    """프로필 수정 테스트."""

    async def test_update_profile_partial(self, client: AsyncClient, user):
        res = await client.put(f"{URL}{user['profile']['id']}", json={
            "biography": "Reads on the ferry.",
            "interests": "sci-fi, poetry",
        })
        assert res.status_code == 200
        data = res.json()
        assert data["biography"] == "Reads on the ferry."
        assert data["interests"] == "sci-fi, poetry"
        assert data["location"] == "Istanbul"

    async def test_update_profile_underage(self, client: AsyncClient, user):
        res = await client.put(f"{URL}{user['profile']['id']}", json={"date_of_birth": "2018-07-01"})
        assert res.status_code == 400
        assert any("at least 18 years old" in d for d in res.json()["details"])

    async def test_update_profile_blank_location(self, client: AsyncClient, user):
        res = await client.put(f"{URL}{user['profile']['id']}", json={"location": ""})
        assert res.status_code == 400

    @pytest.mark.parametrize("field,value", [
        ("biography", " "),
        ("location", "Ü"),
        ("occupation", "x" * 65),
        ("education", "B"),
        ("interests", "i" * 513),
        ("profile_image_url", "https://img.example.com/" + "a" * 500),
    ])
    async def test_update_profile_field_bounds(self, client: AsyncClient, user, field, value):
        res = await client.put(f"{URL}{user['profile']['id']}", json={field: value})
        assert res.status_code == 400
        assert any(d.startswith(f"body.{field}") for d in res.json()["details"])


class TestProfileDelete:
    """프로필 삭제 테스트."""

    async def test_delete_profile_deletes_user(self, client: AsyncClient, user):
        res = await client.delete(f"{URL}{user['profile']['id']}")
        assert res.status_code == 204
        assert (await client.get(f"/api/users/{user['id']}")).status_code == 404
        assert (await client.get(f"{URL}{user['profile']['id']}")).status_code == 404

    async def test_delete_nonexistent_profile(self, client: AsyncClient):
        res = await client.delete(f"{URL}{uuid.uuid4()}")
        assert res.status_code == 404
