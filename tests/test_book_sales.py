"""도서 판매 정보 API 테스트.

Book sales API tests — Listings for existing books, unique sales codes,
price/stock/discount bounds, and the price, discount and availability
queries.
"""

import uuid

import pytest
from httpx import AsyncClient

URL = "/api/book-sales/"


def sales_payload(book_id: str, sales_code: str = "BB-1984", **overrides) -> dict:
    payload = {
        "book_id": book_id,
        "sales_code": sales_code,
        "publisher": "Secker & Warburg",
        "price": 12.5,
        "stock_quantity": 10,
        "currency": "usd",
    }
    payload.update(overrides)
    return payload


class TestSalesCreate:
    """판매 정보 생성 테스트."""

    async def test_create_sales(self, client: AsyncClient, book):
        res = await client.post(URL, json=sales_payload(book["id"]))
        assert res.status_code == 201
        data = res.json()
        assert data["book_id"] == book["id"]
        assert data["price"] == 12.5
        assert data["currency"] == "usd"
        assert data["discount"] == 0.0
        assert data["is_available"] is True

    async def test_create_sales_lenient_currency(self, client: AsyncClient, book):
        res = await client.post(URL, json=sales_payload(book["id"], currency="TRY"))
        assert res.status_code == 201
        assert res.json()["currency"] == "try"

    async def test_create_sales_for_missing_book(self, client: AsyncClient):
        fake_id = str(uuid.uuid4())
        res = await client.post(URL, json=sales_payload(fake_id))
        assert res.status_code == 404
        assert res.json()["message"] == f"Book not found with ID: {fake_id}"

    async def test_create_sales_duplicate_code(self, client: AsyncClient, book):
        await client.post(URL, json=sales_payload(book["id"]))
        res = await client.post(URL, json=sales_payload(book["id"]))
        assert res.status_code == 400
        assert res.json()["message"] == "Sales code is already in use: BB-1984"

    @pytest.mark.parametrize("field,value", [
        ("price", 0),
        ("price", -3.0),
        ("stock_quantity", -1),
        ("discount", 100.5),
        ("discount", -1),
    ])
    async def test_create_sales_out_of_range(self, client: AsyncClient, book, field, value):
        res = await client.post(URL, json=sales_payload(book["id"], **{field: value}))
        assert res.status_code == 400

    async def test_create_sales_trims_code_and_publisher(self, client: AsyncClient, book):
        """판매 코드와 출판사는 앞뒤 공백이 제거됩니다."""
        res = await client.post(URL, json=sales_payload(book["id"], "  BB-1984 ", publisher="  Penguin  "))
        assert res.status_code == 201
        data = res.json()
        assert data["sales_code"] == "BB-1984"
        assert data["publisher"] == "Penguin"

    @pytest.mark.parametrize("field,value", [
        ("sales_code", "BB-198"),
        ("sales_code", "BB-19840"),
        ("sales_code", "       "),
        ("publisher", "P"),
        ("publisher", "P" * 65),
    ])
    async def test_create_sales_bad_code_or_publisher(self, client: AsyncClient, book, field, value):
        res = await client.post(URL, json=sales_payload(book["id"], **{field: value}))
        assert res.status_code == 400
        assert any(d.startswith(f"body.{field}") for d in res.json()["details"])


class TestSalesRead:
    """판매 정보 조회 테스트."""

    async def test_get_by_sales_code(self, client: AsyncClient, book):
        created = (await client.post(URL, json=sales_payload(book["id"]))).json()
        res = await client.get(f"{URL}sales-code/BB-1984")
        assert res.status_code == 200
        assert res.json()["id"] == created["id"]

    async def test_get_by_unknown_sales_code(self, client: AsyncClient):
        res = await client.get(f"{URL}sales-code/NOPE")
        assert res.status_code == 404
        assert res.json()["message"] == "Book sales not found with sales code: NOPE"

    async def test_get_nonexistent_sales(self, client: AsyncClient):
        fake_id = uuid.uuid4()
        res = await client.get(f"{URL}{fake_id}")
        assert res.status_code == 404
        assert res.json()["message"] == f"Book sales not found with ID: {fake_id}"

    async def test_get_by_book(self, client: AsyncClient, book):
        await client.post(URL, json=sales_payload(book["id"], "BB-A001"))
        await client.post(URL, json=sales_payload(book["id"], "BB-B002"))
        res = await client.get(f"{URL}books/{book['id']}")
        assert res.json()["total"] == 2

    async def test_price_greater_than_descending(self, client: AsyncClient, book):
        await client.post(URL, json=sales_payload(book["id"], "CHEAP01", price=5))
        await client.post(URL, json=sales_payload(book["id"], "MIDPR01", price=15))
        await client.post(URL, json=sales_payload(book["id"], "DEAR001", price=40))
        res = await client.get(f"{URL}price-greater-than", params={"price": 10})
        assert [s["sales_code"] for s in res.json()["items"]] == ["DEAR001", "MIDPR01"]

    async def test_available(self, client: AsyncClient, book):
        await client.post(URL, json=sales_payload(book["id"], "ONSALE1"))
        await client.post(URL, json=sales_payload(book["id"], "OFFSAL1", is_available=False))
        res = await client.get(f"{URL}available")
        assert [s["sales_code"] for s in res.json()["items"]] == ["ONSALE1"]

    async def test_discount_greater_than(self, client: AsyncClient, book):
        await client.post(URL, json=sales_payload(book["id"], "NODISC1"))
        await client.post(URL, json=sales_payload(book["id"], "HALFOFF", discount=50))
        res = await client.get(f"{URL}discount-greater-than", params={"discount": 10})
        assert [s["sales_code"] for s in res.json()["items"]] == ["HALFOFF"]


class TestSalesUpdateDelete:
    """판매 정보 수정/삭제 테스트."""

    async def test_update_sales(self, client: AsyncClient, book):
        created = (await client.post(URL, json=sales_payload(book["id"]))).json()
        res = await client.put(f"{URL}{created['id']}", json={"price": 9.99, "is_available": False})
        assert res.status_code == 200
        data = res.json()
        assert data["price"] == 9.99
        assert data["is_available"] is False
        assert data["sales_code"] == "BB-1984"

    async def test_update_sales_code_conflict(self, client: AsyncClient, book):
        await client.post(URL, json=sales_payload(book["id"], "TAKEN01"))
        created = (await client.post(URL, json=sales_payload(book["id"], "MINE001"))).json()
        res = await client.put(f"{URL}{created['id']}", json={"sales_code": "TAKEN01"})
        assert res.status_code == 400

    async def test_update_sales_code_wrong_length(self, client: AsyncClient, book):
        created = (await client.post(URL, json=sales_payload(book["id"]))).json()
        res = await client.put(f"{URL}{created['id']}", json={"sales_code": "SHORT"})
        assert res.status_code == 400

    async def test_update_sales_missing_book(self, client: AsyncClient, book):
        created = (await client.post(URL, json=sales_payload(book["id"]))).json()
        res = await client.put(f"{URL}{created['id']}", json={"book_id": str(uuid.uuid4())})
        assert res.status_code == 404

    async def test_delete_sales(self, client: AsyncClient, book):
        created = (await client.post(URL, json=sales_payload(book["id"]))).json()
        res = await client.delete(f"{URL}{created['id']}")
        assert res.status_code == 204
        assert (await client.get(f"{URL}{created['id']}")).status_code == 404
