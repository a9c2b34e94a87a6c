"""도서 판매 라우터.

Book Sales Router — CRUD and query endpoints for sales listings.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query

from batubook.api.deps import DbSession, Paging
from batubook.schemas.book import BookSalesCreate, BookSalesResponse, BookSalesUpdate
from batubook.services.book_sales_service import book_sales_service
from batubook.utils.pagination import Page

router: APIRouter = APIRouter()


@router.post("/", response_model=BookSalesResponse, status_code=201)
async def create_sales(data: BookSalesCreate, db: DbSession) -> BookSalesResponse:
    result: BookSalesResponse = await book_sales_service.create_sales(db, data)
    await db.commit()
    return result


@router.get("/", response_model=Page[BookSalesResponse])
async def list_sales(db: DbSession, params: Paging) -> Page[BookSalesResponse]:
    return await book_sales_service.list_sales(db, params)


@router.get("/sales-code/{sales_code}", response_model=BookSalesResponse)
async def get_sales_by_sales_code(sales_code: str, db: DbSession) -> BookSalesResponse:
    return await book_sales_service.get_sales_by_sales_code(db, sales_code)


@router.get("/books/{book_id}", response_model=Page[BookSalesResponse])
async def get_sales_by_book(book_id: UUID, db: DbSession, params: Paging) -> Page[BookSalesResponse]:
    return await book_sales_service.get_sales_by_book(db, book_id, params)


@router.get("/price-greater-than", response_model=Page[BookSalesResponse])
async def get_sales_by_price_greater_than(
    price: Annotated[float, Query()],
    db: DbSession,
    params: Paging,
) -> Page[BookSalesResponse]:
    """기준 가격보다 비싼 판매 정보를 가격 내림차순으로 조회합니다.

    Listings priced above ``price``, most expensive first.
    """
    return await book_sales_service.get_sales_by_price_greater_than(db, price, params)


@router.get("/available", response_model=Page[BookSalesResponse])
async def get_available_sales(db: DbSession, params: Paging) -> Page[BookSalesResponse]:
    return await book_sales_service.get_available_sales(db, params)


@router.get("/discount-greater-than", response_model=Page[BookSalesResponse])
async def get_sales_by_discount_greater_than(
    discount: Annotated[float, Query()],
    db: DbSession,
    params: Paging,
) -> Page[BookSalesResponse]:
    return await book_sales_service.get_sales_by_discount_greater_than(db, discount, params)


@router.get("/{sales_id}", response_model=BookSalesResponse)
async def get_sales(sales_id: UUID, db: DbSession) -> BookSalesResponse:
    return await book_sales_service.get_sales(db, sales_id)


@router.put("/{sales_id}", response_model=BookSalesResponse)
async def update_sales(sales_id: UUID, data: BookSalesUpdate, db: DbSession) -> BookSalesResponse:
    result: BookSalesResponse = await book_sales_service.update_sales(db, sales_id, data)
    await db.commit()
    return result


@router.delete("/{sales_id}", status_code=204)
async def delete_sales(sales_id: UUID, db: DbSession) -> None:
    await book_sales_service.delete_sales(db, sales_id)
    await db.commit()
