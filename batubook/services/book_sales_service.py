"""도서 판매 서비스.

Book Sales Service — Business logic for sales listings.
Every listing belongs to an existing book and has a unique sales code.
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from batubook.models.book import BookSales
from batubook.repositories.book_repository import book_repository, book_sales_repository
from batubook.schemas.book import BookSalesCreate, BookSalesResponse, BookSalesUpdate
from batubook.services.common import get_or_404
from batubook.utils.exceptions import BadRequestError, NotFoundError
from batubook.utils.pagination import Page, PageParams

logger = logging.getLogger(__name__)


class BookSalesService:
    """도서 판매 정보 비즈니스 로직을 처리하는 서비스.

    Service handling book sales business logic.
    """

    def _to_response(self, sales: BookSales) -> BookSalesResponse:
        return BookSalesResponse(
            id=str(sales.id),
            book_id=str(sales.book_id),
            sales_code=sales.sales_code,
            publisher=sales.publisher,
            price=sales.price,
            stock_quantity=sales.stock_quantity,
            currency=sales.currency,
            discount=sales.discount,
            is_available=sales.is_available,
            created_at=sales.created_at,
            updated_at=sales.updated_at,
        )

    def _to_page(self, rows: Any, total: int, params: PageParams) -> Page[BookSalesResponse]:
        return Page.build([self._to_response(s) for s in rows], total, params)

    async def create_sales(self, db: AsyncSession, data: BookSalesCreate) -> BookSalesResponse:
        """판매 정보를 등록합니다.

        Create a sales listing for an existing book.

        Raises:
            NotFoundError: 도서를 찾을 수 없을 때 (Book not found)
            BadRequestError: 판매 코드 중복 (Sales code already used)
        """
        await get_or_404(db, book_repository, data.book_id, "Book")
        if await book_sales_repository.sales_code_taken(db, data.sales_code):
            raise BadRequestError(f"Sales code is already in use: {data.sales_code}")
        sales: BookSales = await book_sales_repository.create(db, data.model_dump())
        logger.info("Book sales created: id=%s book_id=%s code=%s", sales.id, sales.book_id, sales.sales_code)
        return self._to_response(sales)

    async def get_sales(self, db: AsyncSession, sales_id: UUID) -> BookSalesResponse:
        sales: BookSales = await get_or_404(db, book_sales_repository, sales_id, "Book sales")
        return self._to_response(sales)

    async def list_sales(self, db: AsyncSession, params: PageParams) -> Page[BookSalesResponse]:
        rows, total = await book_sales_repository.get_paginated(db, params)
        return self._to_page(rows, total, params)

    async def update_sales(self, db: AsyncSession, sales_id: UUID, data: BookSalesUpdate) -> BookSalesResponse:
        sales: BookSales = await get_or_404(db, book_sales_repository, sales_id, "Book sales")
        update_data: dict[str, Any] = data.model_dump(exclude_none=True)
        if "book_id" in update_data:
            await get_or_404(db, book_repository, update_data["book_id"], "Book")
        new_code = update_data.get("sales_code")
        if new_code is not None and await book_sales_repository.sales_code_taken(db, new_code, exclude_id=sales.id):
            raise BadRequestError(f"Sales code is already in use: {new_code}")
        sales = await book_sales_repository.update(db, sales, update_data)
        logger.info("Book sales updated: id=%s fields=%s", sales.id, sorted(update_data))
        return self._to_response(sales)

    async def delete_sales(self, db: AsyncSession, sales_id: UUID) -> None:
        sales: BookSales = await get_or_404(db, book_sales_repository, sales_id, "Book sales")
        await book_sales_repository.delete(db, sales)
        logger.info("Book sales deleted: id=%s", sales_id)

    async def get_sales_by_sales_code(self, db: AsyncSession, sales_code: str) -> BookSalesResponse:
        sales: BookSales | None = await book_sales_repository.get_by_sales_code(db, sales_code)
        if sales is None:
            raise NotFoundError(f"Book sales not found with sales code: {sales_code}")
        return self._to_response(sales)

    async def get_sales_by_book(self, db: AsyncSession, book_id: UUID, params: PageParams) -> Page[BookSalesResponse]:
        rows, total = await book_sales_repository.get_by_book(db, book_id, params)
        return self._to_page(rows, total, params)

    async def get_sales_by_price_greater_than(
        self, db: AsyncSession, price: float, params: PageParams
    ) -> Page[BookSalesResponse]:
        rows, total = await book_sales_repository.get_by_price_greater_than(db, price, params)
        return self._to_page(rows, total, params)

    async def get_available_sales(self, db: AsyncSession, params: PageParams) -> Page[BookSalesResponse]:
        rows, total = await book_sales_repository.get_available(db, params)
        return self._to_page(rows, total, params)

    async def get_sales_by_discount_greater_than(
        self, db: AsyncSession, discount: float, params: PageParams
    ) -> Page[BookSalesResponse]:
        rows, total = await book_sales_repository.get_by_discount_greater_than(db, discount, params)
        return self._to_page(rows, total, params)


book_sales_service: BookSalesService = BookSalesService()
