"""리뷰 및 인용구 서비스.

Review and Quote services. Both are authored by an existing user about an
existing book.
"""

import logging
from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from batubook.models.content import Quote, Review
from batubook.repositories.book_repository import book_repository
from batubook.repositories.content_repository import quote_repository, review_repository
from batubook.repositories.user_repository import user_repository
from batubook.schemas.content import (
    QuoteCreate,
    QuoteResponse,
    QuoteUpdate,
    ReviewCreate,
    ReviewResponse,
    ReviewUpdate,
)
from batubook.services.common import get_or_404
from batubook.utils.pagination import Page, PageParams

logger = logging.getLogger(__name__)


async def check_author_and_book(db: AsyncSession, data: dict[str, Any]) -> None:
    """작성자와 도서가 존재하는지 확인합니다.

    Verify the user and book referenced by a write body exist.
    """
    if data.get("user_id") is not None:
        await get_or_404(db, user_repository, data["user_id"], "User")
    if data.get("book_id") is not None:
        await get_or_404(db, book_repository, data["book_id"], "Book")


class ReviewService:
    """리뷰 비즈니스 로직을 처리하는 서비스.

    Service handling review business logic. Ratings are stored as exact
    decimals with one fractional digit.
    """

    def _to_response(self, review: Review) -> ReviewResponse:
        return ReviewResponse(
            id=str(review.id),
            user_id=str(review.user_id),
            book_id=str(review.book_id),
            review_text=review.review_text,
            rating=float(review.rating),
            created_at=review.created_at,
            updated_at=review.updated_at,
        )

    def _to_page(self, rows: Any, total: int, params: PageParams) -> Page[ReviewResponse]:
        return Page.build([self._to_response(r) for r in rows], total, params)

    async def create_review(self, db: AsyncSession, data: ReviewCreate) -> ReviewResponse:
        review_data: dict[str, Any] = data.model_dump()
        await check_author_and_book(db, review_data)
        review_data["rating"] = Decimal(str(data.rating))
        review: Review = await review_repository.create(db, review_data)
        logger.info("Review created: id=%s book_id=%s rating=%s", review.id, review.book_id, review.rating)
        return self._to_response(review)

    async def get_review(self, db: AsyncSession, review_id: UUID) -> ReviewResponse:
        review: Review = await get_or_404(db, review_repository, review_id, "Review")
        return self._to_response(review)

    async def list_reviews(self, db: AsyncSession, params: PageParams) -> Page[ReviewResponse]:
        rows, total = await review_repository.get_paginated(db, params)
        return self._to_page(rows, total, params)

    async def get_reviews_by_rating(self, db: AsyncSession, rating: float, params: PageParams) -> Page[ReviewResponse]:
        rows, total = await review_repository.get_by_rating(db, Decimal(str(rating)), params)
        return self._to_page(rows, total, params)

    async def update_review(self, db: AsyncSession, review_id: UUID, data: ReviewUpdate) -> ReviewResponse:
        review: Review = await get_or_404(db, review_repository, review_id, "Review")
        update_data: dict[str, Any] = data.model_dump(exclude_none=True)
        await check_author_and_book(db, update_data)
        if "rating" in update_data:
            update_data["rating"] = Decimal(str(update_data["rating"]))
        review = await review_repository.update(db, review, update_data)
        logger.info("Review updated: id=%s fields=%s", review.id, sorted(update_data))
        return self._to_response(review)

    async def delete_review(self, db: AsyncSession, review_id: UUID) -> None:
        review: Review = await get_or_404(db, review_repository, review_id, "Review")
        await review_repository.delete(db, review)
        logger.info("Review deleted: id=%s", review_id)


class QuoteService:
    """인용구 비즈니스 로직을 처리하는 서비스.

    Service handling quote business logic.
    """

    def _to_response(self, quote: Quote) -> QuoteResponse:
        return QuoteResponse(
            id=str(quote.id),
            user_id=str(quote.user_id),
            book_id=str(quote.book_id),
            quote_text=quote.quote_text,
            created_at=quote.created_at,
            updated_at=quote.updated_at,
        )

    async def create_quote(self, db: AsyncSession, data: QuoteCreate) -> QuoteResponse:
        quote_data: dict[str, Any] = data.model_dump()
        await check_author_and_book(db, quote_data)
        quote: Quote = await quote_repository.create(db, quote_data)
        logger.info("Quote created: id=%s book_id=%s", quote.id, quote.book_id)
        return self._to_response(quote)

    async def get_quote(self, db: AsyncSession, quote_id: UUID) -> QuoteResponse:
        quote: Quote = await get_or_404(db, quote_repository, quote_id, "Quote")
        return self._to_response(quote)

    async def list_quotes(self, db: AsyncSession, params: PageParams) -> Page[QuoteResponse]:
        rows, total = await quote_repository.get_paginated(db, params)
        return Page.build([self._to_response(q) for q in rows], total, params)

    async def update_quote(self, db: AsyncSession, quote_id: UUID, data: QuoteUpdate) -> QuoteResponse:
        quote: Quote = await get_or_404(db, quote_repository, quote_id, "Quote")
        update_data: dict[str, Any] = data.model_dump(exclude_none=True)
        await check_author_and_book(db, update_data)
        quote = await quote_repository.update(db, quote, update_data)
        logger.info("Quote updated: id=%s fields=%s", quote.id, sorted(update_data))
        return self._to_response(quote)

    async def delete_quote(self, db: AsyncSession, quote_id: UUID) -> None:
        quote: Quote = await get_or_404(db, quote_repository, quote_id, "Quote")
        await quote_repository.delete(db, quote)
        logger.info("Quote deleted: id=%s", quote_id)


review_service: ReviewService = ReviewService()
quote_service: QuoteService = QuoteService()
