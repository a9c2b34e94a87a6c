"""리뷰 및 인용구 레포지토리.

Review and Quote repositories.
"""

from decimal import Decimal
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from batubook.models.content import Quote, Review
from batubook.repositories.base import BaseRepository
from batubook.utils.pagination import PageParams


class ReviewRepository(BaseRepository[Review]):
    """리뷰 테이블 레포지토리.

    Repository handling database queries for the reviews table.
    """

    def __init__(self) -> None:
        super().__init__(Review)

    async def get_by_rating(
        self, db: AsyncSession, rating: Decimal, params: PageParams
    ) -> tuple[Sequence[Review], int]:
        return await self.get_paginated(db, params, Review.rating == rating)


class QuoteRepository(BaseRepository[Quote]):
    def __init__(self) -> None:
        super().__init__(Quote)


review_repository: ReviewRepository = ReviewRepository()
quote_repository: QuoteRepository = QuoteRepository()
