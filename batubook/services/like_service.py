"""좋아요 서비스.

Like Service — Likes on messages, book interactions, reviews and quotes.
Each like has exactly one target and a user likes a target at most once;
liking again returns the existing like.
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from batubook.models.social import Like
from batubook.repositories.base import BaseRepository
from batubook.repositories.book_repository import book_interaction_repository
from batubook.repositories.content_repository import quote_repository, review_repository
from batubook.repositories.message_repository import message_repository
from batubook.repositories.social_repository import like_repository
from batubook.repositories.user_repository import user_repository
from batubook.schemas.common import ExistsResponse
from batubook.schemas.social import LikeCreate, LikeResponse, LikeUpdate
from batubook.services.common import get_or_404, str_or_none
from batubook.utils.exceptions import BadRequestError
from batubook.utils.pagination import Page, PageParams

logger = logging.getLogger(__name__)

LIKE_TARGETS: dict[str, tuple[str, BaseRepository[Any]]] = {
    "message_id": ("Message", message_repository),
    "book_interaction_id": ("Book interaction", book_interaction_repository),
    "review_id": ("Review", review_repository),
    "quote_id": ("Quote", quote_repository),
}


def single_like_target(data: LikeCreate) -> tuple[str, UUID]:
    """요청에서 유일한 대상 필드와 ID를 꺼냅니다.

    Return the one (field, id) pair set in the body.

    Raises:
        BadRequestError: 대상이 없거나 둘 이상일 때 (Zero or several targets)
    """
    chosen = [(field, getattr(data, field)) for field in LIKE_TARGETS if getattr(data, field) is not None]
    if len(chosen) != 1:
        raise BadRequestError("Only one type of like can be selected. Please choose exactly one type of like.")
    return chosen[0]


class LikeService:
    """좋아요 비즈니스 로직을 처리하는 서비스.

    Service handling like business logic.
    """

    def _to_response(self, like: Like) -> LikeResponse:
        return LikeResponse(
            id=str(like.id),
            user_id=str(like.user_id),
            message_id=str_or_none(like.message_id),
            book_interaction_id=str_or_none(like.book_interaction_id),
            review_id=str_or_none(like.review_id),
            quote_id=str_or_none(like.quote_id),
            created_at=like.created_at,
            updated_at=like.updated_at,
        )

    async def _check_references(self, db: AsyncSession, user_id: UUID, field: str, target_id: UUID) -> None:
        await get_or_404(db, user_repository, user_id, "User")
        label, repository = LIKE_TARGETS[field]
        await get_or_404(db, repository, target_id, label)

    async def create_like(self, db: AsyncSession, data: LikeCreate) -> LikeResponse:
        """좋아요를 생성합니다. 이미 있으면 기존 좋아요를 반환합니다.

        Like a target. Liking the same target twice returns the existing like.

        Raises:
            BadRequestError: 대상이 정확히 하나가 아닐 때 (Not exactly one target)
            NotFoundError: 사용자 또는 대상이 없을 때 (User or target missing)
        """
        field, target_id = single_like_target(data)
        await self._check_references(db, data.user_id, field, target_id)

        existing: Like | None = await like_repository.get_by_user_and_target(db, data.user_id, field, target_id)
        if existing is not None:
            logger.debug("Like already present: id=%s", existing.id)
            return self._to_response(existing)

        like: Like = await like_repository.create(db, {"user_id": data.user_id, field: target_id})
        logger.info("Like created: id=%s user_id=%s %s=%s", like.id, like.user_id, field, target_id)
        return self._to_response(like)

    async def get_like(self, db: AsyncSession, like_id: UUID) -> LikeResponse:
        like: Like = await get_or_404(db, like_repository, like_id, "Like")
        return self._to_response(like)

    async def list_likes(self, db: AsyncSession, params: PageParams) -> Page[LikeResponse]:
        rows, total = await like_repository.get_paginated(db, params)
        return Page.build([self._to_response(like) for like in rows], total, params)

    async def update_like(self, db: AsyncSession, like_id: UUID, data: LikeUpdate) -> LikeResponse:
        """좋아요의 사용자/대상을 변경합니다. 생성과 같은 규칙이 적용됩니다.

        Retarget a like under the creation rules.

        Raises:
            BadRequestError: 대상 위반 또는 같은 대상에 이미 좋아요가 있을 때
                             (Invalid target, or the user already likes the new target)
        """
        like: Like = await get_or_404(db, like_repository, like_id, "Like")
        field, target_id = single_like_target(data)
        await self._check_references(db, data.user_id, field, target_id)

        existing: Like | None = await like_repository.get_by_user_and_target(db, data.user_id, field, target_id)
        if existing is not None and existing.id != like.id:
            raise BadRequestError("The user has already liked this content.")

        values: dict[str, Any] = {name: None for name in LIKE_TARGETS}
        values.update({"user_id": data.user_id, field: target_id})
        like = await like_repository.update(db, like, values)
        logger.info("Like updated: id=%s %s=%s", like.id, field, target_id)
        return self._to_response(like)

    async def delete_like(self, db: AsyncSession, like_id: UUID) -> None:
        like: Like = await get_or_404(db, like_repository, like_id, "Like")
        await like_repository.delete(db, like)
        logger.info("Like deleted: id=%s", like_id)

    async def has_liked(self, db: AsyncSession, user_id: UUID, field: str, target_id: UUID) -> ExistsResponse:
        """사용자가 대상에 좋아요를 눌렀는지 확인합니다.

        Whether the user has liked the target.

        Args:
            field: 대상 컬럼명 ("message_id", "book_interaction_id", "review_id", "quote_id")
        """
        like: Like | None = await like_repository.get_by_user_and_target(db, user_id, field, target_id)
        return ExistsResponse(exists=like is not None)

    async def has_liked_message(self, db: AsyncSession, user_id: UUID, message_id: UUID) -> ExistsResponse:
        return await self.has_liked(db, user_id, "message_id", message_id)

    async def has_liked_book_interaction(
        self, db: AsyncSession, user_id: UUID, book_interaction_id: UUID
    ) -> ExistsResponse:
        return await self.has_liked(db, user_id, "book_interaction_id", book_interaction_id)

    async def has_liked_review(self, db: AsyncSession, user_id: UUID, review_id: UUID) -> ExistsResponse:
        return await self.has_liked(db, user_id, "review_id", review_id)

    async def has_liked_quote(self, db: AsyncSession, user_id: UUID, quote_id: UUID) -> ExistsResponse:
        return await self.has_liked(db, user_id, "quote_id", quote_id)


like_service: LikeService = LikeService()
