"""리포스트/저장 서비스.

RepostSave Service — Users reposting or saving reviews, quotes and book
interactions. A row references exactly one piece of content, and a user
performs each action on a piece of content at most once.
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from batubook.models.enums import ActionType
from batubook.models.social import RepostSave
from batubook.repositories.base import BaseRepository
from batubook.repositories.book_repository import book_interaction_repository
from batubook.repositories.content_repository import quote_repository, review_repository
from batubook.repositories.social_repository import repost_save_repository
from batubook.repositories.user_repository import user_repository
from batubook.schemas.common import ExistsResponse
from batubook.schemas.social import RepostSaveCreate, RepostSaveResponse, RepostSaveUpdate
from batubook.services.common import get_or_404, str_or_none
from batubook.utils.exceptions import BadRequestError, NotFoundError
from batubook.utils.pagination import Page, PageParams

logger = logging.getLogger(__name__)

CONTENT_TARGETS: dict[str, tuple[str, BaseRepository[Any]]] = {
    "review_id": ("Review", review_repository),
    "quote_id": ("Quote", quote_repository),
    "book_interaction_id": ("Book interaction", book_interaction_repository),
}

SINGLE_CONTENT_MESSAGE: str = "Only one content type (Review, Quote, or BookInteraction) can be referenced."


def single_content(
    review_id: UUID | None,
    quote_id: UUID | None,
    book_interaction_id: UUID | None,
) -> tuple[str, UUID]:
    """세 대상 중 정확히 하나만 지정되었는지 확인하고 반환합니다.

    Return the single (field, id) content reference.

    Raises:
        BadRequestError: 대상이 없거나 둘 이상일 때 (Zero or several targets)
    """
    given = {"review_id": review_id, "quote_id": quote_id, "book_interaction_id": book_interaction_id}
    chosen = [(field, value) for field, value in given.items() if value is not None]
    if len(chosen) != 1:
        raise BadRequestError(SINGLE_CONTENT_MESSAGE)
    return chosen[0]


class RepostSaveService:
    """리포스트/저장 비즈니스 로직을 처리하는 서비스.

    Service handling repost/save business logic.
    """

    def _to_response(self, row: RepostSave) -> RepostSaveResponse:
        return RepostSaveResponse(
            id=str(row.id),
            user_id=str(row.user_id),
            action_type=row.action_type,
            review_id=str_or_none(row.review_id),
            quote_id=str_or_none(row.quote_id),
            book_interaction_id=str_or_none(row.book_interaction_id),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def _to_page(self, rows: Any, total: int, params: PageParams) -> Page[RepostSaveResponse]:
        return Page.build([self._to_response(r) for r in rows], total, params)

    async def _validate(
        self, db: AsyncSession, data: RepostSaveCreate, exclude_id: UUID | None = None
    ) -> dict[str, Any]:
        """요청을 검증하고 저장할 필드 딕셔너리를 만듭니다.

        Validate the body (single target, references exist, no duplicate)
        and build the stored field set.
        """
        field, target_id = single_content(data.review_id, data.quote_id, data.book_interaction_id)
        await get_or_404(db, user_repository, data.user_id, "User")
        label, repository = CONTENT_TARGETS[field]
        await get_or_404(db, repository, target_id, label)

        if await repost_save_repository.exists_for(
            db, data.user_id, field, target_id, data.action_type, exclude_id=exclude_id
        ):
            raise BadRequestError(
                f"The user has already performed {data.action_type.name} on this {label.lower()}."
            )

        values: dict[str, Any] = {name: None for name in CONTENT_TARGETS}
        values.update({"user_id": data.user_id, "action_type": data.action_type, field: target_id})
        return values

    async def create_repost_save(self, db: AsyncSession, data: RepostSaveCreate) -> RepostSaveResponse:
        """리포스트 또는 저장을 기록합니다.

        Record a repost or save.

        Raises:
            BadRequestError: 대상 위반 또는 중복 (Invalid target or duplicate)
            NotFoundError: 사용자 또는 콘텐츠가 없을 때 (User or content missing)
        """
        row: RepostSave = await repost_save_repository.create(db, await self._validate(db, data))
        logger.info("RepostSave created: id=%s user_id=%s action=%s", row.id, row.user_id, row.action_type.name)
        return self._to_response(row)

    async def get_repost_save(self, db: AsyncSession, repost_save_id: UUID) -> RepostSaveResponse:
        row: RepostSave = await get_or_404(db, repost_save_repository, repost_save_id, "RepostSave")
        return self._to_response(row)

    async def list_repost_saves(self, db: AsyncSession, params: PageParams) -> Page[RepostSaveResponse]:
        rows, total = await repost_save_repository.get_paginated(db, params)
        return self._to_page(rows, total, params)

    async def update_repost_save(
        self, db: AsyncSession, repost_save_id: UUID, data: RepostSaveUpdate
    ) -> RepostSaveResponse:
        row: RepostSave = await get_or_404(db, repost_save_repository, repost_save_id, "RepostSave")
        values = await self._validate(db, data, exclude_id=row.id)
        row = await repost_save_repository.update(db, row, values)
        logger.info("RepostSave updated: id=%s action=%s", row.id, row.action_type.name)
        return self._to_response(row)

    async def delete_repost_save(self, db: AsyncSession, repost_save_id: UUID) -> None:
        row: RepostSave = await get_or_404(db, repost_save_repository, repost_save_id, "RepostSave")
        await repost_save_repository.delete(db, row)
        logger.info("RepostSave deleted: id=%s", repost_save_id)

    async def get_by_user(
        self,
        db: AsyncSession,
        user_id: UUID,
        params: PageParams,
        action_type: ActionType | None = None,
    ) -> Page[RepostSaveResponse]:
        """사용자의 리포스트/저장 목록을 조회합니다 (동작 유형 필터 선택).

        A user's reposts and saves, optionally filtered by action type.
        """
        rows, total = await repost_save_repository.get_by_user(db, user_id, action_type, params)
        return self._to_page(rows, total, params)

    async def get_by_user_and_content(
        self,
        db: AsyncSession,
        user_id: UUID,
        review_id: UUID | None = None,
        quote_id: UUID | None = None,
        book_interaction_id: UUID | None = None,
    ) -> RepostSaveResponse:
        """사용자와 콘텐츠로 리포스트/저장을 조회합니다.

        Look up the user's repost/save of one piece of content.

        Raises:
            BadRequestError: 대상이 정확히 하나가 아닐 때 (Not exactly one target)
            NotFoundError: 해당 기록이 없을 때 (No such row)
        """
        field, target_id = single_content(review_id, quote_id, book_interaction_id)
        row: RepostSave | None = await repost_save_repository.get_by_user_and_target(db, user_id, field, target_id)
        if row is None:
            raise NotFoundError(f"RepostSave not found for user {user_id} and {field} {target_id}")
        return self._to_response(row)

    async def exists_by_user_content_and_action(
        self,
        db: AsyncSession,
        user_id: UUID,
        action_type: ActionType,
        review_id: UUID | None = None,
        quote_id: UUID | None = None,
        book_interaction_id: UUID | None = None,
    ) -> ExistsResponse:
        field, target_id = single_content(review_id, quote_id, book_interaction_id)
        exists = await repost_save_repository.exists_for(db, user_id, field, target_id, action_type)
        return ExistsResponse(exists=exists)


repost_save_service: RepostSaveService = RepostSaveService()
