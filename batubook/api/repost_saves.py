"""리포스트/저장 라우터.

RepostSave Router — Reposts and saves of reviews, quotes and book
interactions.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query

from batubook.api.deps import DbSession, Paging
from batubook.models.enums import ActionType
from batubook.schemas.common import ExistsResponse
from batubook.schemas.social import RepostSaveCreate, RepostSaveResponse, RepostSaveUpdate
from batubook.services.repost_save_service import repost_save_service
from batubook.utils.pagination import Page

router: APIRouter = APIRouter()


@router.post("/", response_model=RepostSaveResponse, status_code=201)
async def create_repost_save(data: RepostSaveCreate, db: DbSession) -> RepostSaveResponse:
    result: RepostSaveResponse = await repost_save_service.create_repost_save(db, data)
    await db.commit()
    return result


@router.get("/", response_model=Page[RepostSaveResponse])
async def list_repost_saves(db: DbSession, params: Paging) -> Page[RepostSaveResponse]:
    return await repost_save_service.list_repost_saves(db, params)


@router.get("/users/{user_id}", response_model=Page[RepostSaveResponse])
async def get_by_user(
    user_id: UUID,
    db: DbSession,
    params: Paging,
    action_type: Annotated[ActionType | None, Query()] = None,
) -> Page[RepostSaveResponse]:
    """사용자의 리포스트/저장 목록 (action_type 으로 필터 가능).

    A user's reposts and saves, optionally filtered by ``action_type``.
    """
    return await repost_save_service.get_by_user(db, user_id, params, action_type)


@router.get("/content", response_model=RepostSaveResponse)
async def get_by_user_and_content(
    user_id: Annotated[UUID, Query()],
    db: DbSession,
    review_id: Annotated[UUID | None, Query()] = None,
    quote_id: Annotated[UUID | None, Query()] = None,
    book_interaction_id: Annotated[UUID | None, Query()] = None,
) -> RepostSaveResponse:
    return await repost_save_service.get_by_user_and_content(
        db, user_id, review_id, quote_id, book_interaction_id
    )


@router.get("/exists", response_model=ExistsResponse)
async def exists_by_user_content_and_action(
    user_id: Annotated[UUID, Query()],
    action_type: Annotated[ActionType, Query()],
    db: DbSession,
    review_id: Annotated[UUID | None, Query()] = None,
    quote_id: Annotated[UUID | None, Query()] = None,
    book_interaction_id: Annotated[UUID | None, Query()] = None,
) -> ExistsResponse:
    return await repost_save_service.exists_by_user_content_and_action(
        db, user_id, action_type, review_id, quote_id, book_interaction_id
    )


@router.get("/{repost_save_id}", response_model=RepostSaveResponse)
async def get_repost_save(repost_save_id: UUID, db: DbSession) -> RepostSaveResponse:
    return await repost_save_service.get_repost_save(db, repost_save_id)


@router.put("/{repost_save_id}", response_model=RepostSaveResponse)
async def update_repost_save(repost_save_id: UUID, data: RepostSaveUpdate, db: DbSession) -> RepostSaveResponse:
    result: RepostSaveResponse = await repost_save_service.update_repost_save(db, repost_save_id, data)
    await db.commit()
    return result


@router.delete("/{repost_save_id}", status_code=204)
async def delete_repost_save(repost_save_id: UUID, db: DbSession) -> None:
    await repost_save_service.delete_repost_save(db, repost_save_id)
    await db.commit()
