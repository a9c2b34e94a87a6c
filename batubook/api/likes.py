"""좋아요 라우터.

Like Router — Likes on messages, book interactions, reviews and quotes,
plus "has liked" checks per target type.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query

from batubook.api.deps import DbSession, Paging
from batubook.schemas.common import ExistsResponse
from batubook.schemas.social import LikeCreate, LikeResponse, LikeUpdate
from batubook.services.like_service import like_service
from batubook.utils.pagination import Page

router: APIRouter = APIRouter()


@router.post("/", response_model=LikeResponse, status_code=201)
async def create_like(data: LikeCreate, db: DbSession) -> LikeResponse:
    """좋아요를 누릅니다. 같은 대상에 다시 누르면 기존 좋아요가 반환됩니다.

    Like exactly one target; repeating returns the existing like.
    """
    result: LikeResponse = await like_service.create_like(db, data)
    await db.commit()
    return result


@router.get("/", response_model=Page[LikeResponse])
async def list_likes(db: DbSession, params: Paging) -> Page[LikeResponse]:
    return await like_service.list_likes(db, params)


@router.get("/check/message", response_model=ExistsResponse)
async def has_liked_message(
    user_id: Annotated[UUID, Query()],
    message_id: Annotated[UUID, Query()],
    db: DbSession,
) -> ExistsResponse:
    return await like_service.has_liked_message(db, user_id, message_id)


@router.get("/check/book-interaction", response_model=ExistsResponse)
async def has_liked_book_interaction(
    user_id: Annotated[UUID, Query()],
    book_interaction_id: Annotated[UUID, Query()],
    db: DbSession,
) -> ExistsResponse:
    return await like_service.has_liked_book_interaction(db, user_id, book_interaction_id)


@router.get("/check/review", response_model=ExistsResponse)
async def has_liked_review(
    user_id: Annotated[UUID, Query()],
    review_id: Annotated[UUID, Query()],
    db: DbSession,
) -> ExistsResponse:
    return await like_service.has_liked_review(db, user_id, review_id)


@router.get("/check/quote", response_model=ExistsResponse)
async def has_liked_quote(
    user_id: Annotated[UUID, Query()],
    quote_id: Annotated[UUID, Query()],
    db: DbSession,
) -> ExistsResponse:
    return await like_service.has_liked_quote(db, user_id, quote_id)


@router.get("/{like_id}", response_model=LikeResponse)
async def get_like(like_id: UUID, db: DbSession) -> LikeResponse:
    return await like_service.get_like(db, like_id)


@router.put("/{like_id}", response_model=LikeResponse)
async def update_like(like_id: UUID, data: LikeUpdate, db: DbSession) -> LikeResponse:
    result: LikeResponse = await like_service.update_like(db, like_id, data)
    await db.commit()
    return result


@router.delete("/{like_id}", status_code=204)
async def delete_like(like_id: UUID, db: DbSession) -> None:
    await like_service.delete_like(db, like_id)
    await db.commit()
