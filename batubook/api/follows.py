"""팔로우 라우터.

Follow Router — Follow and unfollow users and books, and list follow
relations.
"""

from uuid import UUID

from fastapi import APIRouter

from batubook.api.deps import DbSession, Paging
from batubook.schemas.social import FollowBookRequest, FollowResponse, FollowUserRequest
from batubook.services.follow_service import follow_service
from batubook.utils.pagination import Page

router: APIRouter = APIRouter()


@router.get("/", response_model=Page[FollowResponse])
async def list_follows(db: DbSession, params: Paging) -> Page[FollowResponse]:
    return await follow_service.list_follows(db, params)


@router.post("/follow-user", response_model=FollowResponse, status_code=201)
async def follow_user(data: FollowUserRequest, db: DbSession) -> FollowResponse:
    """다른 사용자를 팔로우합니다.

    Follow another user. Self-follows and duplicates are rejected.
    """
    result: FollowResponse = await follow_service.follow_user(db, data)
    await db.commit()
    return result


@router.post("/follow-book", response_model=FollowResponse, status_code=201)
async def follow_book(data: FollowBookRequest, db: DbSession) -> FollowResponse:
    result: FollowResponse = await follow_service.follow_book(db, data)
    await db.commit()
    return result


@router.post("/unfollow-user", status_code=204)
async def unfollow_user(data: FollowUserRequest, db: DbSession) -> None:
    """사용자 팔로우를 해제합니다. 팔로우 중이 아니어도 204 입니다.

    Unfollow a user; succeeds even when not following.
    """
    await follow_service.unfollow_user(db, data)
    await db.commit()


@router.post("/unfollow-book", status_code=204)
async def unfollow_book(data: FollowBookRequest, db: DbSession) -> None:
    await follow_service.unfollow_book(db, data)
    await db.commit()


@router.get("/users/{user_id}/following", response_model=Page[FollowResponse])
async def get_following(user_id: UUID, db: DbSession, params: Paging) -> Page[FollowResponse]:
    return await follow_service.get_following(db, user_id, params)


@router.get("/users/{user_id}/followers", response_model=Page[FollowResponse])
async def get_followers(user_id: UUID, db: DbSession, params: Paging) -> Page[FollowResponse]:
    return await follow_service.get_followers(db, user_id, params)


@router.get("/books/{book_id}/followers", response_model=Page[FollowResponse])
async def get_book_followers(book_id: UUID, db: DbSession, params: Paging) -> Page[FollowResponse]:
    return await follow_service.get_book_followers(db, book_id, params)
