"""팔로우 서비스.

Follow Service — Users following other users or books.
Following twice is rejected, users cannot follow themselves, and
unfollowing something not followed is a no-op.
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from batubook.models.social import Follow
from batubook.repositories.book_repository import book_repository
from batubook.repositories.social_repository import follow_repository
from batubook.repositories.user_repository import user_repository
from batubook.schemas.social import FollowBookRequest, FollowResponse, FollowUserRequest
from batubook.services.common import get_or_404, str_or_none
from batubook.utils.exceptions import BadRequestError
from batubook.utils.pagination import Page, PageParams

logger = logging.getLogger(__name__)


class FollowService:
    """팔로우 비즈니스 로직을 처리하는 서비스.

    Service handling follow business logic.
    """

    def _to_response(self, follow: Follow) -> FollowResponse:
        return FollowResponse(
            id=str(follow.id),
            follower_id=str(follow.follower_id),
            followed_user_id=str_or_none(follow.followed_user_id),
            followed_book_id=str_or_none(follow.followed_book_id),
            created_at=follow.created_at,
        )

    def _to_page(self, rows: Any, total: int, params: PageParams) -> Page[FollowResponse]:
        return Page.build([self._to_response(f) for f in rows], total, params)

    async def follow_user(self, db: AsyncSession, data: FollowUserRequest) -> FollowResponse:
        """다른 사용자를 팔로우합니다.

        Follow another user.

        Raises:
            NotFoundError: 사용자가 없을 때 (Either user missing)
            BadRequestError: 자기 자신 또는 이미 팔로우 중 (Self-follow or duplicate)
        """
        await get_or_404(db, user_repository, data.follower_id, "User")
        await get_or_404(db, user_repository, data.followed_user_id, "User")
        if data.follower_id == data.followed_user_id:
            raise BadRequestError("Users cannot follow themselves.")
        if await follow_repository.get_user_follow(db, data.follower_id, data.followed_user_id) is not None:
            raise BadRequestError("The user is already following this user.")

        follow: Follow = await follow_repository.create(
            db, {"follower_id": data.follower_id, "followed_user_id": data.followed_user_id}
        )
        logger.info("User followed: follower_id=%s followed_user_id=%s", follow.follower_id, follow.followed_user_id)
        return self._to_response(follow)

    async def follow_book(self, db: AsyncSession, data: FollowBookRequest) -> FollowResponse:
        await get_or_404(db, user_repository, data.follower_id, "User")
        await get_or_404(db, book_repository, data.followed_book_id, "Book")
        if await follow_repository.get_book_follow(db, data.follower_id, data.followed_book_id) is not None:
            raise BadRequestError("The user is already following this book.")

        follow: Follow = await follow_repository.create(
            db, {"follower_id": data.follower_id, "followed_book_id": data.followed_book_id}
        )
        logger.info("Book followed: follower_id=%s followed_book_id=%s", follow.follower_id, follow.followed_book_id)
        return self._to_response(follow)

    async def unfollow_user(self, db: AsyncSession, data: FollowUserRequest) -> None:
        """사용자 팔로우를 해제합니다. 팔로우 중이 아니면 아무 일도 하지 않습니다.

        Stop following a user; a no-op when not following.

        Raises:
            NotFoundError: 사용자가 없을 때 (Either user missing)
        """
        await get_or_404(db, user_repository, data.follower_id, "User")
        await get_or_404(db, user_repository, data.followed_user_id, "User")
        follow: Follow | None = await follow_repository.get_user_follow(db, data.follower_id, data.followed_user_id)
        if follow is None:
            return
        await follow_repository.delete(db, follow)
        logger.info("User unfollowed: follower_id=%s followed_user_id=%s", data.follower_id, data.followed_user_id)

    async def unfollow_book(self, db: AsyncSession, data: FollowBookRequest) -> None:
        await get_or_404(db, user_repository, data.follower_id, "User")
        await get_or_404(db, book_repository, data.followed_book_id, "Book")
        follow: Follow | None = await follow_repository.get_book_follow(db, data.follower_id, data.followed_book_id)
        if follow is None:
            return
        await follow_repository.delete(db, follow)
        logger.info("Book unfollowed: follower_id=%s followed_book_id=%s", data.follower_id, data.followed_book_id)

    async def list_follows(self, db: AsyncSession, params: PageParams) -> Page[FollowResponse]:
        rows, total = await follow_repository.get_paginated(db, params)
        return self._to_page(rows, total, params)

    async def get_following(self, db: AsyncSession, user_id: UUID, params: PageParams) -> Page[FollowResponse]:
        """사용자가 팔로우하는 대상 목록 (사용자와 도서).

        Follows where the user is the follower, users and books alike.
        """
        rows, total = await follow_repository.get_following(db, user_id, params)
        return self._to_page(rows, total, params)

    async def get_followers(self, db: AsyncSession, user_id: UUID, params: PageParams) -> Page[FollowResponse]:
        rows, total = await follow_repository.get_followers(db, user_id, params)
        return self._to_page(rows, total, params)

    async def get_book_followers(self, db: AsyncSession, book_id: UUID, params: PageParams) -> Page[FollowResponse]:
        rows, total = await follow_repository.get_book_followers(db, book_id, params)
        return self._to_page(rows, total, params)


follow_service: FollowService = FollowService()
