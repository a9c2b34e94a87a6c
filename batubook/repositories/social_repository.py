"""소셜 레포지토리 — 좋아요, 리포스트/저장, 팔로우 쿼리.

Social Repository — Queries for likes, repost/saves and follows.
Target columns are addressed by name so one lookup covers every target type.
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from batubook.models.enums import ActionType
from batubook.models.social import Follow, Like, RepostSave
from batubook.repositories.base import BaseRepository
from batubook.utils.pagination import PageParams


class LikeRepository(BaseRepository[Like]):
    """좋아요 테이블 레포지토리.

    Repository handling database queries for the likes table.
    """

    def __init__(self) -> None:
        super().__init__(Like)

    async def get_by_user_and_target(
        self, db: AsyncSession, user_id: UUID, target_column: str, target_id: UUID
    ) -> Like | None:
        """사용자가 특정 대상에 누른 좋아요를 조회합니다.

        The like a user placed on one target, if any.

        Args:
            target_column: 대상 컬럼명 (e.g. "review_id")
        """
        return await self.find_one(db, Like.user_id == user_id, getattr(Like, target_column) == target_id)


class RepostSaveRepository(BaseRepository[RepostSave]):
    """리포스트/저장 테이블 레포지토리.

    Repository handling database queries for the repost_saves table.
    """

    def __init__(self) -> None:
        super().__init__(RepostSave)

    async def get_by_user(
        self, db: AsyncSession, user_id: UUID, action_type: ActionType | None, params: PageParams
    ) -> tuple[Sequence[RepostSave], int]:
        criteria = [RepostSave.user_id == user_id]
        if action_type is not None:
            criteria.append(RepostSave.action_type == action_type)
        return await self.get_paginated(db, params, *criteria)

    async def get_by_user_and_target(
        self, db: AsyncSession, user_id: UUID, target_column: str, target_id: UUID
    ) -> RepostSave | None:
        return await self.find_one(
            db, RepostSave.user_id == user_id, getattr(RepostSave, target_column) == target_id
        )

    async def exists_for(
        self,
        db: AsyncSession,
        user_id: UUID,
        target_column: str,
        target_id: UUID,
        action_type: ActionType,
        exclude_id: UUID | None = None,
    ) -> bool:
        """(사용자, 대상, 동작) 조합이 이미 존재하는지 확인합니다.

        Whether a row for (user, target, action) already exists.
        """
        criteria = [
            RepostSave.user_id == user_id,
            getattr(RepostSave, target_column) == target_id,
            RepostSave.action_type == action_type,
        ]
        if exclude_id is not None:
            criteria.append(RepostSave.id != exclude_id)
        return await self.exists(db, *criteria)


class FollowRepository(BaseRepository[Follow]):
    """팔로우 테이블 레포지토리.

    Repository handling database queries for the follows table.
    """

    def __init__(self) -> None:
        super().__init__(Follow)

    async def get_user_follow(self, db: AsyncSession, follower_id: UUID, followed_user_id: UUID) -> Follow | None:
        return await self.find_one(
            db, Follow.follower_id == follower_id, Follow.followed_user_id == followed_user_id
        )

    async def get_book_follow(self, db: AsyncSession, follower_id: UUID, followed_book_id: UUID) -> Follow | None:
        return await self.find_one(
            db, Follow.follower_id == follower_id, Follow.followed_book_id == followed_book_id
        )

    async def get_following(
        self, db: AsyncSession, user_id: UUID, params: PageParams
    ) -> tuple[Sequence[Follow], int]:
        return await self.get_paginated(db, params, Follow.follower_id == user_id)

    async def get_followers(
        self, db: AsyncSession, user_id: UUID, params: PageParams
    ) -> tuple[Sequence[Follow], int]:
        return await self.get_paginated(db, params, Follow.followed_user_id == user_id)

    async def get_book_followers(
        self, db: AsyncSession, book_id: UUID, params: PageParams
    ) -> tuple[Sequence[Follow], int]:
        return await self.get_paginated(db, params, Follow.followed_book_id == book_id)


like_repository: LikeRepository = LikeRepository()
repost_save_repository: RepostSaveRepository = RepostSaveRepository()
follow_repository: FollowRepository = FollowRepository()
