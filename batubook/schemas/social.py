"""소셜 상호작용 Pydantic 요청/응답 스키마 정의.

Like, RepostSave and Follow request/response schema definitions.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from batubook.models.enums import ActionType


# === 좋아요 (Like) 스키마 ===

class LikeCreate(BaseModel):
    """좋아요 생성 요청 스키마 — 대상은 정확히 하나.

    Like creation request schema. Exactly one target id must be set.
    """

    user_id: UUID  # 좋아요 누른 사용자 (Liking user)
    message_id: UUID | None = None  # 메시지 (Message target)
    book_interaction_id: UUID | None = None  # 도서 상호작용 (Book interaction target)
    review_id: UUID | None = None  # 리뷰 (Review target)
    quote_id: UUID | None = None  # 인용구 (Quote target)


class LikeUpdate(LikeCreate):
    """좋아요 수정 요청 스키마 — 대상 변경.

    Like update request schema; retargets the like under the same rules.
    """


class LikeResponse(BaseModel):
    id: str  # 좋아요 UUID 문자열 (Like UUID as string)
    user_id: str
    message_id: str | None
    book_interaction_id: str | None
    review_id: str | None
    quote_id: str | None
    created_at: datetime
    updated_at: datetime


# === 리포스트/저장 (RepostSave) 스키마 ===

class RepostSaveCreate(BaseModel):
    """리포스트/저장 생성 요청 스키마.

    Repost/save creation request schema. Exactly one of review, quote or
    book interaction must be referenced.

    Attributes:
        user_id: 사용자 UUID (Acting user)
        action_type: 동작 유형 (REPOST or SAVE)
    """

    user_id: UUID  # 사용자 UUID (User UUID)
    action_type: ActionType  # 동작 유형 (Action type)
    review_id: UUID | None = None  # 리뷰 (Review target)
    quote_id: UUID | None = None  # 인용구 (Quote target)
    book_interaction_id: UUID | None = None  # 도서 상호작용 (Book interaction target)


class RepostSaveUpdate(RepostSaveCreate):
    """리포스트/저장 수정 요청 스키마 — 전체 교체.

    Repost/save update request schema; replaces action and target.
    """


class RepostSaveResponse(BaseModel):
    id: str  # 리포스트/저장 UUID 문자열 (RepostSave UUID as string)
    user_id: str
    action_type: ActionType
    review_id: str | None
    quote_id: str | None
    book_interaction_id: str | None
    created_at: datetime
    updated_at: datetime


# === 팔로우 (Follow) 스키마 ===

class FollowUserRequest(BaseModel):
    """사용자 팔로우/언팔로우 요청 스키마.

    Follow or unfollow a user.
    """

    follower_id: UUID  # 팔로우하는 사용자 (Follower)
    followed_user_id: UUID  # 팔로우 대상 사용자 (User being followed)


class FollowBookRequest(BaseModel):
    """도서 팔로우/언팔로우 요청 스키마.

    Follow or unfollow a book.
    """

    follower_id: UUID  # 팔로우하는 사용자 (Follower)
    followed_book_id: UUID  # 팔로우 대상 도서 (Book being followed)


class FollowResponse(BaseModel):
    """팔로우 응답 스키마.

    Follow response schema. Exactly one of the followed ids is set.
    """

    id: str  # 팔로우 UUID 문자열 (Follow UUID as string)
    follower_id: str
    followed_user_id: str | None
    followed_book_id: str | None
    created_at: datetime
