"""소셜 상호작용 모델 — 팔로우, 좋아요, 리포스트/저장.

Social interaction models: follows, likes and repost/save actions.
Each row references exactly one target; CHECK constraints enforce the
single target and UNIQUE constraints prevent duplicates.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    Enum as SAEnum,
    ForeignKey,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from batubook.database import Base
from batubook.models.enums import ActionType


def exactly_one(*columns: str) -> str:
    """주어진 컬럼 중 정확히 하나만 NOT NULL 인지 확인하는 SQL 식.

    SQL expression that holds when exactly one of the columns is NOT NULL.
    """
    terms = [f"(CASE WHEN {column} IS NOT NULL THEN 1 ELSE 0 END)" for column in columns]
    return " + ".join(terms) + " = 1"


class Follow(Base):
    """팔로우 모델 — 사용자 또는 도서를 팔로우.

    A follower following either another user or a book.
    """

    __tablename__ = "follows"
    __table_args__ = (
        CheckConstraint(exactly_one("followed_user_id", "followed_book_id"), name="ck_follows_single_target"),
        CheckConstraint("followed_user_id IS NULL OR followed_user_id <> follower_id", name="ck_follows_not_self"),
        UniqueConstraint("follower_id", "followed_user_id", name="uq_follows_follower_user"),
        UniqueConstraint("follower_id", "followed_book_id", name="uq_follows_follower_book"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    follower_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    followed_user_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=True, index=True
    )
    followed_book_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("books.id", ondelete="CASCADE"), nullable=True, index=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))


class Like(Base):
    """좋아요 모델.

    A like on exactly one of: message, book interaction, review, quote.
    At most one like per (user, target).
    """

    __tablename__ = "likes"
    __table_args__ = (
        CheckConstraint(
            exactly_one("message_id", "book_interaction_id", "review_id", "quote_id"),
            name="ck_likes_single_target",
        ),
        UniqueConstraint("user_id", "message_id", name="uq_likes_user_message"),
        UniqueConstraint("user_id", "book_interaction_id", name="uq_likes_user_book_interaction"),
        UniqueConstraint("user_id", "review_id", name="uq_likes_user_review"),
        UniqueConstraint("user_id", "quote_id", name="uq_likes_user_quote"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    message_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("messages.id", ondelete="CASCADE"), nullable=True)
    book_interaction_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("book_interactions.id", ondelete="CASCADE"), nullable=True
    )
    review_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("reviews.id", ondelete="CASCADE"), nullable=True)
    quote_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("quotes.id", ondelete="CASCADE"), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))


class RepostSave(Base):
    """리포스트/저장 모델.

    A repost or save of exactly one of: review, quote, book interaction.
    At most one row per (user, target, action type).
    """

    __tablename__ = "repost_saves"
    __table_args__ = (
        CheckConstraint(
            exactly_one("review_id", "quote_id", "book_interaction_id"),
            name="ck_repost_saves_single_target",
        ),
        UniqueConstraint("user_id", "review_id", "action_type", name="uq_repost_saves_user_review_action"),
        UniqueConstraint("user_id", "quote_id", "action_type", name="uq_repost_saves_user_quote_action"),
        UniqueConstraint(
            "user_id", "book_interaction_id", "action_type", name="uq_repost_saves_user_book_interaction_action"
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    action_type: Mapped[ActionType] = mapped_column(SAEnum(ActionType, native_enum=False, length=16), nullable=False)
    review_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("reviews.id", ondelete="CASCADE"), nullable=True)
    quote_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("quotes.id", ondelete="CASCADE"), nullable=True)
    book_interaction_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("book_interactions.id", ondelete="CASCADE"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
