"""메시지 SQLAlchemy ORM 모델 정의.

Message model. ``message_type`` selects exactly one populated association:

    PERSONAL -> receiver_id
    BOOK     -> book_interaction_id
    REVIEW   -> review_id
    QUOTE    -> quote_id

The other three columns stay NULL; a table CHECK constraint backs the
service-level validation.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Enum as SAEnum, ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from batubook.database import Base
from batubook.models.enums import MessageType

MESSAGE_TARGET_CHECK: str = (
    "(message_type = 'PERSONAL' AND receiver_id IS NOT NULL AND book_interaction_id IS NULL"
    " AND review_id IS NULL AND quote_id IS NULL)"
    " OR (message_type = 'BOOK' AND book_interaction_id IS NOT NULL AND receiver_id IS NULL"
    " AND review_id IS NULL AND quote_id IS NULL)"
    " OR (message_type = 'REVIEW' AND review_id IS NOT NULL AND receiver_id IS NULL"
    " AND book_interaction_id IS NULL AND quote_id IS NULL)"
    " OR (message_type = 'QUOTE' AND quote_id IS NOT NULL AND receiver_id IS NULL"
    " AND book_interaction_id IS NULL AND review_id IS NULL)"
)


class Message(Base):
    """메시지 모델 — 개인 메시지 또는 콘텐츠에 대한 메시지.

    A message sent by a user, either to another user or about a piece of
    content (book interaction, review or quote).
    """

    __tablename__ = "messages"
    __table_args__ = (CheckConstraint(MESSAGE_TARGET_CHECK, name="ck_messages_single_target"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    sender_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    message_type: Mapped[MessageType] = mapped_column(SAEnum(MessageType, native_enum=False, length=32), nullable=False)
    receiver_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=True)
    book_interaction_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("book_interactions.id", ondelete="CASCADE"), nullable=True
    )
    review_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("reviews.id", ondelete="CASCADE"), nullable=True)
    quote_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("quotes.id", ondelete="CASCADE"), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
