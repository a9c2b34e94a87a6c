"""메시지 Pydantic 요청/응답 스키마 정의.

Message request/response schema definitions.
Which association field may be set depends on ``message_type``; the
service validates that combination before anything is persisted.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from batubook.models.enums import MessageType


class MessageCreate(BaseModel):
    """메시지 생성 요청 스키마.

    Message creation request schema.

    Attributes:
        sender_id: 보낸 사용자 UUID (Sender)
        content: 메시지 본문 (Message body)
        message_type: 메시지 유형 (Discriminator)
        receiver_id: 받는 사용자 UUID — PERSONAL 전용 (Receiver, PERSONAL only)
        book_interaction_id: 도서 상호작용 UUID — BOOK 전용 (BOOK only)
        review_id: 리뷰 UUID — REVIEW 전용 (REVIEW only)
        quote_id: 인용구 UUID — QUOTE 전용 (QUOTE only)
    """

    sender_id: UUID  # 보낸 사용자 UUID (Sender UUID)
    content: str = Field(..., min_length=1)  # 메시지 본문 (Message body)
    message_type: MessageType  # 메시지 유형 (Message type)
    receiver_id: UUID | None = None  # 받는 사용자 (Receiver, PERSONAL)
    book_interaction_id: UUID | None = None  # 도서 상호작용 (Book interaction, BOOK)
    review_id: UUID | None = None  # 리뷰 (Review, REVIEW)
    quote_id: UUID | None = None  # 인용구 (Quote, QUOTE)


class MessageUpdate(MessageCreate):
    """메시지 수정 요청 스키마 — 전체 교체.

    Message update request schema. Updates replace sender, type, target
    and content as a whole, so the body has the same shape as a creation.
    """


class MessageResponse(BaseModel):
    """메시지 응답 스키마.

    Message response schema. Exactly one association id is non-null.
    """

    id: str  # 메시지 UUID 문자열 (Message UUID as string)
    sender_id: str
    content: str
    message_type: MessageType
    receiver_id: str | None
    book_interaction_id: str | None
    review_id: str | None
    quote_id: str | None
    created_at: datetime
    updated_at: datetime
