"""메시지 서비스.

Message Service — Personal messages and messages about content.
``message_type`` decides which single association field is populated;
the combination is validated before anything is written.
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from batubook.models.enums import MessageType
from batubook.models.message import Message
from batubook.repositories.base import BaseRepository
from batubook.repositories.book_repository import book_interaction_repository
from batubook.repositories.content_repository import quote_repository, review_repository
from batubook.repositories.message_repository import message_repository
from batubook.repositories.user_repository import user_repository
from batubook.schemas.message import MessageCreate, MessageResponse, MessageUpdate
from batubook.services.common import get_or_404, str_or_none
from batubook.utils.exceptions import BadRequestError
from batubook.utils.pagination import Page, PageParams

logger = logging.getLogger(__name__)

# 유형별 대상 필드 — Association field, its label and repository per message type
TARGETS: dict[MessageType, tuple[str, str, BaseRepository[Any]]] = {
    MessageType.PERSONAL: ("receiver_id", "User", user_repository),
    MessageType.BOOK: ("book_interaction_id", "Book interaction", book_interaction_repository),
    MessageType.REVIEW: ("review_id", "Review", review_repository),
    MessageType.QUOTE: ("quote_id", "Quote", quote_repository),
}
TARGET_FIELDS: tuple[str, ...] = tuple(field for field, _, _ in TARGETS.values())


def check_message_target(data: MessageCreate) -> str:
    """메시지 유형과 연관 필드 조합을 검증하고 대상 필드명을 반환합니다.

    Validate the type/association combination and return the target field.

    Raises:
        BadRequestError: 필수 대상 누락 또는 다른 대상 지정
                         (Required target missing or another target set)
    """
    field, label, _ = TARGETS[data.message_type]
    type_name = data.message_type.name
    if getattr(data, field) is None:
        raise BadRequestError(f"A {type_name} message requires a {label.lower()} reference ({field}).")
    extra = [other for other in TARGET_FIELDS if other != field and getattr(data, other) is not None]
    if extra:
        raise BadRequestError(f"A {type_name} message must not set: {', '.join(extra)}.")
    return field


class MessageService:
    """메시지 비즈니스 로직을 처리하는 서비스.

    Service handling message business logic.
    """

    def _to_response(self, message: Message) -> MessageResponse:
        return MessageResponse(
            id=str(message.id),
            sender_id=str(message.sender_id),
            content=message.content,
            message_type=message.message_type,
            receiver_id=str_or_none(message.receiver_id),
            book_interaction_id=str_or_none(message.book_interaction_id),
            review_id=str_or_none(message.review_id),
            quote_id=str_or_none(message.quote_id),
            created_at=message.created_at,
            updated_at=message.updated_at,
        )

    def _to_page(self, rows: Any, total: int, params: PageParams) -> Page[MessageResponse]:
        return Page.build([self._to_response(m) for m in rows], total, params)

    async def _resolve(self, db: AsyncSession, data: MessageCreate) -> dict[str, Any]:
        """검증 후 저장할 필드 딕셔너리를 만듭니다. 다른 대상 필드는 None.

        Validate the body and build the stored field set; the three
        non-target association fields are always cleared.
        """
        field = check_message_target(data)
        await get_or_404(db, user_repository, data.sender_id, "User")
        _, label, repository = TARGETS[data.message_type]
        await get_or_404(db, repository, getattr(data, field), label)

        values: dict[str, Any] = {name: None for name in TARGET_FIELDS}
        values.update(
            sender_id=data.sender_id,
            content=data.content,
            message_type=data.message_type,
        )
        values[field] = getattr(data, field)
        return values

    async def create_message(self, db: AsyncSession, data: MessageCreate) -> MessageResponse:
        """메시지를 생성합니다.

        Create a message.

        Raises:
            BadRequestError: 유형과 대상 조합 위반 (Type/target mismatch)
            NotFoundError: 보낸 사람 또는 대상이 없을 때 (Sender or target missing)
        """
        message: Message = await message_repository.create(db, await self._resolve(db, data))
        logger.info("Message created: id=%s type=%s sender_id=%s", message.id, message.message_type.name, message.sender_id)
        return self._to_response(message)

    async def get_message(self, db: AsyncSession, message_id: UUID) -> MessageResponse:
        message: Message = await get_or_404(db, message_repository, message_id, "Message")
        return self._to_response(message)

    async def list_messages(self, db: AsyncSession, params: PageParams) -> Page[MessageResponse]:
        rows, total = await message_repository.get_paginated(db, params)
        return self._to_page(rows, total, params)

    async def get_messages_by_type(
        self, db: AsyncSession, message_type: MessageType, params: PageParams
    ) -> Page[MessageResponse]:
        rows, total = await message_repository.get_by_type(db, message_type, params)
        return self._to_page(rows, total, params)

    async def update_message(self, db: AsyncSession, message_id: UUID, data: MessageUpdate) -> MessageResponse:
        """메시지를 전체 교체합니다. 이전 대상 필드는 지워집니다.

        Replace sender, type, target and content; stale targets are cleared.
        """
        message: Message = await get_or_404(db, message_repository, message_id, "Message")
        message = await message_repository.update(db, message, await self._resolve(db, data))
        logger.info("Message updated: id=%s type=%s", message.id, message.message_type.name)
        return self._to_response(message)

    async def delete_message(self, db: AsyncSession, message_id: UUID) -> None:
        message: Message = await get_or_404(db, message_repository, message_id, "Message")
        await message_repository.delete(db, message)
        logger.info("Message deleted: id=%s", message_id)


message_service: MessageService = MessageService()
