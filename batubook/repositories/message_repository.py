"""메시지 레포지토리.

Message Repository — Queries for the messages table.
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from batubook.models.enums import MessageType
from batubook.models.message import Message
from batubook.repositories.base import BaseRepository
from batubook.utils.pagination import PageParams


class MessageRepository(BaseRepository[Message]):
    def __init__(self) -> None:
        super().__init__(Message)

    async def get_by_type(
        self, db: AsyncSession, message_type: MessageType, params: PageParams
    ) -> tuple[Sequence[Message], int]:
        return await self.get_paginated(db, params, Message.message_type == message_type)


message_repository: MessageRepository = MessageRepository()
