"""DB 제약 조건 테스트.

Database constraint tests — The single-target CHECK constraints on
messages, likes and repost-saves reject rows written straight through the
ORM, without going through the service layer.
"""

import uuid

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from batubook.models.enums import ActionType, MessageType
from batubook.models.message import Message
from batubook.models.social import Like, RepostSave


def _id(entity: dict) -> uuid.UUID:
    return uuid.UUID(entity["id"])


class TestMessageTargetCheck:
    """메시지 대상 CHECK 제약 테스트."""

    async def test_quote_message_with_receiver_rejected(
        self, session_factory: async_sessionmaker[AsyncSession], user, other_user, quote
    ):
        async with session_factory() as session:
            session.add(Message(
                sender_id=_id(user), content="Chills", message_type=MessageType.QUOTE,
                quote_id=_id(quote), receiver_id=_id(other_user),
            ))
            with pytest.raises(IntegrityError):
                await session.flush()

    async def test_personal_message_without_receiver_rejected(
        self, session_factory: async_sessionmaker[AsyncSession], user
    ):
        async with session_factory() as session:
            session.add(Message(sender_id=_id(user), content="Hello?", message_type=MessageType.PERSONAL))
            with pytest.raises(IntegrityError):
                await session.flush()

    async def test_single_target_accepted(
        self, session_factory: async_sessionmaker[AsyncSession], user, quote
    ):
        async with session_factory() as session:
            message = Message(
                sender_id=_id(user), content="Chills", message_type=MessageType.QUOTE, quote_id=_id(quote)
            )
            session.add(message)
            await session.flush()
            assert message.id is not None


class TestLikeTargetCheck:
    """좋아요 대상 CHECK 제약 테스트."""

    async def test_two_targets_rejected(
        self, session_factory: async_sessionmaker[AsyncSession], user, review, quote
    ):
        async with session_factory() as session:
            session.add(Like(user_id=_id(user), review_id=_id(review), quote_id=_id(quote)))
            with pytest.raises(IntegrityError):
                await session.flush()

    async def test_no_target_rejected(self, session_factory: async_sessionmaker[AsyncSession], user):
        async with session_factory() as session:
            session.add(Like(user_id=_id(user)))
            with pytest.raises(IntegrityError):
                await session.flush()


class TestRepostSaveTargetCheck:
    """리포스트/저장 대상 CHECK 제약 테스트."""

    async def test_two_targets_rejected(
        self, session_factory: async_sessionmaker[AsyncSession], user, review, interaction
    ):
        async with session_factory() as session:
            session.add(RepostSave(
                user_id=_id(user), action_type=ActionType.SAVE,
                review_id=_id(review), book_interaction_id=_id(interaction),
            ))
            with pytest.raises(IntegrityError):
                await session.flush()

    async def test_no_target_rejected(self, session_factory: async_sessionmaker[AsyncSession], user):
        async with session_factory() as session:
            session.add(RepostSave(user_id=_id(user), action_type=ActionType.REPOST))
            with pytest.raises(IntegrityError):
                await session.flush()
