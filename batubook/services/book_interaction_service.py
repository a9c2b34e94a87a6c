"""도서 상호작용 서비스.

Book Interaction Service — Records of users reading and liking books.
An interaction may only be recorded for a read book, and a book must be
read before it can be liked. The rule is checked on every write against
the merged state.
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from batubook.models.book import BookInteraction
from batubook.repositories.book_repository import book_interaction_repository, book_repository
from batubook.repositories.user_repository import user_repository
from batubook.schemas.book import BookInteractionCreate, BookInteractionResponse, BookInteractionUpdate
from batubook.schemas.common import ExistsResponse
from batubook.services.common import get_or_404
from batubook.utils.exceptions import BadRequestError
from batubook.utils.pagination import Page, PageParams

logger = logging.getLogger(__name__)


def check_read_rule(is_read: bool, is_liked: bool) -> None:
    """읽음/좋아요 규칙을 검증합니다.

    Raises:
        BadRequestError: 읽지 않은 도서 (Book not read)
    """
    if is_liked and not is_read:
        raise BadRequestError("A book must be read before it can be liked.")
    if not is_read:
        raise BadRequestError("You cannot create an interaction with a book that has not been read.")


class BookInteractionService:
    """도서 상호작용 비즈니스 로직을 처리하는 서비스.

    Service handling book interaction business logic.
    """

    def _to_response(self, interaction: BookInteraction) -> BookInteractionResponse:
        return BookInteractionResponse(
            id=str(interaction.id),
            user_id=str(interaction.user_id),
            book_id=str(interaction.book_id),
            description=interaction.description,
            is_read=interaction.is_read,
            is_liked=interaction.is_liked,
            created_at=interaction.created_at,
            updated_at=interaction.updated_at,
        )

    def _to_page(self, rows: Any, total: int, params: PageParams) -> Page[BookInteractionResponse]:
        return Page.build([self._to_response(i) for i in rows], total, params)

    async def create_interaction(self, db: AsyncSession, data: BookInteractionCreate) -> BookInteractionResponse:
        """도서 상호작용을 기록합니다.

        Record a book interaction for an existing user and book.

        Raises:
            NotFoundError: 사용자 또는 도서를 찾을 수 없을 때 (User or book not found)
            BadRequestError: 읽지 않은 도서 (Unread book)
        """
        await get_or_404(db, user_repository, data.user_id, "User")
        await get_or_404(db, book_repository, data.book_id, "Book")
        check_read_rule(data.is_read, data.is_liked)

        interaction: BookInteraction = await book_interaction_repository.create(db, data.model_dump())
        logger.info(
            "Book interaction created: id=%s user_id=%s book_id=%s liked=%s",
            interaction.id, interaction.user_id, interaction.book_id, interaction.is_liked,
        )
        return self._to_response(interaction)

    async def get_interaction(self, db: AsyncSession, interaction_id: UUID) -> BookInteractionResponse:
        interaction: BookInteraction = await get_or_404(
            db, book_interaction_repository, interaction_id, "Book interaction"
        )
        return self._to_response(interaction)

    async def list_interactions(self, db: AsyncSession, params: PageParams) -> Page[BookInteractionResponse]:
        rows, total = await book_interaction_repository.get_paginated(db, params)
        return self._to_page(rows, total, params)

    async def update_interaction(
        self, db: AsyncSession, interaction_id: UUID, data: BookInteractionUpdate
    ) -> BookInteractionResponse:
        """상호작용을 부분 수정합니다. 병합된 상태로 규칙을 재검증합니다.

        Partially update an interaction, re-checking the read/liked rule on
        the merged state.
        """
        interaction: BookInteraction = await get_or_404(
            db, book_interaction_repository, interaction_id, "Book interaction"
        )
        update_data: dict[str, Any] = data.model_dump(exclude_none=True)
        if "user_id" in update_data:
            await get_or_404(db, user_repository, update_data["user_id"], "User")
        if "book_id" in update_data:
            await get_or_404(db, book_repository, update_data["book_id"], "Book")
        check_read_rule(
            update_data.get("is_read", interaction.is_read),
            update_data.get("is_liked", interaction.is_liked),
        )
        interaction = await book_interaction_repository.update(db, interaction, update_data)
        logger.info("Book interaction updated: id=%s fields=%s", interaction.id, sorted(update_data))
        return self._to_response(interaction)

    async def delete_interaction(self, db: AsyncSession, interaction_id: UUID) -> None:
        interaction: BookInteraction = await get_or_404(
            db, book_interaction_repository, interaction_id, "Book interaction"
        )
        await book_interaction_repository.delete(db, interaction)
        logger.info("Book interaction deleted: id=%s", interaction_id)

    async def get_read_by_user(
        self, db: AsyncSession, user_id: UUID, params: PageParams
    ) -> Page[BookInteractionResponse]:
        rows, total = await book_interaction_repository.get_read_by_user(db, user_id, params)
        return self._to_page(rows, total, params)

    async def get_liked_by_user(
        self, db: AsyncSession, user_id: UUID, params: PageParams
    ) -> Page[BookInteractionResponse]:
        rows, total = await book_interaction_repository.get_liked_by_user(db, user_id, params)
        return self._to_page(rows, total, params)

    async def get_read_by_book(
        self, db: AsyncSession, book_id: UUID, params: PageParams
    ) -> Page[BookInteractionResponse]:
        rows, total = await book_interaction_repository.get_read_by_book(db, book_id, params)
        return self._to_page(rows, total, params)

    async def get_liked_by_book(
        self, db: AsyncSession, book_id: UUID, params: PageParams
    ) -> Page[BookInteractionResponse]:
        rows, total = await book_interaction_repository.get_liked_by_book(db, book_id, params)
        return self._to_page(rows, total, params)

    async def is_book_read_by_user(self, db: AsyncSession, user_id: UUID, book_id: UUID) -> ExistsResponse:
        return ExistsResponse(exists=await book_interaction_repository.is_read(db, user_id, book_id))

    async def is_book_liked_by_user(self, db: AsyncSession, user_id: UUID, book_id: UUID) -> ExistsResponse:
        return ExistsResponse(exists=await book_interaction_repository.is_liked(db, user_id, book_id))


book_interaction_service: BookInteractionService = BookInteractionService()
