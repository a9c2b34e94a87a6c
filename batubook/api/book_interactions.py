"""도서 상호작용 라우터.

Book Interaction Router — Read / liked records of users and books.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query

from batubook.api.deps import DbSession, Paging
from batubook.schemas.book import BookInteractionCreate, BookInteractionResponse, BookInteractionUpdate
from batubook.schemas.common import ExistsResponse
from batubook.services.book_interaction_service import book_interaction_service
from batubook.utils.pagination import Page

router: APIRouter = APIRouter()


@router.post("/", response_model=BookInteractionResponse, status_code=201)
async def create_interaction(data: BookInteractionCreate, db: DbSession) -> BookInteractionResponse:
    """도서 상호작용을 기록합니다. 읽은 도서만 가능합니다.

    Record a book interaction; only read books can be recorded.
    """
    result: BookInteractionResponse = await book_interaction_service.create_interaction(db, data)
    await db.commit()
    return result


@router.get("/", response_model=Page[BookInteractionResponse])
async def list_interactions(db: DbSession, params: Paging) -> Page[BookInteractionResponse]:
    return await book_interaction_service.list_interactions(db, params)


@router.get("/users/{user_id}/read", response_model=Page[BookInteractionResponse])
async def get_read_by_user(user_id: UUID, db: DbSession, params: Paging) -> Page[BookInteractionResponse]:
    return await book_interaction_service.get_read_by_user(db, user_id, params)


@router.get("/users/{user_id}/liked", response_model=Page[BookInteractionResponse])
async def get_liked_by_user(user_id: UUID, db: DbSession, params: Paging) -> Page[BookInteractionResponse]:
    return await book_interaction_service.get_liked_by_user(db, user_id, params)


@router.get("/books/{book_id}/read", response_model=Page[BookInteractionResponse])
async def get_read_by_book(book_id: UUID, db: DbSession, params: Paging) -> Page[BookInteractionResponse]:
    return await book_interaction_service.get_read_by_book(db, book_id, params)


@router.get("/books/{book_id}/liked", response_model=Page[BookInteractionResponse])
async def get_liked_by_book(book_id: UUID, db: DbSession, params: Paging) -> Page[BookInteractionResponse]:
    return await book_interaction_service.get_liked_by_book(db, book_id, params)


@router.get("/is-read", response_model=ExistsResponse)
async def is_book_read_by_user(
    user_id: Annotated[UUID, Query()],
    book_id: Annotated[UUID, Query()],
    db: DbSession,
) -> ExistsResponse:
    return await book_interaction_service.is_book_read_by_user(db, user_id, book_id)


@router.get("/is-liked", response_model=ExistsResponse)
async def is_book_liked_by_user(
    user_id: Annotated[UUID, Query()],
    book_id: Annotated[UUID, Query()],
    db: DbSession,
) -> ExistsResponse:
    return await book_interaction_service.is_book_liked_by_user(db, user_id, book_id)


@router.get("/{interaction_id}", response_model=BookInteractionResponse)
async def get_interaction(interaction_id: UUID, db: DbSession) -> BookInteractionResponse:
    return await book_interaction_service.get_interaction(db, interaction_id)


@router.put("/{interaction_id}", response_model=BookInteractionResponse)
async def update_interaction(
    interaction_id: UUID, data: BookInteractionUpdate, db: DbSession
) -> BookInteractionResponse:
    result: BookInteractionResponse = await book_interaction_service.update_interaction(db, interaction_id, data)
    await db.commit()
    return result


@router.delete("/{interaction_id}", status_code=204)
async def delete_interaction(interaction_id: UUID, db: DbSession) -> None:
    await book_interaction_service.delete_interaction(db, interaction_id)
    await db.commit()
