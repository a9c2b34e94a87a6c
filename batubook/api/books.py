"""도서 라우터 — 도서 카탈로그 CRUD 및 조회 엔드포인트.

Book Router — CRUD and query endpoints for the book catalog.
"""

from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query

from batubook.api.deps import DbSession, Paging
from batubook.models.enums import Genre
from batubook.schemas.book import BookCreate, BookResponse, BookUpdate
from batubook.services.book_service import book_service
from batubook.utils.pagination import Page

router: APIRouter = APIRouter()


@router.post("/", response_model=BookResponse, status_code=201)
async def create_book(data: BookCreate, db: DbSession) -> BookResponse:
    result: BookResponse = await book_service.create_book(db, data)
    await db.commit()
    return result


@router.get("/", response_model=Page[BookResponse])
async def list_books(db: DbSession, params: Paging) -> Page[BookResponse]:
    return await book_service.list_books(db, params)


@router.get("/search", response_model=Page[BookResponse])
async def search_books(
    term: Annotated[str, Query(description="제목/저자 검색어 (Title or author fragment)")],
    db: DbSession,
    params: Paging,
) -> Page[BookResponse]:
    return await book_service.search_books(db, term, params)


@router.get("/search-title-author", response_model=Page[BookResponse])
async def get_books_by_title_and_author(
    title: Annotated[str, Query()],
    author: Annotated[str, Query()],
    db: DbSession,
    params: Paging,
) -> Page[BookResponse]:
    return await book_service.get_books_by_title_and_author(db, title, author, params)


@router.get("/isbn/{isbn}", response_model=BookResponse)
async def get_book_by_isbn(isbn: str, db: DbSession) -> BookResponse:
    return await book_service.get_book_by_isbn(db, isbn)


@router.get("/page-count", response_model=Page[BookResponse])
async def get_books_by_page_count_between(
    min_pages: Annotated[int, Query(alias="min", ge=0)],
    max_pages: Annotated[int, Query(alias="max", ge=0)],
    db: DbSession,
    params: Paging,
) -> Page[BookResponse]:
    """페이지 수 범위로 도서를 조회합니다 (경계 포함).

    Books with a page count in ``[min, max]``.
    """
    return await book_service.get_books_by_page_count_between(db, min_pages, max_pages, params)


@router.get("/publish-date", response_model=Page[BookResponse])
async def get_books_by_publish_date_between(
    start: Annotated[date, Query()],
    end: Annotated[date, Query()],
    db: DbSession,
    params: Paging,
) -> Page[BookResponse]:
    return await book_service.get_books_by_publish_date_between(db, start, end, params)


@router.get("/genre/{genre}", response_model=Page[BookResponse])
async def get_books_by_genre(genre: Genre, db: DbSession, params: Paging) -> Page[BookResponse]:
    return await book_service.get_books_by_genre(db, genre, params)


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(book_id: UUID, db: DbSession) -> BookResponse:
    return await book_service.get_book(db, book_id)


@router.put("/{book_id}", response_model=BookResponse)
async def update_book(book_id: UUID, data: BookUpdate, db: DbSession) -> BookResponse:
    result: BookResponse = await book_service.update_book(db, book_id, data)
    await db.commit()
    return result


@router.delete("/{book_id}", status_code=204)
async def delete_book(book_id: UUID, db: DbSession) -> None:
    await book_service.delete_book(db, book_id)
    await db.commit()
