"""도서 서비스 — 도서 카탈로그 비즈니스 로직.

Book Service — Business logic for the book catalog.
"""

import logging
from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from batubook.models.book import Book
from batubook.models.enums import Genre
from batubook.repositories.book_repository import book_repository
from batubook.schemas.book import BookCreate, BookResponse, BookUpdate
from batubook.services.common import get_or_404
from batubook.utils.exceptions import BadRequestError, NotFoundError
from batubook.utils.pagination import Page, PageParams

logger = logging.getLogger(__name__)


class BookService:
    """도서 관련 비즈니스 로직을 처리하는 서비스.

    Service handling book business logic.
    """

    def _to_response(self, book: Book) -> BookResponse:
        """도서 모델을 응답 스키마로 변환합니다.

        Convert a Book model instance to a BookResponse schema.
        """
        return BookResponse(
            id=str(book.id),
            title=book.title,
            author=book.author,
            isbn=book.isbn,
            page_count=book.page_count,
            publish_date=book.publish_date,
            genre=book.genre,
            summary=book.summary,
            cover_image_url=book.cover_image_url,
            created_at=book.created_at,
            updated_at=book.updated_at,
        )

    def _to_page(self, books: Any, total: int, params: PageParams) -> Page[BookResponse]:
        return Page.build([self._to_response(b) for b in books], total, params)

    async def create_book(self, db: AsyncSession, data: BookCreate) -> BookResponse:
        """새 도서를 등록합니다.

        Create a new book.

        Raises:
            BadRequestError: ISBN 중복 (ISBN already registered)
        """
        if await book_repository.isbn_taken(db, data.isbn):
            raise BadRequestError(f"A book with ISBN {data.isbn} already exists.")
        book: Book = await book_repository.create(db, data.model_dump())
        logger.info("Book created: id=%s isbn=%s", book.id, book.isbn)
        return self._to_response(book)

    async def get_book(self, db: AsyncSession, book_id: UUID) -> BookResponse:
        book: Book = await get_or_404(db, book_repository, book_id, "Book")
        return self._to_response(book)

    async def list_books(self, db: AsyncSession, params: PageParams) -> Page[BookResponse]:
        books, total = await book_repository.get_paginated(db, params)
        return self._to_page(books, total, params)

    async def update_book(self, db: AsyncSession, book_id: UUID, data: BookUpdate) -> BookResponse:
        """도서 정보를 부분 수정합니다.

        Partially update a book; a changed ISBN must stay unique.

        Raises:
            NotFoundError: 도서를 찾을 수 없을 때 (Book not found)
            BadRequestError: ISBN 중복 (ISBN already registered)
        """
        book: Book = await get_or_404(db, book_repository, book_id, "Book")
        update_data: dict[str, Any] = data.model_dump(exclude_none=True)
        new_isbn = update_data.get("isbn")
        if new_isbn is not None and await book_repository.isbn_taken(db, new_isbn, exclude_id=book.id):
            raise BadRequestError(f"A book with ISBN {new_isbn} already exists.")
        book = await book_repository.update(db, book, update_data)
        logger.info("Book updated: id=%s fields=%s", book.id, sorted(update_data))
        return self._to_response(book)

    async def delete_book(self, db: AsyncSession, book_id: UUID) -> None:
        book: Book = await get_or_404(db, book_repository, book_id, "Book")
        await book_repository.delete(db, book)
        logger.info("Book deleted: id=%s", book_id)

    async def get_books_by_title_and_author(
        self, db: AsyncSession, title: str, author: str, params: PageParams
    ) -> Page[BookResponse]:
        books, total = await book_repository.get_by_title_and_author(db, title.strip(), author.strip(), params)
        return self._to_page(books, total, params)

    async def search_books(self, db: AsyncSession, term: str, params: PageParams) -> Page[BookResponse]:
        if not term.strip():
            raise BadRequestError("Search term must not be blank.")
        books, total = await book_repository.search(db, term.strip(), params)
        return self._to_page(books, total, params)

    async def get_book_by_isbn(self, db: AsyncSession, isbn: str) -> BookResponse:
        book: Book | None = await book_repository.get_by_isbn(db, isbn)
        if book is None:
            raise NotFoundError(f"Book not found with ISBN: {isbn}")
        return self._to_response(book)

    async def get_books_by_page_count_between(
        self, db: AsyncSession, min_pages: int, max_pages: int, params: PageParams
    ) -> Page[BookResponse]:
        """페이지 수가 범위 안에 있는 도서를 조회합니다 (경계 포함).

        Books whose page count lies in ``[min_pages, max_pages]``.

        Raises:
            BadRequestError: 최소값이 최대값보다 클 때 (min > max)
        """
        if min_pages > max_pages:
            raise BadRequestError("Minimum page count cannot be greater than maximum page count.")
        books, total = await book_repository.get_by_page_count_between(db, min_pages, max_pages, params)
        return self._to_page(books, total, params)

    async def get_books_by_publish_date_between(
        self, db: AsyncSession, start: date, end: date, params: PageParams
    ) -> Page[BookResponse]:
        if start > end:
            raise BadRequestError("Start date cannot be after end date.")
        books, total = await book_repository.get_by_publish_date_between(db, start, end, params)
        return self._to_page(books, total, params)

    async def get_books_by_genre(self, db: AsyncSession, genre: Genre, params: PageParams) -> Page[BookResponse]:
        books, total = await book_repository.get_by_genre(db, genre, params)
        return self._to_page(books, total, params)


book_service: BookService = BookService()
