"""도서 레포지토리 — 도서, 판매 정보, 상호작용 쿼리.

Book Repository — Queries for books, sales listings and interactions.
"""

from datetime import date
from typing import Sequence
from uuid import UUID

from sqlalchemy import func, or_
from sqlalchemy.ext.asyncio import AsyncSession

from batubook.models.book import Book, BookInteraction, BookSales
from batubook.models.enums import Genre
from batubook.repositories.base import LIKE_ESCAPE, BaseRepository, contains_pattern
from batubook.utils.pagination import PageParams


class BookRepository(BaseRepository[Book]):
    """도서 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the books table.
    """

    def __init__(self) -> None:
        super().__init__(Book)

    async def get_by_isbn(self, db: AsyncSession, isbn: str) -> Book | None:
        return await self.find_one(db, Book.isbn == isbn)

    async def isbn_taken(self, db: AsyncSession, isbn: str, exclude_id: UUID | None = None) -> bool:
        criteria = [Book.isbn == isbn]
        if exclude_id is not None:
            criteria.append(Book.id != exclude_id)
        return await self.exists(db, *criteria)

    async def get_by_title_and_author(
        self, db: AsyncSession, title: str, author: str, params: PageParams
    ) -> tuple[Sequence[Book], int]:
        """제목과 저자가 모두 일치하는 도서를 조회합니다 (대소문자 무시).

        Books whose title and author both match, ignoring case.
        """
        return await self.get_paginated(
            db,
            params,
            func.lower(Book.title) == title.lower(),
            func.lower(Book.author) == author.lower(),
        )

    async def search(self, db: AsyncSession, term: str, params: PageParams) -> tuple[Sequence[Book], int]:
        """제목 또는 저자에 검색어가 포함된 도서를 조회합니다.

        Case-insensitive substring search over title or author.
        """
        pattern = contains_pattern(term)
        return await self.get_paginated(
            db,
            params,
            or_(
                func.lower(Book.title).like(pattern, escape=LIKE_ESCAPE),
                func.lower(Book.author).like(pattern, escape=LIKE_ESCAPE),
            ),
        )

    async def get_by_page_count_between(
        self, db: AsyncSession, min_pages: int, max_pages: int, params: PageParams
    ) -> tuple[Sequence[Book], int]:
        return await self.get_paginated(
            db, params, Book.page_count.between(min_pages, max_pages), order_by=[Book.page_count]
        )

    async def get_by_publish_date_between(
        self, db: AsyncSession, start: date, end: date, params: PageParams
    ) -> tuple[Sequence[Book], int]:
        return await self.get_paginated(
            db, params, Book.publish_date.between(start, end), order_by=[Book.publish_date]
        )

    async def get_by_genre(self, db: AsyncSession, genre: Genre, params: PageParams) -> tuple[Sequence[Book], int]:
        return await self.get_paginated(db, params, Book.genre == genre)


class BookSalesRepository(BaseRepository[BookSales]):
    """도서 판매 정보 테이블 레포지토리.

    Repository handling database queries for the book_sales table.
    """

    def __init__(self) -> None:
        super().__init__(BookSales)

    async def get_by_sales_code(self, db: AsyncSession, sales_code: str) -> BookSales | None:
        return await self.find_one(db, BookSales.sales_code == sales_code)

    async def sales_code_taken(self, db: AsyncSession, sales_code: str, exclude_id: UUID | None = None) -> bool:
        criteria = [BookSales.sales_code == sales_code]
        if exclude_id is not None:
            criteria.append(BookSales.id != exclude_id)
        return await self.exists(db, *criteria)

    async def get_by_book(
        self, db: AsyncSession, book_id: UUID, params: PageParams
    ) -> tuple[Sequence[BookSales], int]:
        return await self.get_paginated(db, params, BookSales.book_id == book_id)

    async def get_by_price_greater_than(
        self, db: AsyncSession, price: float, params: PageParams
    ) -> tuple[Sequence[BookSales], int]:
        """가격이 기준보다 높은 판매 정보를 가격 내림차순으로 조회합니다.

        Listings priced above ``price``, most expensive first.
        """
        return await self.get_paginated(
            db, params, BookSales.price > price, order_by=[BookSales.price.desc()]
        )

    async def get_available(self, db: AsyncSession, params: PageParams) -> tuple[Sequence[BookSales], int]:
        return await self.get_paginated(db, params, BookSales.is_available.is_(True))

    async def get_by_discount_greater_than(
        self, db: AsyncSession, discount: float, params: PageParams
    ) -> tuple[Sequence[BookSales], int]:
        return await self.get_paginated(db, params, BookSales.discount > discount)


class BookInteractionRepository(BaseRepository[BookInteraction]):
    """도서 상호작용 테이블 레포지토리.

    Repository handling database queries for the book_interactions table.
    """

    def __init__(self) -> None:
        super().__init__(BookInteraction)

    async def get_read_by_user(
        self, db: AsyncSession, user_id: UUID, params: PageParams
    ) -> tuple[Sequence[BookInteraction], int]:
        return await self.get_paginated(
            db, params, BookInteraction.user_id == user_id, BookInteraction.is_read.is_(True)
        )

    async def get_liked_by_user(
        self, db: AsyncSession, user_id: UUID, params: PageParams
    ) -> tuple[Sequence[BookInteraction], int]:
        return await self.get_paginated(
            db, params, BookInteraction.user_id == user_id, BookInteraction.is_liked.is_(True)
        )

    async def get_read_by_book(
        self, db: AsyncSession, book_id: UUID, params: PageParams
    ) -> tuple[Sequence[BookInteraction], int]:
        return await self.get_paginated(
            db, params, BookInteraction.book_id == book_id, BookInteraction.is_read.is_(True)
        )

    async def get_liked_by_book(
        self, db: AsyncSession, book_id: UUID, params: PageParams
    ) -> tuple[Sequence[BookInteraction], int]:
        return await self.get_paginated(
            db, params, BookInteraction.book_id == book_id, BookInteraction.is_liked.is_(True)
        )

    async def is_read(self, db: AsyncSession, user_id: UUID, book_id: UUID) -> bool:
        return await self.exists(
            db,
            BookInteraction.user_id == user_id,
            BookInteraction.book_id == book_id,
            BookInteraction.is_read.is_(True),
        )

    async def is_liked(self, db: AsyncSession, user_id: UUID, book_id: UUID) -> bool:
        return await self.exists(
            db,
            BookInteraction.user_id == user_id,
            BookInteraction.book_id == book_id,
            BookInteraction.is_liked.is_(True),
        )


book_repository: BookRepository = BookRepository()
book_sales_repository: BookSalesRepository = BookSalesRepository()
book_interaction_repository: BookInteractionRepository = BookInteractionRepository()
