"""초기 데이터 시드 스크립트 — 관리자 계정과 데모 도서 카탈로그 생성.

Seed script — Creates the admin account and a small demo catalog.

Usage:
    python -m batubook.seed

Creates:
    - 1개 관리자 계정: admin / Admin#12345 (1 admin user with profile)
    - 3권의 도서와 판매 정보 (3 books, each with one sales listing)
"""

import asyncio
import logging
from datetime import date

from sqlalchemy import select

from batubook.config import settings
from batubook.database import Base, async_session, engine
from batubook.models import Book, BookSales, User, UserProfile
from batubook.models.enums import Currency, Gender, Genre, Role
from batubook.utils.logging_config import setup_logging
from batubook.utils.password import hash_password

logger = logging.getLogger(__name__)

# (title, author, isbn, pages, published, genre, sales code, price, currency)
DEMO_BOOKS: list[tuple[str, str, str, int, date, Genre, str, float, Currency]] = [
    ("1984", "George Orwell", "0451524934", 328, date(1949, 6, 8), Genre.DYSTOPIA, "BB-1984", 12.5, Currency.USD),
    ("Dune", "Frank Herbert", "0441172717", 412, date(1965, 8, 1), Genre.SCIENCE_FICTION, "BB-DUNE", 15.0, Currency.EUR),
    ("Kürk Mantolu Madonna", "Sabahattin Ali", "9789753638029", 160, date(1943, 1, 1), Genre.NOVEL, "BB-KURK", 95.0, Currency.TRY),
]


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Create tables if missing, then insert the admin account and demo books.

    Idempotent: 관리자 계정이 이미 있으면 건너뜁니다 (Skips if the admin exists).
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        result = await db.execute(select(User).where(User.username == "admin"))
        if result.scalar_one_or_none() is not None:
            logger.info("Already seeded. Skipping.")
            return

        admin = User(
            username="admin",
            email="admin@batubook.local",
            password_hash=hash_password("Admin#12345"),
            role=Role.ADMIN,
            profile=UserProfile(
                date_of_birth=date(1990, 1, 1),
                gender=Gender.UNDISCLOSED,
                biography="BatuBook administrator.",
                location="Istanbul",
            ),
        )
        db.add(admin)

        for title, author, isbn, pages, published, genre, code, price, currency in DEMO_BOOKS:
            book = Book(
                title=title,
                author=author,
                isbn=isbn,
                page_count=pages,
                publish_date=published,
                genre=genre,
            )
            db.add(book)
            await db.flush()  # flush로 book.id 생성 (Flush to generate book.id)
            db.add(
                BookSales(
                    book_id=book.id,
                    sales_code=code,
                    publisher="BatuBook Press",
                    price=price,
                    stock_quantity=25,
                    currency=currency,
                )
            )

        await db.commit()
        logger.info("Seed complete: admin user and %d books", len(DEMO_BOOKS))


if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    asyncio.run(seed())
