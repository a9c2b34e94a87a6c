"""도서 관련 SQLAlchemy ORM 모델 정의.

Book-related SQLAlchemy ORM model definitions.

Tables:
    - books: 도서 카탈로그 (Book catalog, ISBN unique)
    - book_sales: 판매 정보 (Sales listings per book)
    - book_interactions: 사용자-도서 상호작용 (Read / liked records)
"""

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    DateTime,
    Enum as SAEnum,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from batubook.database import Base
from batubook.models.enums import Currency, Genre


class Book(Base):
    """도서 모델.

    Book catalog entry. ISBN is unique and holds 10 or 13 digits.
    """

    __tablename__ = "books"
    __table_args__ = (CheckConstraint("page_count > 0", name="ck_books_page_count_positive"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    isbn: Mapped[str] = mapped_column(String(13), unique=True, nullable=False)
    page_count: Mapped[int] = mapped_column(Integer, nullable=False)
    publish_date: Mapped[date] = mapped_column(Date, nullable=False)
    genre: Mapped[Genre] = mapped_column(SAEnum(Genre, native_enum=False, length=32), nullable=False)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    cover_image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))


class BookSales(Base):
    """도서 판매 정보 모델.

    Sales listing for a book.

    Attributes:
        sales_code: 판매 코드, 고유 7자 (Unique 7-character sales code)
        price: 가격, 0 초과 (Price, > 0)
        stock_quantity: 재고, 0 이상 (Stock, >= 0)
        discount: 할인율 퍼센트 0..100 (Discount percent)
        is_available: 판매 가능 여부 (Available for sale)
    """

    __tablename__ = "book_sales"
    __table_args__ = (
        CheckConstraint("price > 0", name="ck_book_sales_price_positive"),
        CheckConstraint("stock_quantity >= 0", name="ck_book_sales_stock_non_negative"),
        CheckConstraint("discount >= 0 AND discount <= 100", name="ck_book_sales_discount_range"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    book_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("books.id", ondelete="CASCADE"), nullable=False, index=True)
    sales_code: Mapped[str] = mapped_column(String(7), unique=True, nullable=False)
    publisher: Mapped[str] = mapped_column(String(64), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    currency: Mapped[Currency] = mapped_column(SAEnum(Currency, native_enum=False, length=8), nullable=False)
    discount: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    is_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))


class BookInteraction(Base):
    """사용자-도서 상호작용 모델.

    A user's record of a book. Only read books can be recorded, and
    ``is_liked`` implies ``is_read``.
    """

    __tablename__ = "book_interactions"
    __table_args__ = (
        CheckConstraint("is_read OR NOT is_liked", name="ck_book_interactions_liked_requires_read"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    book_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("books.id", ondelete="CASCADE"), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_liked: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
