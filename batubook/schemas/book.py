"""도서, 판매, 상호작용 Pydantic 요청/응답 스키마 정의.

Book, BookSales and BookInteraction request/response schema definitions.
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from batubook.models.enums import Currency, Genre

ISBN_PATTERN: str = r"^(\d{10}|\d{13})$"


def check_not_future(value: date | None) -> date | None:
    if value is not None and value > date.today():
        raise ValueError("publish date cannot be in the future")
    return value


def strip_text(value: object) -> object:
    return value.strip() if isinstance(value, str) else value


# === 도서 (Book) 스키마 ===

class BookCreate(BaseModel):
    """도서 생성 요청 스키마.

    Book creation request schema.

    Attributes:
        isbn: ISBN, 10자리 또는 13자리 숫자 (10 or 13 digits, unique)
        page_count: 페이지 수, 양수 (Positive page count)
        publish_date: 출판일, 미래 불가 (Not in the future)
    """

    title: str = Field(..., min_length=1, max_length=255)  # 제목 (Title)
    author: str = Field(..., min_length=1, max_length=255)  # 저자 (Author)
    isbn: str = Field(..., pattern=ISBN_PATTERN)  # ISBN (10 or 13 digits)
    page_count: int = Field(..., gt=0)  # 페이지 수 (Page count)
    publish_date: date  # 출판일 (Publication date)
    genre: Genre  # 장르 (Genre)
    summary: str | None = None  # 요약 (Summary, optional)
    cover_image_url: str | None = None  # 표지 URL (Cover image URL, optional)

    @field_validator("publish_date")
    @classmethod
    def validate_publish_date(cls, value: date) -> date:
        return check_not_future(value)


class BookUpdate(BaseModel):
    """도서 수정 요청 스키마 (부분 업데이트).

    Book update request schema (partial update).
    """

    title: str | None = Field(None, min_length=1, max_length=255)
    author: str | None = Field(None, min_length=1, max_length=255)
    isbn: str | None = Field(None, pattern=ISBN_PATTERN)
    page_count: int | None = Field(None, gt=0)
    publish_date: date | None = None
    genre: Genre | None = None
    summary: str | None = None
    cover_image_url: str | None = None

    @field_validator("publish_date")
    @classmethod
    def validate_publish_date(cls, value: date | None) -> date | None:
        return check_not_future(value)


class BookResponse(BaseModel):
    """도서 응답 스키마.

    Book response schema returned from API.
    """

    id: str  # 도서 UUID 문자열 (Book UUID as string)
    title: str
    author: str
    isbn: str
    page_count: int
    publish_date: date
    genre: Genre
    summary: str | None
    cover_image_url: str | None
    created_at: datetime
    updated_at: datetime


# === 도서 판매 (BookSales) 스키마 ===

class BookSalesCreate(BaseModel):
    """도서 판매 정보 생성 요청 스키마.

    Book sales creation request schema.

    Attributes:
        book_id: 대상 도서 UUID (Book being sold, must exist)
        sales_code: 판매 코드 (Unique 7-character code, trimmed)
        price: 가격 (Price, > 0)
        stock_quantity: 재고 (Stock, >= 0)
        discount: 할인율 (Discount percent, 0..100)
    """

    book_id: UUID  # 대상 도서 UUID (Book UUID)
    sales_code: str = Field(..., min_length=7, max_length=7)  # 판매 코드, 7자 (Sales code, 7 chars)
    publisher: str = Field(..., min_length=2, max_length=64)  # 출판사 (Publisher)
    price: float = Field(..., gt=0)  # 가격 (Price)
    stock_quantity: int = Field(0, ge=0)  # 재고 (Stock quantity)
    currency: Currency  # 통화 (Currency)
    discount: float = Field(0.0, ge=0, le=100)  # 할인율 퍼센트 (Discount percent)
    is_available: bool = True  # 판매 가능 여부 (Availability flag)

    @field_validator("sales_code", "publisher", mode="before")
    @classmethod
    def strip_text_fields(cls, value: object) -> object:
        return strip_text(value)


class BookSalesUpdate(BaseModel):
    """도서 판매 정보 수정 요청 스키마 (부분 업데이트).

    Book sales update request schema (partial update).
    """

    book_id: UUID | None = None
    sales_code: str | None = Field(None, min_length=7, max_length=7)
    publisher: str | None = Field(None, min_length=2, max_length=64)
    price: float | None = Field(None, gt=0)
    stock_quantity: int | None = Field(None, ge=0)
    currency: Currency | None = None
    discount: float | None = Field(None, ge=0, le=100)
    is_available: bool | None = None

    @field_validator("sales_code", "publisher", mode="before")
    @classmethod
    def strip_text_fields(cls, value: object) -> object:
        return strip_text(value)


class BookSalesResponse(BaseModel):
    """도서 판매 정보 응답 스키마.

    Book sales response schema returned from API.
    """

    id: str  # 판매 UUID 문자열 (Sales UUID as string)
    book_id: str  # 도서 UUID 문자열 (Book UUID as string)
    sales_code: str
    publisher: str
    price: float
    stock_quantity: int
    currency: Currency
    discount: float
    is_available: bool
    created_at: datetime
    updated_at: datetime


# === 도서 상호작용 (BookInteraction) 스키마 ===

class BookInteractionCreate(BaseModel):
    """도서 상호작용 생성 요청 스키마.

    Book interaction creation request schema. The read/liked rule is
    checked by the service.
    """

    user_id: UUID  # 사용자 UUID (User UUID)
    book_id: UUID  # 도서 UUID (Book UUID)
    description: str | None = None  # 메모 (Free-text note, optional)
    is_read: bool = False  # 읽음 여부 (Read flag)
    is_liked: bool = False  # 좋아요 여부 — 읽은 경우만 (Liked flag, requires read)


class BookInteractionUpdate(BaseModel):
    """도서 상호작용 수정 요청 스키마 (부분 업데이트).

    Book interaction update request schema (partial update).
    """

    user_id: UUID | None = None
    book_id: UUID | None = None
    description: str | None = None
    is_read: bool | None = None
    is_liked: bool | None = None


class BookInteractionResponse(BaseModel):
    """도서 상호작용 응답 스키마.

    Book interaction response schema returned from API.
    """

    id: str  # 상호작용 UUID 문자열 (Interaction UUID as string)
    user_id: str  # 사용자 UUID 문자열 (User UUID as string)
    book_id: str  # 도서 UUID 문자열 (Book UUID as string)
    description: str | None
    is_read: bool
    is_liked: bool
    created_at: datetime
    updated_at: datetime
