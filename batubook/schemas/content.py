"""리뷰 및 인용구 Pydantic 요청/응답 스키마 정의.

Review and Quote request/response schema definitions.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


def check_half_step(value: float | None) -> float | None:
    """평점이 0.5 단위인지 확인합니다.

    Ratings go from 1.0 to 5.0 in half-point steps.
    """
    if value is not None and not (value * 2).is_integer():
        raise ValueError("rating must be a multiple of 0.5")
    return value


# === 리뷰 (Review) 스키마 ===

class ReviewCreate(BaseModel):
    """리뷰 생성 요청 스키마.

    Review creation request schema.

    Attributes:
        user_id: 작성자 UUID (Author, must exist)
        book_id: 도서 UUID (Reviewed book, must exist)
        review_text: 리뷰 본문 (Review body)
        rating: 평점 1.0..5.0, 0.5 단위 (Rating in half steps)
    """

    user_id: UUID  # 작성자 UUID (Author UUID)
    book_id: UUID  # 도서 UUID (Book UUID)
    review_text: str = Field(..., min_length=1)  # 리뷰 본문 (Review text)
    rating: float = Field(..., ge=1.0, le=5.0)  # 평점 (Rating)

    @field_validator("rating")
    @classmethod
    def validate_rating(cls, value: float) -> float:
        return check_half_step(value)


class ReviewUpdate(BaseModel):
    """리뷰 수정 요청 스키마 (부분 업데이트).

    Review update request schema (partial update).
    """

    user_id: UUID | None = None
    book_id: UUID | None = None
    review_text: str | None = Field(None, min_length=1)
    rating: float | None = Field(None, ge=1.0, le=5.0)

    @field_validator("rating")
    @classmethod
    def validate_rating(cls, value: float | None) -> float | None:
        return check_half_step(value)


class ReviewResponse(BaseModel):
    """리뷰 응답 스키마.

    Review response schema returned from API.
    """

    id: str  # 리뷰 UUID 문자열 (Review UUID as string)
    user_id: str
    book_id: str
    review_text: str
    rating: float  # 평점 (Rating)
    created_at: datetime
    updated_at: datetime


# === 인용구 (Quote) 스키마 ===

class QuoteCreate(BaseModel):
    """인용구 생성 요청 스키마.

    Quote creation request schema.
    """

    user_id: UUID  # 작성자 UUID (Author UUID)
    book_id: UUID  # 도서 UUID (Book UUID)
    quote_text: str = Field(..., min_length=1)  # 인용구 본문 (Quoted passage)


class QuoteUpdate(BaseModel):
    user_id: UUID | None = None
    book_id: UUID | None = None
    quote_text: str | None = Field(None, min_length=1)


class QuoteResponse(BaseModel):
    id: str  # 인용구 UUID 문자열 (Quote UUID as string)
    user_id: str
    book_id: str
    quote_text: str
    created_at: datetime
    updated_at: datetime
