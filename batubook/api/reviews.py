"""리뷰 라우터.

Review Router — CRUD endpoints for book reviews plus lookup by rating.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query

from batubook.api.deps import DbSession, Paging
from batubook.schemas.content import ReviewCreate, ReviewResponse, ReviewUpdate
from batubook.services.content_service import review_service
from batubook.utils.pagination import Page

router: APIRouter = APIRouter()


@router.post("/", response_model=ReviewResponse, status_code=201)
async def create_review(data: ReviewCreate, db: DbSession) -> ReviewResponse:
    result: ReviewResponse = await review_service.create_review(db, data)
    await db.commit()
    return result


@router.get("/", response_model=Page[ReviewResponse])
async def list_reviews(db: DbSession, params: Paging) -> Page[ReviewResponse]:
    return await review_service.list_reviews(db, params)


@router.get("/rating", response_model=Page[ReviewResponse])
async def get_reviews_by_rating(
    rating: Annotated[float, Query(ge=1.0, le=5.0)],
    db: DbSession,
    params: Paging,
) -> Page[ReviewResponse]:
    return await review_service.get_reviews_by_rating(db, rating, params)


@router.get("/{review_id}", response_model=ReviewResponse)
async def get_review(review_id: UUID, db: DbSession) -> ReviewResponse:
    return await review_service.get_review(db, review_id)


@router.put("/{review_id}", response_model=ReviewResponse)
async def update_review(review_id: UUID, data: ReviewUpdate, db: DbSession) -> ReviewResponse:
    result: ReviewResponse = await review_service.update_review(db, review_id, data)
    await db.commit()
    return result


@router.delete("/{review_id}", status_code=204)
async def delete_review(review_id: UUID, db: DbSession) -> None:
    await review_service.delete_review(db, review_id)
    await db.commit()
