"""인용구 라우터.

Quote Router — CRUD endpoints for quotes.
"""

from uuid import UUID

from fastapi import APIRouter

from batubook.api.deps import DbSession, Paging
from batubook.schemas.content import QuoteCreate, QuoteResponse, QuoteUpdate
from batubook.services.content_service import quote_service
from batubook.utils.pagination import Page

router: APIRouter = APIRouter()


@router.post("/", response_model=QuoteResponse, status_code=201)
async def create_quote(data: QuoteCreate, db: DbSession) -> QuoteResponse:
    result: QuoteResponse = await quote_service.create_quote(db, data)
    await db.commit()
    return result


@router.get("/", response_model=Page[QuoteResponse])
async def list_quotes(db: DbSession, params: Paging) -> Page[QuoteResponse]:
    return await quote_service.list_quotes(db, params)


@router.get("/{quote_id}", response_model=QuoteResponse)
async def get_quote(quote_id: UUID, db: DbSession) -> QuoteResponse:
    return await quote_service.get_quote(db, quote_id)


@router.put("/{quote_id}", response_model=QuoteResponse)
async def update_quote(quote_id: UUID, data: QuoteUpdate, db: DbSession) -> QuoteResponse:
    result: QuoteResponse = await quote_service.update_quote(db, quote_id, data)
    await db.commit()
    return result


@router.delete("/{quote_id}", status_code=204)
async def delete_quote(quote_id: UUID, db: DbSession) -> None:
    await quote_service.delete_quote(db, quote_id)
    await db.commit()
