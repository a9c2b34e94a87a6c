"""페이지네이션 유틸리티 모듈.

Pagination utility module for SQLAlchemy async queries.
Provides the page request parameters, sort parsing, a generic paginate
function and the Page response model shared by every list endpoint.
"""

import math
from dataclasses import dataclass
from typing import Any, Generic, Sequence, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from batubook.utils.exceptions import BadRequestError

T = TypeVar("T")


@dataclass(frozen=True)
class PageParams:
    """페이지 요청 파라미터.

    Page request parameters parsed from the query string.

    Attributes:
        page: 페이지 번호, 1부터 시작 (Page number, 1-based)
        per_page: 페이지당 항목 수 (Items per page)
        sort: 정렬 지정 "field,asc|desc" (Sort spec, optional)
    """

    page: int = 1
    per_page: int = 20
    sort: str | None = None


class Page(BaseModel, Generic[T]):
    """페이지네이션 결과 모델.

    Pagination result model for typed responses.
    Contains the paginated items and metadata for client-side pagination controls.

    Attributes:
        items: 현재 페이지 항목 목록 (Items for the current page)
        total: 전체 항목 수 (Total count across all pages)
        page: 현재 페이지 번호 (Current page number, 1-based)
        per_page: 페이지당 항목 수 (Items per page)
        pages: 전체 페이지 수 (Total number of pages)
    """

    items: list[T]  # 현재 페이지 항목 목록 (Paginated items)
    total: int  # 전체 항목 수 (Total item count)
    page: int  # 현재 페이지 번호 — 1부터 시작 (Current page, 1-indexed)
    per_page: int  # 페이지당 항목 수 (Items per page)
    pages: int  # 전체 페이지 수 (Total pages, computed: ceil(total/per_page))

    @classmethod
    def build(cls, items: list[Any], total: int, params: PageParams) -> "Page[Any]":
        """항목과 전체 개수로 페이지 응답을 만듭니다.

        Assemble a page from already-mapped items and the total count.
        """
        return cls(
            items=items,
            total=total,
            page=params.page,
            per_page=params.per_page,
            pages=math.ceil(total / params.per_page) if total else 0,
        )


def apply_sort(query: Select[Any], model: type, sort: str | None) -> Select[Any]:
    """정렬 지정 문자열을 쿼리에 적용합니다.

    Apply a ``"field,asc|desc"`` sort spec to the query.
    Without a spec, results are ordered by creation time then id so pages
    are stable.

    Raises:
        BadRequestError: 알 수 없는 필드 또는 방향 (Unknown field or direction)
    """
    if not sort:
        return query.order_by(model.created_at, model.id)

    field, _, direction = sort.partition(",")
    field = field.strip()
    direction = (direction.strip() or "asc").lower()
    column = model.__table__.columns.get(field)
    if column is None or field.endswith("password_hash"):
        raise BadRequestError(f"Cannot sort by unknown field: {field}")
    if direction not in ("asc", "desc"):
        raise BadRequestError(f"Sort direction must be 'asc' or 'desc', got: {direction}")

    ordering = column.desc() if direction == "desc" else column.asc()
    return query.order_by(ordering, model.id)


async def paginate(
    db: AsyncSession,
    query: Select[Any],
    page: int = 1,
    per_page: int = 20,
) -> tuple[Sequence[Any], int]:
    """SQLAlchemy 쿼리에 대한 페이지네이션을 수행합니다.

    Execute a paginated SQLAlchemy query, returning items and total count.
    Runs two queries: one for the total count (via subquery) and one for
    the actual page of results with OFFSET/LIMIT.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: SQLAlchemy Select 쿼리 (Base query to paginate)
        page: 요청 페이지 번호, 1부터 시작 (Page number, 1-indexed, default: 1)
        per_page: 페이지당 항목 수 (Items per page, default: 20)

    Returns:
        tuple[Sequence[Any], int]: (항목 목록, 전체 개수) 튜플
            (Tuple of paginated items and total count)
    """
    # 전체 개수 조회 — 정렬 제거 후 서브쿼리로 COUNT 실행 (Count total via subquery)
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total: int = (await db.execute(count_query)).scalar() or 0

    # 페이지 항목 조회 — OFFSET/LIMIT 적용 (Fetch page items with offset/limit)
    offset: int = (page - 1) * per_page
    result = await db.execute(query.offset(offset).limit(per_page))
    items: Sequence[Any] = result.scalars().all()

    return items, total
