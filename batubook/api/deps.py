"""FastAPI 의존성 주입 모듈 — DB 세션 및 페이지 요청.

FastAPI dependency injection module.
Provides the request-scoped database session and the page/sort query
parameters shared by every list endpoint. The API is open, so no
authentication dependency is applied.
"""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from batubook.config import settings
from batubook.database import get_db
from batubook.utils.pagination import PageParams


def get_page_params(
    page: Annotated[int, Query(ge=1, description="페이지 번호, 1부터 시작 (1-based page number)")] = 1,
    per_page: Annotated[
        int | None,
        Query(ge=1, le=settings.MAX_PAGE_SIZE, description="페이지당 항목 수 (Items per page)"),
    ] = None,
    sort: Annotated[str | None, Query(description='정렬 "field,asc|desc" (Sort spec)')] = None,
) -> PageParams:
    """쿼리 문자열에서 페이지 요청을 구성합니다.

    Build the page request from ``page``, ``per_page`` and ``sort``.
    """
    return PageParams(page=page, per_page=per_page or settings.DEFAULT_PAGE_SIZE, sort=sort or None)


# 라우터 시그니처용 별칭 — Aliases for router signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
Paging = Annotated[PageParams, Depends(get_page_params)]
