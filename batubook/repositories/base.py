"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all domain repositories.
Provides generic Create, Read, Update, Delete operations plus paginated,
sortable listing over arbitrary WHERE criteria.

Usage:
    class BookRepository(BaseRepository[Book]):
        def __init__(self) -> None:
            super().__init__(Book)
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from batubook.database import Base
from batubook.utils.pagination import PageParams, apply_sort, paginate

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)

# LIKE 이스케이프 문자 (Escape character for LIKE patterns)
LIKE_ESCAPE: str = "\\"


def contains_pattern(term: str) -> str:
    """부분 일치 LIKE 패턴을 만듭니다.

    Build a lowercase ``%term%`` pattern with ``\\``, ``%`` and ``_`` escaped
    so they match literally. Use with ``like(pattern, escape=LIKE_ESCAPE)``.
    """
    escaped = (
        term.lower()
        .replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    async def get_by_id(self, db: AsyncSession, record_id: UUID) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its UUID.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드의 UUID (UUID of the record to retrieve)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        return await db.get(self.model, record_id)

    async def find_one(self, db: AsyncSession, *criteria: ColumnElement[bool]) -> ModelType | None:
        """조건에 맞는 첫 번째 레코드를 조회합니다.

        Retrieve the first record matching all criteria, or None.
        """
        result = await db.execute(select(self.model).where(*criteria).limit(1))
        return result.scalar_one_or_none()

    async def get_paginated(
        self,
        db: AsyncSession,
        params: PageParams,
        *criteria: ColumnElement[bool],
        order_by: Sequence[Any] | None = None,
    ) -> tuple[Sequence[ModelType], int]:
        """조건에 맞는 레코드를 페이지 단위로 조회합니다.

        Retrieve one page of records matching all criteria.
        A client ``sort`` spec wins over ``order_by``; without either,
        records are ordered by creation time.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            params: 페이지/정렬 요청 (Page and sort request)
            criteria: WHERE 조건 목록 (Filter expressions)
            order_by: 기본 정렬 컬럼 (Default ordering when no sort spec is given)

        Returns:
            tuple[Sequence[ModelType], int]: (레코드 목록, 전체 개수)
                                             (List of records, total count)
        """
        query: Select[Any] = select(self.model).where(*criteria)
        if params.sort or not order_by:
            query = apply_sort(query, self.model, params.sort)
        else:
            query = query.order_by(*order_by, self.model.id)
        return await paginate(db, query, params.page, params.per_page)

    async def create(self, db: AsyncSession, obj_data: dict[str, Any]) -> ModelType:
        """새 레코드를 생성합니다.

        Create a new record in the database.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj_data: 생성할 레코드의 데이터 딕셔너리
                      (Dictionary of data for the new record)

        Returns:
            ModelType: 생성된 레코드 (The created record)
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def update(self, db: AsyncSession, db_obj: ModelType, update_data: dict[str, Any]) -> ModelType:
        """이미 조회된 레코드에 변경 사항을 적용합니다.

        Apply field changes to an already loaded record.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            db_obj: 수정할 레코드 (Record to modify)
            update_data: 업데이트할 필드와 값의 딕셔너리
                         (Dictionary of fields and values to update)

        Returns:
            ModelType: 수정된 레코드 (Updated record)
        """
        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def delete(self, db: AsyncSession, db_obj: ModelType) -> None:
        """레코드를 삭제합니다.

        Delete a loaded record. Dependent rows go with it through the
        foreign keys' ON DELETE CASCADE.
        """
        await db.delete(db_obj)
        await db.flush()

    async def exists(self, db: AsyncSession, *criteria: ColumnElement[bool]) -> bool:
        """주어진 조건에 일치하는 레코드가 존재하는지 확인합니다.

        Check if a record matching all criteria exists.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            criteria: 검색 조건 (Filter expressions)

        Returns:
            bool: 레코드 존재 여부 (Whether a matching record exists)
        """
        query: Select[Any] = select(func.count()).select_from(self.model).where(*criteria)
        count: int = (await db.execute(query)).scalar() or 0
        return count > 0
