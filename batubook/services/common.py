"""서비스 공용 헬퍼.

Helpers shared by the services: 404 lookups and id formatting.
"""

from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from batubook.repositories.base import BaseRepository
from batubook.utils.exceptions import NotFoundError


async def get_or_404(db: AsyncSession, repository: BaseRepository[Any], record_id: UUID, label: str) -> Any:
    """ID로 레코드를 조회하고 없으면 404를 발생시킵니다.

    Load a record by id or raise ``NotFoundError("<label> not found with ID: <id>")``.
    """
    record = await repository.get_by_id(db, record_id)
    if record is None:
        raise NotFoundError(f"{label} not found with ID: {record_id}")
    return record


def str_or_none(value: UUID | None) -> str | None:
    return str(value) if value is not None else None
