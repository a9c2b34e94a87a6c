"""사용자 라우터 — 사용자 CRUD 및 검색 엔드포인트.

User Router — CRUD and search endpoints for user accounts.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query

from batubook.api.deps import DbSession, Paging
from batubook.models.enums import Role
from batubook.schemas.user import UserCreate, UserResponse, UserUpdate
from batubook.services.user_service import user_service
from batubook.utils.pagination import Page

router: APIRouter = APIRouter()


@router.post("/", response_model=UserResponse, status_code=201)
async def create_user(data: UserCreate, db: DbSession) -> UserResponse:
    """사용자와 프로필을 생성합니다.

    Create a user together with its profile.
    """
    result: UserResponse = await user_service.create_user(db, data)
    await db.commit()
    return result


@router.get("/", response_model=Page[UserResponse])
async def list_users(db: DbSession, params: Paging) -> Page[UserResponse]:
    return await user_service.list_users(db, params)


@router.get("/search", response_model=Page[UserResponse])
async def search_users(
    term: Annotated[str, Query(description="사용자명/이메일 검색어 (Username or email fragment)")],
    db: DbSession,
    params: Paging,
) -> Page[UserResponse]:
    """사용자명 또는 이메일로 사용자를 검색합니다.

    Case-insensitive substring search over username or email.
    """
    return await user_service.search_users(db, term, params)


@router.get("/search-role", response_model=Page[UserResponse])
async def get_users_by_role(
    role: Annotated[Role, Query()],
    db: DbSession,
    params: Paging,
) -> Page[UserResponse]:
    return await user_service.get_users_by_role(db, role, params)


@router.get("/search-username-email", response_model=Page[UserResponse])
async def get_users_by_username_and_email(
    username: Annotated[str, Query()],
    email: Annotated[str, Query()],
    db: DbSession,
    params: Paging,
) -> Page[UserResponse]:
    """사용자명과 이메일이 모두 일치하는 사용자를 조회합니다.

    Users matching both username and email, ignoring case.
    """
    return await user_service.get_users_by_username_and_email(db, username, email, params)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: UUID, db: DbSession) -> UserResponse:
    return await user_service.get_user(db, user_id)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(user_id: UUID, data: UserUpdate, db: DbSession) -> UserResponse:
    """사용자 정보를 부분 수정합니다.

    Partially update a user and, optionally, its profile.
    """
    result: UserResponse = await user_service.update_user(db, user_id, data)
    await db.commit()
    return result


@router.delete("/{user_id}", status_code=204)
async def delete_user(user_id: UUID, db: DbSession) -> None:
    await user_service.delete_user(db, user_id)
    await db.commit()
