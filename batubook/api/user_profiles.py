"""사용자 프로필 라우터.

User Profile Router — Read, search, update and delete profiles.
Profiles are created through the user endpoints.
"""

from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query

from batubook.api.deps import DbSession, Paging
from batubook.models.enums import Gender
from batubook.schemas.user import UserProfileResponse, UserProfileUpdate
from batubook.services.user_profile_service import user_profile_service
from batubook.utils.pagination import Page

router: APIRouter = APIRouter()


@router.get("/", response_model=Page[UserProfileResponse])
async def list_profiles(db: DbSession, params: Paging) -> Page[UserProfileResponse]:
    return await user_profile_service.list_profiles(db, params)


@router.get("/search-birthday", response_model=Page[UserProfileResponse])
async def get_profiles_by_birth_date(
    date_of_birth: Annotated[date, Query()],
    db: DbSession,
    params: Paging,
) -> Page[UserProfileResponse]:
    return await user_profile_service.get_profiles_by_birth_date(db, date_of_birth, params)


@router.get("/search-gender", response_model=Page[UserProfileResponse])
async def get_profiles_by_gender(
    gender: Annotated[Gender, Query()],
    db: DbSession,
    params: Paging,
) -> Page[UserProfileResponse]:
    return await user_profile_service.get_profiles_by_gender(db, gender, params)


@router.get("/{profile_id}", response_model=UserProfileResponse)
async def get_profile(profile_id: UUID, db: DbSession) -> UserProfileResponse:
    return await user_profile_service.get_profile(db, profile_id)


@router.put("/{profile_id}", response_model=UserProfileResponse)
async def update_profile(profile_id: UUID, data: UserProfileUpdate, db: DbSession) -> UserProfileResponse:
    result: UserProfileResponse = await user_profile_service.update_profile(db, profile_id, data)
    await db.commit()
    return result


@router.delete("/{profile_id}", status_code=204)
async def delete_profile(profile_id: UUID, db: DbSession) -> None:
    """프로필과 소유 사용자 계정을 삭제합니다.

    Delete a profile and the user account that owns it.
    """
    await user_profile_service.delete_profile(db, profile_id)
    await db.commit()
