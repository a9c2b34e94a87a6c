"""사용자 프로필 서비스.

User Profile Service — Read, search and update profiles.
Profiles are created with their user; deleting a profile removes the
owning account, since a user cannot exist without one.
"""

import logging
from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from batubook.models.enums import Gender
from batubook.models.user import User, UserProfile
from batubook.repositories.user_repository import user_profile_repository, user_repository
from batubook.schemas.user import UserProfileResponse, UserProfileUpdate
from batubook.services.common import get_or_404
from batubook.services.user_service import profile_to_response
from batubook.utils.pagination import Page, PageParams

logger = logging.getLogger(__name__)


class UserProfileService:
    """사용자 프로필 비즈니스 로직을 처리하는 서비스.

    Service handling user profile business logic.
    """

    def _to_page(self, profiles: Any, total: int, params: PageParams) -> Page[UserProfileResponse]:
        return Page.build([profile_to_response(p) for p in profiles], total, params)

    async def get_profile(self, db: AsyncSession, profile_id: UUID) -> UserProfileResponse:
        profile: UserProfile = await get_or_404(db, user_profile_repository, profile_id, "User profile")
        return profile_to_response(profile)

    async def list_profiles(self, db: AsyncSession, params: PageParams) -> Page[UserProfileResponse]:
        profiles, total = await user_profile_repository.get_paginated(db, params)
        return self._to_page(profiles, total, params)

    async def get_profiles_by_birth_date(
        self, db: AsyncSession, date_of_birth: date, params: PageParams
    ) -> Page[UserProfileResponse]:
        profiles, total = await user_profile_repository.get_by_birth_date(db, date_of_birth, params)
        return self._to_page(profiles, total, params)

    async def get_profiles_by_gender(
        self, db: AsyncSession, gender: Gender, params: PageParams
    ) -> Page[UserProfileResponse]:
        profiles, total = await user_profile_repository.get_by_gender(db, gender, params)
        return self._to_page(profiles, total, params)

    async def update_profile(
        self, db: AsyncSession, profile_id: UUID, data: UserProfileUpdate
    ) -> UserProfileResponse:
        """프로필을 부분 수정합니다. 나이 규칙은 스키마에서 재검증됩니다.

        Partially update a profile; the minimum age rule is re-checked by
        the request schema.

        Raises:
            NotFoundError: 프로필을 찾을 수 없을 때 (Profile not found)
        """
        profile: UserProfile = await get_or_404(db, user_profile_repository, profile_id, "User profile")
        update_data: dict[str, Any] = data.model_dump(exclude_none=True)
        profile = await user_profile_repository.update(db, profile, update_data)
        logger.info("User profile updated: id=%s fields=%s", profile.id, sorted(update_data))
        return profile_to_response(profile)

    async def delete_profile(self, db: AsyncSession, profile_id: UUID) -> None:
        """프로필과 그 소유 사용자를 함께 삭제합니다.

        Delete a profile together with its owning user account.
        """
        profile: UserProfile = await get_or_404(db, user_profile_repository, profile_id, "User profile")
        user: User = await get_or_404(db, user_repository, profile.user_id, "User")
        await user_repository.delete(db, user)
        logger.info("User profile deleted with its user: profile_id=%s user_id=%s", profile_id, user.id)


user_profile_service: UserProfileService = UserProfileService()
