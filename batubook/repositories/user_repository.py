"""사용자 레포지토리 — 사용자 및 프로필 쿼리.

User Repository — Queries for users and their profiles.
"""

from datetime import date
from typing import Sequence
from uuid import UUID

from sqlalchemy import func, or_
from sqlalchemy.ext.asyncio import AsyncSession

from batubook.models.enums import Gender, Role
from batubook.models.user import User, UserProfile
from batubook.repositories.base import LIKE_ESCAPE, BaseRepository, contains_pattern
from batubook.utils.pagination import PageParams


class UserRepository(BaseRepository[User]):
    """사용자 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the users table.
    """

    def __init__(self) -> None:
        super().__init__(User)

    async def username_taken(self, db: AsyncSession, username: str, exclude_id: UUID | None = None) -> bool:
        """사용자명이 이미 사용 중인지 확인합니다 (대소문자 무시).

        Check whether the username is used by another account, ignoring case.
        """
        criteria = [func.lower(User.username) == username.lower()]
        if exclude_id is not None:
            criteria.append(User.id != exclude_id)
        return await self.exists(db, *criteria)

    async def email_taken(self, db: AsyncSession, email: str, exclude_id: UUID | None = None) -> bool:
        """이메일이 이미 사용 중인지 확인합니다 (대소문자 무시).

        Check whether the email is used by another account, ignoring case.
        """
        criteria = [func.lower(User.email) == email.lower()]
        if exclude_id is not None:
            criteria.append(User.id != exclude_id)
        return await self.exists(db, *criteria)

    async def get_by_role(self, db: AsyncSession, role: Role, params: PageParams) -> tuple[Sequence[User], int]:
        return await self.get_paginated(db, params, User.role == role)

    async def get_by_username_and_email(
        self, db: AsyncSession, username: str, email: str, params: PageParams
    ) -> tuple[Sequence[User], int]:
        """사용자명과 이메일이 모두 일치하는 사용자를 조회합니다 (대소문자 무시).

        Users whose username and email both match, ignoring case.
        """
        return await self.get_paginated(
            db,
            params,
            func.lower(User.username) == username.lower(),
            func.lower(User.email) == email.lower(),
        )

    async def search(self, db: AsyncSession, term: str, params: PageParams) -> tuple[Sequence[User], int]:
        """사용자명 또는 이메일에 검색어가 포함된 사용자를 조회합니다.

        Case-insensitive substring search over username or email.
        """
        pattern = contains_pattern(term)
        return await self.get_paginated(
            db,
            params,
            or_(
                func.lower(User.username).like(pattern, escape=LIKE_ESCAPE),
                func.lower(User.email).like(pattern, escape=LIKE_ESCAPE),
            ),
        )


class UserProfileRepository(BaseRepository[UserProfile]):
    """사용자 프로필 테이블 레포지토리.

    Repository handling database queries for the user_profiles table.
    """

    def __init__(self) -> None:
        super().__init__(UserProfile)

    async def get_by_birth_date(
        self, db: AsyncSession, date_of_birth: date, params: PageParams
    ) -> tuple[Sequence[UserProfile], int]:
        return await self.get_paginated(db, params, UserProfile.date_of_birth == date_of_birth)

    async def get_by_gender(
        self, db: AsyncSession, gender: Gender, params: PageParams
    ) -> tuple[Sequence[UserProfile], int]:
        return await self.get_paginated(db, params, UserProfile.gender == gender)


user_repository: UserRepository = UserRepository()
user_profile_repository: UserProfileRepository = UserProfileRepository()
