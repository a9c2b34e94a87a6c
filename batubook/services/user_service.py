"""사용자 서비스 — 사용자 계정 비즈니스 로직.

User Service — Business logic for user accounts.
A user is always created together with its profile, passwords are only
stored as bcrypt hashes, and usernames/emails are unique ignoring case.
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from batubook.models.enums import Role
from batubook.models.user import User, UserProfile
from batubook.repositories.user_repository import user_repository
from batubook.schemas.user import UserCreate, UserProfileResponse, UserResponse, UserUpdate
from batubook.services.common import get_or_404
from batubook.utils.exceptions import BadRequestError
from batubook.utils.pagination import Page, PageParams
from batubook.utils.password import hash_password, verify_password

logger = logging.getLogger(__name__)


def profile_to_response(profile: UserProfile) -> UserProfileResponse:
    """프로필 모델을 응답 스키마로 변환합니다.

    Convert a UserProfile model instance to its response schema.
    """
    return UserProfileResponse(
        id=str(profile.id),
        user_id=str(profile.user_id),
        profile_image_url=profile.profile_image_url,
        date_of_birth=profile.date_of_birth,
        gender=profile.gender,
        biography=profile.biography,
        location=profile.location,
        occupation=profile.occupation,
        education=profile.education,
        interests=profile.interests,
        created_at=profile.created_at,
        updated_at=profile.updated_at,
    )


class UserService:
    """사용자 관련 비즈니스 로직을 처리하는 서비스.

    Service handling user business logic.
    """

    def _to_response(self, user: User) -> UserResponse:
        return UserResponse(
            id=str(user.id),
            username=user.username,
            email=user.email,
            role=user.role,
            profile=profile_to_response(user.profile) if user.profile is not None else None,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _to_page(self, users: Any, total: int, params: PageParams) -> Page[UserResponse]:
        return Page.build([self._to_response(u) for u in users], total, params)

    async def _check_unique(
        self,
        db: AsyncSession,
        username: str | None,
        email: str | None,
        exclude_id: UUID | None = None,
    ) -> None:
        """사용자명/이메일 중복을 확인합니다.

        Reject a username or email already used by another account.

        Raises:
            BadRequestError: 사용자명 또는 이메일 중복 (Username or email taken)
        """
        if username is not None and await user_repository.username_taken(db, username, exclude_id):
            raise BadRequestError(f"Username is already taken: {username}")
        if email is not None and await user_repository.email_taken(db, email, exclude_id):
            raise BadRequestError(f"Email is already registered: {email}")

    async def create_user(self, db: AsyncSession, data: UserCreate) -> UserResponse:
        """사용자와 프로필을 하나의 트랜잭션에서 생성합니다.

        Create a user together with its profile in the same transaction.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 사용자 생성 데이터 (User creation data, nested profile required)

        Returns:
            UserResponse: 생성된 사용자 응답 (Created user response)

        Raises:
            BadRequestError: 프로필 누락, 빈 비밀번호, 사용자명/이메일 중복
                             (Missing profile, blank password, duplicate username/email)
        """
        if data.profile is None:
            raise BadRequestError("User profile is required.")
        password_hash: str = hash_password(data.password)
        await self._check_unique(db, data.username, data.email)

        user: User = await user_repository.create(
            db,
            {
                "username": data.username,
                "email": data.email,
                "password_hash": password_hash,
                "role": data.role,
                "profile": UserProfile(**data.profile.model_dump()),
            },
        )
        logger.info("User created: id=%s username=%s", user.id, user.username)
        return self._to_response(user)

    async def get_user(self, db: AsyncSession, user_id: UUID) -> UserResponse:
        user: User = await get_or_404(db, user_repository, user_id, "User")
        return self._to_response(user)

    async def list_users(self, db: AsyncSession, params: PageParams) -> Page[UserResponse]:
        users, total = await user_repository.get_paginated(db, params)
        return self._to_page(users, total, params)

    async def get_users_by_role(self, db: AsyncSession, role: Role, params: PageParams) -> Page[UserResponse]:
        users, total = await user_repository.get_by_role(db, role, params)
        return self._to_page(users, total, params)

    async def get_users_by_username_and_email(
        self, db: AsyncSession, username: str, email: str, params: PageParams
    ) -> Page[UserResponse]:
        """사용자명과 이메일이 모두 일치하는 사용자를 조회합니다.

        Users matching both username and email, ignoring case.

        Raises:
            BadRequestError: 사용자명 또는 이메일이 비어 있을 때 (Blank username or email)
        """
        if not username.strip() or not email.strip():
            raise BadRequestError("Both username and email are required.")
        users, total = await user_repository.get_by_username_and_email(
            db, username.strip(), email.strip(), params
        )
        return self._to_page(users, total, params)

    async def search_users(self, db: AsyncSession, term: str, params: PageParams) -> Page[UserResponse]:
        if not term.strip():
            raise BadRequestError("Search term must not be blank.")
        users, total = await user_repository.search(db, term.strip(), params)
        return self._to_page(users, total, params)

    async def update_user(self, db: AsyncSession, user_id: UUID, data: UserUpdate) -> UserResponse:
        """사용자 정보를 부분 수정합니다.

        Partially update a user. A changed password is re-hashed, uniqueness
        is re-checked, and nested profile fields are merged into the existing
        profile (or create one when the user has none).

        Raises:
            NotFoundError: 사용자를 찾을 수 없을 때 (User not found)
            BadRequestError: 중복, 빈 비밀번호, 불완전한 새 프로필
                             (Duplicate, blank password, incomplete new profile)
        """
        user: User = await get_or_404(db, user_repository, user_id, "User")
        update_data: dict[str, Any] = data.model_dump(exclude_none=True, exclude={"password", "profile"})

        changed_username = update_data.get("username")
        changed_email = update_data.get("email")
        if changed_username is not None and changed_username.lower() == user.username.lower():
            changed_username = None
        if changed_email is not None and changed_email.lower() == user.email.lower():
            changed_email = None
        await self._check_unique(db, changed_username, changed_email, exclude_id=user.id)

        if data.password is not None and not (
            data.password.strip() and verify_password(data.password, user.password_hash)
        ):
            update_data["password_hash"] = hash_password(data.password)

        if data.profile is not None:
            profile_data: dict[str, Any] = data.profile.model_dump(exclude_none=True)
            if user.profile is None:
                if not {"date_of_birth", "biography", "location"} <= profile_data.keys():
                    raise BadRequestError("User profile is required.")
                user.profile = UserProfile(**profile_data)
            else:
                for field, value in profile_data.items():
                    setattr(user.profile, field, value)

        user = await user_repository.update(db, user, update_data)
        logger.info("User updated: id=%s fields=%s", user.id, sorted(update_data))
        return self._to_response(user)

    async def delete_user(self, db: AsyncSession, user_id: UUID) -> None:
        """사용자와 소유한 모든 데이터를 삭제합니다.

        Delete a user; profile and owned content cascade.
        """
        user: User = await get_or_404(db, user_repository, user_id, "User")
        await user_repository.delete(db, user)
        logger.info("User deleted: id=%s", user_id)


# 모듈 레벨 싱글턴 인스턴스 — Module-level singleton instance
user_service: UserService = UserService()
