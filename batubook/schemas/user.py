"""사용자 및 프로필 Pydantic 요청/응답 스키마 정의.

User and UserProfile Pydantic request/response schema definitions.
Password policy and profile validation (minimum age, field lengths)
live here so that invalid bodies are rejected with 400 before reaching a service.
"""

import re
from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator

from batubook.config import settings
from batubook.models.enums import Gender, Role

EMAIL_PATTERN: str = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
PASSWORD_SPECIAL_PATTERN: str = r"[!@#$%^&*()_+=\[\]{};:'\",<>./?~`|]"


def age_on(date_of_birth: date, today: date) -> int:
    """기준일 기준 만 나이를 계산합니다.

    Full years elapsed between ``date_of_birth`` and ``today``.
    """
    had_birthday = (today.month, today.day) >= (date_of_birth.month, date_of_birth.day)
    return today.year - date_of_birth.year - (0 if had_birthday else 1)


def check_minimum_age(value: date | None) -> date | None:
    if value is not None and age_on(value, date.today()) < settings.MIN_USER_AGE:
        raise ValueError(f"User must be at least {settings.MIN_USER_AGE} years old")
    return value


def check_not_blank(value: str | None) -> str | None:
    if value is not None and not value.strip():
        raise ValueError("must not be blank")
    return value


def check_password_policy(value: str | None) -> str | None:
    """비밀번호 정책을 확인합니다.

    8-256 characters, at least one lowercase letter, uppercase letter,
    digit and special character, no leading or trailing whitespace.
    Missing or blank passwords pass through; ``hash_password`` rejects them.
    """
    if value is None or not value.strip():
        return value
    if not 8 <= len(value) <= 256:
        raise ValueError("Password must be between 8 and 256 characters.")
    if value != value.strip():
        raise ValueError("Password cannot start or end with a space.")
    if not re.search(r"[a-z]", value):
        raise ValueError("Password must contain at least one lowercase letter.")
    if not re.search(r"[A-Z]", value):
        raise ValueError("Password must contain at least one uppercase letter.")
    if not re.search(r"\d", value):
        raise ValueError("Password must contain at least one number.")
    if not re.search(PASSWORD_SPECIAL_PATTERN, value):
        raise ValueError("Password must contain at least one special character.")
    return value


# === 사용자 프로필 (UserProfile) 스키마 ===

class UserProfileCreate(BaseModel):
    """사용자 프로필 생성 스키마 — 사용자 생성 요청에 포함됩니다.

    Profile body nested in a user creation request.

    Attributes:
        date_of_birth: 생년월일 (Birth date; user must meet the minimum age)
        gender: 성별 (Gender, default undisclosed)
        biography: 소개 (Biography, 1-256 chars, not blank)
        location: 위치 (Location, 2-64 chars, not blank)
    """

    profile_image_url: str | None = Field(None, max_length=512)  # 프로필 이미지 URL (Avatar URL, optional)
    date_of_birth: date  # 생년월일 (Birth date)
    gender: Gender = Gender.UNDISCLOSED  # 성별 (Gender)
    biography: str = Field(..., min_length=1, max_length=256)  # 소개 (Biography)
    location: str = Field(..., min_length=2, max_length=64)  # 위치 (Location)
    occupation: str | None = Field(None, min_length=2, max_length=64)  # 직업 (Occupation, optional)
    education: str | None = Field(None, min_length=2, max_length=64)  # 학력 (Education, optional)
    interests: str | None = Field(None, max_length=512)  # 관심사 (Interests, optional)

    @field_validator("date_of_birth")
    @classmethod
    def validate_age(cls, value: date) -> date:
        return check_minimum_age(value)

    @field_validator("biography", "location")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        return check_not_blank(value)


class UserProfileUpdate(BaseModel):
    """사용자 프로필 수정 스키마 (부분 업데이트).

    Profile update schema (partial update). Omitted fields are unchanged.
    """

    profile_image_url: str | None = Field(None, max_length=512)
    date_of_birth: date | None = None
    gender: Gender | None = None
    biography: str | None = Field(None, min_length=1, max_length=256)
    location: str | None = Field(None, min_length=2, max_length=64)
    occupation: str | None = Field(None, min_length=2, max_length=64)
    education: str | None = Field(None, min_length=2, max_length=64)
    interests: str | None = Field(None, max_length=512)

    @field_validator("date_of_birth")
    @classmethod
    def validate_age(cls, value: date | None) -> date | None:
        return check_minimum_age(value)

    @field_validator("biography", "location")
    @classmethod
    def validate_not_blank(cls, value: str | None) -> str | None:
        return check_not_blank(value)


class UserProfileResponse(BaseModel):
    """사용자 프로필 응답 스키마.

    User profile response schema returned from API.
    """

    id: str  # 프로필 UUID 문자열 (Profile UUID as string)
    user_id: str  # 소유 사용자 UUID 문자열 (Owning user UUID as string)
    profile_image_url: str | None
    date_of_birth: date
    gender: Gender
    biography: str
    location: str
    occupation: str | None
    education: str | None
    interests: str | None
    created_at: datetime  # 생성 일시 UTC (Creation timestamp)
    updated_at: datetime  # 수정 일시 UTC (Last update timestamp)


# === 사용자 (User) 스키마 ===

class UserCreate(BaseModel):
    """사용자 생성 요청 스키마.

    User creation request schema. The profile is required; its absence is
    reported by the service as "User profile is required." so the message
    matches the rest of the API.

    Attributes:
        username: 사용자명 (3-50 chars, unique)
        email: 이메일 (Unique email address)
        password: 평문 비밀번호 (Plain password, 8-256 chars with mixed classes)
        role: 역할 (Role, default user)
        profile: 프로필 (Nested profile)
    """

    username: str = Field(..., min_length=3, max_length=50)  # 사용자명 (Username)
    email: str = Field(..., pattern=EMAIL_PATTERN, max_length=255)  # 이메일 (Email)
    password: str | None = None  # 평문 비밀번호 — 서비스에서 검증 (Plain password, checked by service)
    role: Role = Role.USER  # 역할 (Role)
    profile: UserProfileCreate | None = None  # 프로필 — 필수 (Profile, required)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str | None) -> str | None:
        return check_password_policy(value)


class UserUpdate(BaseModel):
    """사용자 수정 요청 스키마 (부분 업데이트).

    User update request schema (partial update).
    A new password is re-hashed; nested profile fields are merged.
    """

    username: str | None = Field(None, min_length=3, max_length=50)
    email: str | None = Field(None, pattern=EMAIL_PATTERN, max_length=255)
    password: str | None = None
    role: Role | None = None
    profile: UserProfileUpdate | None = None

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str | None) -> str | None:
        return check_password_policy(value)


class UserResponse(BaseModel):
    """사용자 응답 스키마 — 비밀번호 해시는 포함하지 않습니다.

    User response schema. The password hash is never returned.
    """

    id: str  # 사용자 UUID 문자열 (User UUID as string)
    username: str  # 사용자명 (Username)
    email: str  # 이메일 (Email)
    role: Role  # 역할 (Role)
    profile: UserProfileResponse | None  # 프로필 (Profile)
    created_at: datetime  # 생성 일시 UTC (Creation timestamp)
    updated_at: datetime  # 수정 일시 UTC (Last update timestamp)
