"""사용자 관련 SQLAlchemy ORM 모델 정의.

User-related SQLAlchemy ORM model definitions.

Tables:
    - users: 계정 (Accounts with bcrypt password hashes)
    - user_profiles: 사용자당 하나의 프로필 (Exactly one profile per user)
"""

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, Enum as SAEnum, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from batubook.database import Base
from batubook.models.enums import Gender, Role


class User(Base):
    """사용자 계정 모델.

    User account model. Owns exactly one UserProfile, which is created in
    the same transaction and removed together with the account.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        username: 사용자명, 고유 (Unique username, 3-50 chars)
        email: 이메일, 고유 (Unique email address)
        password_hash: bcrypt 해시 (Bcrypt hashed password)
        role: 역할 (Role: USER or ADMIN)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)

    Relationships:
        profile: 사용자 프로필 (One-to-one profile, cascade delete)
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 사용자명 — Unique login name
    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    # 이메일 — Unique email address
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    # 비밀번호 해시 — Bcrypt hash, never the plain password
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[Role] = mapped_column(
        SAEnum(Role, native_enum=False, length=32), nullable=False, default=Role.USER
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # selectin 로딩 — 비동기 세션에서 지연 로딩 방지 (Eager load; async sessions cannot lazy load)
    profile: Mapped["UserProfile | None"] = relationship(
        back_populates="user",
        uselist=False,
        lazy="selectin",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class UserProfile(Base):
    """사용자 프로필 모델.

    User profile model (one row per user).

    Attributes:
        user_id: 소유 사용자 FK, 고유 (Owning user, unique)
        date_of_birth: 생년월일 (Birth date; minimum age enforced by the schema)
        gender: 성별 (Gender)
        biography: 소개 (Biography, required)
        location: 위치 (Location, not blank)
    """

    __tablename__ = "user_profiles"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    profile_image_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    gender: Mapped[Gender] = mapped_column(
        SAEnum(Gender, native_enum=False, length=32), nullable=False, default=Gender.UNDISCLOSED
    )
    biography: Mapped[str] = mapped_column(String(256), nullable=False)
    location: Mapped[str] = mapped_column(String(64), nullable=False)
    occupation: Mapped[str | None] = mapped_column(String(64), nullable=True)
    education: Mapped[str | None] = mapped_column(String(64), nullable=True)
    interests: Mapped[str | None] = mapped_column(String(512), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    user: Mapped["User"] = relationship(back_populates="profile")
