"""테스트 인프라 — 인메모리 SQLite DB, 세션 오버라이드, httpx 클라이언트 픽스처.

Test infrastructure — Database engine, session override and httpx client
fixtures. Defaults to an in-memory SQLite database (aiosqlite); set
``TEST_DATABASE_URL`` to run the suite against PostgreSQL instead.
The schema is created fresh for every test.
"""

import os
from collections.abc import AsyncGenerator
from typing import Any

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from batubook.database import Base, get_db
from batubook.main import app
from batubook import models  # noqa: F401 — register all models with metadata

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite://")


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    # SQLite 는 기본적으로 FK/CASCADE 를 적용하지 않음
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션 팩토리, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 테스트마다 스키마를 새로 만듭니다."""
    if TEST_DATABASE_URL.startswith("sqlite"):
        eng = create_async_engine(
            TEST_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        event.listen(eng.sync_engine, "connect", _enable_sqlite_foreign_keys)
    else:
        eng = create_async_engine(TEST_DATABASE_URL, pool_pre_ping=True)

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def client(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — 요청마다 테스트 DB 세션을 사용합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 요청 본문 헬퍼
# ---------------------------------------------------------------------------
def user_payload(username: str = "reader", email: str | None = None, **overrides: Any) -> dict[str, Any]:
    """사용자 생성 요청 본문을 만듭니다."""
    payload: dict[str, Any] = {
        "username": username,
        "email": email or f"{username}@example.com",
        "password": "Secret#123",
        "profile": {
            "date_of_birth": "1995-05-17",
            "gender": "female",
            "biography": "Reads a chapter every night.",
            "location": "Istanbul",
        },
    }
    payload.update(overrides)
    return payload


def book_payload(isbn: str = "9780451524935", **overrides: Any) -> dict[str, Any]:
    """도서 생성 요청 본문을 만듭니다."""
    payload: dict[str, Any] = {
        "title": "1984",
        "author": "George Orwell",
        "isbn": isbn,
        "page_count": 328,
        "publish_date": "1949-06-08",
        "genre": "dystopia",
    }
    payload.update(overrides)
    return payload


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: API 를 통해 테스트 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def user(client: AsyncClient) -> dict[str, Any]:
    """테스트 사용자를 생성합니다."""
    res = await client.post("/api/users/", json=user_payload("reader"))
    assert res.status_code == 201, res.text
    return res.json()


@pytest_asyncio.fixture
async def other_user(client: AsyncClient) -> dict[str, Any]:
    """두 번째 테스트 사용자를 생성합니다."""
    res = await client.post("/api/users/", json=user_payload("writer"))
    assert res.status_code == 201, res.text
    return res.json()


@pytest_asyncio.fixture
async def book(client: AsyncClient) -> dict[str, Any]:
    """테스트 도서를 생성합니다."""
    res = await client.post("/api/books/", json=book_payload())
    assert res.status_code == 201, res.text
    return res.json()


@pytest_asyncio.fixture
async def interaction(client: AsyncClient, user, book) -> dict[str, Any]:
    """읽은 도서 상호작용을 생성합니다."""
    res = await client.post("/api/book-interactions/", json={
        "user_id": user["id"],
        "book_id": book["id"],
        "description": "Finished in a weekend",
        "is_read": True,
        "is_liked": True,
    })
    assert res.status_code == 201, res.text
    return res.json()


@pytest_asyncio.fixture
async def review(client: AsyncClient, user, book) -> dict[str, Any]:
    """테스트 리뷰를 생성합니다."""
    res = await client.post("/api/reviews/", json={
        "user_id": user["id"],
        "book_id": book["id"],
        "review_text": "Chilling and still relevant.",
        "rating": 4.5,
    })
    assert res.status_code == 201, res.text
    return res.json()


@pytest_asyncio.fixture
async def quote(client: AsyncClient, user, book) -> dict[str, Any]:
    """테스트 인용구를 생성합니다."""
    res = await client.post("/api/quotes/", json={
        "user_id": user["id"],
        "book_id": book["id"],
        "quote_text": "Big Brother is watching you.",
    })
    assert res.status_code == 201, res.text
    return res.json()
