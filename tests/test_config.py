"""설정 테스트.

Settings tests — defaults and environment overrides.
"""

from batubook.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("MIN_USER_AGE", raising=False)
    monkeypatch.delenv("MAX_PAGE_SIZE", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.MIN_USER_AGE == 18
    assert settings.MAX_PAGE_SIZE == 100
    assert settings.DATABASE_URL.startswith("postgresql+asyncpg://")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MIN_USER_AGE", "21")
    monkeypatch.setenv("CORS_ORIGINS", '["https://batubook.example"]')
    settings = Settings(_env_file=None)
    assert settings.MIN_USER_AGE == 21
    assert settings.CORS_ORIGINS == ["https://batubook.example"]
