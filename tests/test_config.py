"""Settings — URL normalization and environment overrides."""

from member_api.config import Settings
from member_api.models.member import Member


def test_postgres_url_converted_to_asyncpg():
    s = Settings(database_url="postgresql://u:p@host:5432/db")
    assert s.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_async_url_left_untouched():
    s = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert s.database_url == "sqlite+aiosqlite:///:memory:"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MEMBER_ID_MAX_LENGTH", "12")
    monkeypatch.setenv("LOG_REQUESTS", "false")
    s = Settings()
    assert s.member_id_max_length == 12
    assert s.log_requests is False


def test_default_id_limit_matches_member_id_column(monkeypatch):
    monkeypatch.delenv("MEMBER_ID_MAX_LENGTH", raising=False)
    column = Member.__table__.c.member_id
    assert Settings().member_id_max_length == column.type.length
