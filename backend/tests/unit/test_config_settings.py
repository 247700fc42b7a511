"""Unit tests for application settings configuration."""

from pathlib import Path

from sqlalchemy.pool import StaticPool

from crud_backend.config import Settings
from crud_backend.infrastructure.database.session import _engine_options, _get_async_url

def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized

def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("JWT_ACCESS_TOKEN_EXPIRE_MINUTES", "30")
    monkeypatch.setenv("LOG_LEVEL_SQL", "DEBUG")
    settings = Settings()
    assert settings.jwt_access_token_expire_minutes == 30
    assert settings.log_level_sql == "DEBUG"
    assert settings.jwt_algorithm == "HS256"

def test_sync_urls_are_converted_to_async_drivers():
    assert _get_async_url("sqlite:///./app.db") == "sqlite+aiosqlite:///./app.db"
    assert _get_async_url("postgresql://u:p@h/db") == "postgresql+asyncpg://u:p@h/db"
    assert _get_async_url("postgresql+asyncpg://u:p@h/db") == "postgresql+asyncpg://u:p@h/db"

def test_in_memory_sqlite_shares_one_connection():
    assert _engine_options("sqlite+aiosqlite:///:memory:")["poolclass"] is StaticPool
    assert "poolclass" not in _engine_options("sqlite+aiosqlite:///./app.db")
    assert _engine_options("postgresql+asyncpg://u:p@h/db") == {"pool_pre_ping": True}
