import logging

from linx.core.config import Settings
from linx.core.logging_config import configure_logging


def test_settings_defaults(monkeypatch):
    for name in ("APP_NAME", "PORT", "HOST", "DATABASE_URL"):
        monkeypatch.delenv(name, raising=False)

    s = Settings(_env_file=None)

    assert s.app_name == "linx"
    assert s.host == "0.0.0.0"
    assert s.port == 3000
    assert s.database_url.startswith("sqlite+aiosqlite://")


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://linx:linx@db:5432/linx")

    s = Settings(_env_file=None)

    assert s.port == 8080
    assert s.database_url == "postgresql+psycopg://linx:linx@db:5432/linx"


def test_configure_logging_sets_root_level():
    try:
        configure_logging("debug")
        assert logging.getLogger().level == logging.DEBUG
    finally:
        configure_logging("INFO")
