from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration settings.

    Values are read from environment variables and optionally from a
    `.env` file. Environment variables take precedence over `.env` values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------
    # Application settings
    # ---------------------------------------------------------------------

    app_name: str = Field(
        default="linx",
        alias="APP_NAME",
        description="Application name displayed in logs and API documentation",
    )

    environment: str = Field(
        default="local",
        alias="ENVIRONMENT",
        description="Runtime environment (local, dev, prod)",
    )

    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    # ---------------------------------------------------------------------
    # Server settings
    # ---------------------------------------------------------------------

    host: str = Field(
        default="0.0.0.0",
        alias="HOST",
        description="Interface the HTTP server binds to",
    )

    port: int = Field(
        default=3000,
        alias="PORT",
        description="Port the HTTP server listens on",
    )

    # ---------------------------------------------------------------------
    # Database settings
    # ---------------------------------------------------------------------

    database_url: str = Field(
        default="sqlite+aiosqlite:///./linx.db",
        alias="DATABASE_URL",
        description="SQLAlchemy async connection URL (SQLite or PostgreSQL)",
    )


# Singleton settings instance
settings = Settings()
