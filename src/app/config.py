"""Application configuration with structured settings groups."""
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConnectionSettings(BaseModel):
    """
    Startup connection retry settings.

    The application tries max_attempts times to reach the database, waiting
    retry_delay_seconds between attempts, before it gives up and starts
    without a store connection.
    """

    max_attempts: int = 5
    retry_delay_seconds: float = 5.0


class Settings(BaseSettings):
    """
    Application settings.

    Environment variables use double underscore as delimiter for nested values.
    Example: DATABASE_URL=postgresql+asyncpg://user:pass@db/lashdb, CONNECTION__MAX_ATTEMPTS=10
    """

    # Application metadata
    app_name: str = "Lash Studio API"
    app_version: str = "1.0.0"

    # Database connection string
    database_url: str = "postgresql+asyncpg://localhost/lashdb"

    connection: ConnectionSettings = ConnectionSettings()

    # Directory holding the front-end pages; served at "/" when set
    static_dir: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

