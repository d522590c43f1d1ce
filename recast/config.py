"""Configuration management for recast."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from recast import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="RECAST_", extra="ignore"
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Origin feed fetching
    fetch_timeout_seconds: float = Field(default=15.0, gt=0)
    fetch_deadline_seconds: float = Field(default=60.0, gt=0)
    max_feed_bytes: int = Field(default=10 * 1024 * 1024, gt=0)  # 10 MiB
    follow_redirects: bool = True
    user_agent: str = f"recast/{__version__}"

    # Logging
    log_level: str = Field(
        default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$"
    )

    # Environment
    env: str = Field(default="dev", pattern="^(dev|prod)$")


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
