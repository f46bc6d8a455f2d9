"""
Configuration settings using Pydantic Settings.

Every value has a safe default so the engine imports without a .env file.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Logging (level of the "src" logger tree)
    app_log_level: str = Field("INFO", alias="APP_LOG_LEVEL")

    # Engine tracing (structlog debug wrapper on entry points)
    engine_trace_enabled: bool = Field(True, alias="ENGINE_TRACE_ENABLED")

    # Kill-feed classification
    multi_kill_window_ms: int = Field(
        10_000,
        alias="MULTI_KILL_WINDOW_MS",
        gt=0,
        description="Max gap between consecutive kills by one player to extend a multi-kill",
    )

    # Caller polling cadence (informational; the engine never schedules)
    live_poll_interval_seconds: int = Field(15, alias="LIVE_POLL_INTERVAL_SECONDS", gt=0)
    match_check_interval_seconds: int = Field(60, alias="MATCH_CHECK_INTERVAL_SECONDS", gt=0)


# Global settings instance - loaded from environment
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance.

    This function provides dependency injection support for settings.
    """
    return settings
