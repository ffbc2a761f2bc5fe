"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MEDCALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application environment
    env: Literal["dev", "test", "staging", "prod"] = "dev"

    # Version stamped into submission bundles
    app_version: str = "2.0.0"

    # Logging
    log_level: str = "INFO"

    # SCORE2 lookup table; risk is unknown while unset
    score2_table_path: Path | None = None

    # Submission endpoint; nothing is sent unless both are set
    api_url: str | None = None
    public_key_url: str | None = None

    @property
    def submission_enabled(self) -> bool:
        """Check if results should be sent to the submission server."""
        return bool(self.api_url and self.public_key_url)

    @property
    def is_dev(self) -> bool:
        """Check if running in development mode."""
        return self.env == "dev"

    @property
    def is_prod(self) -> bool:
        """Check if running in production mode."""
        return self.env == "prod"

    @property
    def is_test(self) -> bool:
        """Check if running in test mode."""
        return self.env == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
