"""Runtime configuration loaded from BINKIT_* environment variables."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from binkit.models.schemas import SizePolicy


class Settings(BaseSettings):
    """Settings for binkit, overridable via environment or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="BINKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    size_policy: SizePolicy = SizePolicy.REGULAR_FILES
    demo_path: Optional[str] = None

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        """Accept level names in any case."""
        return value.upper() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings instance."""
    return Settings()


def reset_settings() -> None:
    """Drop the cached settings (for testing)."""
    get_settings.cache_clear()
