"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_conventions_dir() -> Path:
    """Directory holding the packaged convention config files."""
    # src/scitypes/core/config.py -> src/scitypes/conventions/
    return Path(__file__).resolve().parent.parent / "conventions"


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: SCITYPES_
    """

    model_config = SettingsConfigDict(
        env_prefix="SCITYPES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Conventions
    default_convention: str = Field(
        default="standard",
        description="Convention activated when the package is imported",
    )
    conventions_path: Path = Field(
        default_factory=_find_conventions_dir,
        description="Directory containing convention YAML files",
    )

    # Logging
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="console")  # 'json' or 'console'


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
