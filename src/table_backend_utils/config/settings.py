"""
Configuration management for table-backend-utils.

Settings are loaded from environment variables (``TBU_`` prefix) or an
optional ``.env`` file using Pydantic BaseSettings. None of the settings
influence the SQL emitted by the query builders; they only drive the
ambient concerns (logging, default dialect selection in the factories).
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("TBU_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Library settings with environment variable support.

    Environment variables are read with the TBU_ prefix, e.g. TBU_LOG_LEVEL
    overrides LOG_LEVEL and TBU_DEFAULT_DIALECT overrides default_dialect.
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (uppercase)",
    )
    LOG_TO_FILE: bool = Field(
        default=False,
        description="Also write logs to a daily rotated file",
    )
    LOG_FILE_DIR: str = Field(
        default="logs",
        description="Directory for log files when LOG_TO_FILE is enabled",
    )

    default_dialect: Literal["synapse", "teradata", "exasol", "snowflake"] = Field(
        default="synapse",
        description="Dialect used by the factories when none is given",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unsupported log level: {value}")
        return level

    model_config = SettingsConfigDict(
        env_prefix="TBU_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
