"""
Configuration management for sqlite-statements.

Settings are read from environment variables (``SQLSTMT_`` prefix) and an
optional ``.env`` file using Pydantic BaseSettings.
"""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sqlite_statements.core.conflict import ConflictPolicy

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("SQLSTMT_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Builder settings with environment variable support.

    LOG_LEVEL is read without prefix so it can be shared with the host
    application; every other field uses the SQLSTMT_ prefix, e.g.
    SQLSTMT_LOG_SQL=true or SQLSTMT_DEFAULT_CONFLICT=replace.
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )
    log_sql: bool = Field(
        default=False,
        description="Include generated SQL text in statement_built log events",
    )
    log_to_file: bool = Field(
        default=False,
        description="Also write logs to a daily rotated file",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for rotated log files",
    )
    default_conflict: ConflictPolicy = Field(
        default=ConflictPolicy.NONE,
        description="Conflict policy used by StatementBuilder.insert when none is given",
    )

    model_config = SettingsConfigDict(
        env_prefix="SQLSTMT_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unsupported LOG_LEVEL: {value!r}")
        return level

    @field_validator("default_conflict", mode="before")
    @classmethod
    def parse_conflict(cls, value):
        return ConflictPolicy.coerce(value)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
