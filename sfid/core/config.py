import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sfid.utils.clock import DEFAULT_EPOCH


class Settings(BaseSettings):
    """Process-level SFID configuration, read from ``SFID_*`` variables."""

    MACHINE_ID: Optional[int] = Field(default=None, ge=0, le=1023)
    EPOCH: int = Field(default=DEFAULT_EPOCH, ge=0)
    WAIT_ON_OVERFLOW: bool = False
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="SFID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_settings() -> Settings:
    """Load settings from environment and .env file."""
    return Settings()
