"""
Session configuration, read from SALESDESK_* environment variables or .env
"""
import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for a console session"""

    model_config = SettingsConfigDict(
        env_prefix="SALESDESK_",
        env_file=".env",
        extra="ignore",
    )

    # Input handling
    # strict: a malformed seller ID or quantity ends the session
    strict_numbers: bool = False
    # consecutive seller / product misses before giving up; 0 = never
    max_lookup_attempts: int = Field(default=5, ge=0)

    # Display
    currency_symbol: str = "$"
    decimal_places: int = Field(default=2, ge=0)

    # Logging (stderr)
    log_level: str = "WARNING"
    log_json: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level


def get_settings(**overrides) -> Settings:
    return Settings(**overrides)
