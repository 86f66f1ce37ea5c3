"""Configuration management for shroom."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError
from .logging_utils import LOG_LEVELS


class Settings(BaseSettings):
    """Application settings."""

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")

    # Interpreter Configuration
    report_exit_codes: bool = Field(default=True, description="Print nonzero exit codes after each command")
    prompt_suffix: str = Field(default="> ", description="Text printed after the working directory in the prompt")

    model_config = SettingsConfigDict(
        env_prefix="SHROOM_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return normalized


def get_settings() -> Settings:
    """Get application settings from the environment and an optional .env file."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"invalid settings: {exc}") from exc
