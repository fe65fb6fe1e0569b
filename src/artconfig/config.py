from pathlib import Path
from typing import Final

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS: Final = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env files."""

    # Application configuration
    app_name: str = Field(default="artconfig", description="Application name")
    version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=True, description="Enable debug mode")

    # Logging configuration
    log_level: str | None = Field(
        default=None, description="Log level override (defaults from debug mode)"
    )
    log_to_file: bool = Field(
        default=False, description="Force logging to file even in debug mode"
    )
    log_dir: Path = Field(default=Path("logs"), description="Directory for log files")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str | None:
        """Normalize the log level name and reject unknown levels."""
        if v is None:
            return v
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Log level must be one of {', '.join(VALID_LOG_LEVELS)}, got {v!r}"
            )
        return level

    # Pydantic Settings configuration
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.debug

    @computed_field  # type: ignore[prop-decorator]
    @property
    def effective_log_level(self) -> str:
        """Get the log level, defaulting to DEBUG in debug mode and INFO otherwise."""
        if self.log_level:
            return self.log_level
        return "DEBUG" if self.debug else "INFO"


# Global settings instance
settings: Final = Settings()
