"""Application settings."""

from functools import lru_cache
from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent / "data"


class Settings(BaseSettings):
    """fitcycle configuration, read from FITCYCLE_* environment variables or .env."""

    data_dir: Path = Field(default=DATA_DIR)
    db_filename: str = Field(default="fitcycle.db")
    log_level: str = Field(default="INFO")
    log_file: str | None = Field(default=None)
    stats_months: int = Field(default=6, ge=1, description="Months shown in monthly stats")
    progress_sessions: int = Field(
        default=10, ge=1, description="Completed sessions per workout in progress charts"
    )
    recent_days: int = Field(
        default=60, ge=1, description="Look-back window for recent sessions on the today view"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FITCYCLE_",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_filename


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings."""
    return Settings()
