"""Configuration management using environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

if TYPE_CHECKING:
    from toss_vault.models.records import RecordThresholds

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Data Configuration
    data_dir: str = Field(default="data", description="Directory holding tosses/games/teams files")
    placeholder_teams: list[str] = Field(
        default=["Unknown"], description="Team identifiers excluded from aggregation"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Log format (json or console)")
    log_dir: str = Field(default="logs", description="Directory for log files")

    # Record floors
    min_tosses_for_pct: int = Field(
        default=50, ge=0, description="Tosses needed for toss win % records"
    )
    min_conversion_tosses: int = Field(
        default=20, ge=0, description="Toss wins with results needed for the conversion record"
    )
    min_rivalry_meetings: int = Field(
        default=5, ge=0, description="Meetings needed for rivalry records"
    )
    min_season_decisions: int = Field(
        default=10, ge=0, description="Tosses needed for season records"
    )
    min_opponent_breakdown_tosses: int = Field(
        default=3, ge=0, description="Toss wins per opponent needed in conversion breakdowns"
    )
    breakdown_limit: int = Field(default=10, ge=1, description="Rows kept in record breakdowns")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid option."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format is a valid option."""
        if v not in {"json", "console"}:
            raise ValueError("log_format must be 'json' or 'console'")
        return v

    def record_thresholds(self) -> RecordThresholds:
        """Build the record floors used by the records engine."""
        from toss_vault.models.records import RecordThresholds  # noqa: PLC0415

        return RecordThresholds(
            min_tosses_for_pct=self.min_tosses_for_pct,
            min_conversion_tosses=self.min_conversion_tosses,
            min_rivalry_meetings=self.min_rivalry_meetings,
            min_season_decisions=self.min_season_decisions,
            min_opponent_breakdown_tosses=self.min_opponent_breakdown_tosses,
            breakdown_limit=self.breakdown_limit,
        )

    class Config:
        """Pydantic configuration."""

        env_prefix = "TOSS_VAULT_"
        case_sensitive = False
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Application settings.
    """
    return Settings()


def ensure_directories() -> None:
    """
    Ensure all required directories exist.

    This creates the log directory if it doesn't exist.
    """
    settings = get_settings()
    Path(settings.log_dir).mkdir(parents=True, exist_ok=True)
