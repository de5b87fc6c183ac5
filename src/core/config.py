"""Configuration management for choreshare."""

from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import tz
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Local-date semantics
    timezone: str | None = Field(
        default=None,
        description="IANA timezone used to derive calendar dates (defaults to the system local timezone)",
    )

    # Pydantic Logfire Configuration (optional)
    logfire_token: str | None = Field(default=None, description="Pydantic Logfire token for observability")
    environment: str = Field(default="production", description="Deployment environment reported to Logfire")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str | None) -> str | None:
        """Validate the timezone is a known IANA name."""
        if v is None or not v.strip():
            return None
        try:
            ZoneInfo(v.strip())
        except (ZoneInfoNotFoundError, ValueError) as e:
            msg = f"Unknown timezone: {v}"
            raise ValueError(msg) from e
        return v.strip()

    def local_timezone(self) -> tzinfo:
        """Return the timezone calendar dates are computed in.

        Without a configured zone this is the system zone with its DST rules,
        so a January timestamp converts with the winter offset even in summer.
        """
        if self.timezone:
            return ZoneInfo(self.timezone)
        return tz.tzlocal()


# Application Constants
class Constants:
    """Application-wide constants."""

    # Recurrence Resolver
    WEEKLY_SCAN_DAYS: int = 14  # Two full weeks, every weekday seen twice
    DEFAULT_RECURRENCE_INTERVAL: int = 1
    MONTHLY_DUE_DAY: int = 1  # Monthly tasks are due on the 1st

    # Weekday indices (0=Sunday, 6=Saturday)
    MIN_WEEKDAY_INDEX: int = 0
    MAX_WEEKDAY_INDEX: int = 6

    # Frequency Advisor
    LARGE_HOUSEHOLD_MEMBER_COUNT: int = 4
    MANY_PETS_THRESHOLD: int = 3


def get_settings() -> Settings:
    """Get application settings (singleton pattern)."""
    return Settings()


# Global settings instance
settings = get_settings()
constants = Constants()
