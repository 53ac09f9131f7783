"""12-factor configuration adapter using environment variables."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ptv_departures.domain.models import TransportMode


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # PTV API credentials (issued by PTV, never logged)
    dev_id: str = Field(default="", description="PTV API developer id (DEV_ID)")
    api_key: str = Field(default="", description="PTV API signing key (API_KEY)")

    # PTV API configuration
    ptv_base_url: str = Field(
        default="https://timetableapi.ptv.vic.gov.au",
        description="Base URL of the PTV timetable API",
    )
    ptv_api_timeout: int = Field(default=10, description="Timeout for PTV API requests in seconds")

    # Query defaults
    departures_limit: int = Field(
        default=2, description="Number of departures to return (next plus lookahead)"
    )
    default_mode: str = Field(
        default="train", description="Transport mode used when a request does not name one"
    )

    # Display configuration
    timezone: str = Field(
        default="Australia/Melbourne",
        description="Timezone for displaying departure times (IANA timezone name)",
    )
    clock_format: str = Field(default="12h", description="Clock format: '12h' or '24h'")

    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("clock_format")
    @classmethod
    def validate_clock_format(cls, v: str) -> str:
        """Validate clock format is either '12h' or '24h'."""
        if v.lower() not in ("12h", "24h"):
            raise ValueError("clock_format must be either '12h' or '24h'")
        return v.lower()

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be an IANA timezone name, got {v!r}") from e
        return v

    @field_validator("departures_limit")
    @classmethod
    def validate_departures_limit(cls, v: int) -> int:
        """Validate at least one departure is requested."""
        if v < 1:
            raise ValueError("departures_limit must be at least 1")
        return v

    @field_validator("default_mode")
    @classmethod
    def validate_default_mode(cls, v: str) -> str:
        """Validate the default mode names a known transport mode."""
        TransportMode.from_name(v)
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return v.upper()

    @property
    def default_transport_mode(self) -> TransportMode:
        return TransportMode.from_name(self.default_mode)

    @property
    def has_credentials(self) -> bool:
        return bool(self.dev_id and self.api_key)
