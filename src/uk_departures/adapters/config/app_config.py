"""12-factor configuration adapter using environment variables and TOML station files."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DARWIN_BASE_URL = (
    "https://api1.raildata.org.uk/1010-live-departure-board-dep1_2/LDBWS/api/20220120"
)


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Live Departure Boards (Darwin) API configuration
    darwin_api_token: str | None = Field(
        default=None, description="Access token for the Live Departure Boards API"
    )
    darwin_base_url: str = Field(
        default=DEFAULT_DARWIN_BASE_URL,
        description="Base URL of the Live Departure Boards JSON API",
    )
    darwin_api_timeout: int = Field(
        default=30, description="Timeout for Live Departure Boards requests in seconds"
    )
    board_rows: int = Field(default=15, description="Number of services to fetch per board")
    time_window_minutes: int = Field(
        default=120, description="How far ahead (in minutes) a board looks for services"
    )

    # Natural-language parser configuration
    ai_provider: str = Field(
        default="groq", description="LLM provider for natural-language queries: 'groq' or 'openrouter'"
    )
    groq_api_key: str | None = Field(default=None, description="API key for Groq")
    openrouter_api_key: str | None = Field(default=None, description="API key for OpenRouter")
    ai_model: str | None = Field(
        default=None, description="Override the provider's default chat model"
    )
    ai_timeout: int = Field(default=20, description="Timeout for LLM requests in seconds")

    # Station selection and display
    page_size: int = Field(default=20, description="Stations per page when listing the directory")
    candidate_limit: int = Field(
        default=10, description="Candidates shown when a natural-language station is ambiguous"
    )
    search_limit: int = Field(
        default=20, description="Candidates shown when a typed station name is ambiguous"
    )
    wide_layout: bool = Field(
        default=False, description="Use the wider board layout with longer operator names"
    )
    stations_file: str | None = Field(
        default=None,
        description="Optional TOML file with extra [[stations]] aliases (name, code)",
    )

    @field_validator("ai_provider")
    @classmethod
    def validate_ai_provider(cls, v: str) -> str:
        """Validate provider is either 'groq' or 'openrouter'."""
        if v.lower() not in ("groq", "openrouter"):
            raise ValueError("ai_provider must be either 'groq' or 'openrouter'")
        return v.lower()

    @field_validator("time_window_minutes")
    @classmethod
    def validate_time_window(cls, v: int) -> int:
        """Validate time window is within what the API accepts."""
        if not 0 <= v <= 120:
            raise ValueError("time_window_minutes must be between 0 and 120")
        return v

    @field_validator("page_size", "candidate_limit", "search_limit", "board_rows")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate counts are positive."""
        if v < 1:
            raise ValueError("value must be at least 1")
        return v

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a config that does not read the .env file."""
        return cls(_env_file=None, **overrides)

    @property
    def ai_api_key(self) -> str | None:
        """API key for the configured provider, falling back to the other one."""
        if self.ai_provider == "openrouter":
            return self.openrouter_api_key or self.groq_api_key
        return self.groq_api_key or self.openrouter_api_key

    def get_station_aliases(self) -> list[dict[str, Any]]:
        """Parse and return extra station aliases from the TOML stations file.

        Returns an empty list when no stations file is configured.
        """
        if not self.stations_file:
            return []

        stations_path = Path(self.stations_file)
        if not stations_path.exists():
            raise FileNotFoundError(f"Stations file not found: {stations_path}")

        with open(stations_path, "rb") as f:
            toml_data = tomllib.load(f)

        stations = toml_data.get("stations", [])
        if not isinstance(stations, list):
            raise ValueError("TOML config 'stations' must be a list")
        return [s for s in stations if isinstance(s, dict)]
