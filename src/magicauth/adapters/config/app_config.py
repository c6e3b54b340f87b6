"""12-factor configuration adapter using environment variables and optional TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://vault.magicauth.ca"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class AppConfig(BaseSettings):
    """MagicAuth client configuration following 12-factor principles.

    Values are read from ``MAGICAUTH_*`` environment variables or a ``.env``
    file. Pass an instance to the clients instead of mutating shared state.
    """

    model_config = SettingsConfigDict(
        env_prefix="MAGICAUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # MagicAuth API configuration
    api_url: str = Field(default=DEFAULT_API_URL, description="Base URL of the MagicAuth API")
    api_timeout: float = Field(
        default=10, description="Timeout for MagicAuth API requests in seconds"
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Log level for the CLI")

    # Optional TOML config file with [api] and [logging] sections
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file overriding API and logging settings",
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Validate the API URL is http(s) and strip any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("api_url must start with 'http://' or 'https://'")
        return v.rstrip("/")

    @field_validator("api_timeout")
    @classmethod
    def validate_api_timeout(cls, v: float) -> float:
        """Validate the timeout is positive."""
        if v <= 0:
            raise ValueError("api_timeout must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level is a standard logging level name."""
        if v.upper() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return v.upper()

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for ``logging.basicConfig``."""
        return logging.getLevelName(self.log_level)

    def load_toml_overrides(self) -> dict[str, Any]:
        """Load the TOML config file and apply its settings.

        Returns:
            The parsed TOML document (empty if no config file is set).

        Raises:
            FileNotFoundError: If the configured file does not exist.
            ValueError: If a setting in the file is invalid.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        api_config = toml_data.get("api", {})
        if "url" in api_config:
            self.api_url = self.validate_api_url(str(api_config["url"]))
        if "timeout" in api_config:
            self.api_timeout = self.validate_api_timeout(float(api_config["timeout"]))

        logging_config = toml_data.get("logging", {})
        if "level" in logging_config:
            self.log_level = self.validate_log_level(str(logging_config["level"]))

        return toml_data
