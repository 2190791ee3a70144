"""
Configuration management for the Jira Cloud client.

Uses Pydantic BaseSettings for type-safe configuration loading from environment variables.
"""

import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jira_cloud.utils.exceptions import ConfigurationException

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Jira API Configuration
    jira_base_url: str = Field(..., description="Base URL of the Jira instance, e.g. https://your-domain.atlassian.net")
    jira_username: Optional[str] = Field(default=None, description="Account email used for Basic auth")
    jira_api_token: Optional[str] = Field(default=None, description="API token used for Basic auth")
    jira_timeout: float = Field(default=30.0, description="Request timeout in seconds")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="text", description="Log format: 'text' or 'json'")
    log_file: Optional[str] = Field(default=None, description="Optional rotating log file path")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("jira_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL uses http(s)."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("jira_base_url must start with http:// or https://")
        return v

    @field_validator("jira_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("jira_timeout must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format is either 'text' or 'json'."""
        v_lower = v.lower()
        if v_lower not in ["text", "json"]:
            raise ValueError("log_format must be either 'text' or 'json'")
        return v_lower

    def validate_credentials(self) -> None:
        """Validate username and API token are configured together."""
        if bool(self.jira_username) != bool(self.jira_api_token):
            raise ValueError("JIRA_USERNAME and JIRA_API_TOKEN must be set together")


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns:
        Settings instance

    Raises:
        ConfigurationException: If required configuration is missing or invalid
    """
    global _settings

    if _settings is None:
        try:
            settings = Settings()
            settings.validate_credentials()
        except ValueError as e:
            raise ConfigurationException(f"Configuration error: {e}") from e

        _settings = settings
        logger.debug(f"Configuration loaded: Jira URL {_settings.jira_base_url}")

    return _settings


def reload_settings() -> Settings:
    """
    Reload settings (useful for testing).

    Returns:
        New Settings instance
    """
    global _settings
    _settings = None
    return get_settings()
