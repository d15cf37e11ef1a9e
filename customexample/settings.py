"""
Custom Example Settings - Environment configuration using Pydantic Settings.

Loads provider credentials and logging options from environment variables
and .env files. Values declared in the provider block always take precedence;
these settings are only the fallback consulted by the resolver.
"""

from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# Find project root (where .env file is located)
PROJECT_ROOT = Path(__file__).parent.parent

ENV_PREFIX = "CUSTOM_EXAMPLE_"


class ProviderSettings(BaseSettings):
    """
    Provider environment settings.

    Settings are loaded from:
    1. Environment variables (highest priority)
    2. .env file in project root
    3. Default values (lowest priority)
    """

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix=ENV_PREFIX,
    )

    username: str | None = Field(
        default=None,
        description="Remote store username (env: CUSTOM_EXAMPLE_USERNAME)",
    )

    password: SecretStr | None = Field(
        default=None,
        description="Remote store password (env: CUSTOM_EXAMPLE_PASSWORD)",
    )

    baseurl: str | None = Field(
        default=None,
        description="Base URL of the todo store (env: CUSTOM_EXAMPLE_BASEURL)",
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR) (env: CUSTOM_EXAMPLE_LOG_LEVEL)",
    )

    def lookup(self, variable: str) -> str | None:
        """
        Return the value of one prefixed environment variable.

        Args:
            variable: Full variable name, e.g. CUSTOM_EXAMPLE_BASEURL

        Returns:
            The configured value, or None when the variable is unset
            or not a provider setting
        """
        name = variable.lower()
        prefix = ENV_PREFIX.lower()
        if not name.startswith(prefix):
            return None
        value = getattr(self, name[len(prefix):], None)
        if isinstance(value, SecretStr):
            return value.get_secret_value()
        return value


# Global settings instance
_settings: ProviderSettings | None = None


def get_settings() -> ProviderSettings:
    """
    Get the global settings instance.

    Creates the settings instance on first call, then returns cached instance.

    Returns:
        ProviderSettings instance
    """
    global _settings
    if _settings is None:
        _settings = ProviderSettings()
    return _settings


def reload_settings() -> ProviderSettings:
    """
    Reload settings from environment/files.

    Useful for testing or when .env file changes.

    Returns:
        Fresh ProviderSettings instance
    """
    global _settings
    _settings = ProviderSettings()
    return _settings


def env_lookup(variable: str) -> str | None:
    """Look up a provider environment variable through the cached settings."""
    return get_settings().lookup(variable)
