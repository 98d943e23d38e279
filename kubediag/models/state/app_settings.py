"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kubediag.constants.defaults import (
    API_BASE_URL_DEFAULT,
    DEFAULT_NAMESPACE,
    LOG_FILE_DEFAULT,
    LOG_LEVEL_DEFAULT,
)
from kubediag.constants.timeouts import API_REQUEST_TIMEOUT

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    # Diagnostic API
    api_base_url: str = API_BASE_URL_DEFAULT
    request_timeout_seconds: float = Field(default=API_REQUEST_TIMEOUT, gt=0)

    # Namespace preferred by the default-selection policy
    default_namespace: str = DEFAULT_NAMESPACE

    # Logging
    log_level: str = LOG_LEVEL_DEFAULT
    log_file: str = LOG_FILE_DEFAULT

    @field_validator("api_base_url")
    @classmethod
    def _normalize_base_url(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"api_base_url must be an http(s) URL, got {value!r}")
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
