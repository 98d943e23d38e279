"""Settings persistence: YAML file plus environment overrides."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from kubediag.constants.defaults import (
    CONFIG_DIR_DEFAULT,
    CONFIG_FILE_NAME,
    ENV_API_URL,
    ENV_LOG_LEVEL,
    ENV_TIMEOUT,
)
from kubediag.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads and saves :class:`AppSettings`.

    Precedence, lowest first: model defaults, YAML file, environment.
    """

    ENV_OVERRIDES: dict[str, str] = {
        ENV_API_URL: "api_base_url",
        ENV_TIMEOUT: "request_timeout_seconds",
        ENV_LOG_LEVEL: "log_level",
    }

    @staticmethod
    def default_path() -> Path:
        return CONFIG_DIR_DEFAULT / CONFIG_FILE_NAME

    @classmethod
    def load(
        cls,
        path: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> AppSettings:
        """Load settings from ``path`` (or the default location).

        A missing file yields defaults. Malformed YAML or invalid values
        raise ConfigLoadError.
        """
        config_path = path or cls.default_path()
        raw = cls._read_yaml(config_path)
        raw.update(cls._env_overrides(os.environ if environ is None else environ))
        try:
            settings = AppSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {config_path}: {exc}") from exc
        logger.debug("Loaded settings from %s", config_path)
        return settings

    @classmethod
    def save(cls, settings: AppSettings, path: Path | None = None) -> Path:
        """Write settings as YAML, creating the parent directory if needed."""
        config_path = path or cls.default_path()
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with config_path.open("w", encoding="utf-8") as handle:
                yaml.safe_dump(
                    settings.model_dump(),
                    handle,
                    default_flow_style=False,
                    sort_keys=False,
                )
        except OSError as exc:
            raise ConfigSaveError(f"Cannot write settings to {config_path}: {exc}") from exc
        logger.info("Saved settings to %s", config_path)
        return config_path

    @staticmethod
    def _read_yaml(config_path: Path) -> dict[str, Any]:
        if not config_path.exists():
            return {}
        try:
            with config_path.open(encoding="utf-8") as handle:
                data = yaml.safe_load(handle)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Cannot read settings from {config_path}: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigLoadError(f"Settings file {config_path} must contain a mapping")
        return data

    @classmethod
    def _env_overrides(cls, environ: Mapping[str, str]) -> dict[str, str]:
        return {
            field: environ[env_name]
            for env_name, field in cls.ENV_OVERRIDES.items()
            if environ.get(env_name)
        }


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
