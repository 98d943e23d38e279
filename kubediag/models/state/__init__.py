"""Application state models: settings and the current selection."""

from kubediag.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)
from kubediag.models.state.config_manager import ConfigManager
from kubediag.models.state.selection import (
    SelectedPod,
    SelectedResource,
    SelectedService,
    matches,
)

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
    "SelectedPod",
    "SelectedResource",
    "SelectedService",
    "matches",
]
