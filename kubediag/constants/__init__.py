"""Constants module for the KubeDiag TUI.

Re-exports the most commonly used constants from the submodules.
"""

from kubediag.constants.defaults import (
    API_BASE_URL_DEFAULT,
    DEFAULT_NAMESPACE,
    LOG_LEVEL_DEFAULT,
)
from kubediag.constants.enums import FetchState, HealthStatus, ResourceKind
from kubediag.constants.timeouts import API_REQUEST_TIMEOUT
from kubediag.constants.ui import APP_SUB_TITLE, APP_TITLE

__all__ = [
    "API_BASE_URL_DEFAULT",
    "API_REQUEST_TIMEOUT",
    "APP_SUB_TITLE",
    "APP_TITLE",
    "DEFAULT_NAMESPACE",
    "FetchState",
    "HealthStatus",
    "LOG_LEVEL_DEFAULT",
    "ResourceKind",
]
