"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from pathlib import Path
from typing import Final

# ============================================================================
# API defaults
# ============================================================================

API_BASE_URL_DEFAULT: Final = "http://localhost:8080/api"
DEFAULT_NAMESPACE: Final = "default"

# ============================================================================
# Logging defaults
# ============================================================================

LOG_LEVEL_DEFAULT: Final = "WARNING"
LOG_FILE_DEFAULT: Final = ""

# ============================================================================
# Config file location and environment overrides
# ============================================================================

CONFIG_DIR_DEFAULT: Final = Path.home() / ".config" / "kubediag"
CONFIG_FILE_NAME: Final = "settings.yaml"

ENV_API_URL: Final = "KUBEDIAG_API_URL"
ENV_TIMEOUT: Final = "KUBEDIAG_TIMEOUT"
ENV_LOG_LEVEL: Final = "KUBEDIAG_LOG_LEVEL"

__all__ = [
    "API_BASE_URL_DEFAULT",
    "CONFIG_DIR_DEFAULT",
    "CONFIG_FILE_NAME",
    "DEFAULT_NAMESPACE",
    "ENV_API_URL",
    "ENV_LOG_LEVEL",
    "ENV_TIMEOUT",
    "LOG_FILE_DEFAULT",
    "LOG_LEVEL_DEFAULT",
]
