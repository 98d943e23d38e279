"""UI text constants shared across the TUI."""

from typing import Final

APP_TITLE: Final = "KubeDiag"
APP_SUB_TITLE: Final = "Pod & Service Diagnostics"

# ============================================================================
# Fallback error messages (used when an error carries no message)
# ============================================================================

ERROR_FETCH_NAMESPACES: Final = "Failed to fetch namespaces"
ERROR_FETCH_PODS: Final = "Failed to fetch pods"
ERROR_FETCH_SERVICES: Final = "Failed to fetch services"
ERROR_FETCH_POD_DETAILS: Final = "Failed to fetch pod details"
ERROR_FETCH_SERVICE_DETAILS: Final = "Failed to fetch service details"

# ============================================================================
# Gateway error messages
# ============================================================================

ERROR_NETWORK: Final = "Unable to connect to the server. Is the backend running?"
ERROR_TIMEOUT: Final = "Request timed out. Please try again."
ERROR_UNEXPECTED: Final = "An unexpected error occurred"
ERROR_INVALID_RESPONSE: Final = "Invalid response from server"

# ============================================================================
# Display thresholds
# ============================================================================

RESTART_WARNING_THRESHOLD: Final = 5
RESOURCE_NAME_MAX_LENGTH: Final = 40

__all__ = [
    "APP_SUB_TITLE",
    "APP_TITLE",
    "ERROR_FETCH_NAMESPACES",
    "ERROR_FETCH_PODS",
    "ERROR_FETCH_POD_DETAILS",
    "ERROR_FETCH_SERVICES",
    "ERROR_FETCH_SERVICE_DETAILS",
    "ERROR_INVALID_RESPONSE",
    "ERROR_NETWORK",
    "ERROR_TIMEOUT",
    "ERROR_UNEXPECTED",
    "RESOURCE_NAME_MAX_LENGTH",
    "RESTART_WARNING_THRESHOLD",
]
