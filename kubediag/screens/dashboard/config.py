"""Dashboard screen configuration - widget IDs, labels and status styles."""

from __future__ import annotations

from kubediag.constants.enums import HealthStatus, ResourceKind

# =============================================================================
# Widget IDs
# =============================================================================

NAMESPACE_SELECT_ID = "namespace-select"
NAMESPACE_ERROR_ID = "namespace-error"
SEARCH_KIND_ID = "search-kind"
SEARCH_NAMESPACE_ID = "search-namespace"
SEARCH_NAME_ID = "search-name"
SEARCH_BUTTON_ID = "search-button"

PODS_HEADER_ID = "pods-header"
PODS_LIST_ID = "pods-list"
PODS_MESSAGE_ID = "pods-message"
SERVICES_HEADER_ID = "services-header"
SERVICES_LIST_ID = "services-list"
SERVICES_MESSAGE_ID = "services-message"
DETAILS_ID = "details"

# =============================================================================
# Labels
# =============================================================================

PANEL_TITLES: dict[ResourceKind, str] = {
    ResourceKind.POD: "Pods",
    ResourceKind.SERVICE: "Services",
}

EMPTY_MESSAGES: dict[ResourceKind, str] = {
    ResourceKind.POD: "No pods found in this namespace",
    ResourceKind.SERVICE: "No services found in this namespace",
}

SEARCH_KIND_OPTIONS: list[tuple[str, str]] = [
    ("Pod", ResourceKind.POD.value),
    ("Service", ResourceKind.SERVICE.value),
]

LOADING_TEXT = "Loading..."
NAMESPACE_PLACEHOLDER = "namespace"
DETAILS_PLACEHOLDER = "Select a pod or service to view its diagnosis."

# =============================================================================
# Status styles (rich markup styles)
# =============================================================================

STATUS_STYLES: dict[HealthStatus, str] = {
    HealthStatus.CRITICAL: "bold red",
    HealthStatus.WARNING: "bold yellow",
    HealthStatus.HEALTHY: "bold green",
    HealthStatus.UNKNOWN: "dim",
    HealthStatus.COMPLETED: "bold blue",
}

PHASE_STYLES: dict[str, str] = {
    "Running": "green",
    "Pending": "yellow",
    "Failed": "red",
    "Succeeded": "blue",
    "Unknown": "dim",
}
