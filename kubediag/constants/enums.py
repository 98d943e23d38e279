"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Status Enums
# =============================================================================

class HealthStatus(str, Enum):
    """Health classification computed by the diagnostic service."""

    HEALTHY = "Healthy"
    WARNING = "Warning"
    CRITICAL = "Critical"
    UNKNOWN = "Unknown"
    COMPLETED = "Completed"  # pods only

    @classmethod
    def _missing_(cls, value: object) -> "HealthStatus":
        """Match case-insensitively; anything unrecognised is Unknown."""
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return cls.UNKNOWN


class ResourceKind(str, Enum):
    """Kinds of resource the dashboard can list and inspect."""

    POD = "pod"
    SERVICE = "service"

    @classmethod
    def _missing_(cls, value: object) -> "ResourceKind | None":
        """Match case-insensitively; unknown kinds still raise ValueError."""
        if isinstance(value, str):
            for member in cls:
                if member.value == value.strip().lower():
                    return member
        return None


# =============================================================================
# Fetch State Enums
# =============================================================================

class FetchState(Enum):
    """Lifecycle of a list controller's bulk fetch."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


__all__ = [
    "FetchState",
    "HealthStatus",
    "ResourceKind",
]
