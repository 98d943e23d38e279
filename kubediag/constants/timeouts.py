"""Timeout constants for the TUI.

All timeout values for API requests, in seconds.
"""

from typing import Final

# ============================================================================
# API timeouts (float, in seconds)
# ============================================================================

API_REQUEST_TIMEOUT: Final = 30.0
API_CONNECT_TIMEOUT: Final = 5.0

__all__ = [
    "API_CONNECT_TIMEOUT",
    "API_REQUEST_TIMEOUT",
]
