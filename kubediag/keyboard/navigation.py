"""Screen-specific keyboard bindings."""

from textual.binding import Binding

DASHBOARD_SCREEN_BINDINGS: list[Binding] = [
    Binding("r", "refresh", "Refresh"),
    Binding("escape", "close_details", "Close details"),
    Binding("slash", "focus_search", "Search"),
    Binding("n", "focus_namespaces", "Namespace"),
]

__all__ = [
    "DASHBOARD_SCREEN_BINDINGS",
]
