"""Dashboard screen package."""

from kubediag.screens.dashboard.dashboard_screen import (
    DashboardScreen,
    DashboardStateChanged,
)
from kubediag.screens.dashboard.presenter import DashboardPresenter

__all__ = ["DashboardPresenter", "DashboardScreen", "DashboardStateChanged"]
