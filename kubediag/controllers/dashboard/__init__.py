"""Dashboard composition."""

from kubediag.controllers.dashboard.controller import (
    DashboardController,
    DashboardState,
)

__all__ = ["DashboardController", "DashboardState"]
