"""Screens for the KubeDiag TUI."""

from kubediag.screens.dashboard import DashboardScreen

__all__ = ["DashboardScreen"]
