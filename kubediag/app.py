"""Main application class for the KubeDiag TUI."""

from __future__ import annotations

import logging

from textual.app import App

from kubediag.constants import APP_SUB_TITLE, APP_TITLE
from kubediag.controllers.dashboard import DashboardController
from kubediag.controllers.gateway import ApiGateway, HttpApiGateway
from kubediag.keyboard.app import APP_BINDINGS
from kubediag.models.state.config_manager import (
    AppSettings,
    ConfigLoadError,
    ConfigManager,
)

logger = logging.getLogger(__name__)


class KubeDiagApp(App[None]):
    """Pod and service diagnostics dashboard."""

    TITLE = APP_TITLE
    SUB_TITLE = APP_SUB_TITLE
    BINDINGS = APP_BINDINGS

    # Type hint for settings attribute
    settings: AppSettings

    def __init__(
        self,
        settings: AppSettings | None = None,
        gateway: ApiGateway | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        if settings is None:
            settings = self._load_settings()
        self.settings = settings

        self._owns_gateway = gateway is None
        self.gateway: ApiGateway = gateway or HttpApiGateway(
            base_url=settings.api_base_url,
            timeout=settings.request_timeout_seconds,
        )
        self.dashboard = DashboardController(
            self.gateway,
            preferred_namespace=settings.default_namespace,
        )

    @staticmethod
    def _load_settings() -> AppSettings:
        """Load settings from persistent storage, falling back to defaults."""
        try:
            return ConfigManager.load()
        except ConfigLoadError as exc:
            logger.warning("Using default settings: %s", exc)
            return AppSettings()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        from kubediag.screens import DashboardScreen

        logger.info("Connecting to %s", self.settings.api_base_url)
        self.push_screen(DashboardScreen(self.dashboard))

    async def on_unmount(self) -> None:
        """Cancel pending fetches and release the HTTP client."""
        await self.dashboard.aclose()
        if self._owns_gateway and isinstance(self.gateway, HttpApiGateway):
            await self.gateway.aclose()


__all__ = [
    "KubeDiagApp",
]
