"""Base classes shared by all controllers."""

from kubediag.controllers.base.base_controller import (
    AsyncControllerMixin,
    BaseController,
    RequestGeneration,
)

__all__ = ["AsyncControllerMixin", "BaseController", "RequestGeneration"]
