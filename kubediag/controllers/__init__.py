"""Controllers module for the KubeDiag TUI.

This module provides event-driven controllers for loading namespaces,
per-namespace pod and service diagnostics, and single-resource details.
"""

from __future__ import annotations

# Base classes
from kubediag.controllers.base import (
    AsyncControllerMixin,
    BaseController,
    RequestGeneration,
)

# Composition
from kubediag.controllers.dashboard import DashboardController, DashboardState

# Gateway
from kubediag.controllers.gateway import (
    ApiError,
    ApiGateway,
    HttpApiGateway,
    NetworkError,
    RequestTimeoutError,
    ServerError,
)

# Domain controllers
from kubediag.controllers.namespace import NamespaceState, NamespaceStore
from kubediag.controllers.resources import ResourceListController, ResourceListState
from kubediag.controllers.selection import (
    SearchController,
    SearchState,
    SelectionController,
    SelectionState,
)

__all__ = [
    # Base
    "AsyncControllerMixin",
    "BaseController",
    "RequestGeneration",
    # Gateway
    "ApiError",
    "ApiGateway",
    "HttpApiGateway",
    "NetworkError",
    "RequestTimeoutError",
    "ServerError",
    # Domain controllers
    "DashboardController",
    "DashboardState",
    "NamespaceState",
    "NamespaceStore",
    "ResourceListController",
    "ResourceListState",
    "SearchController",
    "SearchState",
    "SelectionController",
    "SelectionState",
]
