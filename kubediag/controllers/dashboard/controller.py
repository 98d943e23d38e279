"""Dashboard controller: wires the namespace, list, selection and search flows.

The selected namespace fans out to the pod and service listings, which fetch
in parallel. List clicks and searches both land in the selection controller.
Every flow keeps its own error state; one failing never touches another.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from typing import Any

from kubediag.constants.defaults import DEFAULT_NAMESPACE
from kubediag.constants.enums import ResourceKind
from kubediag.controllers.base import BaseController
from kubediag.controllers.gateway import ApiGateway
from kubediag.controllers.namespace import NamespaceState, NamespaceStore
from kubediag.controllers.resources import ResourceListController, ResourceListState
from kubediag.controllers.selection import (
    SearchController,
    SelectionController,
    SelectionState,
)
from kubediag.models.diagnostics import PodDiagnosticResult, ServiceDiagnosticResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardState:
    """Aggregated, immutable view of every flow's state."""

    namespaces: NamespaceState
    pods: ResourceListState[PodDiagnosticResult]
    services: ResourceListState[ServiceDiagnosticResult]
    selection: SelectionState
    searching: bool


class DashboardController(BaseController[DashboardState]):
    """Composition root for the dashboard's controllers."""

    def __init__(
        self,
        gateway: ApiGateway,
        preferred_namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        super().__init__()
        self.gateway = gateway
        self.namespaces = NamespaceStore(gateway, preferred_namespace)
        self.pods = ResourceListController.for_pods(gateway)
        self.services = ResourceListController.for_services(gateway)
        self.selection = SelectionController(gateway)
        self.search_controller = SearchController(self.selection)
        self._tasks: set[asyncio.Task[Any]] = set()

        for controller in (
            self.namespaces,
            self.pods,
            self.services,
            self.selection,
            self.search_controller,
        ):
            controller.subscribe(self._on_child_changed)
        self.namespaces.add_namespace_listener(self._on_namespace_changed)

    def snapshot(self) -> DashboardState:
        return DashboardState(
            namespaces=self.namespaces.snapshot(),
            pods=self.pods.snapshot(),
            services=self.services.snapshot(),
            selection=self.selection.snapshot(),
            searching=self.search_controller.searching,
        )

    # =========================================================================
    # Operations
    # =========================================================================

    async def start(self) -> None:
        """Load namespaces; the default selection triggers the listings."""
        await self.namespaces.load()

    def select_namespace(self, namespace: str) -> None:
        self.namespaces.select(namespace)

    async def refresh(self) -> None:
        """Re-fetch both listings for the current namespace."""
        await asyncio.gather(self.pods.refresh(), self.services.refresh())

    async def select_pod(self, namespace: str, name: str) -> None:
        await self.selection.select_pod(namespace, name)

    async def select_service(self, namespace: str, name: str) -> None:
        await self.selection.select_service(namespace, name)

    async def search(self, kind: ResourceKind | str, namespace: str, name: str) -> None:
        await self.search_controller.search(kind, namespace, name)

    def close_details(self) -> None:
        self.selection.clear()

    async def wait_idle(self) -> None:
        """Wait until every listing fetch spawned so far has settled."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def aclose(self) -> None:
        """Cancel outstanding listing fetches."""
        for task in list(self._tasks):
            task.cancel()
        await asyncio.gather(*list(self._tasks), return_exceptions=True)

    # =========================================================================
    # Wiring
    # =========================================================================

    def _on_namespace_changed(self, namespace: str) -> None:
        # Navigating to another namespace hides the detail view; a lookup
        # already in flight still lands.
        self.selection.reset()
        self._spawn(self.pods.on_namespace_changed(namespace), f"pods:{namespace}")
        self._spawn(self.services.on_namespace_changed(namespace), f"services:{namespace}")

    def _spawn(self, coro: Coroutine[Any, Any, None], name: str) -> None:
        task = asyncio.get_running_loop().create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _on_child_changed(self, _: object) -> None:
        self._notify()


__all__ = ["DashboardController", "DashboardState"]
