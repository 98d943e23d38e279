"""Contract between the controllers and the diagnostic service."""

from __future__ import annotations

from typing import Protocol

from kubediag.models.diagnostics import (
    BulkPodResult,
    BulkServiceResult,
    NamespaceList,
    PodDiagnosticResult,
    ServiceDiagnosticResult,
)


class ApiGateway(Protocol):
    """Read-only diagnostic operations.

    Every method raises :class:`~kubediag.controllers.gateway.errors.ApiError`
    (or a subclass) on failure.
    """

    async def list_namespaces(self) -> NamespaceList: ...

    async def list_pods(self, namespace: str) -> BulkPodResult: ...

    async def list_services(self, namespace: str) -> BulkServiceResult: ...

    async def get_pod_detail(self, namespace: str, name: str) -> PodDiagnosticResult: ...

    async def get_service_detail(
        self, namespace: str, name: str
    ) -> ServiceDiagnosticResult: ...
