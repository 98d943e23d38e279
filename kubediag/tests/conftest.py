"""Shared fixtures: diagnostic payload factories and a controllable gateway."""

from __future__ import annotations

import asyncio
from collections import defaultdict
from collections.abc import Callable
from typing import Any

import pytest

from kubediag.models.diagnostics import (
    BulkResult,
    DiagnosticSummary,
    NamespaceList,
    PodDiagnosticResult,
    ServiceDiagnosticResult,
)


class ControlledGateway:
    """Gateway whose calls block until the test resolves them.

    Each call registers a future keyed by operation and arguments. Tests
    resolve futures in any order to simulate out-of-order completion.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self._pending: dict[tuple[Any, ...], list[asyncio.Future[Any]]] = defaultdict(list)

    async def _call(self, *key: Any) -> Any:
        future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
        self.calls.append(key)
        self._pending[key].append(future)
        return await future

    async def list_namespaces(self) -> NamespaceList:
        return await self._call("list_namespaces")

    async def list_pods(self, namespace: str) -> BulkResult[PodDiagnosticResult]:
        return await self._call("list_pods", namespace)

    async def list_services(self, namespace: str) -> BulkResult[ServiceDiagnosticResult]:
        return await self._call("list_services", namespace)

    async def get_pod_detail(self, namespace: str, name: str) -> PodDiagnosticResult:
        return await self._call("get_pod_detail", namespace, name)

    async def get_service_detail(self, namespace: str, name: str) -> ServiceDiagnosticResult:
        return await self._call("get_service_detail", namespace, name)

    def pending(self, *key: Any) -> int:
        return sum(1 for future in self._pending.get(key, []) if not future.done())

    def resolve(self, *key: Any, result: Any = None, error: BaseException | None = None) -> None:
        """Complete the oldest pending call matching ``key``."""
        for future in self._pending.get(key, []):
            if future.done():
                continue
            if error is not None:
                future.set_exception(error)
            else:
                future.set_result(result)
            return
        raise AssertionError(f"No pending call for {key!r}")

    @staticmethod
    async def flush(rounds: int = 5) -> None:
        """Let spawned tasks run until they block on the gateway again."""
        for _ in range(rounds):
            await asyncio.sleep(0)


@pytest.fixture
def gateway() -> ControlledGateway:
    return ControlledGateway()


@pytest.fixture
def make_pod() -> Callable[..., PodDiagnosticResult]:
    def factory(
        name: str = "nginx-1",
        namespace: str = "default",
        status: str = "Healthy",
        **fields: Any,
    ) -> PodDiagnosticResult:
        payload: dict[str, Any] = {
            "resourceName": name,
            "namespace": namespace,
            "status": status,
            "phase": "Running",
        }
        payload.update(fields)
        return PodDiagnosticResult.model_validate(payload)

    return factory


@pytest.fixture
def make_service() -> Callable[..., ServiceDiagnosticResult]:
    def factory(
        name: str = "web",
        namespace: str = "default",
        status: str = "Healthy",
        **fields: Any,
    ) -> ServiceDiagnosticResult:
        payload: dict[str, Any] = {
            "resourceName": name,
            "namespace": namespace,
            "status": status,
            "serviceType": "ClusterIP",
        }
        payload.update(fields)
        return ServiceDiagnosticResult.model_validate(payload)

    return factory


@pytest.fixture
def make_bulk() -> Callable[..., BulkResult[Any]]:
    def factory(namespace: str, results: list[Any]) -> BulkResult[Any]:
        counts = {"Critical": 0, "Warning": 0, "Healthy": 0}
        for result in results:
            if result.status.value in counts:
                counts[result.status.value] += 1
        return BulkResult[type(results[0]) if results else PodDiagnosticResult](
            summary=DiagnosticSummary(resource_type="bulk"),
            namespace=namespace,
            total_count=len(results),
            critical_count=counts["Critical"],
            warning_count=counts["Warning"],
            healthy_count=counts["Healthy"],
            results=results,
        )

    return factory
