"""Resource list controller: the bulk listing for the active namespace."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from kubediag.constants.enums import FetchState, ResourceKind
from kubediag.constants.ui import ERROR_FETCH_PODS, ERROR_FETCH_SERVICES
from kubediag.controllers.base import BaseController, RequestGeneration
from kubediag.controllers.gateway import ApiError, ApiGateway, error_message
from kubediag.models.diagnostics import (
    BulkResult,
    PodDiagnosticResult,
    ServiceDiagnosticResult,
)

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT", PodDiagnosticResult, ServiceDiagnosticResult)


@dataclass(frozen=True)
class ResourceListState(Generic[ResultT]):
    """Observable state of one resource listing."""

    kind: ResourceKind
    namespace: str | None = None
    state: FetchState = FetchState.IDLE
    data: BulkResult[ResultT] | None = None
    error: str | None = None

    @property
    def is_loading(self) -> bool:
        return self.state is FetchState.LOADING

    @property
    def results(self) -> list[ResultT]:
        return list(self.data.results) if self.data is not None else []


class ResourceListController(BaseController[ResourceListState[ResultT]]):
    """Owns one kind's bulk listing and reconciles out-of-order fetches.

    State machine: IDLE -> LOADING -> (READY | FAILED), re-entering LOADING
    on every namespace change or refresh. A fetch that completes after the
    target namespace has moved on is discarded without touching data, error
    or loading state.
    """

    def __init__(
        self,
        kind: ResourceKind,
        fetch: Callable[[str], Awaitable[BulkResult[ResultT]]],
        fallback_error: str,
    ) -> None:
        super().__init__()
        self.kind = kind
        self._fetch = fetch
        self._fallback_error = fallback_error
        self._generation = RequestGeneration()
        self._namespace: str | None = None
        self._state = FetchState.IDLE
        self._data: BulkResult[ResultT] | None = None
        self._error: str | None = None

    @classmethod
    def for_pods(cls, gateway: ApiGateway) -> ResourceListController[PodDiagnosticResult]:
        return cls(ResourceKind.POD, gateway.list_pods, ERROR_FETCH_PODS)

    @classmethod
    def for_services(
        cls, gateway: ApiGateway
    ) -> ResourceListController[ServiceDiagnosticResult]:
        return cls(ResourceKind.SERVICE, gateway.list_services, ERROR_FETCH_SERVICES)

    @property
    def namespace(self) -> str | None:
        """Namespace the controller currently targets."""
        return self._namespace

    def snapshot(self) -> ResourceListState[ResultT]:
        return ResourceListState(
            kind=self.kind,
            namespace=self._namespace,
            state=self._state,
            data=self._data,
            error=self._error,
        )

    async def on_namespace_changed(self, namespace: str) -> None:
        """Re-fetch the listing for ``namespace``."""
        self._namespace = namespace
        await self._load(namespace)

    async def refresh(self) -> None:
        """Force a re-fetch for the current namespace."""
        if self._namespace is None:
            return
        await self._load(self._namespace)

    async def _load(self, namespace: str) -> None:
        token = self._generation.advance()
        self._error = None
        self._state = FetchState.LOADING
        self._mark_load_started()
        self._notify()
        logger.debug("Fetching %s list for %s (token %d)", self.kind.value, namespace, token)

        try:
            result = await self._fetch(namespace)
        except ApiError as exc:
            self._apply_failure(token, namespace, error_message(exc, self._fallback_error))
            return
        except Exception as exc:
            logger.exception("Unexpected error fetching %s list for %s", self.kind.value, namespace)
            self._apply_failure(token, namespace, error_message(exc, self._fallback_error))
            return
        self._apply_success(token, namespace, result)

    def _is_stale(self, token: int, namespace: str) -> bool:
        if self._generation.is_current(token) and namespace == self._namespace:
            return False
        logger.debug(
            "Discarding stale %s list for %s (token %d, current %d)",
            self.kind.value,
            namespace,
            token,
            self._generation.current,
        )
        return True

    def _apply_success(
        self, token: int, namespace: str, result: BulkResult[ResultT]
    ) -> None:
        if self._is_stale(token, namespace):
            return
        self._data = result
        self._state = FetchState.READY
        logger.debug(
            "Loaded %d %s results for %s (%.2fms)",
            result.total_count,
            self.kind.value,
            namespace,
            self._load_duration_ms(),
        )
        self._notify()

    def _apply_failure(self, token: int, namespace: str, message: str) -> None:
        if self._is_stale(token, namespace):
            return
        logger.warning("Failed to fetch %s list for %s: %s", self.kind.value, namespace, message)
        self._data = None
        self._error = message
        self._state = FetchState.FAILED
        self._notify()
