"""Selection controller: the single resource shown in the detail view."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from kubediag.constants.enums import ResourceKind
from kubediag.constants.ui import ERROR_FETCH_POD_DETAILS, ERROR_FETCH_SERVICE_DETAILS
from kubediag.controllers.base import BaseController, RequestGeneration
from kubediag.controllers.gateway import ApiError, ApiGateway, error_message
from kubediag.models.state.selection import (
    SelectedPod,
    SelectedResource,
    SelectedService,
    matches,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionState:
    """Observable state of the detail view."""

    selected: SelectedResource = None
    loading: bool = False
    error: str | None = None


class SelectionController(BaseController[SelectionState]):
    """Owns at most one selected pod or service and its detail fetch.

    Detail fetches are last-write-wins: whichever completes last is shown,
    regardless of issue order. :meth:`clear` advances a generation token so
    that a fetch completing after an explicit clear is ignored.
    """

    def __init__(self, gateway: ApiGateway) -> None:
        super().__init__()
        self._gateway = gateway
        self._generation = RequestGeneration()
        self._selected: SelectedResource = None
        self._loading = False
        self._error: str | None = None

    @property
    def selected(self) -> SelectedResource:
        return self._selected

    def snapshot(self) -> SelectionState:
        return SelectionState(
            selected=self._selected,
            loading=self._loading,
            error=self._error,
        )

    def is_selected(self, kind: ResourceKind, namespace: str, name: str) -> bool:
        return matches(self._selected, kind, namespace, name)

    async def select_pod(self, namespace: str, name: str) -> None:
        async def fetch() -> SelectedResource:
            return SelectedPod(await self._gateway.get_pod_detail(namespace, name))

        await self._select(ResourceKind.POD, namespace, name, fetch, ERROR_FETCH_POD_DETAILS)

    async def select_service(self, namespace: str, name: str) -> None:
        async def fetch() -> SelectedResource:
            return SelectedService(await self._gateway.get_service_detail(namespace, name))

        await self._select(
            ResourceKind.SERVICE, namespace, name, fetch, ERROR_FETCH_SERVICE_DETAILS
        )

    async def select(self, kind: ResourceKind, namespace: str, name: str) -> None:
        if kind is ResourceKind.POD:
            await self.select_pod(namespace, name)
        else:
            await self.select_service(namespace, name)

    def clear(self) -> None:
        """Close the detail view; in-flight fetches will not reopen it."""
        self._generation.advance()
        self._selected = None
        self._error = None
        self._loading = False
        self._notify()

    def reset(self) -> None:
        """Hide the current selection and error without invalidating fetches.

        A detail fetch already in flight still lands when it completes.
        """
        self._selected = None
        self._error = None
        self._notify()

    async def _select(
        self,
        kind: ResourceKind,
        namespace: str,
        name: str,
        fetch: Callable[[], Awaitable[SelectedResource]],
        fallback_error: str,
    ) -> None:
        token = self._generation.current
        self._loading = True
        self._error = None
        self._notify()
        logger.debug("Fetching %s detail %s/%s", kind.value, namespace, name)

        try:
            selected = await fetch()
        except ApiError as exc:
            self._apply(token, None, error_message(exc, fallback_error))
            return
        except Exception as exc:
            logger.exception("Unexpected error fetching %s detail %s/%s", kind.value, namespace, name)
            self._apply(token, None, error_message(exc, fallback_error))
            return
        self._apply(token, selected, None)

    def _apply(self, token: int, selected: SelectedResource, error: str | None) -> None:
        if not self._generation.is_current(token):
            logger.debug("Ignoring detail result that completed after clear()")
            return
        if error is not None:
            logger.warning("Detail fetch failed: %s", error)
        self._selected = selected
        self._error = error
        self._loading = False
        self._notify()
