"""Namespace store: known namespaces and the active selection."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from kubediag.constants.defaults import DEFAULT_NAMESPACE
from kubediag.constants.ui import ERROR_FETCH_NAMESPACES
from kubediag.controllers.base import BaseController
from kubediag.controllers.gateway import ApiError, ApiGateway, error_message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamespaceState:
    """Observable state of the namespace store."""

    namespaces: tuple[str, ...] = ()
    selected: str | None = None
    loading: bool = False
    error: str | None = None


class NamespaceStore(BaseController[NamespaceState]):
    """Owns the namespace list and the currently selected namespace.

    The namespace list is loaded once per session. Changing the selected
    namespace is the only signal that drives the resource listings; listeners
    registered with :meth:`add_namespace_listener` receive each new value.
    """

    def __init__(
        self,
        gateway: ApiGateway,
        preferred_namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        super().__init__()
        self._gateway = gateway
        self._preferred = preferred_namespace
        self._namespaces: tuple[str, ...] = ()
        self._selected: str | None = None
        self._loading = False
        self._error: str | None = None
        self._namespace_listeners: list[Callable[[str], None]] = []

    @property
    def namespaces(self) -> tuple[str, ...]:
        return self._namespaces

    @property
    def selected(self) -> str | None:
        return self._selected

    def snapshot(self) -> NamespaceState:
        return NamespaceState(
            namespaces=self._namespaces,
            selected=self._selected,
            loading=self._loading,
            error=self._error,
        )

    def add_namespace_listener(self, callback: Callable[[str], None]) -> None:
        """Call ``callback(namespace)`` whenever the selection changes."""
        self._namespace_listeners.append(callback)

    async def load(self) -> None:
        """Fetch the namespace list and apply the default-selection policy."""
        self._loading = True
        self._error = None
        self._notify()
        try:
            response = await self._gateway.list_namespaces()
        except ApiError as exc:
            self._fail(error_message(exc, ERROR_FETCH_NAMESPACES))
            return
        except Exception as exc:
            logger.exception("Unexpected error while loading namespaces")
            self._fail(error_message(exc, ERROR_FETCH_NAMESPACES))
            return

        self._namespaces = tuple(response.namespaces)
        self._loading = False
        logger.info("Loaded %d namespaces", len(self._namespaces))
        default = self._default_selection()
        if default is None:
            self._notify()
            return
        self.select(default)

    def select(self, namespace: str) -> None:
        """Make ``namespace`` active.

        Any value is accepted; it does not have to be a known namespace.
        Re-selecting the active namespace does nothing.
        """
        if namespace == self._selected:
            return
        logger.debug("Namespace changed: %s -> %s", self._selected, namespace)
        self._selected = namespace
        self._notify()
        for listener in list(self._namespace_listeners):
            listener(namespace)

    def _default_selection(self) -> str | None:
        if self._preferred in self._namespaces:
            return self._preferred
        if self._namespaces:
            return self._namespaces[0]
        return None

    def _fail(self, message: str) -> None:
        logger.warning("Namespace load failed: %s", message)
        self._loading = False
        self._error = message
        self._notify()
