"""Search controller: direct lookup of one resource by namespace and name."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from kubediag.constants.enums import ResourceKind
from kubediag.controllers.base import BaseController
from kubediag.controllers.selection.controller import SelectionController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchState:
    searching: bool = False


class SearchController(BaseController[SearchState]):
    """Front door to :class:`SelectionController` that bypasses the lists."""

    def __init__(self, selection: SelectionController) -> None:
        super().__init__()
        self._selection = selection
        self._searching = False

    @property
    def searching(self) -> bool:
        return self._searching

    def snapshot(self) -> SearchState:
        return SearchState(searching=self._searching)

    @staticmethod
    def can_search(namespace: str, name: str) -> bool:
        """Client-side gate: both fields must be non-blank."""
        return bool(namespace.strip()) and bool(name.strip())

    async def search(self, kind: ResourceKind | str, namespace: str, name: str) -> None:
        """Look up ``name`` in ``namespace``; blank input is silently ignored."""
        if not self.can_search(namespace, name):
            logger.debug("Ignoring search with blank namespace or name")
            return
        kind = ResourceKind(kind)
        namespace, name = namespace.strip(), name.strip()

        self._searching = True
        self._notify()
        try:
            await self._selection.select(kind, namespace, name)
        finally:
            self._searching = False
            self._notify()
