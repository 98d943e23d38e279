"""Per-namespace pod and service listings."""

from kubediag.controllers.resources.controller import (
    ResourceListController,
    ResourceListState,
)

__all__ = ["ResourceListController", "ResourceListState"]
