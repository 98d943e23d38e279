"""Detail selection and direct search."""

from kubediag.controllers.selection.controller import (
    SelectionController,
    SelectionState,
)
from kubediag.controllers.selection.search import SearchController, SearchState

__all__ = [
    "SearchController",
    "SearchState",
    "SelectionController",
    "SelectionState",
]
