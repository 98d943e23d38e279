"""Namespace selection."""

from kubediag.controllers.namespace.store import NamespaceState, NamespaceStore

__all__ = ["NamespaceState", "NamespaceStore"]
