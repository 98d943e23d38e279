"""The resource shown in the detail view.

A selection is a pod, a service, or nothing. Each variant carries its own
``kind`` so a selection can never hold both at once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from kubediag.constants.enums import ResourceKind
from kubediag.models.diagnostics import PodDiagnosticResult, ServiceDiagnosticResult


@dataclass(frozen=True)
class SelectedPod:
    data: PodDiagnosticResult
    kind: ClassVar[ResourceKind] = ResourceKind.POD


@dataclass(frozen=True)
class SelectedService:
    data: ServiceDiagnosticResult
    kind: ClassVar[ResourceKind] = ResourceKind.SERVICE


SelectedResource = Union[SelectedPod, SelectedService, None]


def matches(
    selected: SelectedResource,
    kind: ResourceKind,
    namespace: str,
    name: str,
) -> bool:
    """Return True when ``selected`` is the given resource."""
    if selected is None or selected.kind is not kind:
        return False
    return selected.data.namespace == namespace and selected.data.resource_name == name
