"""Diagnostic payload models returned by the diagnostic service."""

from kubediag.models.diagnostics.bulk import (
    BulkPodResult,
    BulkResult,
    BulkServiceResult,
)
from kubediag.models.diagnostics.pod import ContainerStatus, PodDiagnosticResult
from kubediag.models.diagnostics.service import (
    EndpointInfo,
    ServiceDiagnosticResult,
    ServicePort,
)
from kubediag.models.diagnostics.summary import DiagnosticSummary, NamespaceList

__all__ = [
    "BulkPodResult",
    "BulkResult",
    "BulkServiceResult",
    "ContainerStatus",
    "DiagnosticSummary",
    "EndpointInfo",
    "NamespaceList",
    "PodDiagnosticResult",
    "ServiceDiagnosticResult",
    "ServicePort",
]
