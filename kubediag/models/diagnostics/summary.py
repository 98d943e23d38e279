"""Diagnostic summary and namespace listing models."""

from __future__ import annotations

from pydantic import Field

from kubediag.constants.enums import HealthStatus
from kubediag.models.diagnostics.base import WireModel


class DiagnosticSummary(WireModel):
    """Snapshot describing when and how a diagnosis was produced."""

    diagnostic_time: str = ""
    resource_type: str = ""
    overall_health: HealthStatus = HealthStatus.UNKNOWN
    message: str = ""


class NamespaceList(WireModel):
    """Namespaces known to the diagnostic service, in backend order."""

    total: int = 0
    namespaces: list[str] = Field(default_factory=list)
