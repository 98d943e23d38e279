"""Pod diagnostic result models."""

from __future__ import annotations

from pydantic import Field

from kubediag.constants.enums import HealthStatus
from kubediag.models.diagnostics.base import WireModel
from kubediag.models.diagnostics.summary import DiagnosticSummary


class ContainerStatus(WireModel):
    """Per-container state reported for a pod."""

    name: str
    state: str = "Unknown"
    reason: str | None = None
    message: str | None = None
    restart_count: int = Field(default=0, ge=0)
    ready: bool = False


class PodDiagnosticResult(WireModel):
    """Diagnosis of a single pod."""

    summary: DiagnosticSummary | None = None
    resource_name: str
    namespace: str
    status: HealthStatus = HealthStatus.UNKNOWN
    phase: str = "Unknown"
    probable_causes: list[str] = Field(default_factory=list)
    evidence: list[str] = Field(default_factory=list)
    suggested_actions: list[str] = Field(default_factory=list)
    container_statuses: list[ContainerStatus] = Field(default_factory=list)
    restart_count: int = Field(default=0, ge=0)

    @property
    def key(self) -> tuple[str, str]:
        """Natural key within a listing."""
        return (self.namespace, self.resource_name)

    @property
    def ready_containers(self) -> int:
        return sum(1 for container in self.container_statuses if container.ready)
