"""Service diagnostic result models."""

from __future__ import annotations

from pydantic import Field

from kubediag.constants.enums import HealthStatus
from kubediag.models.diagnostics.base import WireModel
from kubediag.models.diagnostics.summary import DiagnosticSummary


class ServicePort(WireModel):
    """A port exposed by a service."""

    name: str | None = None
    protocol: str = "TCP"
    port: int
    target_port: int | str | None = None
    node_port: int | None = None


class EndpointInfo(WireModel):
    """Endpoint readiness backing a service."""

    ready_endpoints: int = Field(default=0, ge=0)
    not_ready_endpoints: int = Field(default=0, ge=0)
    addresses: list[str] = Field(default_factory=list)


class ServiceDiagnosticResult(WireModel):
    """Diagnosis of a single service."""

    summary: DiagnosticSummary | None = None
    resource_name: str
    namespace: str
    status: HealthStatus = HealthStatus.UNKNOWN
    service_type: str = "ClusterIP"
    selector: dict[str, str] = Field(default_factory=dict)
    ports: list[ServicePort] = Field(default_factory=list)
    probable_causes: list[str] = Field(default_factory=list)
    evidence: list[str] = Field(default_factory=list)
    suggested_actions: list[str] = Field(default_factory=list)
    endpoint_info: EndpointInfo = Field(default_factory=EndpointInfo)
    core_dns_exists: bool = False

    @property
    def key(self) -> tuple[str, str]:
        """Natural key within a listing."""
        return (self.namespace, self.resource_name)
