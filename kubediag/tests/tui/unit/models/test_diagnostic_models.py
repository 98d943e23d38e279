"""Unit tests for diagnostic wire models.

This module tests:
- camelCase wire aliases and snake_case population
- HealthStatus normalization for unexpected values
- BulkResult count invariants and total-count aliases
- Selection sum type matching
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from kubediag.constants.enums import HealthStatus, ResourceKind
from kubediag.models.diagnostics import (
    BulkPodResult,
    BulkServiceResult,
    NamespaceList,
    PodDiagnosticResult,
    ServiceDiagnosticResult,
)
from kubediag.models.state.selection import SelectedPod, SelectedService, matches

POD_PAYLOAD = {
    "summary": {
        "diagnosticTime": "2024-05-01T10:00:00Z",
        "resourceType": "Pod",
        "overallHealth": "Critical",
        "message": "Container is crash looping",
    },
    "resourceName": "api-7d9f",
    "namespace": "app-ns",
    "status": "Critical",
    "phase": "Running",
    "probableCauses": ["CrashLoopBackOff"],
    "evidence": ["Exit code 1"],
    "suggestedActions": ["Check logs"],
    "containerStatuses": [
        {
            "name": "api",
            "state": "Waiting",
            "reason": "CrashLoopBackOff",
            "restartCount": 12,
            "ready": False,
        }
    ],
    "restartCount": 12,
}


class TestPodDiagnosticResult:
    """Tests for PodDiagnosticResult parsing."""

    def test_parses_camel_case_payload(self) -> None:
        """Wire payloads use camelCase keys."""
        pod = PodDiagnosticResult.model_validate(POD_PAYLOAD)
        assert pod.resource_name == "api-7d9f"
        assert pod.status is HealthStatus.CRITICAL
        assert pod.summary is not None
        assert pod.summary.overall_health is HealthStatus.CRITICAL
        assert pod.container_statuses[0].restart_count == 12
        assert pod.probable_causes == ["CrashLoopBackOff"]

    def test_populates_by_field_name(self) -> None:
        """Models also accept snake_case field names."""
        pod = PodDiagnosticResult(resource_name="a", namespace="b")
        assert pod.key == ("b", "a")
        assert pod.status is HealthStatus.UNKNOWN

    def test_unknown_status_maps_to_unknown(self) -> None:
        """Unrecognized health values degrade to Unknown."""
        pod = PodDiagnosticResult.model_validate(
            {"resourceName": "a", "namespace": "b", "status": "Exploded"}
        )
        assert pod.status is HealthStatus.UNKNOWN

    def test_status_is_case_insensitive(self) -> None:
        """Health values match regardless of case."""
        assert HealthStatus("warning") is HealthStatus.WARNING

    def test_negative_restart_count_rejected(self) -> None:
        """Restart counts cannot be negative."""
        with pytest.raises(ValidationError):
            PodDiagnosticResult(resource_name="a", namespace="b", restart_count=-1)

    def test_ready_containers(self) -> None:
        """ready_containers counts ready container statuses."""
        pod = PodDiagnosticResult.model_validate(
            {
                "resourceName": "a",
                "namespace": "b",
                "containerStatuses": [
                    {"name": "one", "ready": True},
                    {"name": "two", "ready": False},
                ],
            }
        )
        assert pod.ready_containers == 1

    def test_models_are_frozen(self) -> None:
        """Results are immutable snapshots."""
        pod = PodDiagnosticResult(resource_name="a", namespace="b")
        with pytest.raises(ValidationError):
            pod.phase = "Failed"  # type: ignore[misc]


class TestServiceDiagnosticResult:
    """Tests for ServiceDiagnosticResult parsing."""

    def test_parses_ports_and_endpoints(self) -> None:
        """Ports accept numeric and named target ports."""
        service = ServiceDiagnosticResult.model_validate(
            {
                "resourceName": "web",
                "namespace": "default",
                "status": "Warning",
                "serviceType": "NodePort",
                "selector": {"app": "web"},
                "ports": [
                    {"name": "http", "protocol": "TCP", "port": 80, "targetPort": 8080, "nodePort": 30080},
                    {"port": 443, "targetPort": "https"},
                ],
                "endpointInfo": {"readyEndpoints": 0, "notReadyEndpoints": 2, "addresses": []},
                "coreDnsExists": True,
            }
        )
        assert service.ports[0].node_port == 30080
        assert service.ports[1].target_port == "https"
        assert service.endpoint_info.not_ready_endpoints == 2
        assert service.core_dns_exists is True
        assert service.selector == {"app": "web"}


class TestBulkResult:
    """Tests for BulkResult invariants."""

    def _payload(self, **overrides: object) -> dict[str, object]:
        payload: dict[str, object] = {
            "summary": {"resourceType": "Pod"},
            "namespace": "default",
            "totalPods": 2,
            "criticalCount": 1,
            "warningCount": 0,
            "healthyCount": 1,
            "results": [
                {"resourceName": "a", "namespace": "default", "status": "Critical"},
                {"resourceName": "b", "namespace": "default", "status": "Healthy"},
            ],
        }
        payload.update(overrides)
        return payload

    def test_total_pods_alias(self) -> None:
        """The pod listing names its total totalPods."""
        bulk = BulkPodResult.model_validate(self._payload())
        assert bulk.total_count == 2
        assert [pod.resource_name for pod in bulk.results] == ["a", "b"]

    def test_total_services_alias(self) -> None:
        """The service listing names its total totalServices."""
        bulk = BulkServiceResult.model_validate(
            {
                "summary": {},
                "namespace": "default",
                "totalServices": 1,
                "healthyCount": 1,
                "results": [{"resourceName": "web", "namespace": "default"}],
            }
        )
        assert bulk.total_count == 1
        assert isinstance(bulk.results[0], ServiceDiagnosticResult)

    def test_total_must_match_results(self) -> None:
        """total_count must equal the number of results."""
        with pytest.raises(ValidationError):
            BulkPodResult.model_validate(self._payload(totalPods=3))

    def test_buckets_cannot_exceed_total(self) -> None:
        """critical + warning + healthy must not exceed the total."""
        with pytest.raises(ValidationError):
            BulkPodResult.model_validate(self._payload(warningCount=1))

    def test_buckets_may_undercount(self) -> None:
        """Unknown and Completed results are not bucketed."""
        bulk = BulkPodResult.model_validate(self._payload(criticalCount=0, healthyCount=0))
        assert bulk.critical_count + bulk.warning_count + bulk.healthy_count == 0


class TestNamespaceList:
    """Tests for NamespaceList."""

    def test_preserves_backend_order(self) -> None:
        """Namespaces keep the order the service returned."""
        listing = NamespaceList.model_validate(
            {"total": 3, "namespaces": ["kube-system", "default", "app-ns"]}
        )
        assert listing.namespaces == ["kube-system", "default", "app-ns"]


class TestSelection:
    """Tests for the selected-resource sum type."""

    def test_matches_pod(self) -> None:
        """A selected pod matches only its own kind, namespace and name."""
        selected = SelectedPod(PodDiagnosticResult(resource_name="a", namespace="ns"))
        assert matches(selected, ResourceKind.POD, "ns", "a")
        assert not matches(selected, ResourceKind.SERVICE, "ns", "a")
        assert not matches(selected, ResourceKind.POD, "other", "a")

    def test_matches_none(self) -> None:
        """Nothing selected matches nothing."""
        assert not matches(None, ResourceKind.POD, "ns", "a")

    def test_resource_kind_is_case_insensitive(self) -> None:
        """Resource kinds match regardless of case; unknown kinds are rejected."""
        assert ResourceKind("Service") is ResourceKind.SERVICE
        assert ResourceKind(" POD ") is ResourceKind.POD
        with pytest.raises(ValueError):
            ResourceKind("deployment")

    def test_variant_kinds(self) -> None:
        """Each variant carries its own kind."""
        assert SelectedPod.kind is ResourceKind.POD
        assert SelectedService.kind is ResourceKind.SERVICE
