"""Bulk (per-namespace) diagnostic listings."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import AliasChoices, Field, model_validator

from kubediag.models.diagnostics.base import WireModel
from kubediag.models.diagnostics.pod import PodDiagnosticResult
from kubediag.models.diagnostics.service import ServiceDiagnosticResult
from kubediag.models.diagnostics.summary import DiagnosticSummary

ResultT = TypeVar("ResultT")


class BulkResult(WireModel, Generic[ResultT]):
    """Diagnosis of every resource of one kind within a namespace.

    The service names the total ``totalPods`` or ``totalServices`` depending
    on the kind; ``totalCount`` is accepted as well.
    """

    summary: DiagnosticSummary
    namespace: str
    total_count: int = Field(
        ge=0,
        validation_alias=AliasChoices(
            "total_count", "totalCount", "totalPods", "totalServices"
        ),
    )
    critical_count: int = Field(default=0, ge=0)
    warning_count: int = Field(default=0, ge=0)
    healthy_count: int = Field(default=0, ge=0)
    results: list[ResultT] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_counts(self) -> BulkResult:
        if self.total_count != len(self.results):
            raise ValueError(
                f"total count {self.total_count} does not match "
                f"{len(self.results)} results"
            )
        bucketed = self.critical_count + self.warning_count + self.healthy_count
        if bucketed > self.total_count:
            raise ValueError(
                f"critical+warning+healthy ({bucketed}) exceeds total count "
                f"({self.total_count})"
            )
        return self


BulkPodResult = BulkResult[PodDiagnosticResult]
BulkServiceResult = BulkResult[ServiceDiagnosticResult]
