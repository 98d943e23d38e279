"""Dashboard presenter - turns controller state into rich markup."""

from __future__ import annotations

from rich.markup import escape

from kubediag.constants.enums import FetchState, HealthStatus, ResourceKind
from kubediag.constants.ui import RESOURCE_NAME_MAX_LENGTH, RESTART_WARNING_THRESHOLD
from kubediag.controllers.resources import ResourceListState
from kubediag.controllers.selection import SelectionState
from kubediag.models.diagnostics import (
    DiagnosticSummary,
    PodDiagnosticResult,
    ServiceDiagnosticResult,
)
from kubediag.models.state.selection import SelectedPod, SelectedService
from kubediag.screens.dashboard.config import (
    DETAILS_PLACEHOLDER,
    EMPTY_MESSAGES,
    LOADING_TEXT,
    PANEL_TITLES,
    PHASE_STYLES,
    STATUS_STYLES,
)
from kubediag.utils.formatting import format_timestamp, pluralize, truncate


class DashboardPresenter:
    """Formatting for the dashboard panels. Holds no state."""

    # =========================================================================
    # Badges
    # =========================================================================

    @staticmethod
    def status_badge(status: HealthStatus) -> str:
        style = STATUS_STYLES.get(status, STATUS_STYLES[HealthStatus.UNKNOWN])
        return f"[{style}]● {status.value}[/]"

    @staticmethod
    def phase_text(phase: str) -> str:
        style = PHASE_STYLES.get(phase)
        if style is None:
            return escape(phase)
        return f"[{style}]{escape(phase)}[/]"

    @staticmethod
    def restart_text(restart_count: int) -> str:
        text = pluralize(restart_count, "restart")
        if restart_count >= RESTART_WARNING_THRESHOLD:
            return f"[yellow]{text}[/]"
        return text

    # =========================================================================
    # List panels
    # =========================================================================

    @classmethod
    def panel_header(cls, state: ResourceListState) -> str:
        title = PANEL_TITLES[state.kind]
        total = state.data.total_count if state.data is not None else 0
        header = f"[b]{title}[/b] ({total})"
        if state.is_loading:
            header += " [dim]⟳[/]"
        if state.data is None or total == 0:
            return header
        counts = [
            f"[red]{state.data.critical_count} critical[/]"
            if state.data.critical_count
            else "",
            f"[yellow]{state.data.warning_count} warning[/]"
            if state.data.warning_count
            else "",
            f"[green]{state.data.healthy_count} healthy[/]"
            if state.data.healthy_count
            else "",
        ]
        breakdown = " · ".join(part for part in counts if part)
        return f"{header}\n{breakdown}" if breakdown else header

    @staticmethod
    def list_message(state: ResourceListState) -> str | None:
        """Text replacing the list body, or None when rows should be shown."""
        if state.state is FetchState.LOADING:
            return LOADING_TEXT
        if state.state is FetchState.FAILED:
            return f"[red]{escape(state.error or '')}[/]"
        if state.state is FetchState.IDLE:
            return ""
        if not state.results:
            return f"[dim]{EMPTY_MESSAGES[state.kind]}[/]"
        return None

    @classmethod
    def pod_row(cls, pod: PodDiagnosticResult, selected: bool = False) -> str:
        name = escape(truncate(pod.resource_name, RESOURCE_NAME_MAX_LENGTH))
        marker = "▶ " if selected else ""
        line = f"{marker}[b]{name}[/b]  {cls.status_badge(pod.status)}"
        detail = f"Phase: {cls.phase_text(pod.phase)}"
        if pod.restart_count > 0:
            detail += f"  ↻ {cls.restart_text(pod.restart_count)}"
        return f"{line}\n[dim]{detail}[/]"

    @classmethod
    def service_row(cls, service: ServiceDiagnosticResult, selected: bool = False) -> str:
        name = escape(truncate(service.resource_name, RESOURCE_NAME_MAX_LENGTH))
        marker = "▶ " if selected else ""
        ready = service.endpoint_info.ready_endpoints
        ready_style = "red" if ready == 0 else "green"
        line = f"{marker}[b]{name}[/b]  {cls.status_badge(service.status)}"
        detail = (
            f"{escape(service.service_type)}  "
            f"Endpoints: [{ready_style}]{ready} ready[/]"
        )
        return f"{line}\n[dim]{detail}[/]"

    @classmethod
    def row(
        cls,
        kind: ResourceKind,
        result: PodDiagnosticResult | ServiceDiagnosticResult,
        selected: bool = False,
    ) -> str:
        if kind is ResourceKind.POD:
            return cls.pod_row(result, selected)  # type: ignore[arg-type]
        return cls.service_row(result, selected)  # type: ignore[arg-type]

    # =========================================================================
    # Details panel
    # =========================================================================

    @classmethod
    def details(cls, state: SelectionState) -> str:
        if state.loading:
            return f"[b]{LOADING_TEXT}[/b]"
        if state.error:
            return f"[b red]Error[/]\n\n{escape(state.error)}"
        if isinstance(state.selected, SelectedPod):
            return cls.pod_details(state.selected.data)
        if isinstance(state.selected, SelectedService):
            return cls.service_details(state.selected.data)
        return f"[dim]{DETAILS_PLACEHOLDER}[/]"

    @classmethod
    def pod_details(cls, pod: PodDiagnosticResult) -> str:
        lines = [
            "[b]Pod Details[/b]",
            "",
            f"[b]{escape(pod.resource_name)}[/b]  {cls.status_badge(pod.status)}",
            f"Namespace: {escape(pod.namespace)}",
            f"Phase: {cls.phase_text(pod.phase)}",
        ]
        if pod.restart_count > 0:
            lines.append(f"Total restarts: {cls.restart_text(pod.restart_count)}")
        lines.extend(cls._summary_lines(pod.summary))
        if pod.container_statuses:
            ready_count = f"{pod.ready_containers}/{len(pod.container_statuses)} ready"
            lines.extend(["", f"[b]Container Statuses[/b] ({ready_count})"])
            for container in pod.container_statuses:
                ready = "[green]ready[/]" if container.ready else "[red]not ready[/]"
                entry = (
                    f"  • {escape(container.name)}: {escape(container.state)} "
                    f"({ready}, {pluralize(container.restart_count, 'restart')})"
                )
                if container.reason:
                    entry += f" - {escape(container.reason)}"
                lines.append(entry)
                if container.message:
                    lines.append(f"    [dim]{escape(container.message)}[/]")
        lines.extend(cls._findings(pod.probable_causes, pod.evidence, pod.suggested_actions))
        return "\n".join(lines)

    @classmethod
    def service_details(cls, service: ServiceDiagnosticResult) -> str:
        lines = [
            "[b]Service Details[/b]",
            "",
            f"[b]{escape(service.resource_name)}[/b]  {cls.status_badge(service.status)}",
            f"Namespace: {escape(service.namespace)}",
            f"Type: {escape(service.service_type)}",
        ]
        lines.extend(cls._summary_lines(service.summary))
        if service.selector:
            lines.extend(["", "[b]Selector Labels[/b]"])
            lines.extend(
                f"  {escape(key)}={escape(value)}"
                for key, value in service.selector.items()
            )
        if service.ports:
            lines.extend(["", "[b]Ports[/b]"])
            for port in service.ports:
                entry = f"  {escape(port.name or '-')}: {port.port}"
                if port.target_port is not None:
                    entry += f" → {escape(str(port.target_port))}"
                entry += f"/{escape(port.protocol)}"
                if port.node_port:
                    entry += f" (nodePort {port.node_port})"
                lines.append(entry)
        endpoints = service.endpoint_info
        lines.extend(
            [
                "",
                "[b]Endpoints[/b]",
                f"  Ready: [green]{endpoints.ready_endpoints}[/]  "
                f"Not ready: [red]{endpoints.not_ready_endpoints}[/]",
            ]
        )
        lines.extend(f"  {escape(address)}" for address in endpoints.addresses)
        dns = "[green]CoreDNS found[/]" if service.core_dns_exists else "[red]CoreDNS not found[/]"
        lines.append(f"  DNS: {dns}")
        lines.extend(
            cls._findings(
                service.probable_causes, service.evidence, service.suggested_actions
            )
        )
        return "\n".join(lines)

    @staticmethod
    def _summary_lines(summary: DiagnosticSummary | None) -> list[str]:
        if summary is None:
            return []
        lines = []
        if summary.message:
            lines.append(f"[i]{escape(summary.message)}[/i]")
        if summary.diagnostic_time:
            lines.append(f"[dim]Diagnosed at {escape(format_timestamp(summary.diagnostic_time))}[/]")
        return lines

    @staticmethod
    def _findings(
        causes: list[str], evidence: list[str], actions: list[str]
    ) -> list[str]:
        lines: list[str] = []
        for title, items in (
            ("Probable Causes", causes),
            ("Evidence", evidence),
            ("Suggested Actions", actions),
        ):
            lines.extend(["", f"[b]{title}[/b]"])
            if not items:
                lines.append("  [dim]None[/]")
                continue
            lines.extend(f"  • {escape(item)}" for item in items)
        return lines
