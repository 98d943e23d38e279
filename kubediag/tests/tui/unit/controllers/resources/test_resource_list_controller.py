"""Tests for the resource list controller and its staleness guard."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import pytest

from kubediag.constants.enums import FetchState, ResourceKind
from kubediag.constants.ui import ERROR_FETCH_SERVICES
from kubediag.controllers.gateway import ServerError
from kubediag.controllers.resources import ResourceListController, ResourceListState


class TestResourceListControllerLoad:
    """Tests for a single fetch cycle."""

    @pytest.mark.asyncio
    async def test_initial_state_is_idle(self, gateway: Any) -> None:
        """A fresh controller has no namespace and no data."""
        controller = ResourceListController.for_pods(gateway)
        state = controller.snapshot()
        assert state.kind is ResourceKind.POD
        assert state.state is FetchState.IDLE
        assert state.results == []

    @pytest.mark.asyncio
    async def test_success(self, gateway: Any, make_pod: Callable[..., Any], make_bulk: Callable[..., Any]) -> None:
        """A completed fetch stores the listing."""
        controller = ResourceListController.for_pods(gateway)
        task = asyncio.create_task(controller.on_namespace_changed("default"))
        await gateway.flush()
        assert controller.snapshot().is_loading

        bulk = make_bulk("default", [make_pod("nginx-1")])
        gateway.resolve("list_pods", "default", result=bulk)
        await task

        state = controller.snapshot()
        assert state.state is FetchState.READY
        assert state.data is bulk
        assert state.error is None

    @pytest.mark.asyncio
    async def test_failure_clears_data(self, gateway: Any, make_service: Callable[..., Any], make_bulk: Callable[..., Any]) -> None:
        """A failed fetch clears previous data and records the error."""
        controller = ResourceListController.for_services(gateway)
        task = asyncio.create_task(controller.on_namespace_changed("default"))
        await gateway.flush()
        gateway.resolve("list_services", "default", result=make_bulk("default", [make_service()]))
        await task

        task = asyncio.create_task(controller.refresh())
        await gateway.flush()
        gateway.resolve("list_services", "default", error=ServerError(500, "kaput"))
        await task

        state = controller.snapshot()
        assert state.state is FetchState.FAILED
        assert state.data is None
        assert state.error == "kaput"

    @pytest.mark.asyncio
    async def test_failure_without_message_uses_fallback(self, gateway: Any) -> None:
        """Unexpected errors without a message use the kind's fallback."""
        controller = ResourceListController.for_services(gateway)
        task = asyncio.create_task(controller.on_namespace_changed("default"))
        await gateway.flush()
        gateway.resolve("list_services", "default", error=RuntimeError())
        await task
        assert controller.snapshot().error == ERROR_FETCH_SERVICES

    @pytest.mark.asyncio
    async def test_refresh_without_namespace_is_noop(self, gateway: Any) -> None:
        """Refreshing before any namespace is chosen fetches nothing."""
        controller = ResourceListController.for_pods(gateway)
        await controller.refresh()
        assert gateway.calls == []

    @pytest.mark.asyncio
    async def test_loading_clears_previous_error(self, gateway: Any) -> None:
        """Starting a new fetch clears the previous error."""
        controller = ResourceListController.for_pods(gateway)
        task = asyncio.create_task(controller.on_namespace_changed("a"))
        await gateway.flush()
        gateway.resolve("list_pods", "a", error=ServerError(500, "kaput"))
        await task

        task = asyncio.create_task(controller.refresh())
        await gateway.flush()
        state = controller.snapshot()
        assert state.is_loading
        assert state.error is None
        gateway.resolve("list_pods", "a", error=ServerError(500, "kaput"))
        await task


class TestResourceListControllerStaleness:
    """Tests for out-of-order completion."""

    @pytest.mark.asyncio
    async def test_late_result_for_old_namespace_is_discarded(
        self, gateway: Any, make_pod: Callable[..., Any], make_bulk: Callable[..., Any]
    ) -> None:
        """app-ns completing after kube-system never overwrites kube-system."""
        controller = ResourceListController.for_pods(gateway)
        first = asyncio.create_task(controller.on_namespace_changed("app-ns"))
        await gateway.flush()
        second = asyncio.create_task(controller.on_namespace_changed("kube-system"))
        await gateway.flush()

        system_bulk = make_bulk("kube-system", [make_pod("coredns", "kube-system")])
        gateway.resolve("list_pods", "kube-system", result=system_bulk)
        await second
        gateway.resolve("list_pods", "app-ns", result=make_bulk("app-ns", [make_pod("api", "app-ns")]))
        await first

        state = controller.snapshot()
        assert state.namespace == "kube-system"
        assert state.data is system_bulk
        assert state.state is FetchState.READY

    @pytest.mark.asyncio
    async def test_stale_completion_keeps_loading(
        self, gateway: Any, make_pod: Callable[..., Any], make_bulk: Callable[..., Any]
    ) -> None:
        """A superseded fetch finishing first does not end the loading state."""
        controller = ResourceListController.for_pods(gateway)
        first = asyncio.create_task(controller.on_namespace_changed("a"))
        await gateway.flush()
        second = asyncio.create_task(controller.on_namespace_changed("b"))
        await gateway.flush()

        gateway.resolve("list_pods", "a", result=make_bulk("a", [make_pod("x", "a")]))
        await first
        state = controller.snapshot()
        assert state.is_loading
        assert state.data is None

        gateway.resolve("list_pods", "b", result=make_bulk("b", []))
        await second
        assert controller.snapshot().state is FetchState.READY

    @pytest.mark.asyncio
    async def test_stale_failure_is_discarded(
        self, gateway: Any, make_pod: Callable[..., Any], make_bulk: Callable[..., Any]
    ) -> None:
        """An error for a superseded namespace is not shown."""
        controller = ResourceListController.for_pods(gateway)
        first = asyncio.create_task(controller.on_namespace_changed("a"))
        await gateway.flush()
        second = asyncio.create_task(controller.on_namespace_changed("b"))
        await gateway.flush()

        bulk = make_bulk("b", [make_pod("x", "b")])
        gateway.resolve("list_pods", "b", result=bulk)
        await second
        gateway.resolve("list_pods", "a", error=ServerError(500, "late"))
        await first

        state = controller.snapshot()
        assert state.error is None
        assert state.data is bulk

    @pytest.mark.asyncio
    async def test_refresh_supersedes_in_flight_fetch(
        self, gateway: Any, make_pod: Callable[..., Any], make_bulk: Callable[..., Any]
    ) -> None:
        """Only the latest fetch for the same namespace is applied."""
        controller = ResourceListController.for_pods(gateway)
        first = asyncio.create_task(controller.on_namespace_changed("a"))
        await gateway.flush()
        second = asyncio.create_task(controller.refresh())
        await gateway.flush()
        assert gateway.pending("list_pods", "a") == 2

        latest = make_bulk("a", [make_pod("new", "a")])
        gateway.resolve("list_pods", "a", result=make_bulk("a", [make_pod("old", "a")]))
        gateway.resolve("list_pods", "a", result=latest)
        await asyncio.gather(first, second)
        assert controller.snapshot().data is latest

    @pytest.mark.asyncio
    async def test_any_completion_order_converges(
        self, gateway: Any, make_pod: Callable[..., Any], make_bulk: Callable[..., Any]
    ) -> None:
        """Whatever order fetches complete in, the last namespace wins."""
        controller = ResourceListController.for_pods(gateway)
        namespaces = ["a", "b", "c"]
        tasks = []
        for namespace in namespaces:
            tasks.append(asyncio.create_task(controller.on_namespace_changed(namespace)))
            await gateway.flush()

        for namespace in ["c", "a", "b"]:
            gateway.resolve(
                "list_pods", namespace, result=make_bulk(namespace, [make_pod("p", namespace)])
            )
        await asyncio.gather(*tasks)

        state = controller.snapshot()
        assert state.namespace == "c"
        assert state.data is not None
        assert state.data.namespace == "c"

    @pytest.mark.asyncio
    async def test_subscribers_not_notified_for_stale_results(
        self, gateway: Any, make_bulk: Callable[..., Any]
    ) -> None:
        """Discarded results produce no state change."""
        controller = ResourceListController.for_pods(gateway)
        first = asyncio.create_task(controller.on_namespace_changed("a"))
        await gateway.flush()
        second = asyncio.create_task(controller.on_namespace_changed("b"))
        await gateway.flush()

        seen: list[ResourceListState[Any]] = []
        controller.subscribe(seen.append)
        gateway.resolve("list_pods", "a", result=make_bulk("a", []))
        await first
        assert seen == []

        gateway.resolve("list_pods", "b", result=make_bulk("b", []))
        await second
        assert len(seen) == 1
