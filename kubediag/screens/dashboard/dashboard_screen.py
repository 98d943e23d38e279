"""Dashboard screen: namespace picker, search bar, pod/service lists and details."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import suppress
from typing import Any

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.message import Message
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input, ListItem, ListView, Select, Static

from kubediag.constants.enums import ResourceKind
from kubediag.controllers.dashboard import DashboardController, DashboardState
from kubediag.controllers.resources import ResourceListState
from kubediag.controllers.selection import SearchController
from kubediag.keyboard import DASHBOARD_SCREEN_BINDINGS
from kubediag.models.state.selection import SelectedResource
from kubediag.screens.dashboard.config import (
    DETAILS_ID,
    LOADING_TEXT,
    NAMESPACE_ERROR_ID,
    NAMESPACE_PLACEHOLDER,
    NAMESPACE_SELECT_ID,
    PODS_HEADER_ID,
    PODS_LIST_ID,
    PODS_MESSAGE_ID,
    SEARCH_BUTTON_ID,
    SEARCH_KIND_ID,
    SEARCH_KIND_OPTIONS,
    SEARCH_NAME_ID,
    SEARCH_NAMESPACE_ID,
    SERVICES_HEADER_ID,
    SERVICES_LIST_ID,
    SERVICES_MESSAGE_ID,
)
from kubediag.screens.dashboard.presenter import DashboardPresenter

logger = logging.getLogger(__name__)


class DashboardStateChanged(Message):
    """Posted whenever any dashboard controller changes state."""

    def __init__(self, state: DashboardState) -> None:
        super().__init__()
        self.state = state


class DashboardScreen(Screen[None]):
    """Single-screen dashboard driven by a :class:`DashboardController`."""

    BINDINGS = DASHBOARD_SCREEN_BINDINGS

    DEFAULT_CSS = """
    DashboardScreen {
        layout: vertical;
    }

    #top-bar {
        height: auto;
        padding: 0 1;
    }

    #namespace-select {
        width: 32;
    }

    #search-kind {
        width: 16;
    }

    #search-namespace {
        width: 24;
    }

    #search-name {
        width: 1fr;
    }

    #namespace-error {
        color: $error;
        height: auto;
        padding: 0 1;
    }

    #main {
        height: 1fr;
    }

    .resource-panel {
        width: 40;
        border: round $primary;
    }

    .panel-header {
        height: auto;
        padding: 0 1;
    }

    .panel-message {
        height: auto;
        padding: 1;
    }

    #details-panel {
        width: 1fr;
        border: round $secondary;
        padding: 0 1;
    }
    """

    _LIST_KINDS: dict[str, ResourceKind] = {
        PODS_LIST_ID: ResourceKind.POD,
        SERVICES_LIST_ID: ResourceKind.SERVICE,
    }

    def __init__(self, dashboard: DashboardController) -> None:
        super().__init__()
        self._dashboard = dashboard
        self._presenter = DashboardPresenter()
        self._unsubscribe: Callable[[], None] | None = None
        self._rendered_lists: dict[ResourceKind, tuple[ResourceListState, Any]] = {}
        self._rendered_namespaces: tuple[str, ...] | None = None
        self._synced_search_namespace = ""

    @property
    def dashboard(self) -> DashboardController:
        return self._dashboard

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="top-bar"):
            yield Select[str]([], prompt=NAMESPACE_PLACEHOLDER, id=NAMESPACE_SELECT_ID)
            yield Select[str](
                SEARCH_KIND_OPTIONS,
                value=ResourceKind.POD.value,
                allow_blank=False,
                id=SEARCH_KIND_ID,
            )
            yield Input(placeholder=NAMESPACE_PLACEHOLDER, id=SEARCH_NAMESPACE_ID)
            yield Input(placeholder="Enter pod name...", id=SEARCH_NAME_ID)
            yield Button("Search", id=SEARCH_BUTTON_ID, disabled=True)
        yield Static("", id=NAMESPACE_ERROR_ID)
        with Horizontal(id="main"):
            with Vertical(classes="resource-panel"):
                yield Static("", id=PODS_HEADER_ID, classes="panel-header")
                yield Static("", id=PODS_MESSAGE_ID, classes="panel-message")
                yield ListView(id=PODS_LIST_ID)
            with VerticalScroll(id="details-panel"):
                yield Static("", id=DETAILS_ID)
            with Vertical(classes="resource-panel"):
                yield Static("", id=SERVICES_HEADER_ID, classes="panel-header")
                yield Static("", id=SERVICES_MESSAGE_ID, classes="panel-message")
                yield ListView(id=SERVICES_LIST_ID)
        yield Footer()

    async def on_mount(self) -> None:
        self._unsubscribe = self._dashboard.subscribe(self._on_state_changed)
        await self._render_state(self._dashboard.snapshot())
        self.run_worker(self._dashboard.start(), name="load-namespaces", group="namespaces")

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_state_changed(self, state: DashboardState) -> None:
        self.post_message(DashboardStateChanged(state))

    async def on_dashboard_state_changed(self, message: DashboardStateChanged) -> None:
        await self._render_state(message.state)

    # =========================================================================
    # Rendering
    # =========================================================================

    async def _render_state(self, state: DashboardState) -> None:
        self._render_namespaces(state)
        selected = state.selection.selected
        await self._render_list(state.pods, selected, PODS_HEADER_ID, PODS_MESSAGE_ID, PODS_LIST_ID)
        await self._render_list(
            state.services, selected, SERVICES_HEADER_ID, SERVICES_MESSAGE_ID, SERVICES_LIST_ID
        )
        self.query_one(f"#{DETAILS_ID}", Static).update(
            self._presenter.details(state.selection)
        )
        self._update_search_button(state.searching)

    def _render_namespaces(self, state: DashboardState) -> None:
        ns_state = state.namespaces
        select = self.query_one(f"#{NAMESPACE_SELECT_ID}", Select)
        if ns_state.namespaces != self._rendered_namespaces:
            self._rendered_namespaces = ns_state.namespaces
            select.set_options((name, name) for name in ns_state.namespaces)
        if ns_state.selected is not None and ns_state.selected in ns_state.namespaces:
            if select.value != ns_state.selected:
                select.value = ns_state.selected
        select.disabled = ns_state.loading

        error = self.query_one(f"#{NAMESPACE_ERROR_ID}", Static)
        if ns_state.loading:
            error.update(f"[dim]{LOADING_TEXT}[/]")
        elif ns_state.error:
            error.update(f"[red]{escape(ns_state.error)}[/]")
        else:
            error.update("")

        namespace_input = self.query_one(f"#{SEARCH_NAMESPACE_ID}", Input)
        if ns_state.selected and namespace_input.value == self._synced_search_namespace:
            namespace_input.value = ns_state.selected
            self._synced_search_namespace = ns_state.selected

    async def _render_list(
        self,
        state: ResourceListState,
        selected: SelectedResource,
        header_id: str,
        message_id: str,
        list_id: str,
    ) -> None:
        selected_key = selected.data.key if selected is not None and selected.kind is state.kind else None
        if self._rendered_lists.get(state.kind) == (state, selected_key):
            return
        self._rendered_lists[state.kind] = (state, selected_key)

        self.query_one(f"#{header_id}", Static).update(self._presenter.panel_header(state))
        list_view = self.query_one(f"#{list_id}", ListView)
        message = self._presenter.list_message(state)
        message_widget = self.query_one(f"#{message_id}", Static)
        message_widget.update(message or "")
        message_widget.display = message is not None

        await list_view.clear()
        if message is not None:
            return
        items = [
            ListItem(
                Static(
                    self._presenter.row(
                        state.kind,
                        result,
                        self._dashboard.selection.is_selected(
                            state.kind, result.namespace, result.resource_name
                        ),
                    )
                ),
                name=result.resource_name,
            )
            for result in state.results
        ]
        await list_view.extend(items)

    def _update_search_button(self, searching: bool | None = None) -> None:
        if searching is None:
            searching = self._dashboard.search_controller.searching
        namespace, name = self._search_fields()
        button = self.query_one(f"#{SEARCH_BUTTON_ID}", Button)
        button.disabled = searching or not SearchController.can_search(namespace, name)

    def _search_fields(self) -> tuple[str, str]:
        return (
            self.query_one(f"#{SEARCH_NAMESPACE_ID}", Input).value,
            self.query_one(f"#{SEARCH_NAME_ID}", Input).value,
        )

    # =========================================================================
    # Event handlers
    # =========================================================================

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id == NAMESPACE_SELECT_ID:
            if isinstance(event.value, str):
                self._dashboard.select_namespace(event.value)
        elif event.select.id == SEARCH_KIND_ID and isinstance(event.value, str):
            with suppress(NoMatches):
                self.query_one(f"#{SEARCH_NAME_ID}", Input).placeholder = (
                    f"Enter {event.value} name..."
                )

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        kind = self._LIST_KINDS.get(event.list_view.id or "")
        if kind is None or event.item is None or not event.item.name:
            return
        listing = self._dashboard.pods if kind is ResourceKind.POD else self._dashboard.services
        for result in listing.snapshot().results:
            if result.resource_name == event.item.name:
                self.run_worker(
                    self._dashboard.selection.select(kind, result.namespace, result.resource_name),
                    name=f"select-{kind.value}",
                    group="details",
                )
                return

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id in (SEARCH_NAMESPACE_ID, SEARCH_NAME_ID):
            self._update_search_button()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id in (SEARCH_NAMESPACE_ID, SEARCH_NAME_ID):
            self._submit_search()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == SEARCH_BUTTON_ID:
            self._submit_search()

    def _submit_search(self) -> None:
        if self._dashboard.search_controller.searching:
            return
        namespace, name = self._search_fields()
        if not SearchController.can_search(namespace, name):
            return
        kind = self.query_one(f"#{SEARCH_KIND_ID}", Select).value
        if not isinstance(kind, str):
            kind = ResourceKind.POD.value
        logger.debug("Searching for %s %s/%s", kind, namespace.strip(), name.strip())
        self.run_worker(
            self._dashboard.search(kind, namespace, name),
            name="search",
            group="search",
        )

    # =========================================================================
    # Actions
    # =========================================================================

    def action_refresh(self) -> None:
        self.run_worker(self._dashboard.refresh(), name="refresh", group="refresh")

    def action_close_details(self) -> None:
        self._dashboard.close_details()

    def action_focus_search(self) -> None:
        self.query_one(f"#{SEARCH_NAME_ID}", Input).focus()

    def action_focus_namespaces(self) -> None:
        self.query_one(f"#{NAMESPACE_SELECT_ID}", Select).focus()


__all__ = ["DashboardScreen", "DashboardStateChanged"]
