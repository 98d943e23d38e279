"""Tests for base controller module."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from kubediag.controllers.base.base_controller import (
    AsyncControllerMixin,
    BaseController,
    RequestGeneration,
)


@dataclass(frozen=True)
class CounterState:
    value: int


class CounterController(BaseController[CounterState]):
    """Minimal concrete controller for exercising the base class."""

    def __init__(self) -> None:
        super().__init__()
        self.value = 0

    def snapshot(self) -> CounterState:
        return CounterState(self.value)

    def increment(self) -> None:
        self.value += 1
        self._notify()


class TestRequestGeneration:
    """Tests for RequestGeneration."""

    def test_starts_at_zero(self) -> None:
        """A fresh generation is 0 and current."""
        generation = RequestGeneration()
        assert generation.current == 0
        assert generation.is_current(0)

    def test_advance_supersedes_previous_tokens(self) -> None:
        """Advancing invalidates every earlier token."""
        generation = RequestGeneration()
        first = generation.advance()
        second = generation.advance()
        assert second == first + 1
        assert not generation.is_current(first)
        assert generation.is_current(second)


class TestAsyncControllerMixin:
    """Tests for AsyncControllerMixin class."""

    @pytest.fixture
    def mixin(self) -> AsyncControllerMixin:
        """Create mixin instance for testing."""
        return AsyncControllerMixin()

    def test_mixin_init(self, mixin: AsyncControllerMixin) -> None:
        """Test AsyncControllerMixin initialization."""
        assert mixin._load_start_time is None
        assert mixin._load_duration_ms() == 0.0

    def test_duration_after_start(self, mixin: AsyncControllerMixin) -> None:
        """Duration is non-negative once a load has started."""
        mixin._mark_load_started()
        assert mixin._load_duration_ms() >= 0.0


class TestBaseController:
    """Tests for BaseController abstract class."""

    def test_base_controller_is_abstract(self) -> None:
        """Test that BaseController is abstract and cannot be instantiated directly."""
        with pytest.raises(TypeError):
            BaseController()  # type: ignore[abstract]

    def test_subscribers_receive_snapshots(self) -> None:
        """Subscribers are called with the new snapshot after each change."""
        controller = CounterController()
        seen: list[CounterState] = []
        controller.subscribe(seen.append)
        controller.increment()
        controller.increment()
        assert seen == [CounterState(1), CounterState(2)]

    def test_unsubscribe(self) -> None:
        """The returned callable removes the subscription."""
        controller = CounterController()
        seen: list[CounterState] = []
        unsubscribe = controller.subscribe(seen.append)
        unsubscribe()
        unsubscribe()
        controller.increment()
        assert seen == []

    def test_failing_subscriber_does_not_block_others(self) -> None:
        """One broken subscriber never stops the rest from being notified."""
        controller = CounterController()
        seen: list[CounterState] = []

        def broken(_: CounterState) -> None:
            raise RuntimeError("boom")

        controller.subscribe(broken)
        controller.subscribe(seen.append)
        controller.increment()
        assert seen == [CounterState(1)]
