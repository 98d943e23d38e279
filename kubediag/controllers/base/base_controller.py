"""Base controller with event-driven state observation for the KubeDiag TUI.

Controllers own a piece of dashboard state, mutate it from async operations
running on the event loop, and notify subscribers after every change. The
screen subscribes and re-renders; nothing relies on implicit dependency
tracking.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

StateT = TypeVar("StateT")


class RequestGeneration:
    """Monotonic token used to supersede in-flight requests.

    Every issued operation captures :meth:`advance` (or :attr:`current`) at
    issue time and applies its result only while :meth:`is_current` still
    holds. Fetches are never cancelled; late results are dropped instead.
    """

    def __init__(self) -> None:
        self._value = 0

    @property
    def current(self) -> int:
        return self._value

    def advance(self) -> int:
        """Invalidate every previously issued token and return a new one."""
        self._value += 1
        return self._value

    def is_current(self, token: int) -> bool:
        return token == self._value


class AsyncControllerMixin:
    """Mixin tracking how long the controller's current load has taken."""

    def __init__(self) -> None:
        """Initialize the async controller mixin."""
        self._load_start_time: float | None = None

    def _mark_load_started(self) -> None:
        self._load_start_time = time.monotonic()

    def _load_duration_ms(self) -> float:
        if self._load_start_time is None:
            return 0.0
        return (time.monotonic() - self._load_start_time) * 1000


class BaseController(AsyncControllerMixin, ABC, Generic[StateT]):
    """Base controller class with subscription-based observation.

    Subclasses implement :meth:`snapshot` and call :meth:`_notify` after
    every state mutation.
    """

    def __init__(self) -> None:
        super().__init__()
        self._subscribers: list[Callable[[StateT], None]] = []

    @abstractmethod
    def snapshot(self) -> StateT:
        """Return an immutable view of the current state."""
        ...

    def subscribe(self, callback: Callable[[StateT], None]) -> Callable[[], None]:
        """Register ``callback`` for state changes.

        Returns:
            A function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        state = self.snapshot()
        for callback in list(self._subscribers):
            try:
                callback(state)
            except Exception:
                logger.exception(
                    "Subscriber %r of %s failed", callback, type(self).__name__
                )
