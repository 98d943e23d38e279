"""Normalized failures raised by the diagnostic API gateway."""

from __future__ import annotations

from kubediag.constants.ui import ERROR_NETWORK, ERROR_TIMEOUT, ERROR_UNEXPECTED


class ApiError(Exception):
    """Uniform error shape for every gateway failure.

    Attributes:
        message: Human-readable message suitable for inline display.
        status: HTTP status, 408 for timeouts and 0 when no response arrived.
        error: Short error label (e.g. ``"Not Found"``).
    """

    def __init__(self, message: str, status: int = 0, error: str = "Error") -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.error = error

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status}, message={self.message!r})"


class NetworkError(ApiError):
    """No response was received from the diagnostic service."""

    def __init__(self, message: str = ERROR_NETWORK) -> None:
        super().__init__(message, status=0, error="Network Error")


class RequestTimeoutError(ApiError):
    """The request exceeded its deadline."""

    def __init__(self, message: str = ERROR_TIMEOUT) -> None:
        super().__init__(message, status=408, error="Timeout")


class ServerError(ApiError):
    """The service answered with an error payload."""

    def __init__(
        self,
        status: int,
        message: str = ERROR_UNEXPECTED,
        error: str = "Error",
    ) -> None:
        super().__init__(message or ERROR_UNEXPECTED, status=status, error=error)


def error_message(exc: BaseException, fallback: str) -> str:
    """Message to display for ``exc``, or ``fallback`` when it has none."""
    if isinstance(exc, ApiError):
        return exc.message or fallback
    return str(exc) or fallback
