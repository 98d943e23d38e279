"""Diagnostic API gateway: contract, HTTP implementation and errors."""

from kubediag.controllers.gateway.errors import (
    ApiError,
    NetworkError,
    RequestTimeoutError,
    ServerError,
    error_message,
)
from kubediag.controllers.gateway.http_gateway import HttpApiGateway
from kubediag.controllers.gateway.protocol import ApiGateway

__all__ = [
    "ApiError",
    "ApiGateway",
    "HttpApiGateway",
    "NetworkError",
    "RequestTimeoutError",
    "ServerError",
    "error_message",
]
