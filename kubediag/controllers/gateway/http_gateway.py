"""HTTP implementation of the diagnostic API gateway."""

from __future__ import annotations

import logging
from contextlib import suppress
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from kubediag.constants.defaults import API_BASE_URL_DEFAULT
from kubediag.constants.timeouts import API_CONNECT_TIMEOUT, API_REQUEST_TIMEOUT
from kubediag.constants.ui import ERROR_INVALID_RESPONSE, ERROR_UNEXPECTED
from kubediag.controllers.gateway.errors import (
    NetworkError,
    RequestTimeoutError,
    ServerError,
)
from kubediag.models.diagnostics import (
    BulkPodResult,
    BulkServiceResult,
    NamespaceList,
    PodDiagnosticResult,
    ServiceDiagnosticResult,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class HttpApiGateway:
    """Diagnostic API client built on ``httpx.AsyncClient``.

    Transport and server failures are normalized into the ApiError
    hierarchy. One attempt per request; no retries.
    """

    NAMESPACES_PATH = "/namespaces"
    PODS_PATH = "/debug/pods/{namespace}"
    POD_PATH = "/debug/pod/{namespace}/{name}"
    SERVICES_PATH = "/debug/services/{namespace}"
    SERVICE_PATH = "/debug/service/{namespace}/{name}"

    def __init__(
        self,
        base_url: str = API_BASE_URL_DEFAULT,
        timeout: float = API_REQUEST_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout, connect=min(timeout, API_CONNECT_TIMEOUT)),
            headers={"Accept": "application/json"},
        )

    async def aclose(self) -> None:
        """Close the underlying client if this gateway created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpApiGateway:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # =========================================================================
    # Operations
    # =========================================================================

    async def list_namespaces(self) -> NamespaceList:
        return await self._get(self.NAMESPACES_PATH, NamespaceList)

    async def list_pods(self, namespace: str) -> BulkPodResult:
        return await self._get(
            self.PODS_PATH.format(namespace=_segment(namespace)), BulkPodResult
        )

    async def list_services(self, namespace: str) -> BulkServiceResult:
        return await self._get(
            self.SERVICES_PATH.format(namespace=_segment(namespace)),
            BulkServiceResult,
        )

    async def get_pod_detail(self, namespace: str, name: str) -> PodDiagnosticResult:
        return await self._get(
            self.POD_PATH.format(namespace=_segment(namespace), name=_segment(name)),
            PodDiagnosticResult,
        )

    async def get_service_detail(
        self, namespace: str, name: str
    ) -> ServiceDiagnosticResult:
        return await self._get(
            self.SERVICE_PATH.format(namespace=_segment(namespace), name=_segment(name)),
            ServiceDiagnosticResult,
        )

    # =========================================================================
    # Request plumbing
    # =========================================================================

    async def _get(self, path: str, model: type[ModelT]) -> ModelT:
        logger.debug("GET %s%s", self.base_url, path)
        try:
            response = await self._client.get(path)
        except httpx.TimeoutException as exc:
            logger.warning("GET %s timed out: %s", path, exc)
            raise RequestTimeoutError() from exc
        except httpx.TransportError as exc:
            logger.warning("GET %s failed to connect: %s", path, exc)
            raise NetworkError() from exc

        if response.is_error:
            error = self._server_error(response)
            logger.warning("GET %s -> %s %s", path, error.status, error.message)
            raise error

        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logger.warning("GET %s returned an invalid payload: %s", path, exc)
            raise ServerError(
                response.status_code, ERROR_INVALID_RESPONSE, "Invalid Response"
            ) from exc

    @staticmethod
    def _server_error(response: httpx.Response) -> ServerError:
        """Build a ServerError from the service's error payload, if any."""
        payload: Any = None
        with suppress(ValueError):
            payload = response.json()
        if not isinstance(payload, dict):
            return ServerError(
                response.status_code, ERROR_UNEXPECTED, response.reason_phrase or "Error"
            )
        status = payload.get("status")
        return ServerError(
            status if isinstance(status, int) and status > 0 else response.status_code,
            str(payload.get("message") or ERROR_UNEXPECTED),
            str(payload.get("error") or response.reason_phrase or "Error"),
        )


def _segment(value: str) -> str:
    return quote(value, safe="")
