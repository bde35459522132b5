"""HTTP transport: POST each command to the satellite messaging backend."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from relaymgr.errors import (
    ApiError,
    HttpErrorInfo,
    NetworkError,
    TransportError,
    map_http_error,
)

from .config import TransportConfig

logger = logging.getLogger(__name__)

_DEFAULT_FAILURE_MESSAGE = "Command failed to send"


class HttpCommandTransport:
    """One HTTP request per command; failures are reported, never retried."""

    def __init__(
        self,
        config: TransportConfig,
        *,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._config = config
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=config.timeout_sec)

    @property
    def config(self) -> TransportConfig:
        return self._config

    def send(self, command: str, *, description: str = "") -> None:
        """
        POST `command` to the configured endpoint.

        Raises:
            NetworkError: connection failure or timeout.
            TransportError subclass: non-2xx response (see map_http_error).
        """
        payload = self._config.payload(command)
        logger.debug("POST %s command=%s (%s)", self._config.api_url, command, description)

        try:
            response = self._client.post(
                self._config.api_url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as exc:
            mapped = _map_exception(exc)
            logger.warning("Command %s not delivered: %s", command, mapped)
            raise mapped from exc

        if response.is_success:
            return

        mapped = map_http_error(_response_to_info(response))
        logger.warning(
            "Backend rejected command %s: HTTP %d %s",
            command,
            response.status_code,
            mapped,
        )
        raise mapped

    def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpCommandTransport:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def _map_exception(exc: httpx.HTTPError) -> TransportError:
    if isinstance(exc, httpx.TransportError):
        return NetworkError("Network or server error", cause=exc)
    return ApiError("Backend request failed", cause=exc)


def _response_to_info(response: httpx.Response) -> HttpErrorInfo:
    message: Optional[str] = None
    details: dict[str, Any] = {}

    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        error_details = payload.get("errorDetails")
        if isinstance(error_details, str) and error_details.strip():
            message = error_details
            details["error_details"] = error_details

    return HttpErrorInfo(
        status_code=response.status_code,
        reason=response.reason_phrase or None,
        message=message or _DEFAULT_FAILURE_MESSAGE,
        details=details or None,
    )
