"""Exception hierarchy and HTTP error mapping for relaymgr."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class RelayMgrError(Exception):
    """
    Base exception for relaymgr.

    Attributes:
        details: Optional structured information (e.g., index, HTTP status).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class InvalidIndexError(RelayMgrError):
    """Raised for an out-of-range relay, module or relay-within-module index."""


class LengthMismatchError(RelayMgrError):
    """Raised when a relay vector or bitmask does not hold exactly 32 states."""


class InvalidStateError(RelayMgrError):
    """Raised when the session is used in an invalid state (e.g., apply in flight)."""


class ModuleDisabledError(RelayMgrError):
    """Raised when staging a change on a module that is not enabled."""


class InvalidArgumentError(RelayMgrError):
    """Raised when caller-supplied arguments are invalid (e.g., empty command text)."""


class TransportError(RelayMgrError):
    """Base for per-command delivery failures reported by a transport."""


class NetworkError(TransportError):
    """Raised when network/timeout issues prevent the request."""


class BadRequestError(TransportError):
    """Raised when the backend rejects the request as invalid (HTTP 400)."""


class AuthError(TransportError):
    """Raised when the backend refuses the caller (HTTP 401/403)."""


class NotFoundError(TransportError):
    """Raised when the backend endpoint is not found (HTTP 404)."""


class RateLimitError(TransportError):
    """Raised when rate-limited (HTTP 429)."""


class ApiError(TransportError):
    """Raised for unclassified backend errors (5xx, unknown 4xx, etc.)."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information for mapping to relaymgr exceptions."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> TransportError:
    """
    Map an HTTP error to a relaymgr transport exception.

    Policy:
        - 400 -> BadRequestError
        - 401/403 -> AuthError
        - 404 -> NotFoundError
        - 429 -> RateLimitError
        - otherwise -> ApiError
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"HTTP error {info.status_code}"

    if info.status_code == 400:
        return BadRequestError(message, details=details, cause=cause)
    if info.status_code in (401, 403):
        return AuthError(message, details=details, cause=cause)
    if info.status_code == 404:
        return NotFoundError(message, details=details, cause=cause)
    if info.status_code == 429:
        return RateLimitError(message, details=details, cause=cause)

    return ApiError(message, details=details, cause=cause)
