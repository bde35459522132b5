"""Public error exports for relaymgr."""

from __future__ import annotations

from .exceptions import (
    ApiError,
    AuthError,
    BadRequestError,
    HttpErrorInfo,
    InvalidArgumentError,
    InvalidIndexError,
    InvalidStateError,
    LengthMismatchError,
    ModuleDisabledError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    RelayMgrError,
    TransportError,
    map_http_error,
)

__all__ = [
    "RelayMgrError",
    "InvalidIndexError",
    "LengthMismatchError",
    "InvalidStateError",
    "ModuleDisabledError",
    "TransportError",
    "InvalidArgumentError",
    "NetworkError",
    "BadRequestError",
    "AuthError",
    "NotFoundError",
    "RateLimitError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
