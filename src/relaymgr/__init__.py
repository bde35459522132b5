"""relaymgr public API."""

from __future__ import annotations

from relaymgr.errors import (
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
from relaymgr.local import RelayLocal
from relaymgr.manager import RelayManager, SessionState
from relaymgr.models import (
    ApplyResult,
    CommandHistory,
    DispatchOutcome,
    HistoryEntry,
    RelayVector,
)
from relaymgr.plan import (
    DIAGNOSTIC_COMMANDS,
    Command,
    CommandKind,
    CommandPlan,
    ModulePolicy,
    decode_command,
    diff,
    encode_command,
    synthesize_plan,
)
from relaymgr.transport import CommandTransport, HttpCommandTransport, TransportConfig

__all__ = [
    # High-level
    "RelayManager",
    "RelayLocal",
    "SessionState",
    # Transport / config
    "CommandTransport",
    "HttpCommandTransport",
    "TransportConfig",
    # Plan / Models
    "RelayVector",
    "Command",
    "CommandKind",
    "CommandPlan",
    "ModulePolicy",
    "DIAGNOSTIC_COMMANDS",
    "diff",
    "synthesize_plan",
    "encode_command",
    "decode_command",
    "DispatchOutcome",
    "ApplyResult",
    "HistoryEntry",
    "CommandHistory",
    # Errors
    "RelayMgrError",
    "InvalidIndexError",
    "LengthMismatchError",
    "InvalidStateError",
    "ModuleDisabledError",
    "InvalidArgumentError",
    "TransportError",
    "NetworkError",
    "BadRequestError",
    "AuthError",
    "NotFoundError",
    "RateLimitError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
