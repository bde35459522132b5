"""Public model exports for relaymgr."""

from __future__ import annotations

from .history import HISTORY_CAPACITY, CommandHistory, HistoryEntry
from .relay_vector import (
    MODULE_COUNT,
    RELAY_COUNT,
    RELAYS_PER_MODULE,
    RelayVector,
    global_index,
    split_index,
)
from .results import ApplyResult, ApplyStatus, DispatchOutcome, DispatchStatus

__all__ = [
    "MODULE_COUNT",
    "RELAYS_PER_MODULE",
    "RELAY_COUNT",
    "RelayVector",
    "global_index",
    "split_index",
    "HISTORY_CAPACITY",
    "HistoryEntry",
    "CommandHistory",
    "DispatchStatus",
    "ApplyStatus",
    "DispatchOutcome",
    "ApplyResult",
]
