"""Bounded, most-recent-first record of command attempts."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, Optional

from relaymgr.util.time import format_clock, now_utc

HISTORY_CAPACITY: int = 10


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """One transmitted (or attempted) command."""

    command: str
    description: str
    timestamp: datetime
    success: bool

    @property
    def clock(self) -> str:
        """Wall-clock stamp (HH:MM:SS, UTC) as shown in the history list."""
        return format_clock(self.timestamp)


class CommandHistory:
    """
    Ring of the most recent command attempts, newest first.

    Inserting at the front evicts the oldest entry once at capacity.
    Observability only: nothing in synthesis or dispatch reads it.
    """

    def __init__(self, capacity: int = HISTORY_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._entries: deque[HistoryEntry] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or 0

    def record(
        self,
        command: str,
        description: str,
        success: bool,
        timestamp: Optional[datetime] = None,
    ) -> HistoryEntry:
        entry = HistoryEntry(
            command=command,
            description=description,
            timestamp=timestamp if timestamp is not None else now_utc(),
            success=success,
        )
        self._entries.appendleft(entry)
        return entry

    def entries(self) -> list[HistoryEntry]:
        return list(self._entries)

    def latest(self) -> Optional[HistoryEntry]:
        return self._entries[0] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(list(self._entries))
