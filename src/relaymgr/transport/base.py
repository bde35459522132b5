"""Transport protocol used by RelayManager."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CommandTransport(Protocol):
    """
    Delivers one command string per call, at most once.

    Returns None on success and raises a relaymgr TransportError subclass
    on any failure.
    """

    def send(self, command: str, *, description: str = "") -> None: ...
