"""Public local exports for relaymgr."""

from __future__ import annotations

from .relay_local import RelayLocal

__all__ = ["RelayLocal"]
