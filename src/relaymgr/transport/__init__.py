"""Public transport exports for relaymgr."""

from __future__ import annotations

from .base import CommandTransport
from .config import TransportConfig
from .http_transport import HttpCommandTransport

__all__ = ["CommandTransport", "TransportConfig", "HttpCommandTransport"]
