"""Addressing configuration for the command backend."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

DEFAULT_DISPLAY_NAME: str = "Web GUI"
DEFAULT_TIMEOUT_SEC: float = 30.0

# Accepted spellings: the backend's JSON field names, then snake_case.
_KEY_ALIASES: dict[str, tuple[str, ...]] = {
    "imei": ("Imei", "imei"),
    "recipient_email": ("RecipientEmail", "recipientEmail", "recipient_email"),
    "api_url": ("ApiUrl", "apiUrl", "api_url"),
    "display_name": ("RecipientDisplayName", "displayName", "display_name"),
    "timeout_sec": ("timeout_sec", "timeoutSec"),
}


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """
    Where and as whom commands are sent.

    Fields:
        imei: identifier of the satellite modem that receives commands.
        recipient_email: verified address the backend relays through.
        api_url: absolute http(s) URL of the send-command endpoint.
        display_name: sender label shown by the backend.
        timeout_sec: per-request timeout.
    """

    imei: str
    recipient_email: str
    api_url: str
    display_name: str = DEFAULT_DISPLAY_NAME
    timeout_sec: float = DEFAULT_TIMEOUT_SEC

    def __post_init__(self) -> None:
        for key in ("imei", "recipient_email", "api_url", "display_name"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"TransportConfig.{key} must be a non-empty string")

        if not self.api_url.startswith(("http://", "https://")):
            raise ValueError("TransportConfig.api_url must be an absolute http(s) URL")

        if isinstance(self.timeout_sec, bool) or not isinstance(self.timeout_sec, (int, float)):
            raise TypeError("TransportConfig.timeout_sec must be a number")
        if self.timeout_sec <= 0:
            raise ValueError("TransportConfig.timeout_sec must be positive")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TransportConfig:
        """Build from a mapping using backend field names or snake_case keys."""
        if not isinstance(data, Mapping):
            raise TypeError("TransportConfig data must be a mapping")

        kwargs: dict[str, Any] = {}
        for field_name, aliases in _KEY_ALIASES.items():
            for alias in aliases:
                if alias in data:
                    kwargs[field_name] = data[alias]
                    break

        for required in ("imei", "recipient_email", "api_url"):
            if required not in kwargs:
                raise ValueError(f"TransportConfig is missing '{required}'")

        return cls(**kwargs)

    def payload(self, command: str) -> dict[str, str]:
        """JSON body expected by the send-command endpoint."""
        return {
            "Imei": self.imei,
            "Command": command,
            "RecipientEmail": self.recipient_email,
            "RecipientDisplayName": self.display_name,
        }
