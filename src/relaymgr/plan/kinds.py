"""Command kinds for relaymgr."""

from __future__ import annotations

from enum import Enum


class CommandKind(str, Enum):
    """Supported command forms."""

    ALL_ON = "ALL_ON"
    ALL_OFF = "ALL_OFF"
    MODULE_ALL_ON = "MODULE_ALL_ON"
    MODULE_ALL_OFF = "MODULE_ALL_OFF"
    SINGLE_RELAY = "SINGLE_RELAY"
    RAW_BITMASK = "RAW_BITMASK"
    CUSTOM = "CUSTOM"


MODULE_KINDS: set[CommandKind] = {CommandKind.MODULE_ALL_ON, CommandKind.MODULE_ALL_OFF}
SYSTEM_KINDS: set[CommandKind] = {CommandKind.ALL_ON, CommandKind.ALL_OFF}
