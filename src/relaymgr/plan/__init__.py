"""Public plan exports for relaymgr."""

from __future__ import annotations

from .codec import DIAGNOSTIC_COMMANDS, decode_command, encode_command
from .command import (
    CUSTOM_DESCRIPTION,
    Command,
    all_off,
    all_on,
    custom,
    module_all,
    raw_bitmask,
    single_relay,
)
from .command_plan import CommandPlan
from .diff import diff, module_diff
from .kinds import MODULE_KINDS, SYSTEM_KINDS, CommandKind
from .synthesizer import ModulePolicy, synthesize_commands, synthesize_plan

__all__ = [
    "CommandKind",
    "MODULE_KINDS",
    "SYSTEM_KINDS",
    "Command",
    "CUSTOM_DESCRIPTION",
    "CommandPlan",
    "ModulePolicy",
    "all_on",
    "all_off",
    "module_all",
    "single_relay",
    "raw_bitmask",
    "custom",
    "encode_command",
    "decode_command",
    "DIAGNOSTIC_COMMANDS",
    "diff",
    "module_diff",
    "synthesize_plan",
    "synthesize_commands",
]
