"""Wire text encoding for relay commands (must match the remote decoder bit for bit)."""

from __future__ import annotations

import re

from relaymgr.models.relay_vector import RELAY_COUNT, RelayVector

from . import command as factories
from .command import CUSTOM_DESCRIPTION, Command
from .kinds import CommandKind

DIAGNOSTIC_COMMANDS: dict[str, str] = {
    "STATUS": "System Status",
    "HEALTH": "Health Check",
    "STATS": "System Statistics",
    "TIME": "Current Time",
}

_SYSTEM_RE = re.compile(r"^ALL(ON|OFF)$")
_MODULE_RE = re.compile(r"^M([1-4])ALL(ON|OFF)$")
_RELAY_RE = re.compile(r"^M([1-4])R([1-8])(ON|OFF)$")
_BITMASK_RE = re.compile(rf"^[01]{{{RELAY_COUNT}}}$")


def encode_command(command: Command) -> str:
    """
    Encode a Command as wire text.

        ALLON / ALLOFF
        M{m}ALLON / M{m}ALLOFF        (m: 1..4)
        M{m}R{r}ON / M{m}R{r}OFF      (r: 1..8)
        32 x '0'/'1', index 0 first
        custom text, verbatim

    Raises:
        ValueError: if the command is missing fields required by its kind.
    """
    command.validate_required_fields()
    kind = command.kind

    if kind is CommandKind.ALL_ON:
        return "ALLON"
    if kind is CommandKind.ALL_OFF:
        return "ALLOFF"
    if kind is CommandKind.MODULE_ALL_ON:
        return f"M{command.module + 1}ALLON"  # type: ignore[operator]
    if kind is CommandKind.MODULE_ALL_OFF:
        return f"M{command.module + 1}ALLOFF"  # type: ignore[operator]
    if kind is CommandKind.SINGLE_RELAY:
        suffix = "ON" if command.state else "OFF"
        return f"M{command.module + 1}R{command.relay + 1}{suffix}"  # type: ignore[operator]
    if kind is CommandKind.RAW_BITMASK:
        return command.bits  # type: ignore[return-value]
    if kind is CommandKind.CUSTOM:
        return command.text  # type: ignore[return-value]

    raise ValueError(f"Unsupported kind: {kind}")


def decode_command(text: str, description: str = CUSTOM_DESCRIPTION) -> Command:
    """
    Classify wire text back into a Command.

    Text that is not one of the structured forms becomes a CUSTOM command
    carrying `description`; diagnostic commands get their standard
    description.
    """
    s = text.strip()

    m = _SYSTEM_RE.match(s)
    if m:
        return factories.all_on() if m.group(1) == "ON" else factories.all_off()

    m = _MODULE_RE.match(s)
    if m:
        return factories.module_all(int(m.group(1)) - 1, m.group(2) == "ON")

    m = _RELAY_RE.match(s)
    if m:
        return factories.single_relay(
            int(m.group(1)) - 1,
            int(m.group(2)) - 1,
            m.group(3) == "ON",
        )

    if _BITMASK_RE.match(s):
        vector = RelayVector.from_bitmask(s)
        return Command(
            kind=CommandKind.RAW_BITMASK,
            description=f"Full state ({vector.count_on()} relays ON)",
            bits=s,
        )

    return factories.custom(s, DIAGNOSTIC_COMMANDS.get(s, description))
