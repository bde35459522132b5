"""Command model (explicit fields; one tagged variant per CommandKind)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from relaymgr.models.relay_vector import (
    MODULE_COUNT,
    RELAY_COUNT,
    RELAYS_PER_MODULE,
    RelayVector,
)

from .kinds import MODULE_KINDS, SYSTEM_KINDS, CommandKind

CUSTOM_DESCRIPTION = "Custom Command"


@dataclass(frozen=True, slots=True)
class Command:
    """
    A single command within a CommandPlan.

    module and relay are 0-based; the wire text uses 1-based numbers.
    Only the fields required by `kind` are set.
    """

    kind: CommandKind
    description: str = ""

    module: Optional[int] = None
    relay: Optional[int] = None
    state: Optional[bool] = None
    bits: Optional[str] = None
    text: Optional[str] = None

    def validate_required_fields(self) -> None:
        """Validate required fields according to kind. Raises ValueError."""
        if self.kind in SYSTEM_KINDS:
            return

        if self.kind in MODULE_KINDS:
            _require_range(self.module, MODULE_COUNT, "module")
            return

        if self.kind is CommandKind.SINGLE_RELAY:
            _require_range(self.module, MODULE_COUNT, "module")
            _require_range(self.relay, RELAYS_PER_MODULE, "relay")
            if not isinstance(self.state, bool):
                raise ValueError("Missing required field: state")
            return

        if self.kind is CommandKind.RAW_BITMASK:
            if (
                not isinstance(self.bits, str)
                or len(self.bits) != RELAY_COUNT
                or any(ch not in "01" for ch in self.bits)
            ):
                raise ValueError(f"bits must be a {RELAY_COUNT}-character 0/1 string")
            return

        if self.kind is CommandKind.CUSTOM:
            if self.text is None or not self.text.strip():
                raise ValueError("Missing required field: text")
            return

        raise ValueError(f"Unsupported kind: {self.kind}")


def _require_range(value: Optional[int], upper: int, field_name: str) -> None:
    if value is None:
        raise ValueError(f"Missing required field: {field_name}")
    if isinstance(value, bool) or not 0 <= value < upper:
        raise ValueError(f"{field_name} out of range: {value}")


def _on_off(state: bool) -> str:
    return "ON" if state else "OFF"


# ----------------------------
# Factories
# ----------------------------
def all_on() -> Command:
    return Command(kind=CommandKind.ALL_ON, description="All Relays ON")


def all_off() -> Command:
    return Command(kind=CommandKind.ALL_OFF, description="All Relays OFF")


def module_all(module: int, state: bool) -> Command:
    kind = CommandKind.MODULE_ALL_ON if state else CommandKind.MODULE_ALL_OFF
    cmd = Command(
        kind=kind,
        description=f"Module {module + 1} All {_on_off(state)}",
        module=module,
    )
    cmd.validate_required_fields()
    return cmd


def single_relay(module: int, relay: int, state: bool) -> Command:
    cmd = Command(
        kind=CommandKind.SINGLE_RELAY,
        description=f"Module {module + 1} Relay {relay + 1} {_on_off(state)}",
        module=module,
        relay=relay,
        state=bool(state),
    )
    cmd.validate_required_fields()
    return cmd


def raw_bitmask(target: RelayVector, changed: int) -> Command:
    """Full-state overwrite of every relay (not a delta)."""
    cmd = Command(
        kind=CommandKind.RAW_BITMASK,
        description=f"Multiple relay changes ({changed} relays)",
        bits=target.to_bitmask(),
    )
    cmd.validate_required_fields()
    return cmd


def custom(text: str, description: str = CUSTOM_DESCRIPTION) -> Command:
    cmd = Command(kind=CommandKind.CUSTOM, description=description, text=text)
    cmd.validate_required_fields()
    return cmd
