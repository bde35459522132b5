"""RelayVector: immutable 32-relay state container with module partitioning."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from relaymgr.errors import InvalidIndexError, LengthMismatchError

MODULE_COUNT: int = 4
RELAYS_PER_MODULE: int = 8
RELAY_COUNT: int = MODULE_COUNT * RELAYS_PER_MODULE

_BIT_ON = "1"
_BIT_OFF = "0"


def validate_index(index: int) -> None:
    if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < RELAY_COUNT:
        raise InvalidIndexError(
            f"Relay index out of range: {index!r}",
            details={"index": index, "max": RELAY_COUNT - 1},
        )


def validate_module(module: int) -> None:
    if not isinstance(module, int) or isinstance(module, bool) or not 0 <= module < MODULE_COUNT:
        raise InvalidIndexError(
            f"Module index out of range: {module!r}",
            details={"module": module, "max": MODULE_COUNT - 1},
        )


def validate_relay(relay: int) -> None:
    if not isinstance(relay, int) or isinstance(relay, bool) or not 0 <= relay < RELAYS_PER_MODULE:
        raise InvalidIndexError(
            f"Relay-in-module index out of range: {relay!r}",
            details={"relay": relay, "max": RELAYS_PER_MODULE - 1},
        )


def global_index(module: int, relay: int) -> int:
    """Map (module, relay-within-module), both 0-based, to a global index."""
    validate_module(module)
    validate_relay(relay)
    return module * RELAYS_PER_MODULE + relay


def split_index(index: int) -> tuple[int, int]:
    """Map a global index to (module, relay-within-module), both 0-based."""
    validate_index(index)
    return divmod(index, RELAYS_PER_MODULE)


def module_range(module: int) -> range:
    """Global indices owned by module."""
    validate_module(module)
    start = module * RELAYS_PER_MODULE
    return range(start, start + RELAYS_PER_MODULE)


def _parse_bitmask(bits: str) -> tuple[bool, ...]:
    if not isinstance(bits, str) or len(bits) != RELAY_COUNT:
        raise LengthMismatchError(
            f"Bitmask must be a {RELAY_COUNT}-character string",
            details={"bitmask": bits},
        )
    if any(ch not in (_BIT_ON, _BIT_OFF) for ch in bits):
        raise LengthMismatchError(
            "Bitmask may only contain '0' and '1'",
            details={"bitmask": bits},
        )
    return tuple(ch == _BIT_ON for ch in bits)


@dataclass(frozen=True, slots=True)
class RelayVector:
    """
    Exactly 32 on/off relay states, index 0..31.

    Module m owns indices [8m, 8m+8). Instances are immutable: every
    "mutation" returns a new vector, so two holders never share state.
    """

    states: tuple[bool, ...]

    def __post_init__(self) -> None:
        if isinstance(self.states, str):
            states = _parse_bitmask(self.states)
        else:
            states = tuple(bool(s) for s in self.states)
        if len(states) != RELAY_COUNT:
            raise LengthMismatchError(
                f"RelayVector requires exactly {RELAY_COUNT} states, got {len(states)}",
                details={"length": len(states)},
            )
        object.__setattr__(self, "states", states)

    # ----------------------------
    # Constructors
    # ----------------------------
    @classmethod
    def from_states(cls, states: Iterable[bool]) -> RelayVector:
        if isinstance(states, str):
            return cls.from_bitmask(states)
        return cls(tuple(states))

    @classmethod
    def all_off(cls) -> RelayVector:
        return cls((False,) * RELAY_COUNT)

    @classmethod
    def all_on(cls) -> RelayVector:
        return cls((True,) * RELAY_COUNT)

    @classmethod
    def from_bitmask(cls, bits: str) -> RelayVector:
        """
        Parse a 32-character '0'/'1' string, index 0 first.

        Raises:
            LengthMismatchError: wrong length or characters other than 0/1.
        """
        return cls(_parse_bitmask(bits))

    # ----------------------------
    # Read APIs
    # ----------------------------
    def get(self, index: int) -> bool:
        validate_index(index)
        return self.states[index]

    def slice_module(self, module: int) -> tuple[bool, ...]:
        r = module_range(module)
        return self.states[r.start:r.stop]

    def all_equal(self, value: bool) -> bool:
        target = bool(value)
        return all(s == target for s in self.states)

    def module_all_equal(self, module: int, value: bool) -> bool:
        target = bool(value)
        return all(s == target for s in self.slice_module(module))

    def count_on(self) -> int:
        return sum(1 for s in self.states if s)

    def module_count_on(self, module: int) -> int:
        return sum(1 for s in self.slice_module(module) if s)

    def to_bitmask(self) -> str:
        return "".join(_BIT_ON if s else _BIT_OFF for s in self.states)

    # ----------------------------
    # Copy-on-write updates
    # ----------------------------
    def set(self, index: int, value: bool) -> RelayVector:
        validate_index(index)
        states = list(self.states)
        states[index] = bool(value)
        return RelayVector(tuple(states))

    def toggle(self, index: int) -> RelayVector:
        return self.set(index, not self.get(index))

    def with_module(self, module: int, value: bool) -> RelayVector:
        r = module_range(module)
        states = list(self.states)
        for i in r:
            states[i] = bool(value)
        return RelayVector(tuple(states))

    def with_all(self, value: bool) -> RelayVector:
        return RelayVector((bool(value),) * RELAY_COUNT)

    # ----------------------------
    # Sequence protocol
    # ----------------------------
    def __len__(self) -> int:
        return RELAY_COUNT

    def __getitem__(self, index: int) -> bool:
        return self.get(index)

    def __iter__(self) -> Iterator[bool]:
        return iter(self.states)


def coerce_vector(value: RelayVector | Sequence[bool] | str) -> RelayVector:
    """Accept a RelayVector, a plain sequence of booleans or a 32-character bitmask."""
    if isinstance(value, RelayVector):
        return value
    return RelayVector.from_states(value)
