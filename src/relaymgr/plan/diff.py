"""Index-level difference between two relay vectors."""

from __future__ import annotations

from typing import Sequence

from relaymgr.errors import LengthMismatchError
from relaymgr.models.relay_vector import RELAY_COUNT, RelayVector, module_range


def _states(value: RelayVector | Sequence[bool] | str, what: str) -> Sequence[bool]:
    if isinstance(value, RelayVector):
        return value.states
    if isinstance(value, str):
        return RelayVector.from_bitmask(value).states
    if len(value) != RELAY_COUNT:
        raise LengthMismatchError(
            f"{what} must hold exactly {RELAY_COUNT} states, got {len(value)}",
            details={"length": len(value)},
        )
    return value


def diff(
    a: RelayVector | Sequence[bool] | str,
    b: RelayVector | Sequence[bool] | str,
) -> list[int]:
    """
    Return indices where a[i] != b[i], ascending.

    Raises:
        LengthMismatchError: if either input is not 32 long (bitmask strings
            are parsed as '0'/'1' characters).
    """
    sa = _states(a, "Left vector")
    sb = _states(b, "Right vector")
    return [i for i in range(RELAY_COUNT) if bool(sa[i]) != bool(sb[i])]


def module_diff(
    a: RelayVector | Sequence[bool] | str,
    b: RelayVector | Sequence[bool] | str,
    module: int,
) -> list[int]:
    """Diff restricted to the global indices owned by module."""
    sa = _states(a, "Left vector")
    sb = _states(b, "Right vector")
    return [i for i in module_range(module) if bool(sa[i]) != bool(sb[i])]
