"""RelayLocal: staged vs committed relay state (no external I/O)."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from relaymgr.errors import InvalidStateError
from relaymgr.models.relay_vector import MODULE_COUNT, RelayVector, coerce_vector
from relaymgr.plan import CommandPlan, ModulePolicy, diff, synthesize_plan

from .validators import (
    normalize_enabled_modules,
    validate_module_enabled,
    validate_relay_enabled,
)


class RelayLocal:
    """
    Local view of the relay bank: operator edits (staging) over the last
    fully delivered state (committed).

    Both are immutable RelayVector snapshots; every edit swaps in a new
    staging vector. The diff is never cached.
    """

    def __init__(
        self,
        committed: Optional[RelayVector | Sequence[bool] | str] = None,
        *,
        enabled_modules: Optional[Iterable[int]] = None,
    ) -> None:
        base = RelayVector.all_off() if committed is None else coerce_vector(committed)
        self._committed = base
        self._staging = base
        self._enabled = normalize_enabled_modules(enabled_modules)
        self._busy = False

    @classmethod
    def from_bitmask(
        cls,
        bits: str,
        *,
        enabled_modules: Optional[Iterable[int]] = None,
    ) -> RelayLocal:
        return cls(RelayVector.from_bitmask(bits), enabled_modules=enabled_modules)

    # ----------------------------
    # Read APIs
    # ----------------------------
    @property
    def staging(self) -> RelayVector:
        return self._staging

    @property
    def committed(self) -> RelayVector:
        return self._committed

    @property
    def enabled_modules(self) -> frozenset[int]:
        return self._enabled

    def get(self, index: int) -> bool:
        return self._staging.get(index)

    def diff(self) -> list[int]:
        return diff(self._staging, self._committed)

    @property
    def has_unapplied_changes(self) -> bool:
        return bool(self.diff())

    # ----------------------------
    # Staging edits
    # ----------------------------
    def toggle(self, index: int) -> bool:
        """Flip one relay; returns its new staged state."""
        validate_relay_enabled(self._enabled, index)
        self._staging = self._staging.toggle(index)
        return self._staging.get(index)

    def set_relay(self, index: int, value: bool) -> None:
        validate_relay_enabled(self._enabled, index)
        self._staging = self._staging.set(index, value)

    def set_module(self, module: int, value: bool) -> None:
        validate_module_enabled(self._enabled, module)
        self._staging = self._staging.with_module(module, value)

    def set_all(self, value: bool) -> None:
        """Set every relay of every enabled module; disabled modules keep their state."""
        staged = self._staging
        for module in range(MODULE_COUNT):
            if module in self._enabled:
                staged = staged.with_module(module, value)
        self._staging = staged

    def discard(self) -> None:
        """Revert staging to the committed vector."""
        if self._busy:
            raise InvalidStateError("Cannot discard while commands are being dispatched.")
        self._staging = self._committed

    # ----------------------------
    # Plan building / commit
    # ----------------------------
    def snapshot(self) -> RelayVector:
        return self._staging

    def build_plan(self, *, policy: ModulePolicy = ModulePolicy.COMPATIBLE) -> CommandPlan:
        """Build a CommandPlan for the current staging against committed."""
        return synthesize_plan(self._staging, self._committed, policy=policy)

    def commit(self, vector: RelayVector) -> None:
        """
        Move the committed baseline to `vector`.

        Called by the manager once every command of a plan was delivered;
        staging is left alone so edits made mid-dispatch stay pending.
        """
        self._committed = coerce_vector(vector)

    @property
    def busy(self) -> bool:
        return self._busy

    def set_busy(self, busy: bool) -> None:
        """Mark a plan as in flight; discard() is rejected until cleared."""
        self._busy = bool(busy)
