"""CommandPlan model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterator

from relaymgr.models.relay_vector import RelayVector

from .codec import encode_command
from .command import Command
from .diff import diff


@dataclass(slots=True)
class CommandPlan:
    """
    Ordered commands that move the remote system from `committed` to `staging`.

    Each command sets an absolute target for its scope, so order matters
    only for audit.
    """

    plan_id: str
    created_at: datetime
    staging: RelayVector
    committed: RelayVector
    commands: list[Command]

    def changed(self) -> list[int]:
        """Indices this plan reconciles, ascending."""
        return diff(self.staging, self.committed)

    def texts(self) -> list[str]:
        return [encode_command(c) for c in self.commands]

    def is_empty(self) -> bool:
        return not self.commands

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)
