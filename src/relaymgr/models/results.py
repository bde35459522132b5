"""Result models for dispatch/apply operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Optional

from .relay_vector import RelayVector


DispatchStatus = Literal["success", "failed"]
ApplyStatus = Literal["success", "partial", "no_changes"]


@dataclass(slots=True)
class DispatchOutcome:
    """Result for a single transmitted command."""

    seq: int
    command: str
    description: str
    status: DispatchStatus

    error_type: Optional[str] = None
    error_message: Optional[str] = None
    error_details: Optional[dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.status == "success"


@dataclass(slots=True)
class ApplyResult:
    """Aggregate result for RelayManager.apply()."""

    status: ApplyStatus
    message: str
    outcomes: list[DispatchOutcome]

    plan_id: Optional[str] = None
    committed: Optional[RelayVector] = None
    summary: dict[str, int] = field(default_factory=dict)

    @property
    def succeeded(self) -> int:
        return sum(1 for o in self.outcomes if o.ok)

    @property
    def attempted(self) -> int:
        return len(self.outcomes)
