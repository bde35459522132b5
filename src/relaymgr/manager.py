"""RelayManager: stage relay edits locally, then apply them as optimized commands."""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum
from typing import Any, Iterable, Optional, Sequence

from relaymgr.errors import (
    InvalidArgumentError,
    InvalidStateError,
    NetworkError,
    TransportError,
)
from relaymgr.local import RelayLocal
from relaymgr.models import (
    HISTORY_CAPACITY,
    ApplyResult,
    CommandHistory,
    DispatchOutcome,
    RelayVector,
)
from relaymgr.plan import (
    CUSTOM_DESCRIPTION,
    DIAGNOSTIC_COMMANDS,
    Command,
    CommandPlan,
    ModulePolicy,
    decode_command,
    encode_command,
    synthesize_plan,
)
from relaymgr.transport import CommandTransport, HttpCommandTransport, TransportConfig

logger = logging.getLogger(__name__)

NO_CHANGES_MESSAGE = "No changes to apply"


class SessionState(str, Enum):
    """Apply protocol states."""

    IDLE = "IDLE"
    SYNTHESIZING = "SYNTHESIZING"
    DISPATCHING = "DISPATCHING"
    COMMITTING = "COMMITTING"
    PARTIALLY_FAILED = "PARTIALLY_FAILED"


class RelayManager:
    """
    High-level session for one relay bank: Stage -> Plan -> Apply.

    The committed baseline moves only when every command of a plan was
    delivered. A partially delivered plan leaves committed untouched and is
    reported as "partial"; nothing is retried or rolled back.
    """

    def __init__(
        self,
        config: TransportConfig,
        *,
        committed: Optional[RelayVector | Sequence[bool] | str] = None,
        enabled_modules: Optional[Iterable[int]] = None,
        policy: ModulePolicy = ModulePolicy.COMPATIBLE,
        history_capacity: int = HISTORY_CAPACITY,
    ) -> None:
        transport = HttpCommandTransport(config)
        self._init_session(
            transport,
            committed=committed,
            enabled_modules=enabled_modules,
            policy=policy,
            history_capacity=history_capacity,
        )
        self._owned_transport = transport

    @classmethod
    def from_transport(
        cls,
        transport: CommandTransport,
        *,
        committed: Optional[RelayVector | Sequence[bool] | str] = None,
        enabled_modules: Optional[Iterable[int]] = None,
        policy: ModulePolicy = ModulePolicy.COMPATIBLE,
        history_capacity: int = HISTORY_CAPACITY,
    ) -> "RelayManager":
        """Create manager with an injected transport (useful for tests)."""
        obj = cls.__new__(cls)
        obj._init_session(
            transport,
            committed=committed,
            enabled_modules=enabled_modules,
            policy=policy,
            history_capacity=history_capacity,
        )
        return obj

    def _init_session(
        self,
        transport: CommandTransport,
        *,
        committed: Optional[RelayVector | Sequence[bool] | str],
        enabled_modules: Optional[Iterable[int]],
        policy: ModulePolicy,
        history_capacity: int,
    ) -> None:
        self._transport = transport
        self._owned_transport: Optional[HttpCommandTransport] = None
        self._local = RelayLocal(committed, enabled_modules=enabled_modules)
        self._history = CommandHistory(history_capacity)
        self._policy = ModulePolicy(policy)
        self._state = SessionState.IDLE

    # ----------------------------
    # Read APIs
    # ----------------------------
    @property
    def local(self) -> RelayLocal:
        """Staging/committed view; edit relays through it."""
        return self._local

    @property
    def history(self) -> CommandHistory:
        return self._history

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def policy(self) -> ModulePolicy:
        return self._policy

    @property
    def staging(self) -> RelayVector:
        return self._local.staging

    @property
    def committed(self) -> RelayVector:
        return self._local.committed

    @property
    def has_unapplied_changes(self) -> bool:
        return self._local.has_unapplied_changes

    # ----------------------------
    # Session actions
    # ----------------------------
    def build_plan(self) -> CommandPlan:
        """Preview the plan apply() would send right now."""
        return self._local.build_plan(policy=self._policy)

    def discard(self) -> None:
        """
        Revert staging to committed.

        Raises:
            InvalidStateError: if an apply is in flight.
        """
        self._require_idle("discard")
        self._local.discard()

    def apply(self) -> ApplyResult:
        """
        Synthesize a plan from staging and dispatch it command by command.

        Policy:
            - Every command is attempted even if an earlier one failed.
            - Each attempt is recorded in history as soon as it completes.
            - All delivered: committed := the staging snapshot taken before
              synthesis (later staging edits stay pending).
            - Otherwise committed is unchanged and status is "partial".

        Raises:
            InvalidStateError: if another apply is already in flight.
        """
        self._require_idle("apply")

        if not self._local.has_unapplied_changes:
            logger.info(NO_CHANGES_MESSAGE)
            return _no_changes_result()

        self._local.set_busy(True)
        try:
            self._state = SessionState.SYNTHESIZING
            snapshot = self._local.snapshot()
            plan = synthesize_plan(snapshot, self._local.committed, policy=self._policy)
            if plan.is_empty():
                logger.info(NO_CHANGES_MESSAGE)
                return _no_changes_result(plan.plan_id)

            logger.info(
                "Plan %s: %d command(s) for %d changed relay(s): %s",
                plan.plan_id,
                len(plan),
                len(plan.changed()),
                ", ".join(plan.texts()),
            )

            self._state = SessionState.DISPATCHING
            outcomes: list[DispatchOutcome] = []
            for seq, command in enumerate(plan.commands):
                outcomes.append(self._dispatch(seq, command))

            return self._finish(plan, outcomes)
        finally:
            self._state = SessionState.IDLE
            self._local.set_busy(False)

    def send_command(self, text: str, description: str = "") -> DispatchOutcome:
        """
        Send a custom or diagnostic command verbatim (STATUS, HEALTH, M1R1ON, ...).

        Staging and committed are not touched. The attempt is recorded in
        history under `description`; without one, diagnostic commands keep
        their standard name and anything else is labelled "Custom Command",
        even text that matches a relay command form.

        Raises:
            InvalidArgumentError: if text is empty.
            InvalidStateError: if an apply is in flight.
        """
        if not isinstance(text, str) or not text.strip():
            raise InvalidArgumentError("Command text must be a non-empty string")
        self._require_idle("send a command")

        command = decode_command(text)
        label = description or DIAGNOSTIC_COMMANDS.get(text.strip(), CUSTOM_DESCRIPTION)
        command = _with_description(command, label)

        self._state = SessionState.DISPATCHING
        try:
            return self._dispatch(0, command)
        finally:
            self._state = SessionState.IDLE

    def close(self) -> None:
        """Close the transport if this manager created it; injected transports are left open."""
        if self._owned_transport is not None:
            self._owned_transport.close()

    def __enter__(self) -> RelayManager:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ----------------------------
    # Internals
    # ----------------------------
    def _require_idle(self, action: str) -> None:
        if self._state is not SessionState.IDLE:
            raise InvalidStateError(
                f"Cannot {action} while state is {self._state.value}",
                details={"state": self._state.value},
            )

    def _dispatch(self, seq: int, command: Command) -> DispatchOutcome:
        text = encode_command(command)
        logger.debug("Dispatching #%d %s (%s)", seq, text, command.description)

        try:
            self._transport.send(text, description=command.description)
        except TransportError as exc:
            suffix = " - ERROR" if isinstance(exc, NetworkError) else " - FAILED"
            self._history.record(text, command.description + suffix, success=False)
            logger.warning("Command %s failed: %s", text, exc)
            return _failed_outcome(seq, text, command, exc)

        self._history.record(text, command.description, success=True)
        return DispatchOutcome(
            seq=seq,
            command=text,
            description=command.description,
            status="success",
        )

    def _finish(self, plan: CommandPlan, outcomes: list[DispatchOutcome]) -> ApplyResult:
        total = len(outcomes)
        succeeded = sum(1 for o in outcomes if o.ok)
        summary = {"success": succeeded, "failed": total - succeeded}

        if succeeded == total:
            self._state = SessionState.COMMITTING
            self._local.commit(plan.staging)
            message = f"Applied {total} commands successfully"
            logger.info("Plan %s: %s", plan.plan_id, message)
            return ApplyResult(
                status="success",
                message=message,
                outcomes=outcomes,
                plan_id=plan.plan_id,
                committed=plan.staging,
                summary=summary,
            )

        self._state = SessionState.PARTIALLY_FAILED
        message = f"Applied {succeeded}/{total} commands"
        logger.warning("Plan %s: %s; committed state unchanged", plan.plan_id, message)
        return ApplyResult(
            status="partial",
            message=message,
            outcomes=outcomes,
            plan_id=plan.plan_id,
            committed=None,
            summary=summary,
        )


def _no_changes_result(plan_id: Optional[str] = None) -> ApplyResult:
    return ApplyResult(
        status="no_changes",
        message=NO_CHANGES_MESSAGE,
        outcomes=[],
        plan_id=plan_id,
        summary={"success": 0, "failed": 0},
    )


def _with_description(command: Command, description: str) -> Command:
    return replace(command, description=description)


def _failed_outcome(
    seq: int,
    text: str,
    command: Command,
    exc: TransportError,
) -> DispatchOutcome:
    return DispatchOutcome(
        seq=seq,
        command=text,
        description=command.description,
        status="failed",
        error_type=exc.__class__.__name__,
        error_message=str(exc),
        error_details=getattr(exc, "details", None),
    )
