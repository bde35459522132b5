"""Command synthesis: turn (staging, committed) into the cheapest CommandPlan."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence

from relaymgr.models.relay_vector import (
    MODULE_COUNT,
    RelayVector,
    coerce_vector,
    split_index,
)
from relaymgr.util.ids import new_plan_id
from relaymgr.util.time import now_utc

from . import command as factories
from .command import Command
from .command_plan import CommandPlan
from .diff import diff, module_diff


class ModulePolicy(str, Enum):
    """
    What to do with modules holding a mixed on/off change when another module
    in the same plan was collapsed into a module-wide command.

    COMPATIBLE: leave them unreconciled (the plan is exactly the module
        commands). This is what deployed consoles send today.
    PER_RELAY: add one single-relay command per changed relay of each mixed
        module. Commands are ordered by module.
    """

    COMPATIBLE = "COMPATIBLE"
    PER_RELAY = "PER_RELAY"


def synthesize_plan(
    staging: RelayVector | Sequence[bool],
    committed: RelayVector | Sequence[bool],
    *,
    policy: ModulePolicy = ModulePolicy.COMPATIBLE,
    plan_id: Optional[str] = None,
) -> CommandPlan:
    """
    Build a CommandPlan from the staged and committed vectors.

    Rules (first match decides the whole plan):
        1. staging all ON, committed not all ON   -> [ALLON]
        2. staging all OFF, committed not all OFF -> [ALLOFF]
        3. exactly one relay differs               -> [M{m}R{r}ON|OFF]
        4. otherwise, per module with changes, a uniform staging slice becomes
           M{m}ALLON / M{m}ALLOFF. If no module collapsed, the whole staging
           vector is sent as one 32-bit bitmask instead.
    An empty diff gives an empty plan.
    """
    target = coerce_vector(staging)
    base = coerce_vector(committed)

    return CommandPlan(
        plan_id=plan_id or new_plan_id(),
        created_at=now_utc(),
        staging=target,
        committed=base,
        commands=synthesize_commands(target, base, policy=policy),
    )


def synthesize_commands(
    staging: RelayVector,
    committed: RelayVector,
    *,
    policy: ModulePolicy = ModulePolicy.COMPATIBLE,
) -> list[Command]:
    policy = ModulePolicy(policy)
    changed = diff(staging, committed)

    if staging.all_equal(True) and not committed.all_equal(True):
        return [factories.all_on()]

    if staging.all_equal(False) and not committed.all_equal(False):
        return [factories.all_off()]

    if len(changed) == 1:
        return [_single_relay_command(staging, changed[0])]

    if not changed:
        return []

    module_commands: dict[int, Command] = {}
    mixed_modules: list[int] = []

    for module in range(MODULE_COUNT):
        if not module_diff(staging, committed, module):
            continue

        if staging.module_all_equal(module, True) and not committed.module_all_equal(module, True):
            module_commands[module] = factories.module_all(module, True)
        elif staging.module_all_equal(module, False) and not committed.module_all_equal(module, False):
            module_commands[module] = factories.module_all(module, False)
        else:
            mixed_modules.append(module)

    if not module_commands:
        if len(changed) > 1:
            return [factories.raw_bitmask(staging, len(changed))]
        # Unreachable while rule 3 handles a single change.
        return [_single_relay_command(staging, i) for i in changed]

    if policy is ModulePolicy.COMPATIBLE:
        return [module_commands[m] for m in sorted(module_commands)]

    commands: list[Command] = []
    for module in range(MODULE_COUNT):
        if module in module_commands:
            commands.append(module_commands[module])
        elif module in mixed_modules:
            commands.extend(
                _single_relay_command(staging, i)
                for i in module_diff(staging, committed, module)
            )
    return commands


def _single_relay_command(staging: RelayVector, index: int) -> Command:
    module, relay = split_index(index)
    return factories.single_relay(module, relay, staging.get(index))
