"""Strict validation helpers for RelayLocal."""

from __future__ import annotations

from typing import AbstractSet, Iterable

from relaymgr.errors import ModuleDisabledError
from relaymgr.models.relay_vector import MODULE_COUNT, split_index, validate_module


def normalize_enabled_modules(modules: Iterable[int] | None) -> frozenset[int]:
    """None means every module is enabled."""
    if modules is None:
        return frozenset(range(MODULE_COUNT))
    enabled = frozenset(modules)
    for module in enabled:
        validate_module(module)
    return enabled


def validate_module_enabled(enabled: AbstractSet[int], module: int) -> None:
    validate_module(module)
    if module not in enabled:
        raise ModuleDisabledError(
            f"Module {module + 1} is not in use",
            details={"module": module},
        )


def validate_relay_enabled(enabled: AbstractSet[int], index: int) -> None:
    module, _ = split_index(index)
    validate_module_enabled(enabled, module)
