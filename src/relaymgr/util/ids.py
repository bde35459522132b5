from __future__ import annotations

import uuid


def new_uuid() -> str:
    """Generate a UUID4 string."""
    return str(uuid.uuid4())


def new_plan_id() -> str:
    """Generate a new CommandPlan ID."""
    return new_uuid()
