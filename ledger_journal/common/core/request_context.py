"""
RunContext management.
Use ContextVar to share the run ID across async execution and worker threads.
"""

import uuid
from contextvars import ContextVar
from typing import Optional


# Context variable for the run ID (UUID), one per CLI invocation.
_run_id_var: ContextVar[Optional[str]] = ContextVar("run_id", default=None)


def get_run_id() -> Optional[str]:
    """Get the current run ID."""
    return _run_id_var.get()


def generate_run_id() -> str:
    """
    Generate and set a new run ID (UUID) for the current context.
    """
    new_id = str(uuid.uuid4())
    _run_id_var.set(new_id)
    return new_id


def set_run_id(run_id: str) -> str:
    if not run_id:
        raise ValueError("run_id must be a non-empty string")
    _run_id_var.set(run_id)
    return run_id


def clear_run_id() -> None:
    """Clear the run ID context."""
    _run_id_var.set(None)
