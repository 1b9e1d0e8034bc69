"""
Diagnostics that read a tree without changing it: JSON snapshots and trace output.
"""

from redblack.diagnostics.snapshot import dumps, snapshot, write_snapshot
from redblack.diagnostics.trace import (
    configure_from_env,
    is_tracing,
    set_output,
    trace_off,
    trace_on,
)

__all__ = [
    "configure_from_env",
    "dumps",
    "is_tracing",
    "set_output",
    "snapshot",
    "trace_off",
    "trace_on",
    "write_snapshot",
]
