"""
Toggleable trace output for the `redblack` logger hierarchy.

Tracing is off by default. Trees log through loggers under `redblack`
unless given their own, so one handler here sees every tree. The lock
only makes swapping the handler atomic; it gives tree operations no
thread safety.
"""

import logging
import os
import sys
import threading
from typing import TextIO

TRACE_FORMAT = "%(asctime)s - %(name)s - %(message)s"
TRACE_ENV_VAR = "REDBLACK_TRACE"

logger = logging.getLogger("redblack")
logger.addHandler(logging.NullHandler())

_lock = threading.Lock()
_handler: logging.Handler | None = None


def set_output(stream: TextIO) -> logging.Handler:
    """
    Redirect trace output to `stream`, replacing any previous sink.

    Args:
        stream: Writable text stream.

    Returns:
        The installed handler.
    """
    global _handler

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(TRACE_FORMAT))
    with _lock:
        if _handler is not None:
            logger.removeHandler(_handler)
        _handler = handler
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
    return handler


def trace_on() -> logging.Handler:
    """Send trace output to stderr."""
    return set_output(sys.stderr)


def trace_off() -> None:
    """Remove the trace sink and stop forcing DEBUG level."""
    global _handler

    with _lock:
        if _handler is not None:
            logger.removeHandler(_handler)
            _handler = None
        logger.setLevel(logging.NOTSET)


def is_tracing() -> bool:
    return _handler is not None


def configure_from_env() -> bool:
    """Turn tracing on when REDBLACK_TRACE is truthy. Returns whether it did."""
    value = os.environ.get(TRACE_ENV_VAR, "").strip().lower()
    if value in ("1", "true", "yes", "on"):
        trace_on()
        return True
    return False
