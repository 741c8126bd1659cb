"""Controlling terminal lookup."""

from __future__ import annotations

import os
import sys

__all__ = ["stderr_tty"]


def stderr_tty() -> str | None:
    """Return the terminal device attached to stderr, or None.

    stderr is checked rather than stdout because stdout is commonly captured,
    e.g. ``export JAVA_HOME=$(jpre link-path)``.
    """
    try:
        fd = sys.stderr.fileno()
    except (AttributeError, ValueError, OSError):
        return None

    if not os.isatty(fd):
        return None
    try:
        return os.ttyname(fd)
    except OSError:
        return None
