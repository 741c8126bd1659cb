"""Logging setup for the CLI.

Library modules log through ``logging.getLogger(__name__)``; only the CLI
installs a handler.
"""

from __future__ import annotations

import logging

__all__ = ["configure_logging"]


def configure_logging(*, verbose: bool) -> None:
    """Send log records to stderr through Rich; DEBUG when verbose."""
    from rich.console import Console
    from rich.logging import RichHandler

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=verbose,
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )
