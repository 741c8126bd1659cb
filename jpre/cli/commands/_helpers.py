"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer

from jpre.core.result import Err, Result
from jpre.output.errors import jdk_error_exit_code, print_jdk_error

if TYPE_CHECKING:
    from jpre.cli.context import CLIContext
    from jpre.jdk.errors import JdkError


def unwrap_or_exit[T](result: Result[T, JdkError], ctx: CLIContext) -> T:
    """Return the Ok value, or print the error and exit with its code."""
    if isinstance(result, Err):
        print_jdk_error(result.error, ctx.console)
        raise typer.Exit(code=jdk_error_exit_code(result.error))
    return result.value


MAJOR_HELP = "JDK major version, e.g. 17"
