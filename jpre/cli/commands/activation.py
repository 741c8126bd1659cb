from __future__ import annotations

import typer

from jpre.cli.commands._helpers import MAJOR_HELP, unwrap_or_exit
from jpre.cli.context import build_context
from jpre.jdk.release import MAX_MAJOR


def use(
    major: int = typer.Argument(..., min=0, max=MAX_MAJOR, help=MAJOR_HELP),
) -> None:
    """Use a JDK in this terminal, downloading it if needed."""
    ctx = build_context()
    path = unwrap_or_exit(ctx.activation.activate(major), ctx)
    ctx.console.success(f"JDK {major} active in this terminal ({path})")


def current() -> None:
    """Print the Java version active in this terminal."""
    ctx = build_context()
    version = unwrap_or_exit(ctx.activation.current_jdk(), ctx)
    typer.echo(version)


def link_path() -> None:
    """Print this terminal's activation link, for use as JAVA_HOME."""
    ctx = build_context()
    path = unwrap_or_exit(ctx.activation.session_link_path(), ctx)
    typer.echo(str(path))
