from __future__ import annotations

import typer

from jpre.cli.commands._helpers import MAJOR_HELP, unwrap_or_exit
from jpre.cli.context import build_context
from jpre.core.errors import ErrorCode
from jpre.core.result import Err, Ok
from jpre.jdk.registry import list_installed_majors, list_installed_with_versions
from jpre.jdk.release import MAX_MAJOR
from jpre.output.errors import jdk_error_exit_code, print_jdk_error


def java_home(
    major: int = typer.Argument(..., min=0, max=MAX_MAJOR, help=MAJOR_HELP),
) -> None:
    """Print the install path of a JDK, downloading it if needed."""
    ctx = build_context()
    path = unwrap_or_exit(ctx.installer.ensure_installed(major), ctx)
    typer.echo(str(path))


def list_jdks() -> None:
    """List installed JDKs; the one active in this terminal is starred."""
    ctx = build_context()
    installed = unwrap_or_exit(list_installed_with_versions(ctx.installer.jdks_dir), ctx)
    if not installed:
        ctx.console.info("No JDKs installed")
        return

    # Outside a terminal there is simply nothing to star.
    active = ctx.activation.resolve_current()
    active_major = active.value.major if isinstance(active, Ok) else None

    for major, version in installed:
        marker = "*" if major == active_major else " "
        typer.echo(f"{marker} {major:>3}  {version}")


def update(
    majors: list[int] | None = typer.Argument(
        None, min=0, max=MAX_MAJOR, help="Majors to update (default: all installed)"
    ),
) -> None:
    """Reinstall the latest build of installed JDKs."""
    ctx = build_context()
    if not majors:
        majors = sorted(unwrap_or_exit(list_installed_majors(ctx.installer.jdks_dir), ctx))
    if not majors:
        ctx.console.info("No JDKs installed")
        return

    exit_code = int(ErrorCode.OK)
    for major in majors:
        result = ctx.installer.install(major)
        if isinstance(result, Err):
            error = result.error.with_context(f"Failed to update JDK {major}")
            print_jdk_error(error, ctx.console)
            if exit_code == ErrorCode.OK:
                exit_code = jdk_error_exit_code(error)
            continue
        ctx.console.success(f"JDK {major} updated ({result.value})")

    if exit_code != ErrorCode.OK:
        raise typer.Exit(code=exit_code)
