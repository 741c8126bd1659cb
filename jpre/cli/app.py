from __future__ import annotations

import typer

from jpre import __version__
from jpre.cli.commands.activation import current, link_path, use
from jpre.cli.commands.jdks import java_home, list_jdks, update
from jpre.cli.context import options
from jpre.output.log import configure_logging


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="Per-terminal JDK manager: download JDKs on demand, pick one per terminal.",
)


# Commands
app.command()(use)
app.command()(current)
app.command("link-path")(link_path)
app.command("java-home")(java_home)
app.command("list")(list_jdks)
app.command()(update)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Hide download progress."),
) -> None:
    configure_logging(verbose=verbose)
    options.quiet = quiet


def main() -> None:
    app()
