from __future__ import annotations

from dataclasses import dataclass

import typer

from jpre.core.config import Config, load_user_config
from jpre.core.errors import ErrorCode
from jpre.core.result import Err
from jpre.jdk.activation import ActivationManager
from jpre.jdk.pipeline import JdkInstaller
from jpre.output.console import ConsoleProtocol, RichConsole
from jpre.output.progress import NullProgress, ProgressReporter, RichProgress
from jpre.remote.adoptium import AdoptiumClient
from jpre.remote.http import RealHttpClient


@dataclass(slots=True)
class CLIOptions:
    """Global flags, set by the app callback."""

    quiet: bool = False


options = CLIOptions()


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol
    installer: JdkInstaller
    activation: ActivationManager


def build_context() -> CLIContext:
    config_result = load_user_config()
    if isinstance(config_result, Err):
        typer.echo(f"error: {config_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
    config = config_result.value

    console = RichConsole()

    def progress() -> ProgressReporter:
        if options.quiet:
            return NullProgress()
        return RichProgress(console.rich)

    source = AdoptiumClient(RealHttpClient(timeout=config.http.timeout), config=config.adoptium)
    installer = JdkInstaller(
        config.jdks_dir(),
        source,
        progress=progress,
        console=None if options.quiet else console,
    )
    return CLIContext(
        config=config,
        console=console,
        installer=installer,
        activation=ActivationManager(installer),
    )
