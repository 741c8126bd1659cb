"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from jpre.core.errors import ErrorCode
from jpre.output.console import Style

if TYPE_CHECKING:
    from jpre.jdk.errors import JdkError
    from jpre.output.console import ConsoleProtocol

__all__ = ["print_jdk_error", "jdk_error_exit_code"]


def print_jdk_error(error: JdkError, console: ConsoleProtocol) -> None:
    """Print the full error chain, then its hint if any."""
    console.error(str(error))
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def jdk_error_exit_code(error: JdkError) -> int:
    """Get exit code for a JDK error."""
    match error.kind:
        case "no_session" | "no_active":
            return int(ErrorCode.ENV_ERROR)
        case "remote":
            return int(ErrorCode.NETWORK_ERROR)
        case "format":
            return int(ErrorCode.USER_ERROR)
        case "io":
            return int(ErrorCode.IO_ERROR)
