"""Error values for JDK installation and activation.

Every failure carries a ``kind`` (what class of problem, mapped to an exit
code by the CLI) and a ``message``. Layers add context with ``with_context``
so the printed error reads ``outer: inner: root cause``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from jpre.remote.http import HttpError

__all__ = [
    "JdkError",
    "JdkErrorKind",
    "InactiveReason",
    "io_error",
    "no_active_jdk",
]

JdkErrorKind = Literal[
    "no_session",
    "remote",
    "format",
    "io",
    "no_active",
]

# Why a session has no active JDK. The user-facing message is the same for
# all of them.
InactiveReason = Literal[
    "no_link",
    "not_a_jdk_dir",
    "not_installed",
]


@dataclass(frozen=True, slots=True)
class JdkError:
    kind: JdkErrorKind
    message: str
    path: Path | None = None
    hint: str | None = None
    reason: InactiveReason | None = None
    cause: JdkError | HttpError | str | None = None

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"

    def with_context(self, message: str) -> JdkError:
        """Wrap this error under a higher-level message, keeping its kind."""
        return JdkError(
            kind=self.kind,
            message=message,
            path=self.path,
            hint=self.hint,
            reason=self.reason,
            cause=self,
        )


def io_error(message: str, path: Path, exc: OSError) -> JdkError:
    detail = exc.strerror or str(exc)
    return JdkError(kind="io", message=f"{message} ({path})", path=path, cause=detail)


def no_active_jdk(reason: InactiveReason, path: Path | None = None) -> JdkError:
    return JdkError(
        kind="no_active",
        message="No active JDK for this session",
        path=path,
        hint="Run: jpre use <major>",
        reason=reason,
    )
