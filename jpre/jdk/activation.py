"""Per-terminal JDK activation.

Each terminal gets one symlink in a shared directory, named after the
terminal device of stderr (``/dev/pts/3`` -> ``-dev-pts-3``). Activating a
JDK repoints that link; shells use it as a stable ``JAVA_HOME``:

    export JAVA_HOME="$(jpre link-path)"
    jpre use 17

Links are never shared between terminals, so no locking is needed. Links of
closed terminals are left behind and either still point at a valid JDK or
get overwritten when the device is reused.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from jpre.core.result import Err, Ok, Result
from jpre.jdk.errors import JdkError, io_error, no_active_jdk
from jpre.jdk.release import get_jdk_version, parse_major
from jpre.platform.files import atomic_symlink
from jpre.platform.paths import link_dir as default_link_dir
from jpre.platform.terminal import stderr_tty

if TYPE_CHECKING:
    from jpre.jdk.pipeline import JdkInstaller

__all__ = ["ActivationManager", "ActiveJdk", "tty_link_name"]


def tty_link_name(tty: str) -> str:
    """Flatten a terminal device path into a file name.

    Path separators become ``-``; literal ``-`` and ``%`` are escaped so two
    different devices never share a name.
    """
    return tty.replace("%", "%25").replace("-", "%2D").replace("/", "-")


@dataclass(frozen=True, slots=True)
class ActiveJdk:
    """The JDK a terminal currently points at."""

    major: int
    version: str
    path: Path


class ActivationManager:
    """Reads and repoints the calling terminal's activation link."""

    def __init__(
        self,
        installer: JdkInstaller,
        *,
        link_dir: Path | None = None,
        tty: Callable[[], str | None] = stderr_tty,
    ) -> None:
        """Initialize manager.

        Args:
            installer: Used to resolve (and install on demand) JDK paths
            link_dir: Directory of per-terminal links (default: under tmp)
            tty: Returns the session's terminal device, None if there is none
        """
        self._installer = installer
        self._link_dir = link_dir or default_link_dir()
        self._tty = tty

    def session_link_path(self) -> Result[Path, JdkError]:
        """Path of this terminal's activation link (which may not exist yet)."""
        tty = self._tty()
        if tty is None:
            return Err(
                JdkError(
                    kind="no_session",
                    message="Not a TTY",
                    hint="jpre needs stderr attached to an interactive terminal",
                )
            )

        try:
            self._link_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return Err(io_error("Failed to create by-tty directory", self._link_dir, e))
        return Ok(self._link_dir / tty_link_name(tty))

    def activate(self, major: int) -> Result[Path, JdkError]:
        """Point this terminal at ``major``, installing it first if needed.

        Returns:
            Ok with the JDK install path, or Err with JdkError
        """
        link = self.session_link_path()
        if isinstance(link, Err):
            return link.map_err(lambda e: e.with_context("Failed to get symlink location"))

        installed = self._installer.ensure_installed(major)
        if isinstance(installed, Err):
            return installed.map_err(lambda e: e.with_context("Failed to get JDK path"))
        path = installed.value.absolute()

        try:
            atomic_symlink(path, link.value)
        except OSError as e:
            return Err(io_error("Failed to make new symlink", link.value, e))
        return Ok(path)

    def resolve_current(self) -> Result[ActiveJdk, JdkError]:
        """Follow this terminal's link to an installed JDK.

        Every failure after the session lookup is a ``no_active`` error; its
        ``reason`` says whether the link is missing, points somewhere that is
        not a JDK directory, or points at a JDK that is no longer installed.
        """
        link = self.session_link_path()
        if isinstance(link, Err):
            return link

        try:
            target = Path(os.readlink(link.value))
        except OSError:
            return Err(no_active_jdk("no_link", link.value))

        major = parse_major(target.name)
        if major is None:
            return Err(no_active_jdk("not_a_jdk_dir", target))

        version = get_jdk_version(self._installer.jdks_dir, major)
        if version is None:
            return Err(no_active_jdk("not_installed", target))
        return Ok(ActiveJdk(major=major, version=version, path=target))

    def current_jdk(self) -> Result[str, JdkError]:
        """Java version of this terminal's active JDK."""
        return self.resolve_current().map(lambda active: active.version)
