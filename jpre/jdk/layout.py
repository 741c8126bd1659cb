"""Locating the JDK root inside an extracted archive.

Archives wrap the JDK in one top-level folder (``jdk-17.0.2+8/``); on macOS
the actual JDK home sits further down in ``<folder>/Contents/Home``. This
module is the only place that knows about those layouts.
"""

from __future__ import annotations

from pathlib import Path

from jpre.platform.detection import Platform

__all__ = ["locate_jdk_root", "promotion_root", "visible_entries"]

MACOS_HOME = Path("Contents") / "Home"


def visible_entries(staging: Path) -> list[Path]:
    """Top-level entries of ``staging``, without dot-prefixed names.

    Raises:
        OSError: If the directory cannot be read.
    """
    return sorted(p for p in staging.iterdir() if not p.name.startswith("."))


def locate_jdk_root(entry: Path, platform: Platform) -> Path:
    """Return the JDK home inside a single extracted top-level folder."""
    if platform == Platform.MACOS:
        home = entry / MACOS_HOME
        if home.is_dir():
            return home
    return entry


def promotion_root(staging: Path, platform: Platform) -> Path:
    """Directory whose contents become the install directory.

    With exactly one visible top-level directory, that directory (or its
    platform-specific JDK home) is promoted; otherwise the staging directory
    itself is.

    Raises:
        OSError: If the staging directory cannot be read.
    """
    entries = visible_entries(staging)
    if len(entries) == 1 and entries[0].is_dir():
        return locate_jdk_root(entries[0], platform)
    return staging
