"""Installed JDK inspection.

An install directory ``<jdks>/<major>/`` counts as installed only when it
holds the completion marker; the marker is written after everything else, so
an interrupted install is never mistaken for a finished one. The reported
version comes from the JDK's own ``release`` file, whose ``KEY="value"`` lines
are valid TOML.
"""

from __future__ import annotations

import logging
import re
import tomllib
from pathlib import Path

from jpre.core.structured import StrDict, get_str

__all__ = [
    "FINISHED_MARKER",
    "MAX_MAJOR",
    "RELEASE_FILE",
    "get_jdk_version",
    "is_installed",
    "jdk_dir",
    "parse_major",
    "parse_release",
]

logger = logging.getLogger(__name__)

FINISHED_MARKER = ".jdk_marker"
RELEASE_FILE = "release"

# Majors are stored as an unsigned byte.
MAX_MAJOR = 255

_DIGITS = re.compile(r"[0-9]+")


def parse_major(name: str) -> int | None:
    """Parse a directory name as a JDK major, or None if it is not one."""
    if not _DIGITS.fullmatch(name):
        return None
    major = int(name)
    return major if major <= MAX_MAJOR else None


def jdk_dir(jdks_dir: Path, major: int) -> Path:
    return jdks_dir / str(major)


def is_installed(jdks_dir: Path, major: int) -> bool:
    """True iff the completion marker for ``major`` exists."""
    return (jdk_dir(jdks_dir, major) / FINISHED_MARKER).exists()


def parse_release(text: str) -> StrDict | None:
    """Parse the contents of a ``release`` file; None if it is not valid."""
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        logger.debug("Failed to parse release file: %s", e)
        return None


def get_jdk_version(jdks_dir: Path, major: int) -> str | None:
    """Return the JAVA_VERSION of an installed JDK.

    None covers every way the JDK can be unusable: not installed, marker
    missing, release file missing or unreadable, no JAVA_VERSION.
    """
    path = jdk_dir(jdks_dir, major)
    if not (path / FINISHED_MARKER).exists():
        logger.debug("No finished marker exists in JDK %d", major)
        return None

    release = path / RELEASE_FILE
    if not release.exists():
        logger.debug("No release file exists in JDK %d", major)
        return None

    try:
        text = release.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Failed to read release file of JDK %d: %s", major, e)
        return None

    data = parse_release(text)
    if data is None:
        return None
    return get_str(data, "JAVA_VERSION")
