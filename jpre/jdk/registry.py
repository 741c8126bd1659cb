"""Enumeration of installed JDKs in the cache."""

from __future__ import annotations

from pathlib import Path

from jpre.core.result import Err, Ok, Result
from jpre.jdk.errors import JdkError, io_error
from jpre.jdk.release import get_jdk_version, is_installed, parse_major

__all__ = ["list_installed_majors", "list_installed_with_versions"]


def list_installed_majors(jdks_dir: Path) -> Result[set[int], JdkError]:
    """Return every major with a finished install in the cache.

    Entries that are not majors (staging directories, lock files, stray
    files) are skipped, and so are major directories without a completion
    marker. A cache that does not exist yet is empty.
    """
    try:
        names = [entry.name for entry in jdks_dir.iterdir()]
    except FileNotFoundError:
        return Ok(set())
    except OSError as e:
        return Err(io_error("Failed to read JDK directory", jdks_dir, e))

    majors: set[int] = set()
    for name in names:
        major = parse_major(name)
        if major is not None and is_installed(jdks_dir, major):
            majors.add(major)
    return Ok(majors)


def list_installed_with_versions(jdks_dir: Path) -> Result[list[tuple[int, str]], JdkError]:
    """Return ``(major, JAVA_VERSION)`` for finished installs, ascending."""
    result = list_installed_majors(jdks_dir)
    if isinstance(result, Err):
        return result

    pairs: list[tuple[int, str]] = []
    for major in sorted(result.value):
        version = get_jdk_version(jdks_dir, major)
        if version is not None:
            pairs.append((major, version))
    return Ok(pairs)
