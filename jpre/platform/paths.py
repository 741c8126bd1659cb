"""Platform-aware path utilities.

User-level directories for configuration and the JDK cache, plus the shared
directory that holds per-terminal activation links.
"""

from __future__ import annotations

import os
import tempfile
from functools import lru_cache
from pathlib import Path

from .detection import is_macos

__all__ = [
    "APP_NAME",
    "clear_caches",
    "home",
    "link_dir",
    "user_cache_dir",
    "user_config_dir",
]

# Application name used for directory naming
APP_NAME = "jpre"


@lru_cache(maxsize=1)
def home() -> Path:
    """Get user's home directory.

    Prefers $HOME for CI/container scenarios, then Path.home().
    """
    home_env = os.environ.get("HOME")
    if home_env:
        return Path(home_env)
    return Path.home()


@lru_cache(maxsize=1)
def user_config_dir() -> Path:
    """Get the user-level configuration directory.

    Location: $XDG_CONFIG_HOME/jpre or ~/.config/jpre
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / APP_NAME
    return home() / ".config" / APP_NAME


@lru_cache(maxsize=1)
def user_cache_dir() -> Path:
    """Get the user-level cache directory.

    Location: ~/Library/Caches/jpre (macOS), $XDG_CACHE_HOME/jpre or
    ~/.cache/jpre elsewhere.
    """
    if is_macos():
        return home() / "Library" / "Caches" / APP_NAME

    xdg_cache = os.environ.get("XDG_CACHE_HOME")
    if xdg_cache:
        return Path(xdg_cache) / APP_NAME
    return home() / ".cache" / APP_NAME


def link_dir() -> Path:
    """Shared directory holding one activation link per terminal."""
    return Path(tempfile.gettempdir()) / f"{APP_NAME}-by-tty"


def clear_caches() -> None:
    """Clear all cached paths.

    Useful for testing when environment variables change.
    """
    home.cache_clear()
    user_config_dir.cache_clear()
    user_cache_dir.cache_clear()
