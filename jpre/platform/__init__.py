"""Platform abstraction layer."""

from .detection import (
    Arch,
    Platform,
    detect_arch,
    detect_platform,
    is_macos,
)
from .files import atomic_symlink
from .paths import (
    home,
    link_dir,
    user_cache_dir,
    user_config_dir,
)
from .terminal import stderr_tty

__all__ = [
    # detection
    "Arch",
    "Platform",
    "detect_arch",
    "detect_platform",
    "is_macos",
    # files
    "atomic_symlink",
    # paths
    "home",
    "link_dir",
    "user_cache_dir",
    "user_config_dir",
    # terminal
    "stderr_tty",
]
