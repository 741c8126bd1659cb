"""JDK acquisition and activation.

- release.py: installed JDK inspection (completion marker, release file)
- registry.py: enumeration of installed majors
- pipeline.py: download, extraction and atomic installation
- layout.py: locating the JDK root inside an extracted archive
- lock.py: per-major install lock
- activation.py: per-terminal activation links
"""

from jpre.jdk.activation import ActivationManager, ActiveJdk, tty_link_name
from jpre.jdk.errors import InactiveReason, JdkError, JdkErrorKind
from jpre.jdk.pipeline import JdkInstaller
from jpre.jdk.registry import list_installed_majors, list_installed_with_versions
from jpre.jdk.release import FINISHED_MARKER, get_jdk_version, parse_major

__all__ = [
    # Activation
    "ActivationManager",
    "ActiveJdk",
    "tty_link_name",
    # Errors
    "InactiveReason",
    "JdkError",
    "JdkErrorKind",
    # Install
    "JdkInstaller",
    # Registry
    "FINISHED_MARKER",
    "get_jdk_version",
    "list_installed_majors",
    "list_installed_with_versions",
    "parse_major",
]
