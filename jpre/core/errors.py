"""Exit codes for CLI commands.

The numeric values are process exit codes and must remain stable:
- 0: Success
- 1: User error (bad arguments, unsupported archive format)
- 2: Environment error (no terminal, no active JDK, bad config)
- 4: Network error (catalog unreachable, bad response)
- 5: I/O error (cannot create, move or link a directory)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    NETWORK_ERROR = 4
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK
