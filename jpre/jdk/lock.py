"""Per-major advisory install lock.

Two processes installing the same major would otherwise race on one install
directory. The lock file sits next to the install directories
(``<jdks>/.<major>.lock``) so removing an install never removes its lock.
"""

from __future__ import annotations

import fcntl
import logging
from pathlib import Path
from types import TracebackType
from typing import BinaryIO

__all__ = ["InstallLock"]

logger = logging.getLogger(__name__)


class InstallLock:
    """Exclusive ``flock`` held for the duration of an install.

    Blocks until the lock is free. Usage:

        with InstallLock(jdks_dir, 17):
            ...
    """

    def __init__(self, jdks_dir: Path, major: int) -> None:
        self.path = jdks_dir / f".{major}.lock"
        self._handle: BinaryIO | None = None

    def acquire(self) -> None:
        """Take the lock, waiting for another installer if needed.

        Raises:
            OSError: If the lock file cannot be created or locked.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        handle = open(self.path, "a+b")
        try:
            try:
                fcntl.flock(handle.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
            except BlockingIOError:
                logger.info("Waiting for another install to finish (%s)", self.path)
                fcntl.flock(handle.fileno(), fcntl.LOCK_EX)
        except OSError:
            handle.close()
            raise
        self._handle = handle
        logger.debug("Acquired install lock %s", self.path)

    def release(self) -> None:
        if self._handle is None:
            return
        try:
            fcntl.flock(self._handle.fileno(), fcntl.LOCK_UN)
        finally:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> InstallLock:
        self.acquire()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()
