"""JDK download and installation.

This module provides a JdkInstaller that:
- Returns an already-installed JDK without touching the network
- Streams the archive from the catalog through gzip and tar into a private
  staging directory, on a worker thread, while the caller's thread renders
  progress
- Promotes the JDK root from staging into ``<jdks>/<major>`` with a rename
- Writes the completion marker last

Until the marker exists, an install directory is treated as absent, so any
failure or crash before that point leaves the cache as if nothing had been
attempted.
"""

from __future__ import annotations

import gzip
import http.client
import logging
import os
import shutil
import ssl
import tarfile
import tempfile
import threading
import zlib
from collections.abc import Callable
from pathlib import Path
from typing import IO, TYPE_CHECKING

from jpre.core.result import Err, Ok, Result
from jpre.jdk.errors import JdkError, io_error
from jpre.jdk.layout import promotion_root
from jpre.jdk.lock import InstallLock
from jpre.jdk.release import FINISHED_MARKER, is_installed, jdk_dir
from jpre.output.progress import NullProgress
from jpre.platform.detection import Platform, detect_platform
from jpre.remote.disposition import parse_filename

if TYPE_CHECKING:
    from jpre.output.console import ConsoleProtocol
    from jpre.output.progress import ProgressReporter
    from jpre.remote.adoptium import JdkSource
    from jpre.remote.http import StreamResponse

__all__ = [
    "JdkInstaller",
    "STAGING_PREFIX",
    "check_archive_name",
    "unpack_tar_gz",
]

logger = logging.getLogger(__name__)

STAGING_PREFIX = "jdk-download"

# Only gzip-compressed tar is supported; this tuple is the extension point.
SUPPORTED_SUFFIXES = (".tar.gz",)

# Seconds between progress redraws while waiting for the worker.
_REFRESH_INTERVAL = 0.1


class _ProgressReader:
    """Read-through wrapper reporting how many bytes pass a stage boundary."""

    def __init__(self, raw: IO[bytes], on_read: Callable[[int], None]) -> None:
        self._raw = raw
        self._on_read = on_read

    def read(self, size: int = -1) -> bytes:
        data = self._raw.read(size)
        if data:
            self._on_read(len(data))
        return data


def check_archive_name(filename: str) -> Result[str, JdkError]:
    """Accept ``filename`` if it names a supported archive."""
    if filename.lower().endswith(SUPPORTED_SUFFIXES):
        return Ok(filename)
    return Err(
        JdkError(
            kind="format",
            message=f"Don't know how to handle {filename}",
            hint="Only .tar.gz archives are supported",
        )
    )


def unpack_tar_gz(source: IO[bytes], dest: Path, progress: ProgressReporter) -> int:
    """Stream-extract a gzip tar into ``dest``.

    Download bytes feed gzip, decompressed bytes feed the tar reader; each
    boundary reports to ``progress``. Permissions are kept, setuid bits and
    paths escaping ``dest`` are not (tarfile's "tar" filter).

    Returns:
        Number of archive entries extracted.

    Raises:
        tarfile.TarError, EOFError, zlib.error, OSError: On a corrupt or
        truncated archive or a failed write.
    """
    downloaded = _ProgressReader(source, progress.advance_download)
    with gzip.GzipFile(fileobj=downloaded, mode="rb") as decompressed:
        unpacked = _ProgressReader(decompressed, progress.advance_unpacked)
        count = 0
        with tarfile.open(fileobj=unpacked, mode="r|") as archive:
            for member in archive:
                progress.extracting(member.name)
                archive.extract(member, dest, filter="tar")
                count += 1
    return count


class _ExtractWorker(threading.Thread):
    """Runs ``unpack_tar_gz`` and keeps its outcome for the joining thread."""

    def __init__(self, source: IO[bytes], dest: Path, progress: ProgressReporter) -> None:
        super().__init__(name="jdk-extract", daemon=True)
        self._source = source
        self._dest = dest
        self._progress = progress
        self.entries = 0
        self.error: Exception | None = None

    def run(self) -> None:
        try:
            self.entries = unpack_tar_gz(self._source, self._dest, self._progress)
        except Exception as e:  # noqa: BLE001 - handed to the joining thread
            self.error = e


def _extraction_error(filename: str, exc: Exception) -> JdkError | None:
    """Map a worker failure to a JdkError; None for unexpected exceptions."""
    if isinstance(exc, tarfile.TarError | EOFError | zlib.error | gzip.BadGzipFile):
        return JdkError(kind="format", message=f"Failed to unpack {filename}", cause=str(exc))
    if isinstance(exc, http.client.HTTPException | TimeoutError | ConnectionError | ssl.SSLError):
        return JdkError(kind="remote", message=f"Download of {filename} failed", cause=str(exc))
    if isinstance(exc, OSError):
        return JdkError(
            kind="io", message=f"Failed to extract {filename}", cause=exc.strerror or str(exc)
        )
    return None


class JdkInstaller:
    """Installs JDK majors into the cache.

    Usage:
        installer = JdkInstaller(jdks_dir, AdoptiumClient(RealHttpClient()))
        result = installer.ensure_installed(17)
        if is_ok(result):
            print(f"JAVA_HOME={result.value}")
    """

    def __init__(
        self,
        jdks_dir: Path,
        source: JdkSource,
        *,
        platform: Platform | None = None,
        progress: Callable[[], ProgressReporter] = NullProgress,
        console: ConsoleProtocol | None = None,
    ) -> None:
        """Initialize installer.

        Args:
            jdks_dir: Directory holding one sub-directory per major
            source: Catalog to download archives from
            platform: Layout convention of the archives (default: current OS)
            progress: Factory for a fresh progress reporter per download
            console: Where to announce downloads, if anywhere
        """
        self._jdks_dir = jdks_dir
        self._source = source
        self._platform = platform or detect_platform()
        self._progress = progress
        self._console = console

    @property
    def jdks_dir(self) -> Path:
        return self._jdks_dir

    def path_for(self, major: int) -> Path:
        return jdk_dir(self._jdks_dir, major)

    def ensure_installed(self, major: int) -> Result[Path, JdkError]:
        """Return the install path for ``major``, downloading it if needed.

        A finished install is returned without any network access.
        """
        path = self.path_for(major)
        if is_installed(self._jdks_dir, major):
            return Ok(path)

        return self._locked(major, reinstall=False)

    def install(self, major: int) -> Result[Path, JdkError]:
        """Download and install the latest ``major``, replacing any install."""
        return self._locked(major, reinstall=True)

    def _locked(self, major: int, *, reinstall: bool) -> Result[Path, JdkError]:
        lock = InstallLock(self._jdks_dir, major)
        try:
            lock.acquire()
        except OSError as e:
            return Err(io_error("Failed to lock JDK install", lock.path, e))

        try:
            if not reinstall and is_installed(self._jdks_dir, major):
                logger.debug("JDK %d was installed while waiting for the lock", major)
                return Ok(self.path_for(major))
            return self._install(major)
        finally:
            lock.release()

    def _install(self, major: int) -> Result[Path, JdkError]:
        path = self.path_for(major)

        fetched = self._source.latest_binary(major)
        if isinstance(fetched, Err):
            return Err(
                JdkError(kind="remote", message="Failed to get JDK binary", cause=fetched.error)
            )

        with fetched.value as response:
            named = self._archive_name(response)
            if isinstance(named, Err):
                return named
            filename = named.value

            if self._console is not None:
                self._console.info(f"Extracting {filename}")
            logger.debug("Installing JDK %d from %s", major, response.url)

            prepared = self._prepare_dirs(path)
            if isinstance(prepared, Err):
                return prepared
            staging = prepared.value

            try:
                result = self._extract_and_promote(response, filename, staging, path)
            finally:
                cleanup = self._cleanup_staging(staging)

        if isinstance(result, Err):
            return result
        if isinstance(cleanup, Err):
            return cleanup
        return Ok(path)

    def _archive_name(self, response: StreamResponse) -> Result[str, JdkError]:
        header = response.header("Content-Disposition")
        if header is None:
            return Err(JdkError(kind="remote", message="no content disposition"))

        filename = parse_filename(header)
        if filename is None:
            return Err(
                JdkError(
                    kind="remote",
                    message="Failed to parse filename from Content-Disposition",
                    cause=header,
                )
            )
        return check_archive_name(filename)

    def _prepare_dirs(self, path: Path) -> Result[Path, JdkError]:
        """Clear leftovers of earlier attempts and create staging."""
        if path.exists() or path.is_symlink():
            try:
                if path.is_dir() and not path.is_symlink():
                    shutil.rmtree(path)
                else:
                    path.unlink()
            except OSError as e:
                return Err(io_error("Unable to clean JDK folder", path, e))

        try:
            path.mkdir(parents=True)
        except OSError as e:
            return Err(io_error("Unable to create directories to JDK folder", path, e))

        try:
            staging = Path(tempfile.mkdtemp(prefix=STAGING_PREFIX, dir=self._jdks_dir))
        except OSError as e:
            return Err(io_error("Failed to create temporary directory", self._jdks_dir, e))
        logger.debug("Staging into %s", staging)
        return Ok(staging)

    def _extract_and_promote(
        self,
        response: StreamResponse,
        filename: str,
        staging: Path,
        path: Path,
    ) -> Result[Path, JdkError]:
        extracted = self._extract(response, filename, staging)
        if isinstance(extracted, Err):
            return extracted

        try:
            root = promotion_root(staging, self._platform)
        except OSError as e:
            return Err(io_error("Failed to read temp dir", staging, e))
        logger.debug("Promoting %s to %s", root, path)

        try:
            os.replace(root, path)
        except OSError as e:
            return Err(io_error("Unable to move to JDK folder", path, e))

        # Last step: from here on the install counts as finished.
        try:
            (path / FINISHED_MARKER).touch()
        except OSError as e:
            return Err(io_error("Unable to create marker", path / FINISHED_MARKER, e))
        return Ok(path)

    def _extract(
        self,
        response: StreamResponse,
        filename: str,
        staging: Path,
    ) -> Result[int, JdkError]:
        progress = self._progress()
        progress.start(response.content_length)

        worker = _ExtractWorker(response.body, staging, progress)
        worker.start()
        while worker.is_alive():
            worker.join(_REFRESH_INTERVAL)
            progress.refresh()

        progress.finish(success=worker.error is None)

        if worker.error is not None:
            error = _extraction_error(filename, worker.error)
            if error is None:
                raise worker.error
            return Err(error)

        logger.debug("Extracted %d entries from %s", worker.entries, filename)
        return Ok(worker.entries)

    def _cleanup_staging(self, staging: Path) -> Result[None, JdkError]:
        if not staging.exists():
            return Ok(None)
        try:
            shutil.rmtree(staging)
        except OSError as e:
            logger.warning("Failed to cleanup temp dir %s: %s", staging, e)
            return Err(io_error("Failed to cleanup temp dir", staging, e))
        return Ok(None)
