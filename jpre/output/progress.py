"""Progress reporting for JDK downloads.

A download reports on two independent channels:
- download: raw bytes received, bounded by Content-Length when known
- extraction: decompressed bytes unpacked plus the entry currently written

Reporter methods on the two channels are called from the extraction worker
thread; ``refresh`` is called from the thread that waits for the worker.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from rich.console import Console
    from rich.progress import Progress, TaskID

__all__ = [
    "ProgressReporter",
    "RichProgress",
    "NullProgress",
    "MockProgress",
]


class ProgressReporter(Protocol):
    """Write-only sink for download and extraction progress."""

    def start(self, expected_size: int | None) -> None:
        """Begin reporting. ``expected_size`` is None when unknown."""
        ...

    def advance_download(self, nbytes: int) -> None: ...

    def advance_unpacked(self, nbytes: int) -> None: ...

    def extracting(self, name: str) -> None:
        """Report the archive entry currently being written."""
        ...

    def refresh(self) -> None:
        """Redraw. Called periodically while the worker runs."""
        ...

    def finish(self, *, success: bool) -> None: ...


class RichProgress:
    """Two stacked Rich progress bars on stderr."""

    def __init__(self, console: Console | None = None) -> None:
        from rich.progress import (
            BarColumn,
            DownloadColumn,
            Progress,
            SpinnerColumn,
            TextColumn,
            TransferSpeedColumn,
        )

        self._progress: Progress = Progress(
            SpinnerColumn(),
            TextColumn("{task.description}"),
            BarColumn(),
            DownloadColumn(),
            TransferSpeedColumn(),
            console=console,
            auto_refresh=False,
        )
        self._download: TaskID | None = None
        self._extract: TaskID | None = None

    def start(self, expected_size: int | None) -> None:
        self._progress.start()
        self._download = self._progress.add_task("Download progress", total=expected_size)
        self._extract = self._progress.add_task("Extracting", total=None)

    def advance_download(self, nbytes: int) -> None:
        if self._download is not None:
            self._progress.advance(self._download, nbytes)

    def advance_unpacked(self, nbytes: int) -> None:
        if self._extract is not None:
            self._progress.advance(self._extract, nbytes)

    def extracting(self, name: str) -> None:
        if self._extract is not None:
            self._progress.update(self._extract, description=f"Extracting {name}")

    def refresh(self) -> None:
        self._progress.refresh()

    def finish(self, *, success: bool) -> None:
        if self._download is not None and success:
            completed = next(t.completed for t in self._progress.tasks if t.id == self._download)
            self._progress.update(self._download, total=completed)
        if self._extract is not None:
            message = "Done extracting!" if success else "Extraction failed"
            self._progress.update(self._extract, description=message)
        self._progress.refresh()
        self._progress.stop()


class NullProgress:
    """Reporter that discards everything (``--quiet``)."""

    def start(self, expected_size: int | None) -> None:
        pass

    def advance_download(self, nbytes: int) -> None:
        pass

    def advance_unpacked(self, nbytes: int) -> None:
        pass

    def extracting(self, name: str) -> None:
        pass

    def refresh(self) -> None:
        pass

    def finish(self, *, success: bool) -> None:
        pass


def _empty_names() -> list[str]:
    return []


@dataclass
class MockProgress:
    """Reporter that records calls for testing."""

    expected_size: int | None = None
    started: bool = False
    downloaded: int = 0
    unpacked: int = 0
    entries: list[str] = field(default_factory=_empty_names)
    refreshes: int = 0
    success: bool | None = None

    def start(self, expected_size: int | None) -> None:
        self.started = True
        self.expected_size = expected_size

    def advance_download(self, nbytes: int) -> None:
        self.downloaded += nbytes

    def advance_unpacked(self, nbytes: int) -> None:
        self.unpacked += nbytes

    def extracting(self, name: str) -> None:
        self.entries.append(name)

    def refresh(self) -> None:
        self.refreshes += 1

    def finish(self, *, success: bool) -> None:
        self.success = success
