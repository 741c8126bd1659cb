"""Shared fixtures: fake JDK installs and logging isolation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from jpre.jdk.release import FINISHED_MARKER, RELEASE_FILE


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo the handlers the CLI installs on the root logger."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def jdks_dir(tmp_path: Path) -> Path:
    return tmp_path / "cache" / "jdks"


@pytest.fixture
def fake_jdk(jdks_dir: Path) -> Callable[..., Path]:
    """Factory creating ``<jdks>/<major>`` as a finished (or unfinished) install."""

    def create(major: int, version: str | None = None, *, marker: bool = True) -> Path:
        path = jdks_dir / str(major)
        path.mkdir(parents=True, exist_ok=True)
        (path / RELEASE_FILE).write_text(
            f'IMPLEMENTOR="Eclipse Adoptium"\nJAVA_VERSION="{version or f"{major}.0.1"}"\n',
            encoding="utf-8",
        )
        (path / "bin").mkdir(exist_ok=True)
        (path / "bin" / "java").write_text("#!/bin/sh\n", encoding="utf-8")
        if marker:
            (path / FINISHED_MARKER).touch()
        return path

    return create
