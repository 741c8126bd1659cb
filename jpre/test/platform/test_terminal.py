"""Tests for jpre.platform.terminal module."""

from __future__ import annotations

import io
import sys

import pytest

from jpre.platform import terminal
from jpre.platform.terminal import stderr_tty


class _FakeStream:
    def __init__(self, fd: int) -> None:
        self._fd = fd

    def fileno(self) -> int:
        return self._fd


class TestStderrTty:
    def test_stream_without_descriptor(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "stderr", io.StringIO())
        assert stderr_tty() is None

    def test_not_a_terminal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "stderr", _FakeStream(2))
        monkeypatch.setattr(terminal.os, "isatty", lambda fd: False)
        assert stderr_tty() is None

    def test_terminal_device(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "stderr", _FakeStream(2))
        monkeypatch.setattr(terminal.os, "isatty", lambda fd: True)
        monkeypatch.setattr(terminal.os, "ttyname", lambda fd: "/dev/pts/7")
        assert stderr_tty() == "/dev/pts/7"

    def test_ttyname_failure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def no_name(fd: int) -> str:
            raise OSError("not a tty")

        monkeypatch.setattr(sys, "stderr", _FakeStream(2))
        monkeypatch.setattr(terminal.os, "isatty", lambda fd: True)
        monkeypatch.setattr(terminal.os, "ttyname", no_name)
        assert stderr_tty() is None
