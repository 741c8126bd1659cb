"""Content-Disposition filename extraction."""

from __future__ import annotations

from email.message import Message
from pathlib import PurePosixPath

__all__ = ["parse_filename"]


def parse_filename(header: str) -> str | None:
    """Return the filename carried by a Content-Disposition header.

    Handles plain and quoted ``filename=`` values and the RFC 5987
    ``filename*=UTF-8''...`` form.
    Directory components are dropped. Returns None when there is no usable
    filename.

    >>> parse_filename('attachment; filename="OpenJDK17U-jdk_x64_linux.tar.gz"')
    'OpenJDK17U-jdk_x64_linux.tar.gz'
    """
    msg = Message()
    msg["Content-Disposition"] = header
    try:
        raw = msg.get_filename()
    except (ValueError, LookupError):
        return None
    if not raw:
        return None

    name = PurePosixPath(raw.replace("\\", "/")).name.strip()
    if name in ("", ".", ".."):
        return None
    return name
