"""Filesystem helpers."""

from __future__ import annotations

import os
from pathlib import Path
from uuid import uuid4

__all__ = ["atomic_symlink"]


def atomic_symlink(target: Path, link: Path) -> None:
    """Point ``link`` at ``target`` using temp link + replace.

    The old link stays in place until the new one is renamed over it, so
    ``link`` is never observed missing.
    """
    link.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = link.parent / f".{link.name}.{uuid4().hex}.tmp"

    os.symlink(target, tmp_path)
    try:
        os.replace(tmp_path, link)
    finally:
        if tmp_path.is_symlink():
            tmp_path.unlink(missing_ok=True)
