"""In-memory JDK archives for installer tests."""

from __future__ import annotations

import io
import tarfile
from collections.abc import Mapping

from jpre.remote.adoptium import binary_latest_url

JDK17_URL = binary_latest_url(17, "linux", "x64")
JDK21_URL = binary_latest_url(21, "linux", "x64")
JDK17_ARCHIVE = "OpenJDK17U-jdk_x64_linux_hotspot_17.0.2_8.tar.gz"


def make_tar_gz(
    files: Mapping[str, str],
    *,
    prefix: str = "",
    symlinks: Mapping[str, str] | None = None,
) -> bytes:
    """Build a .tar.gz holding ``files`` (name -> text) under ``prefix``."""
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w:gz") as tar:
        for name, text in files.items():
            data = text.encode("utf-8")
            info = tarfile.TarInfo(name=prefix + name)
            info.size = len(data)
            info.mode = 0o755 if "/bin/" in f"/{name}" else 0o644
            tar.addfile(info, io.BytesIO(data))
        for name, target in (symlinks or {}).items():
            info = tarfile.TarInfo(name=prefix + name)
            info.type = tarfile.SYMTYPE
            info.linkname = target
            tar.addfile(info)
    return buf.getvalue()


def jdk_files(version: str = "17.0.2") -> dict[str, str]:
    return {
        "release": f'IMPLEMENTOR="Eclipse Adoptium"\nJAVA_VERSION="{version}"\n',
        "bin/java": "#!/bin/sh\necho java\n",
        "lib/modules": "modules",
    }


def disposition(filename: str) -> dict[str, str]:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}
