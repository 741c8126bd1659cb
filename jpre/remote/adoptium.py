"""Adoptium catalog: latest JDK binary for a major version.

API: https://api.adoptium.net/v3/

The ``binary/latest`` endpoint redirects to the archive itself, so a single
request yields the byte stream together with ``Content-Disposition`` (the
archive filename) and ``Content-Length``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from jpre.core.config import AdoptiumConfig
from jpre.core.result import Err, Ok, Result
from jpre.platform.detection import Arch, Platform, detect_arch, detect_platform
from jpre.remote.http import HttpError, response_failure

if TYPE_CHECKING:
    from jpre.remote.http import HttpClient, StreamResponse

__all__ = [
    "ADOPTIUM_API",
    "AdoptiumClient",
    "JdkSource",
    "binary_latest_url",
]

ADOPTIUM_API = "https://api.adoptium.net/v3"

_ADOPTIUM_OS: dict[Platform, str] = {
    Platform.LINUX: "linux",
    Platform.MACOS: "mac",
}

_ADOPTIUM_ARCH: dict[Arch, str] = {
    Arch.X64: "x64",
    Arch.ARM64: "aarch64",
}


class JdkSource(Protocol):
    """Where JDK archives come from."""

    def latest_binary(self, major: int) -> Result[StreamResponse, HttpError]:
        """Open the latest GA archive for ``major``.

        Returns Ok only for success responses; the caller owns (and must
        close) the returned response.
        """
        ...


def binary_latest_url(
    major: int,
    os: str,
    arch: str,
    *,
    jvm_impl: str = "hotspot",
    vendor: str = "eclipse",
) -> str:
    """Build the ``binary/latest`` URL.

    Example:
        >>> binary_latest_url(17, "linux", "x64")
        'https://api.adoptium.net/v3/binary/latest/17/ga/linux/x64/jdk/hotspot/normal/eclipse'
    """
    return f"{ADOPTIUM_API}/binary/latest/{major}/ga/{os}/{arch}/jdk/{jvm_impl}/normal/{vendor}"


class AdoptiumClient:
    """JdkSource backed by the Adoptium API."""

    def __init__(
        self,
        http: HttpClient,
        *,
        config: AdoptiumConfig | None = None,
        platform: Platform | None = None,
        arch: Arch | None = None,
    ) -> None:
        self._http = http
        self._config = config or AdoptiumConfig()
        self._platform = platform or detect_platform()
        self._arch = arch or detect_arch()

    def url_for(self, major: int) -> Result[str, HttpError]:
        os_str = _ADOPTIUM_OS.get(self._platform)
        arch_str = _ADOPTIUM_ARCH.get(self._arch)
        if os_str is None or arch_str is None:
            return Err(
                HttpError(
                    url=ADOPTIUM_API,
                    status=0,
                    message=f"No Adoptium builds for {self._platform}-{self._arch}",
                )
            )
        return Ok(
            binary_latest_url(
                major,
                os_str,
                arch_str,
                jvm_impl=self._config.jvm_impl,
                vendor=self._config.vendor,
            )
        )

    def latest_binary(self, major: int) -> Result[StreamResponse, HttpError]:
        url_result = self.url_for(major)
        if isinstance(url_result, Err):
            return url_result

        result = self._http.open_stream(url_result.value)
        if isinstance(result, Err):
            return result

        response = result.value
        if not response.is_success:
            return Err(response_failure(response, f"No JDK {major} binary available"))
        return Ok(response)
