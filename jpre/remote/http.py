"""HTTP client abstraction for JDK downloads.

This module provides:
- HttpClient: Protocol for HTTP operations (injectable for tests)
- RealHttpClient: Real implementation using urllib
- MockHttpClient: Mock implementation for testing

Responses are streamed: callers read the body incrementally and must close
the response (it is a context manager).
"""

from __future__ import annotations

import io
import json
import ssl
import urllib.error
import urllib.request
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import TracebackType
from typing import IO, Protocol, runtime_checkable

from jpre import __version__
from jpre.core.result import Err, Ok, Result

__all__ = [
    "HttpClient",
    "HttpError",
    "MockHttpClient",
    "RealHttpClient",
    "StreamResponse",
    "response_failure",
]

# Bytes of an error body read to describe a failed response.
_ERROR_BODY_LIMIT = 4096


@dataclass(frozen=True, slots=True)
class HttpError:
    """HTTP error details.

    Attributes:
        url: The URL that failed
        status: HTTP status code (0 for network errors)
        message: Human-readable error message
    """

    url: str
    status: int
    message: str

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


def _lower_keys(headers: Mapping[str, str]) -> dict[str, str]:
    return {k.lower(): v for k, v in headers.items()}


@dataclass(slots=True)
class StreamResponse:
    """An open HTTP response with a streaming body.

    Attributes:
        url: Final URL after redirects
        status: HTTP status code
        headers: Response headers, keys lower-cased
        body: Readable binary stream of the response body
    """

    url: str
    status: int
    headers: dict[str, str]
    body: IO[bytes]

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        return self.headers.get(name.lower())

    @property
    def content_length(self) -> int | None:
        """Expected body size, or None when absent or malformed."""
        value = self.header("Content-Length")
        if value is None:
            return None
        try:
            length = int(value.strip())
        except ValueError:
            return None
        return length if length >= 0 else None

    def close(self) -> None:
        self.body.close()

    def __enter__(self) -> StreamResponse:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def response_failure(response: StreamResponse, context: str) -> HttpError:
    """Build an HttpError for a non-success response.

    The body is read (bounded) for a server-supplied explanation; Adoptium
    returns JSON with an ``errorMessage`` field.
    """
    try:
        raw = response.body.read(_ERROR_BODY_LIMIT)
    except OSError:
        raw = b""
    finally:
        response.close()

    text = raw.decode("utf-8", errors="replace").strip()
    detail = text
    try:
        data: object = json.loads(text)
    except ValueError:
        data = None
    if isinstance(data, dict):
        error_message = data.get("errorMessage") or data.get("message")
        if isinstance(error_message, str) and error_message:
            detail = error_message

    message = f"{context}: {detail}" if detail else context
    return HttpError(url=response.url, status=response.status, message=message)


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP operations.

    This abstraction allows injecting mock clients for testing,
    avoiding real network calls in unit tests.
    """

    def open_stream(self, url: str) -> Result[StreamResponse, HttpError]:
        """Send a GET request and return the open response.

        Non-success statuses are returned as Ok responses so the caller can
        build a failure message from the body. Transport failures (DNS,
        refused connection, timeout) are Err.
        """
        ...


class RealHttpClient:
    """Real HTTP client using urllib.

    Handles:
    - HTTPS with system certificates
    - Redirects (the Adoptium binary endpoint redirects to GitHub)
    - Timeout handling
    """

    def __init__(self, timeout: float = 30.0, user_agent: str = f"jpre/{__version__}") -> None:
        """Initialize HTTP client.

        Args:
            timeout: Socket timeout in seconds
            user_agent: User-Agent header value
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self._ssl_context = ssl.create_default_context()

    def open_stream(self, url: str) -> Result[StreamResponse, HttpError]:
        req = urllib.request.Request(url, headers={"User-Agent": self.user_agent})
        try:
            response = urllib.request.urlopen(
                req,
                timeout=self.timeout,
                context=self._ssl_context,
            )
        except urllib.error.HTTPError as e:
            # HTTPError is itself a readable response.
            return Ok(
                StreamResponse(
                    url=e.url or url,
                    status=e.code,
                    headers=_lower_keys(dict(e.headers.items())) if e.headers else {},
                    body=e,
                )
            )
        except urllib.error.URLError as e:
            return Err(HttpError(url=url, status=0, message=str(e.reason)))
        except TimeoutError:
            return Err(HttpError(url=url, status=0, message="Request timed out"))
        except (ValueError, OSError) as e:
            return Err(HttpError(url=url, status=0, message=str(e)))

        return Ok(
            StreamResponse(
                url=response.geturl(),
                status=response.status,
                headers=_lower_keys(dict(response.headers.items())),
                body=response,
            )
        )


@dataclass(frozen=True, slots=True)
class _MockResponse:
    body: bytes
    status: int
    headers: dict[str, str]


def _empty_responses() -> dict[str, _MockResponse | HttpError]:
    return {}


def _empty_calls() -> list[str]:
    return []


@dataclass
class MockHttpClient:
    """Mock HTTP client for testing.

    Usage:
        client = MockHttpClient()
        client.set_stream(url, archive_bytes, headers={
            "Content-Disposition": 'attachment; filename="jdk.tar.gz"',
        })
        result = client.open_stream(url)
    """

    responses: dict[str, _MockResponse | HttpError] = field(default_factory=_empty_responses)
    calls: list[str] = field(default_factory=_empty_calls)

    def set_stream(
        self,
        url: str,
        body: bytes,
        *,
        status: int = 200,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.responses[url] = _MockResponse(body, status, _lower_keys(headers or {}))

    def set_error(self, url: str, error: HttpError) -> None:
        self.responses[url] = error

    def open_stream(self, url: str) -> Result[StreamResponse, HttpError]:
        self.calls.append(url)

        response = self.responses.get(url)
        if response is None:
            return Err(HttpError(url=url, status=0, message="No mock response (mock)"))
        if isinstance(response, HttpError):
            return Err(response)
        return Ok(
            StreamResponse(
                url=url,
                status=response.status,
                headers=dict(response.headers),
                body=io.BytesIO(response.body),
            )
        )
