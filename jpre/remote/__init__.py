"""Remote catalog access: HTTP transport, Adoptium, header parsing."""

from jpre.remote.adoptium import AdoptiumClient, JdkSource, binary_latest_url
from jpre.remote.disposition import parse_filename
from jpre.remote.http import (
    HttpClient,
    HttpError,
    MockHttpClient,
    RealHttpClient,
    StreamResponse,
)

__all__ = [
    # Adoptium
    "AdoptiumClient",
    "JdkSource",
    "binary_latest_url",
    # Headers
    "parse_filename",
    # HTTP
    "HttpClient",
    "HttpError",
    "MockHttpClient",
    "RealHttpClient",
    "StreamResponse",
]
