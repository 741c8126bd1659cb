"""Tests for jpre.remote.http - streaming HTTP client abstraction."""

from __future__ import annotations

import io
import urllib.error
from email.message import Message
from unittest.mock import patch

import pytest

from jpre.core.result import Err, Ok
from jpre.remote.http import (
    HttpClient,
    HttpError,
    MockHttpClient,
    RealHttpClient,
    StreamResponse,
    response_failure,
)

URL = "https://api.example.com/binary"


def _response(body: bytes = b"", *, status: int = 200, **headers: str) -> StreamResponse:
    return StreamResponse(
        url=URL,
        status=status,
        headers={k.lower().replace("_", "-"): v for k, v in headers.items()},
        body=io.BytesIO(body),
    )


# =============================================================================
# HttpError tests
# =============================================================================


class TestHttpError:
    def test_str_with_status(self) -> None:
        error = HttpError(url=URL, status=500, message="Internal Error")
        assert str(error) == f"HTTP 500: Internal Error ({URL})"

    def test_str_without_status(self) -> None:
        """Network errors have no status code."""
        error = HttpError(url=URL, status=0, message="Timeout")
        assert str(error) == f"Timeout ({URL})"

    def test_is_frozen(self) -> None:
        error = HttpError(url=URL, status=404, message="Not Found")
        with pytest.raises(AttributeError):
            error.status = 500  # type: ignore[misc]


# =============================================================================
# StreamResponse tests
# =============================================================================


class TestStreamResponse:
    def test_is_success(self) -> None:
        assert _response(status=200).is_success
        assert _response(status=204).is_success
        assert not _response(status=302).is_success
        assert not _response(status=404).is_success

    def test_header_lookup_ignores_case(self) -> None:
        response = _response(Content_Disposition="attachment")
        assert response.header("Content-Disposition") == "attachment"
        assert response.header("CONTENT-DISPOSITION") == "attachment"
        assert response.header("Content-Length") is None

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("1024", 1024), (" 7 ", 7), ("0", 0), ("-1", None), ("abc", None), ("", None)],
    )
    def test_content_length(self, value: str, expected: int | None) -> None:
        assert _response(Content_Length=value).content_length == expected

    def test_content_length_missing(self) -> None:
        assert _response().content_length is None

    def test_context_manager_closes_body(self) -> None:
        response = _response(b"data")
        with response:
            pass
        assert response.body.closed


class TestResponseFailure:
    def test_json_error_message_preferred(self) -> None:
        response = _response(b'{"errorMessage": "No releases match"}', status=404)

        error = response_failure(response, "No JDK 99 binary available")

        assert error == HttpError(
            url=URL, status=404, message="No JDK 99 binary available: No releases match"
        )
        assert response.body.closed

    def test_plain_text_body(self) -> None:
        error = response_failure(_response(b"Bad Gateway\n", status=502), "Failed")
        assert error.message == "Failed: Bad Gateway"

    def test_empty_body(self) -> None:
        error = response_failure(_response(status=500), "Failed")
        assert error.message == "Failed"


# =============================================================================
# MockHttpClient tests
# =============================================================================


class TestMockHttpClient:
    def test_isinstance_check(self) -> None:
        """MockHttpClient implements HttpClient protocol."""
        assert isinstance(MockHttpClient(), HttpClient)

    def test_stream(self) -> None:
        client = MockHttpClient()
        client.set_stream(URL, b"payload", headers={"Content-Length": "7"})

        result = client.open_stream(URL)

        assert isinstance(result, Ok)
        with result.value as response:
            assert response.status == 200
            assert response.content_length == 7
            assert response.body.read() == b"payload"

    def test_error_status_is_a_response(self) -> None:
        client = MockHttpClient()
        client.set_stream(URL, b"gone", status=410)

        result = client.open_stream(URL)

        assert isinstance(result, Ok)
        assert result.value.status == 410

    def test_transport_error(self) -> None:
        client = MockHttpClient()
        client.set_error(URL, HttpError(url=URL, status=0, message="refused"))

        result = client.open_stream(URL)

        assert isinstance(result, Err)
        assert result.error.message == "refused"

    def test_unknown_url(self) -> None:
        result = MockHttpClient().open_stream(URL)
        assert isinstance(result, Err)
        assert result.error.status == 0

    def test_tracks_calls(self) -> None:
        client = MockHttpClient()
        client.open_stream(URL)
        client.open_stream(URL + "/2")
        assert client.calls == [URL, URL + "/2"]


# =============================================================================
# RealHttpClient tests (urllib patched, no network)
# =============================================================================


class _FakeUrlopenResponse(io.BytesIO):
    def __init__(self, body: bytes, headers: Message) -> None:
        super().__init__(body)
        self.status = 200
        self.headers = headers

    def geturl(self) -> str:
        return URL + "/redirected"


def _headers(**values: str) -> Message:
    msg = Message()
    for key, value in values.items():
        msg[key.replace("_", "-")] = value
    return msg


class TestRealHttpClient:
    def test_isinstance_check(self) -> None:
        assert isinstance(RealHttpClient(), HttpClient)

    def test_defaults(self) -> None:
        client = RealHttpClient()
        assert client.timeout == 30.0
        assert client.user_agent.startswith("jpre/")

    def test_success(self) -> None:
        fake = _FakeUrlopenResponse(b"archive", _headers(Content_Length="7"))
        with patch("urllib.request.urlopen", return_value=fake) as urlopen:
            result = RealHttpClient(timeout=5.0).open_stream(URL)

        assert isinstance(result, Ok)
        assert result.value.url == URL + "/redirected"
        assert result.value.header("content-length") == "7"
        assert urlopen.call_args.kwargs["timeout"] == 5.0

    def test_http_error_becomes_response(self) -> None:
        error = urllib.error.HTTPError(
            URL, 404, "Not Found", _headers(Content_Type="application/json"), io.BytesIO(b"{}")
        )
        with patch("urllib.request.urlopen", side_effect=error):
            result = RealHttpClient().open_stream(URL)

        assert isinstance(result, Ok)
        assert result.value.status == 404
        assert result.value.header("Content-Type") == "application/json"

    def test_url_error(self) -> None:
        with patch("urllib.request.urlopen", side_effect=urllib.error.URLError("refused")):
            result = RealHttpClient().open_stream(URL)

        assert isinstance(result, Err)
        assert result.error == HttpError(url=URL, status=0, message="refused")

    def test_timeout(self) -> None:
        with patch("urllib.request.urlopen", side_effect=TimeoutError()):
            result = RealHttpClient().open_stream(URL)

        assert isinstance(result, Err)
        assert result.error.message == "Request timed out"
