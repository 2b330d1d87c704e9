# tests/unit/test_http.py
"""Tests for the one-request-per-call HTTP transport."""

from __future__ import annotations

import json

import httpx
import pytest

from doc_service_client.http import HttpResponse, HttpTransport

pytestmark = pytest.mark.tier1

URL = "http://localhost:8118/document/abc"


def _transport(handler) -> HttpTransport:
    return HttpTransport(transport=httpx.MockTransport(handler))


class TestGet:
    def test_sends_accept_header(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=b"data")

        response = _transport(handler).get(URL, "application/json")

        assert seen[0].method == "GET"
        assert str(seen[0].url) == URL
        assert seen[0].headers["Accept"] == "application/json"
        assert response.content == b"data"

    def test_stream_is_readable_and_fresh(self):
        response = _transport(lambda r: httpx.Response(200, content=b"abc")).get(URL, "*/*")

        assert response.stream().read() == b"abc"
        assert response.stream().read() == b"abc"

    def test_content_type_and_charset(self):
        def handler(request):
            return httpx.Response(
                200,
                content="é".encode("latin-1"),
                headers={"Content-Type": "text/plain; charset=latin-1"},
            )

        response = _transport(handler).get(URL, "text/plain")

        assert response.content_type == "text/plain; charset=latin-1"
        assert response.encoding == "latin-1"
        assert response.text == "é"

    def test_missing_content_type(self):
        response = _transport(lambda r: httpx.Response(200, content=b"x")).get(URL, "*/*")

        assert response.content_type is None
        assert response.encoding is None

    def test_unknown_charset_is_dropped(self):
        def handler(request):
            return httpx.Response(
                200,
                content=b"plain",
                headers={"Content-Type": "text/plain; charset=bogus"},
            )

        response = _transport(handler).get(URL, "text/plain")

        assert response.encoding is None
        assert response.text == "plain"

    def test_follows_redirect(self):
        seen = []

        def handler(request):
            seen.append(request.url.path)
            if request.url.path == "/document/abc":
                return httpx.Response(302, headers={"Location": "/document/abc2"})
            return httpx.Response(200, content=b"ok")

        response = _transport(handler).get(URL, "*/*")

        assert seen == ["/document/abc", "/document/abc2"]
        assert response.status_code == 200
        assert response.content == b"ok"

    def test_error_status_raises(self):
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            _transport(lambda r: httpx.Response(404)).get(URL, "*/*")

        assert exc_info.value.response.status_code == 404

    def test_connection_failure_propagates(self):
        def handler(request):
            raise httpx.ConnectError("Connection refused", request=request)

        with pytest.raises(httpx.ConnectError):
            _transport(handler).get(URL, "*/*")


class TestPost:
    def test_sends_body_and_content_type(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"key": "abc"})

        response = _transport(handler).post(URL, "application/pdf", b"%PDF-1.4")

        assert seen[0].method == "POST"
        assert seen[0].headers["Content-Type"] == "application/pdf"
        assert seen[0].content == b"%PDF-1.4"
        assert response.status_code == 200
        assert json.loads(response.text) == {"key": "abc"}

    def test_server_error_raises(self):
        with pytest.raises(httpx.HTTPStatusError):
            _transport(lambda r: httpx.Response(500)).post(URL, "text/plain", b"x")

    def test_write_failure_propagates(self):
        def handler(request):
            raise httpx.WriteError("broken pipe", request=request)

        with pytest.raises(httpx.WriteError):
            _transport(handler).post(URL, "text/plain", b"x")


class TestTransportConfig:
    def test_timeout_kept(self):
        assert HttpTransport(timeout=3.0).timeout == 3.0

    def test_response_is_frozen(self):
        response = HttpResponse(status_code=200, content=b"")

        with pytest.raises(AttributeError):
            response.status_code = 500  # type: ignore[misc]
