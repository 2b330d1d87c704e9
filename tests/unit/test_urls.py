# tests/unit/test_urls.py
"""Tests for document endpoint URL construction."""

from __future__ import annotations

import pytest

from doc_service_client.urls import MalformedURLError, build_document_url, encode_query

pytestmark = pytest.mark.tier1


class TestBuildDocumentUrl:
    """Test the http://{host}:{port}/document[/{id}][?query] layout."""

    def test_no_id_no_params(self):
        """Empty ID and no params yields the bare collection endpoint."""
        assert build_document_url("localhost", 8118) == "http://localhost:8118/document"

    def test_with_id(self):
        assert (
            build_document_url("localhost", 8118, "abc123")
            == "http://localhost:8118/document/abc123"
        )

    def test_other_host_and_port(self):
        assert (
            build_document_url("docs.example.org", 9000, "x")
            == "http://docs.example.org:9000/document/x"
        )

    def test_empty_params_add_no_query(self):
        assert build_document_url("localhost", 8118, "abc", {}) == "http://localhost:8118/document/abc"

    def test_extract_param(self):
        url = build_document_url("localhost", 8118, "abc", {"extract": "true"})
        assert url == "http://localhost:8118/document/abc?extract=true"

    def test_space_is_percent_encoded(self):
        url = build_document_url("localhost", 8118, "", {"title": "a b"})
        assert url.endswith("?title=a%20b")

    def test_params_keep_insertion_order(self):
        url = build_document_url("localhost", 8118, "", {"extract": "false", "author": "me"})
        assert url.endswith("?extract=false&author=me")

    def test_keys_are_encoded_too(self):
        url = build_document_url("localhost", 8118, "", {"my key": "v"})
        assert url.endswith("?my%20key=v")

    def test_invalid_port_raises(self):
        with pytest.raises(MalformedURLError):
            build_document_url("localhost", 70000)

    def test_empty_host_raises(self):
        with pytest.raises(MalformedURLError):
            build_document_url("", 8118)

    @pytest.mark.parametrize("host", ["a/b", "user@evil", "h?x"])
    def test_host_that_changes_the_authority_raises(self, host):
        with pytest.raises(MalformedURLError):
            build_document_url(host, 8118)

    def test_host_case_is_not_a_mismatch(self):
        assert build_document_url("LocalHost", 8118) == "http://LocalHost:8118/document"

    def test_malformed_url_is_value_error(self):
        """Callers can treat it as a plain ValueError."""
        assert issubclass(MalformedURLError, ValueError)


class TestEncodeQuery:
    """Test query string rendering."""

    def test_reserved_characters(self):
        assert encode_query({"q": "a&b=c/d"}) == "q=a%26b%3Dc%2Fd"

    def test_utf8(self):
        assert encode_query({"name": "für"}) == "name=f%C3%BCr"

    def test_non_string_values_are_stringified(self):
        assert encode_query({"n": 3}) == "n=3"
