"""Tests for relkit.http.message - request/response values."""

from __future__ import annotations

import pytest

from relkit.http.message import DefaultRequestFactory, HttpRequest, HttpResponse, RequestFactory


class TestDefaultRequestFactory:
    def test_implements_protocol(self) -> None:
        assert isinstance(DefaultRequestFactory(), RequestFactory)

    def test_sets_host_from_url(self) -> None:
        request = DefaultRequestFactory().create_request("post", "https://the-domain.com/the-path")
        assert request.method == "POST"
        assert request.url == "https://the-domain.com/the-path"
        assert request.headers == (("Host", "the-domain.com"),)
        assert request.body == ""

    def test_keeps_port_in_host(self) -> None:
        request = DefaultRequestFactory().create_request("GET", "http://localhost:8080/x")
        assert request.header("host") == "localhost:8080"

    def test_rejects_url_without_host(self) -> None:
        with pytest.raises(ValueError):
            DefaultRequestFactory().create_request("GET", "/relative")


class TestHttpRequest:
    def test_with_header_appends_in_order(self) -> None:
        request = HttpRequest("POST", "https://x").with_header("A", "1").with_header("B", "2")
        assert request.headers == (("A", "1"), ("B", "2"))

    def test_with_header_replaces_case_insensitively(self) -> None:
        request = (
            HttpRequest("POST", "https://x")
            .with_header("Content-Type", "text/plain")
            .with_header("X-Other", "1")
            .with_header("content-type", "application/json")
        )
        assert request.headers == (("Content-Type", "application/json"), ("X-Other", "1"))

    def test_decoration_returns_new_value(self) -> None:
        original = HttpRequest("POST", "https://x")
        decorated = original.with_header("A", "1").with_body("{}")
        assert original.headers == ()
        assert original.body == ""
        assert decorated.body == "{}"

    def test_header_map(self) -> None:
        request = HttpRequest("GET", "https://x", headers=(("Host", "x"), ("Accept", "*/*")))
        assert request.header_map() == {"Host": ["x"], "Accept": ["*/*"]}
        assert request.header("missing") is None

    def test_is_frozen(self) -> None:
        request = HttpRequest("GET", "https://x")
        with pytest.raises(AttributeError):
            request.url = "https://y"  # type: ignore[misc]


def test_response_header_lookup() -> None:
    response = HttpResponse(status=201, body="{}", headers=(("Content-Type", "application/json"),))
    assert response.header("content-type") == "application/json"
    assert response.header("location") is None
