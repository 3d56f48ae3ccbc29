"""Immutable HTTP request/response values.

Requests are built by a ``RequestFactory`` from a method and URL, then
decorated with ``with_header``/``with_body``. Every decoration returns a new
value; nothing is mutated after construction.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Protocol, runtime_checkable
from urllib.parse import urlsplit

__all__ = [
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "RequestFactory",
    "DefaultRequestFactory",
]

Headers = tuple[tuple[str, str], ...]


def _find_header(headers: Headers, name: str) -> int | None:
    wanted = name.lower()
    for i, (key, _) in enumerate(headers):
        if key.lower() == wanted:
            return i
    return None


@dataclass(frozen=True, slots=True)
class HttpRequest:
    """An outgoing HTTP request.

    Attributes:
        method: HTTP method, upper case
        url: Absolute target URL
        headers: Ordered (name, value) pairs; names are unique case-insensitively
        body: Request body as text ("" when there is none)
    """

    method: str
    url: str
    headers: Headers = ()
    body: str = ""

    def with_header(self, name: str, value: str) -> HttpRequest:
        """Return a copy with ``name`` set to ``value``.

        An existing header with the same name (any case) is replaced in place,
        keeping the original spelling of the name.
        """
        index = _find_header(self.headers, name)
        if index is None:
            return replace(self, headers=(*self.headers, (name, value)))
        existing = self.headers[index][0]
        headers = (*self.headers[:index], (existing, value), *self.headers[index + 1 :])
        return replace(self, headers=headers)

    def with_body(self, body: str) -> HttpRequest:
        return replace(self, body=body)

    def header(self, name: str) -> str | None:
        index = _find_header(self.headers, name)
        if index is None:
            return None
        return self.headers[index][1]

    def header_map(self) -> dict[str, list[str]]:
        """Headers as ``{name: [value]}`` in insertion order."""
        return {key: [value] for key, value in self.headers}


@dataclass(frozen=True, slots=True)
class HttpResponse:
    """A response received from a transport.

    Non-2xx statuses are ordinary responses; transports only raise for
    connection-level failures.
    """

    status: int
    body: str = ""
    headers: Headers = ()

    def header(self, name: str) -> str | None:
        index = _find_header(self.headers, name)
        if index is None:
            return None
        return self.headers[index][1]


@runtime_checkable
class RequestFactory(Protocol):
    """Builds an empty request for a method and URL."""

    def create_request(self, method: str, url: str) -> HttpRequest: ...


class DefaultRequestFactory:
    """Request factory that derives the ``Host`` header from the URL."""

    def create_request(self, method: str, url: str) -> HttpRequest:
        host = urlsplit(url).netloc
        if not host:
            raise ValueError(f"URL has no host: {url!r}")
        return HttpRequest(method=method.upper(), url=url, headers=(("Host", host),))
