"""HTTP transport abstraction.

This module provides:
- HttpClient: Protocol for sending a request (injectable for tests)
- UrllibHttpClient: Real implementation using urllib
- MockHttpClient: Scripted implementation for testing
- TransportError: Raised for connection-level failures
"""

from __future__ import annotations

import http.client
import ssl
import urllib.error
import urllib.request
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from relkit.http.message import Headers, HttpRequest, HttpResponse

__all__ = [
    "HttpClient",
    "UrllibHttpClient",
    "MockHttpClient",
    "TransportError",
]


class TransportError(Exception):
    """The request could not be exchanged with the server.

    Attributes:
        url: The URL that failed
        message: Human-readable error message
    """

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"{message} ({url})")
        self.url = url
        self.message = message


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for sending one fully-formed request.

    Implementations return every HTTP status as a response and raise
    ``TransportError`` only when no response was received. Timeouts,
    TLS and connection reuse are the implementation's concern.
    """

    def send_request(self, request: HttpRequest) -> HttpResponse:
        """Send request and return the response.

        Args:
            request: Request to send

        Returns:
            The response, whatever its status

        Raises:
            TransportError: When the connection fails or times out
        """
        ...


def _headers_of(items: Iterable[tuple[str, str]]) -> Headers:
    return tuple((k, v) for k, v in items)


class UrllibHttpClient:
    """Real HTTP client using urllib.

    Handles:
    - HTTPS with system certificates
    - Timeout handling
    - Error statuses returned as responses
    """

    def __init__(self, timeout: float = 30.0) -> None:
        """Initialize HTTP client.

        Args:
            timeout: Request timeout in seconds
        """
        self.timeout = timeout
        # Use system certificates
        self._ssl_context = ssl.create_default_context()

    def send_request(self, request: HttpRequest) -> HttpResponse:
        data = request.body.encode("utf-8") if request.body else None
        req = urllib.request.Request(
            request.url,
            data=data,
            headers=dict(request.headers),
            method=request.method,
        )
        try:
            with urllib.request.urlopen(
                req,
                timeout=self.timeout,
                context=self._ssl_context,
            ) as response:
                return HttpResponse(
                    status=response.status,
                    body=response.read().decode("utf-8", errors="replace"),
                    headers=_headers_of(response.headers.items()),
                )
        except urllib.error.HTTPError as e:
            body = e.read().decode("utf-8", errors="replace")
            headers = _headers_of(e.headers.items()) if e.headers is not None else ()
            return HttpResponse(status=e.code, body=body, headers=headers)
        except urllib.error.URLError as e:
            raise TransportError(request.url, str(e.reason)) from e
        except http.client.HTTPException as e:
            raise TransportError(request.url, str(e) or type(e).__name__) from e
        except TimeoutError as e:
            raise TransportError(request.url, "Request timed out") from e
        except OSError as e:
            raise TransportError(request.url, str(e)) from e


class MockHttpClient:
    """Scripted HTTP client for testing.

    Responses (or exceptions) are queued and consumed in order; every sent
    request is recorded.

    Usage:
        client = MockHttpClient()
        client.respond(HttpResponse(status=201, body='{"html_url": "x"}'))
        response = client.send_request(request)
        assert client.requests == [request]
    """

    def __init__(self) -> None:
        self._script: list[HttpResponse | Exception] = []
        self.requests: list[HttpRequest] = []

    def respond(self, response: HttpResponse) -> None:
        """Queue a response."""
        self._script.append(response)

    def fail(self, error: Exception) -> None:
        """Queue an exception to raise."""
        self._script.append(error)

    def send_request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)

        if not self._script:
            raise AssertionError(f"unexpected request (mock): {request.method} {request.url}")

        outcome = self._script.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome
