"""HTTP messages and transports."""

from relkit.http.client import HttpClient, MockHttpClient, TransportError, UrllibHttpClient
from relkit.http.message import DefaultRequestFactory, HttpRequest, HttpResponse, RequestFactory

__all__ = [
    "DefaultRequestFactory",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "MockHttpClient",
    "RequestFactory",
    "TransportError",
    "UrllibHttpClient",
]
