"""REST runtime abstractions."""

from .http_client import HTTPClient, HTTPResponse
from .provider import RESTProvider
from .runner import ResponseAdapter, RestEndpointSpec, RestRunner
from .transport import RESTTransport, retry_after_hook

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "RESTTransport",
    "RESTProvider",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "retry_after_hook",
]
