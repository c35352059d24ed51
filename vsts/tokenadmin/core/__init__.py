"""Core components."""

from .config import (
    API_VERSIONS,
    CONTINUATION_TOKEN_HEADER,
    DEFAULT_TIMEOUT,
    EMPTY_GUID,
    get_api_version,
    get_base_url,
)
from .enums import ApiArea
from .exceptions import (
    AdminError,
    AuthorizationError,
    ConfigurationError,
    NotFoundError,
    RateLimitError,
    RequestValidationError,
    ResponseFormatError,
    ServiceError,
    error_for_status,
    parse_retry_after,
)

__all__ = [
    "ApiArea",
    "API_VERSIONS",
    "CONTINUATION_TOKEN_HEADER",
    "DEFAULT_TIMEOUT",
    "EMPTY_GUID",
    "get_api_version",
    "get_base_url",
    "AdminError",
    "ConfigurationError",
    "ResponseFormatError",
    "ServiceError",
    "AuthorizationError",
    "NotFoundError",
    "RequestValidationError",
    "RateLimitError",
    "error_for_status",
    "parse_retry_after",
]
