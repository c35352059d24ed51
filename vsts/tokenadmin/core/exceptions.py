"""Custom exception hierarchy."""

from __future__ import annotations

import math
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from typing import Any


class AdminError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(AdminError):
    """Client was constructed with missing or conflicting settings."""

    pass


class ResponseFormatError(AdminError):
    """Response body could not be parsed into the expected model."""

    def __init__(self, message: str, endpoint_id: str | None = None) -> None:
        super().__init__(message)
        self.endpoint_id = endpoint_id


class ServiceError(AdminError):
    """Error response from the remote service.

    The service reports failures as a JSON body carrying ``message`` and
    ``typeKey``; both are kept when present.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        type_key: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.type_key = type_key


class AuthorizationError(ServiceError):
    """Caller is not authenticated or lacks administrator rights."""

    pass


class NotFoundError(ServiceError):
    """Requested user, descriptor or resource does not exist."""

    pass


class RequestValidationError(ServiceError):
    """Service rejected the request (e.g. page size or batch over the server limit)."""

    pass


class RateLimitError(ServiceError):
    """Service rate limit exceeded."""

    def __init__(
        self,
        message: str,
        retry_after: int = 60,
        type_key: str | None = None,
    ) -> None:
        super().__init__(message, status_code=429, type_key=type_key)
        self.retry_after = retry_after


_STATUS_ERRORS: dict[int, type[ServiceError]] = {
    400: RequestValidationError,
    401: AuthorizationError,
    403: AuthorizationError,
    404: NotFoundError,
}


def parse_retry_after(value: str | None, *, now: datetime | None = None) -> float | None:
    """Convert a ``Retry-After`` header value to seconds.

    Accepts both delay-seconds and HTTP-date forms. Dates in the past give
    0.0; unparseable values give None.
    """
    if value is None:
        return None
    value = str(value).strip()
    if not value:
        return None
    try:
        return max(float(value), 0.0)
    except ValueError:
        pass
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=UTC)
    now = now or datetime.now(UTC)
    return max((when - now).total_seconds(), 0.0)


def error_for_status(
    status: int,
    body: Any = None,
    *,
    reason: str | None = None,
    retry_after: str | None = None,
) -> ServiceError:
    """Build the exception matching an HTTP error status.

    Args:
        status: HTTP status code (>= 400)
        body: Decoded response body, if any
        reason: HTTP reason phrase used when the body carries no message
        retry_after: Raw ``Retry-After`` header value for 429 responses

    Returns:
        ServiceError subclass instance (not raised)
    """
    message = None
    type_key = None
    if isinstance(body, dict):
        message = body.get("message")
        type_key = body.get("typeKey")
    if not message:
        message = f"HTTP {status}" + (f" {reason}" if reason else "")

    if status == 429:
        seconds = parse_retry_after(retry_after)
        delay = math.ceil(seconds) if seconds is not None else 60
        return RateLimitError(message, retry_after=delay, type_key=type_key)

    error_cls = _STATUS_ERRORS.get(status, ServiceError)
    return error_cls(message, status_code=status, type_key=type_key)
