"""HTTP client helper."""

from __future__ import annotations

import asyncio
import inspect
import json
import logging
import time
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Union

import aiohttp

from ...core.config import DEFAULT_TIMEOUT
from ...core.exceptions import ResponseFormatError, error_for_status

logger = logging.getLogger(__name__)

# A hook may return a delay in seconds to throttle the next request.
ResponseHook = Callable[[aiohttp.ClientResponse], Union[Optional[float], Awaitable[Optional[float]]]]


@dataclass(frozen=True)
class HTTPResponse:
    """Decoded HTTP response.

    Attributes:
        status: HTTP status code
        headers: Response headers
        data: Decoded JSON body, or None for 204 and empty bodies
    """

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    data: Any = None

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        value = self.headers.get(name)
        if value is not None:
            return value
        lowered = name.lower()
        for key, val in self.headers.items():
            if key.lower() == lowered:
                return val
        return None


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Optional[dict[str, str]] = None,
        auth: Optional[aiohttp.BasicAuth] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._headers = dict(headers or {})
        self._auth = auth
        self._session: Optional[aiohttp.ClientSession] = None
        self._response_hooks: list[ResponseHook] = []
        self._throttle_until: Optional[float] = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout, headers=self._headers, auth=self._auth
            )
        return self._session

    def add_response_hook(self, hook: ResponseHook) -> None:
        """Register a hook called with every raw response."""
        self._response_hooks.append(hook)

    def set_throttle(self, delay: float) -> None:
        """Delay the next request by ``delay`` seconds (extends, never shortens)."""
        if delay <= 0:
            return
        until = time.time() + delay
        if self._throttle_until is None or until > self._throttle_until:
            self._throttle_until = until

    async def _wait_for_throttle(self) -> None:
        if self._throttle_until is None:
            return
        remaining = self._throttle_until - time.time()
        self._throttle_until = None
        if remaining > 0:
            await asyncio.sleep(remaining)

    async def _run_hooks(self, response: aiohttp.ClientResponse) -> None:
        for hook in self._response_hooks:
            try:
                delay = hook(response)
                if inspect.isawaitable(delay):
                    delay = await delay
            except Exception:
                logger.warning("Response hook failed", exc_info=True)
                continue
            if delay:
                self.set_throttle(float(delay))

    def _resolve_url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json_body: Any = None,
        headers: Optional[dict[str, str]] = None,
    ) -> HTTPResponse:
        await self._wait_for_throttle()
        url = self._resolve_url(url)

        kwargs: dict[str, Any] = {"params": params, "headers": headers}
        if json_body is not None:
            kwargs["json"] = json_body

        async with self.session.request(method, url, **kwargs) as response:
            await self._run_hooks(response)
            status = response.status
            resp_headers = dict(response.headers)

            if status >= 400:
                try:
                    body = await response.json(content_type=None)
                except (aiohttp.ContentTypeError, json.JSONDecodeError, UnicodeDecodeError):
                    body = None
                logger.warning(
                    "http_error",
                    extra={"method": method, "url": url, "status": status},
                )
                raise error_for_status(
                    status,
                    body,
                    reason=response.reason,
                    retry_after=response.headers.get("Retry-After"),
                )

            if status == 204:
                return HTTPResponse(status=status, headers=resp_headers, data=None)

            try:
                data = await response.json(content_type=None)
            except (aiohttp.ContentTypeError, json.JSONDecodeError, UnicodeDecodeError) as e:
                raise ResponseFormatError(f"Invalid JSON from {method} {url}: {e}") from e
            return HTTPResponse(status=status, headers=resp_headers, data=data)

    async def get(
        self,
        url: str,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> HTTPResponse:
        """GET request."""
        return await self._request("GET", url, params=params, headers=headers)

    async def post(
        self,
        url: str,
        json: Any = None,
        headers: Optional[dict[str, str]] = None,
        params: Optional[dict[str, Any]] = None,
    ) -> HTTPResponse:
        """POST request with a JSON body."""
        return await self._request("POST", url, params=params, json_body=json, headers=headers)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "HTTPClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
