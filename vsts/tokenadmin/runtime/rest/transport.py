"""REST transport: credentials, default headers and HTTPClient delegation."""

from __future__ import annotations

from typing import Any

import aiohttp

from ...core.config import DEFAULT_TIMEOUT
from ...core.exceptions import ConfigurationError, parse_retry_after
from .http_client import HTTPClient, HTTPResponse, ResponseHook


def retry_after_hook(response: aiohttp.ClientResponse) -> float | None:
    """Throttle the next request when the service sends ``Retry-After``.

    The service attaches the header to delayed (not only rejected) requests.
    """
    return parse_retry_after(response.headers.get("Retry-After"))


class RESTTransport:
    """Thin transport over HTTPClient bound to one base URL.

    Credentials are pre-acquired by the caller: either an access token sent
    as ``Authorization: Bearer ...`` or a personal access token sent as basic
    auth with an empty user name.
    """

    def __init__(
        self,
        base_url: str,
        *,
        access_token: str | None = None,
        personal_access_token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        respect_retry_after: bool = True,
    ) -> None:
        if access_token and personal_access_token:
            raise ConfigurationError("Pass either access_token or personal_access_token, not both")

        headers = {"Accept": "application/json"}
        auth = None
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        elif personal_access_token:
            auth = aiohttp.BasicAuth("", personal_access_token)

        self._http = HTTPClient(base_url=base_url, timeout=timeout, headers=headers, auth=auth)
        if respect_retry_after:
            self._http.add_response_hook(retry_after_hook)

    @property
    def base_url(self) -> str | None:
        return self._http.base_url

    def add_response_hook(self, hook: ResponseHook) -> None:
        self._http.add_response_hook(hook)

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> HTTPResponse:
        return await self._http.get(path, params=params, headers=headers)

    async def post(
        self,
        path: str,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
    ) -> HTTPResponse:
        return await self._http.post(path, json=json_body, headers=headers, params=params)

    async def close(self) -> None:
        await self._http.close()
