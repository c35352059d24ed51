"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..pagination import CursorPolicy, Page, PageHandler, PageWalker, PageWalkResult
from .http_client import HTTPResponse
from .transport import RESTTransport


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST"
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_body: Callable[[dict[str, Any]], Any] | None = None
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None
    # Set on paginated listings; the adapter must then return a Page
    cursor_policy: CursorPolicy | None = None


class ResponseAdapter:
    def parse(self, response: HTTPResponse, params: dict[str, Any]) -> Any:
        return response.data


class RestRunner:
    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        path = spec.build_path(params)
        query = spec.build_query(params) if spec.build_query else None
        body = spec.build_body(params) if spec.build_body else None
        headers = spec.build_headers(params) if spec.build_headers else None

        if query is not None:
            # Optional parameters are left off the wire entirely
            query = {k: v for k, v in query.items() if v is not None}

        if spec.method.upper() == "GET":
            response = await self._t.get(path, params=query, headers=headers)
        else:
            response = await self._t.post(path, params=query, json_body=body, headers=headers)

        return adapter.parse(response, params)

    async def run_paginated(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        params: dict[str, Any],
        on_page: PageHandler[Any] | None = None,
        materialize: bool = True,
    ) -> PageWalkResult[Any]:
        """Walk every page of a paginated endpoint.

        The cursor is passed to the spec's builders as
        ``params["continuation_token"]``.
        """
        if spec.cursor_policy is None:
            raise ValueError(f"Endpoint {spec.id} is not paginated")

        async def fetch_page(cursor: str | None) -> Page[Any]:
            page = await self.run(
                spec=spec, adapter=adapter, params={**params, "continuation_token": cursor}
            )
            if not isinstance(page, Page):
                raise TypeError(f"Adapter for {spec.id} must return a Page")
            return page

        walker: PageWalker[Any] = PageWalker(policy=spec.cursor_policy, endpoint_id=spec.id)
        return await walker.walk(fetch_page, on_page=on_page, materialize=materialize)
