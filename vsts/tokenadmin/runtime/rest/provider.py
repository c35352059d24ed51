"""Base class for REST connectors.

Architecture:
    A connector owns (or shares) a RESTTransport, looks endpoint specs and
    adapters up in its area's registry, and executes them with RestRunner.
    Connectors for the same organization may share one transport so that a
    single session and credential are used.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ...core.config import DEFAULT_TIMEOUT, get_api_version, get_base_url
from ...core.enums import ApiArea
from ..pagination import PageHandler, PageWalkResult
from .runner import ResponseAdapter, RestEndpointSpec, RestRunner
from .transport import RESTTransport


class RESTProvider(ABC):
    """Common lifecycle and dispatch for area connectors."""

    area: ApiArea

    def __init__(
        self,
        *,
        organization: str | None = None,
        base_url: str | None = None,
        access_token: str | None = None,
        personal_access_token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        api_version: str | None = None,
        transport: RESTTransport | None = None,
    ) -> None:
        """Initialize connector.

        Args:
            organization: Organization name used to build the base URL
            base_url: Explicit base URL (overrides organization)
            access_token: Bearer token for the Authorization header
            personal_access_token: PAT sent via basic auth
            timeout: Total request timeout in seconds
            api_version: Override for the area's ``api-version``
            transport: Shared transport; when given, connection arguments are ignored
        """
        self._owns_transport = transport is None
        if transport is None:
            transport = RESTTransport(
                get_base_url(organization, base_url),
                access_token=access_token,
                personal_access_token=personal_access_token,
                timeout=timeout,
            )
        self._transport = transport
        self._runner = RestRunner(self._transport)
        self.api_version = api_version or get_api_version(self.area)

    @abstractmethod
    def _lookup(self, endpoint_id: str) -> tuple[RestEndpointSpec, type[ResponseAdapter]] | None:
        """Return the spec and adapter class registered for ``endpoint_id``."""

    def _resolve(self, endpoint_id: str) -> tuple[RestEndpointSpec, ResponseAdapter]:
        entry = self._lookup(endpoint_id)
        if entry is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")
        spec, adapter_cls = entry
        return spec, adapter_cls()

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Execute a single request against an endpoint.

        Args:
            endpoint_id: Endpoint identifier (e.g., "descriptor", "revocations")
            params: Request parameters

        Returns:
            Parsed response from the endpoint adapter

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec, adapter = self._resolve(endpoint_id)
        params = {**params, "api_version": self.api_version}
        return await self._runner.run(spec=spec, adapter=adapter, params=params)

    async def fetch_all(
        self,
        endpoint_id: str,
        params: dict[str, Any],
        *,
        on_page: PageHandler[Any] | None = None,
        materialize: bool = True,
    ) -> PageWalkResult[Any]:
        """Walk every page of a paginated endpoint."""
        spec, adapter = self._resolve(endpoint_id)
        params = {**params, "api_version": self.api_version}
        return await self._runner.run_paginated(
            spec=spec, adapter=adapter, params=params, on_page=on_page, materialize=materialize
        )

    async def close(self) -> None:
        """Close underlying HTTP resources (only when owned)."""
        if self._owns_transport:
            await self._transport.close()

    async def __aenter__(self) -> RESTProvider:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
