"""Graph REST connector.

Wraps the Graph endpoints needed for token administration: resolving
storage keys (VSIDs) to subject descriptors and listing users.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any
from uuid import UUID

from vsts.tokenadmin.core import ApiArea
from vsts.tokenadmin.models import GraphUser
from vsts.tokenadmin.runtime.pagination import Page, PageHandler, PageWalkResult
from vsts.tokenadmin.runtime.rest import ResponseAdapter, RestEndpointSpec, RESTProvider

from .endpoints import get_endpoint

logger = logging.getLogger(__name__)


class GraphRESTConnector(RESTProvider):
    """Connector for ``/_apis/graph/*``."""

    area = ApiArea.GRAPH

    def _lookup(self, endpoint_id: str) -> tuple[RestEndpointSpec, type[ResponseAdapter]] | None:
        return get_endpoint(endpoint_id)

    async def get_descriptor(self, storage_key: UUID | str) -> str:
        """Resolve a storage key (VSID) to its subject descriptor.

        HTTP: GET /_apis/graph/descriptors/{storage_key} => {"value": "<descriptor>"}
        """
        descriptor: str = await self.fetch("descriptor", {"storage_key": storage_key})
        return descriptor

    async def get_descriptors(self, storage_keys: Iterable[UUID | str]) -> list[str]:
        """Resolve several storage keys, one request each, in input order."""
        return [await self.get_descriptor(key) for key in storage_keys]

    async def list_users(
        self,
        continuation_token: str | None = None,
        *,
        subject_types: str | None = None,
    ) -> Page[GraphUser]:
        """Fetch one page of users.

        Args:
            continuation_token: Cursor from the previous page's header (None for the first page)
            subject_types: Optional comma-separated subject type filter (e.g. "aad,msa")

        Returns:
            Page of users; its continuation token comes from ``X-MS-ContinuationToken``
        """
        params: dict[str, Any] = {
            "continuation_token": continuation_token,
            "subject_types": subject_types,
        }
        page: Page[GraphUser] = await self.fetch("users", params)
        logger.debug(
            "users_page",
            extra={"users": len(page.items), "has_cursor": bool(page.continuation_token)},
        )
        return page

    async def list_all_users(
        self,
        *,
        on_page: PageHandler[GraphUser] | None = None,
        materialize: bool = True,
        subject_types: str | None = None,
    ) -> PageWalkResult[GraphUser]:
        """Walk all pages of users."""
        return await self.fetch_all(
            "users",
            {"subject_types": subject_types},
            on_page=on_page,
            materialize=materialize,
        )
