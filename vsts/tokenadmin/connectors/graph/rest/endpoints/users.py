"""Graph users listing endpoint definition and adapter.

The listing is paginated; the continuation token (if any) is returned in
the ``X-MS-ContinuationToken`` response header, not in the body.
"""

from __future__ import annotations

from typing import Any

from vsts.tokenadmin.connectors.parsing import collection_value, validate_model
from vsts.tokenadmin.core import ApiArea
from vsts.tokenadmin.core.config import (
    API_VERSION_PARAM,
    CONTINUATION_TOKEN_HEADER,
    CONTINUATION_TOKEN_PARAM,
)
from vsts.tokenadmin.models import GraphUser
from vsts.tokenadmin.runtime.pagination import STRING_CURSOR, Page
from vsts.tokenadmin.runtime.rest import HTTPResponse, ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return f"{ApiArea.GRAPH.path_prefix}/users"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the users listing."""
    return {
        API_VERSION_PARAM: params.get("api_version"),
        "subjectTypes": params.get("subject_types"),
        CONTINUATION_TOKEN_PARAM: params.get("continuation_token"),
    }


# Endpoint specification
SPEC = RestEndpointSpec(
    id="users",
    method="GET",
    build_path=build_path,
    build_query=build_query,
    cursor_policy=STRING_CURSOR,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing a page of Graph users."""

    def parse(self, response: HTTPResponse, params: dict[str, Any]) -> Page[GraphUser]:
        """Parse a users page.

        Args:
            response: Response with ``{"count": n, "value": [...]}`` body
            params: Request parameters

        Returns:
            Page of GraphUser with the header continuation token
        """
        rows = collection_value(response.data, SPEC.id)
        users = [validate_model(GraphUser, row, SPEC.id) for row in rows]
        return Page(items=users, continuation_token=response.header(CONTINUATION_TOKEN_HEADER))
