"""TokenAdmin personal access token listing endpoint definition and adapter.

The listing is paginated per user; unlike Graph, the continuation token is
returned in the response body and the service signals the last page with
the empty GUID. Page size is client-configurable up to a server-side limit
that is enforced by the service, not here.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from vsts.tokenadmin.connectors.parsing import collection_value, validate_model
from vsts.tokenadmin.core import ApiArea
from vsts.tokenadmin.core.config import API_VERSION_PARAM, CONTINUATION_TOKEN_PARAM
from vsts.tokenadmin.models import SessionToken
from vsts.tokenadmin.runtime.pagination import GUID_CURSOR, Page
from vsts.tokenadmin.runtime.rest import HTTPResponse, ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    """Build the PAT listing path for a subject descriptor."""
    descriptor = quote(str(params["subject_descriptor"]), safe="")
    return f"{ApiArea.TOKEN_ADMIN.path_prefix}/personalAccessTokens/{descriptor}"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters; pageSize is only sent when set."""
    page_size = params.get("page_size")
    return {
        API_VERSION_PARAM: params.get("api_version"),
        "pageSize": int(page_size) if page_size is not None else None,
        CONTINUATION_TOKEN_PARAM: params.get("continuation_token"),
    }


# Endpoint specification
SPEC = RestEndpointSpec(
    id="personal_access_tokens",
    method="GET",
    build_path=build_path,
    build_query=build_query,
    cursor_policy=GUID_CURSOR,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing a page of personal access tokens."""

    def parse(self, response: HTTPResponse, params: dict[str, Any]) -> Page[SessionToken]:
        """Parse a PAT page.

        Args:
            response: Response with ``{"count", "value", "continuationToken"}`` body
            params: Request parameters

        Returns:
            Page of SessionToken with the body continuation token; a blank
            token reads as None, the way a null GUID would
        """
        rows = collection_value(response.data, SPEC.id)
        tokens = [validate_model(SessionToken, row, SPEC.id) for row in rows]
        cursor = response.data.get("continuationToken")
        if cursor is not None:
            cursor = str(cursor).strip() or None
        return Page(items=tokens, continuation_token=cursor)
