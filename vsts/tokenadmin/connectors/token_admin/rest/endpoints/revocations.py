"""TokenAdmin revocations endpoint definition and adapter.

Revokes a batch of authorizations, possibly belonging to several users,
in one call. Batches over the server-side limit are rejected by the service.
"""

from __future__ import annotations

from typing import Any

from vsts.tokenadmin.core import ApiArea
from vsts.tokenadmin.core.config import API_VERSION_PARAM
from vsts.tokenadmin.models import TokenAdminRevocation
from vsts.tokenadmin.runtime.rest import HTTPResponse, ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return f"{ApiArea.TOKEN_ADMIN.path_prefix}/revocations"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {API_VERSION_PARAM: params.get("api_version")}


def build_body(params: dict[str, Any]) -> list[dict[str, str]]:
    """Build ``[{"authorizationId": "<guid>"}, ...]`` in input order."""
    revocations: list[TokenAdminRevocation] = params["revocations"]
    return [revocation.to_wire() for revocation in revocations]


# Endpoint specification
SPEC = RestEndpointSpec(
    id="revocations",
    method="POST",
    build_path=build_path,
    build_query=build_query,
    build_body=build_body,
)


class Adapter(ResponseAdapter):
    """The service answers 204 No Content; nothing to parse."""

    def parse(self, response: HTTPResponse, params: dict[str, Any]) -> None:
        return None
