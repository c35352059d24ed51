"""TokenAdmin revocation rules endpoint definition and adapter.

Some OAuth credentials, such as self-describing session tokens, cannot be
revoked one by one. A revocation rule instead rejects, at authentication
time, every credential matching any of the rule's scopes that was issued
before ``createdBefore``.
"""

from __future__ import annotations

from typing import Any

from vsts.tokenadmin.core import ApiArea
from vsts.tokenadmin.core.config import API_VERSION_PARAM
from vsts.tokenadmin.models import TokenAdminRevocationRule
from vsts.tokenadmin.runtime.rest import HTTPResponse, ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    return f"{ApiArea.TOKEN_ADMIN.path_prefix}/revocationRules"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {API_VERSION_PARAM: params.get("api_version")}


def build_body(params: dict[str, Any]) -> dict[str, str]:
    rule: TokenAdminRevocationRule = params["rule"]
    return rule.to_wire()


# Endpoint specification
SPEC = RestEndpointSpec(
    id="revocation_rules",
    method="POST",
    build_path=build_path,
    build_query=build_query,
    build_body=build_body,
)


class Adapter(ResponseAdapter):
    """The service answers 204 No Content; nothing to parse."""

    def parse(self, response: HTTPResponse, params: dict[str, Any]) -> None:
        return None
