"""Graph descriptor endpoint definition and adapter.

Resolves a storage key (the identity's VSID) to its subject descriptor.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from vsts.tokenadmin.connectors.parsing import validate_model
from vsts.tokenadmin.core import ApiArea
from vsts.tokenadmin.core.config import API_VERSION_PARAM
from vsts.tokenadmin.models import GraphDescriptorResult
from vsts.tokenadmin.runtime.rest import HTTPResponse, ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    """Build the descriptor path for a storage key."""
    storage_key = quote(str(params["storage_key"]), safe="")
    return f"{ApiArea.GRAPH.path_prefix}/descriptors/{storage_key}"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {API_VERSION_PARAM: params.get("api_version")}


# Endpoint specification
SPEC = RestEndpointSpec(
    id="descriptor",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter returning the subject descriptor string."""

    def parse(self, response: HTTPResponse, params: dict[str, Any]) -> str:
        return validate_model(GraphDescriptorResult, response.data, SPEC.id).value
