"""Graph REST endpoint registry."""

from __future__ import annotations

from vsts.tokenadmin.runtime.rest import ResponseAdapter, RestEndpointSpec

from .descriptors import SPEC as DescriptorSpec  # noqa: N811
from .descriptors import Adapter as DescriptorAdapter
from .users import SPEC as UsersSpec  # noqa: N811
from .users import Adapter as UsersAdapter

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "descriptor": (DescriptorSpec, DescriptorAdapter),
    "users": (UsersSpec, UsersAdapter),
}


def get_endpoint(endpoint_id: str) -> tuple[RestEndpointSpec, type[ResponseAdapter]] | None:
    """Get endpoint specification and adapter class by ID."""
    return _ENDPOINT_REGISTRY.get(endpoint_id)


def list_endpoints() -> list[str]:
    """List all available endpoint IDs."""
    return list(_ENDPOINT_REGISTRY.keys())


__all__ = [
    "get_endpoint",
    "list_endpoints",
    "DescriptorSpec",
    "DescriptorAdapter",
    "UsersSpec",
    "UsersAdapter",
]
