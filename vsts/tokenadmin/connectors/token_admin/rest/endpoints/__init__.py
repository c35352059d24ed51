"""TokenAdmin REST endpoint registry."""

from __future__ import annotations

from vsts.tokenadmin.runtime.rest import ResponseAdapter, RestEndpointSpec

from .personal_access_tokens import SPEC as PersonalAccessTokensSpec  # noqa: N811
from .personal_access_tokens import Adapter as PersonalAccessTokensAdapter
from .revocation_rules import SPEC as RevocationRulesSpec  # noqa: N811
from .revocation_rules import Adapter as RevocationRulesAdapter
from .revocations import SPEC as RevocationsSpec  # noqa: N811
from .revocations import Adapter as RevocationsAdapter

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "personal_access_tokens": (PersonalAccessTokensSpec, PersonalAccessTokensAdapter),
    "revocations": (RevocationsSpec, RevocationsAdapter),
    "revocation_rules": (RevocationRulesSpec, RevocationRulesAdapter),
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
    "PersonalAccessTokensSpec",
    "PersonalAccessTokensAdapter",
    "RevocationsSpec",
    "RevocationsAdapter",
    "RevocationRulesSpec",
    "RevocationRulesAdapter",
]
