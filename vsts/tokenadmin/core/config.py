"""Shared connection constants.

This module centralizes the base URL template, API versions and header
names used by the Graph and TokenAdmin connectors so the connectors can
stay small and focused.
"""

from __future__ import annotations

from .enums import ApiArea
from .exceptions import ConfigurationError

# Token administration lives on the identity (vssps) host, not the
# organization's main dev.azure.com host.
BASE_URL_TEMPLATE = "https://{organization}.vssps.visualstudio.com"

API_VERSIONS = {
    ApiArea.GRAPH: "4.1-preview.1",
    ApiArea.TOKEN_ADMIN: "5.0-preview.1",
}

API_VERSION_PARAM = "api-version"

# Graph returns its cursor in this header; TokenAdmin uses the body.
CONTINUATION_TOKEN_HEADER = "X-MS-ContinuationToken"
CONTINUATION_TOKEN_PARAM = "continuationToken"

EMPTY_GUID = "00000000-0000-0000-0000-000000000000"

DEFAULT_TIMEOUT = 30.0

# Scopes rejected by the canned revocation rule of the sample
DEFAULT_REVOCATION_SCOPES = ("vso.code", "vso.packaging")


def get_base_url(organization: str | None = None, base_url: str | None = None) -> str:
    """Resolve the REST base URL.

    Args:
        organization: Organization name (e.g. "fabrikam")
        base_url: Explicit base URL, takes precedence over organization

    Returns:
        Base URL without a trailing slash

    Raises:
        ConfigurationError: If neither argument is provided

    Examples:
        >>> get_base_url("fabrikam")
        'https://fabrikam.vssps.visualstudio.com'
        >>> get_base_url(base_url="http://localhost:8080/")
        'http://localhost:8080'
    """
    if base_url:
        return base_url.rstrip("/")
    if organization:
        return BASE_URL_TEMPLATE.format(organization=organization.strip())
    raise ConfigurationError("Either organization or base_url must be provided")


def get_api_version(area: ApiArea, overrides: dict[ApiArea, str] | None = None) -> str:
    """Get the ``api-version`` for an area, honoring caller overrides."""
    if overrides and area in overrides:
        return overrides[area]
    return API_VERSIONS[area]
