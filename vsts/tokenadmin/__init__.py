"""vsts-tokenadmin - find and revoke personal access tokens across an organization."""

from .core import (
    AdminError,
    ApiArea,
    AuthorizationError,
    ConfigurationError,
    NotFoundError,
    RateLimitError,
    RequestValidationError,
    ResponseFormatError,
    ServiceError,
)
from .models import (
    GraphDescriptorResult,
    GraphUser,
    SessionToken,
    TokenAdminRevocation,
    TokenAdminRevocationRule,
)
from .runtime.pagination import (
    GUID_CURSOR,
    STRING_CURSOR,
    CursorPolicy,
    Page,
    PageWalker,
    PageWalkResult,
    paginate,
)
from .connectors import GraphRESTConnector, TokenAdminRESTConnector
from .clients import TokenAdminClient

__version__ = "0.1.0"

__all__ = [
    # Clients
    "TokenAdminClient",
    "GraphRESTConnector",
    "TokenAdminRESTConnector",
    # Pagination
    "Page",
    "PageWalker",
    "PageWalkResult",
    "CursorPolicy",
    "STRING_CURSOR",
    "GUID_CURSOR",
    "paginate",
    # Models
    "GraphDescriptorResult",
    "GraphUser",
    "SessionToken",
    "TokenAdminRevocation",
    "TokenAdminRevocationRule",
    # Core
    "ApiArea",
    "AdminError",
    "ConfigurationError",
    "ResponseFormatError",
    "ServiceError",
    "AuthorizationError",
    "NotFoundError",
    "RequestValidationError",
    "RateLimitError",
]
