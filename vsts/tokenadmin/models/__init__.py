"""Data models for Graph and TokenAdmin resources.

All models are Pydantic v2 and immutable (frozen=True). Wire field names
are camelCase aliases; models accept either form on construction.
"""

from .graph import GraphDescriptorResult, GraphUser
from .token_admin import SessionToken, TokenAdminRevocation, TokenAdminRevocationRule

__all__ = [
    "GraphDescriptorResult",
    "GraphUser",
    "SessionToken",
    "TokenAdminRevocation",
    "TokenAdminRevocationRule",
]
