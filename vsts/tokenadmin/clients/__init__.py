"""High-level clients."""

from .token_admin_client import TokenAdminClient

__all__ = ["TokenAdminClient"]
