"""TokenAdmin connector implementation."""

from .rest.provider import TokenAdminRESTConnector

__all__ = ["TokenAdminRESTConnector"]
