"""TokenAdmin REST connector."""

from .provider import TokenAdminRESTConnector

__all__ = ["TokenAdminRESTConnector"]
