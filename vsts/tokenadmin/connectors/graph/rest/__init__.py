"""Graph REST connector."""

from .provider import GraphRESTConnector

__all__ = ["GraphRESTConnector"]
