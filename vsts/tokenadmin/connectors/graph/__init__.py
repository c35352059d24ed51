"""Graph connector implementation."""

from .rest.provider import GraphRESTConnector

__all__ = ["GraphRESTConnector"]
