"""Connectors for the REST API areas used in token administration."""

from .graph import GraphRESTConnector
from .token_admin import TokenAdminRESTConnector

__all__ = ["GraphRESTConnector", "TokenAdminRESTConnector"]
