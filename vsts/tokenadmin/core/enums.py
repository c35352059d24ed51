"""Core enumerations shared by connectors and clients."""

from enum import Enum


class ApiArea(str, Enum):
    """Areas of the REST API used for token administration.

    Each area versions its endpoints independently, so the ``api-version``
    query parameter is chosen per area.
    """

    GRAPH = "graph"
    TOKEN_ADMIN = "tokenAdmin"

    @property
    def path_prefix(self) -> str:
        """Path prefix shared by every endpoint of the area."""
        return f"/_apis/{self.value}"
