"""Pagination definitions and cursor policy structures.

This module defines the data structures used to describe cursor-based
pagination: the page returned by one fetch, the policy deciding when a
cursor ends a walk, and the aggregated result of a walk.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar
from uuid import UUID

from ...core.config import EMPTY_GUID

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page returned by a listing call.

    Attributes:
        items: Items of the page, in service order
        continuation_token: Opaque cursor for the next page (None if absent)
    """

    items: list[T]
    continuation_token: str | None = None


@dataclass(frozen=True)
class CursorPolicy:
    """Decides which cursor values end a pagination walk.

    Endpoints signal "no more pages" differently, so each endpoint declares
    its own policy instead of sharing one convention.

    Attributes:
        name: Policy name used in telemetry
        terminal_values: Cursor strings that end the walk (besides None)
        guid_sentinel: GUID that ends the walk, compared as a UUID so casing
            and braces do not matter
    """

    name: str
    terminal_values: frozenset[str] = frozenset()
    guid_sentinel: UUID | None = None

    def is_terminal(self, cursor: str | None) -> bool:
        """Return True when ``cursor`` signals the end of pages."""
        if cursor is None:
            return True
        if cursor in self.terminal_values:
            return True
        if self.guid_sentinel is not None:
            try:
                return UUID(cursor) == self.guid_sentinel
            except ValueError:
                return False
        return False


# Graph users: cursor arrives in a header; absent or empty means done.
STRING_CURSOR = CursorPolicy(name="string", terminal_values=frozenset({""}))

# TokenAdmin PATs: cursor arrives in the body; null, blank or the empty GUID means done.
GUID_CURSOR = CursorPolicy(
    name="guid", terminal_values=frozenset({""}), guid_sentinel=UUID(EMPTY_GUID)
)


@dataclass
class PageWalkResult(Generic[T]):
    """Result of a pagination walk.

    Attributes:
        items: Concatenated items of all pages (empty when not materialized)
        pages_fetched: Number of fetch calls made
        total_items: Number of items seen across all pages
        materialized: Whether ``items`` holds the full result
    """

    items: list[T] = field(default_factory=list)
    pages_fetched: int = 0
    total_items: int = 0
    materialized: bool = True


FetchPage = Callable[[str | None], Awaitable[Page[T]]]
PageHandler = Callable[[list[T]], Any]
