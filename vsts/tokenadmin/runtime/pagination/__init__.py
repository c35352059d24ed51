"""Generic cursor pagination layer.

This module provides reusable pagination logic that walks any listing
endpoint returning an opaque continuation token.

Architecture:
    The pagination layer consists of:
    - definitions.py: Page, CursorPolicy and PageWalkResult structures
    - executors.py: PageWalker (walks pages and aggregates or streams them)
    - telemetry.py: Structured logging

Usage:
    Connectors expose ``fetch(cursor) -> Page`` functions and declare the
    CursorPolicy of their endpoint; PageWalker does the rest.
"""

from __future__ import annotations

from .definitions import (
    GUID_CURSOR,
    STRING_CURSOR,
    CursorPolicy,
    FetchPage,
    Page,
    PageHandler,
    PageWalkResult,
)
from .executors import PageWalker, paginate

__all__ = [
    "Page",
    "PageWalkResult",
    "CursorPolicy",
    "STRING_CURSOR",
    "GUID_CURSOR",
    "FetchPage",
    "PageHandler",
    "PageWalker",
    "paginate",
]
