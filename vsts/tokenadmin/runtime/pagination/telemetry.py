"""Structured logging for pagination walks.

This module provides telemetry hooks for pagination, emitting structured
logs for observability.
"""

from __future__ import annotations

import logging

from .definitions import PageWalkResult

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    endpoint_id: str,
    page_index: int,
    items: int,
    has_more: bool,
    latency_ms: float | None = None,
) -> None:
    """Log a fetched page.

    Args:
        endpoint_id: Endpoint identifier
        page_index: Zero-based index of the page in the walk
        items: Number of items on the page
        has_more: Whether the page carried a non-terminal cursor
        latency_ms: Fetch latency in milliseconds (optional)
    """
    logger.debug(
        "page_fetched",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "items": items,
            "has_more": has_more,
            "latency_ms": latency_ms,
        },
    )


def log_page_walk_complete(
    *,
    endpoint_id: str,
    result: PageWalkResult,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of a pagination walk."""
    logger.info(
        "page_walk_complete",
        extra={
            "endpoint_id": endpoint_id,
            "pages_fetched": result.pages_fetched,
            "total_items": result.total_items,
            "materialized": result.materialized,
            "total_latency_ms": total_latency_ms,
        },
    )


def log_page_error(
    *,
    endpoint_id: str,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page fetch.

    Args:
        endpoint_id: Endpoint identifier
        page_index: Zero-based index of the page that failed
        error_type: Type of error (e.g., "AuthorizationError")
        error_message: Error message
    """
    logger.error(
        "page_error",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
