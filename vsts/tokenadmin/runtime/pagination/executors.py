"""Page walking logic for cursor-paginated endpoints.

This module provides the PageWalker class that repeatedly calls a fetch
function, forwarding each returned cursor verbatim, until the endpoint's
cursor policy reports the end of pages.
"""

from __future__ import annotations

import inspect
from collections.abc import AsyncIterator
from contextlib import aclosing
from time import perf_counter
from typing import Generic, TypeVar

from .definitions import STRING_CURSOR, CursorPolicy, FetchPage, Page, PageHandler, PageWalkResult
from .telemetry import log_page_error, log_page_fetched, log_page_walk_complete

T = TypeVar("T")


class PageWalker(Generic[T]):
    """Walks all pages of a cursor-paginated listing.

    The walker decouples "walk all pages" from "process one page": results
    can be materialized into a list, handed to a per-page callback, or both.
    Fetches are issued one at a time; any fetch failure aborts the walk.
    """

    def __init__(self, policy: CursorPolicy = STRING_CURSOR, endpoint_id: str = "unknown") -> None:
        """Initialize page walker.

        Args:
            policy: Cursor policy deciding when the walk ends
            endpoint_id: Endpoint identifier used in telemetry
        """
        self._policy = policy
        self._endpoint_id = endpoint_id

    async def iter_pages(self, fetch_page: FetchPage[T]) -> AsyncIterator[Page[T]]:
        """Yield pages as they arrive.

        The next page is requested only after the consumer resumes the
        iterator, so a page is fully processed before the following fetch.

        Args:
            fetch_page: Async function taking a cursor (None first) and returning a Page

        Yields:
            Each Page, including empty ones
        """
        cursor: str | None = None
        page_index = 0
        while True:
            start = perf_counter()
            try:
                page = await fetch_page(cursor)
            except Exception as e:
                log_page_error(
                    endpoint_id=self._endpoint_id,
                    page_index=page_index,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise

            cursor = page.continuation_token
            done = self._policy.is_terminal(cursor)
            log_page_fetched(
                endpoint_id=self._endpoint_id,
                page_index=page_index,
                items=len(page.items),
                has_more=not done,
                latency_ms=(perf_counter() - start) * 1000.0,
            )
            yield page

            if done:
                return
            page_index += 1

    async def walk(
        self,
        fetch_page: FetchPage[T],
        *,
        on_page: PageHandler[T] | None = None,
        materialize: bool = True,
        into: list[T] | None = None,
    ) -> PageWalkResult[T]:
        """Walk every page and aggregate the results.

        Args:
            fetch_page: Async function taking a cursor (None first) and returning a Page
            on_page: Optional handler (sync or async) called once with each
                page's items before the next page is requested; a listing whose
                only page is empty and final never calls it
            materialize: Whether to accumulate all items into the result
            into: Optional caller-owned list to accumulate into; items already
                appended stay there if a later fetch fails

        Returns:
            PageWalkResult with the ordered items and walk metadata
        """
        items: list[T] = into if into is not None else []
        result: PageWalkResult[T] = PageWalkResult(items=items, materialized=materialize)
        start = perf_counter()

        async with aclosing(self.iter_pages(fetch_page)) as pages:
            async for page in pages:
                result.pages_fetched += 1
                if (
                    result.pages_fetched == 1
                    and not page.items
                    and self._policy.is_terminal(page.continuation_token)
                ):
                    # Zero-page listing
                    break

                result.total_items += len(page.items)
                if on_page is not None:
                    outcome = on_page(list(page.items))
                    if inspect.isawaitable(outcome):
                        await outcome
                if materialize:
                    items.extend(page.items)

        log_page_walk_complete(
            endpoint_id=self._endpoint_id,
            result=result,
            total_latency_ms=(perf_counter() - start) * 1000.0,
        )
        return result


async def paginate(
    fetch_page: FetchPage[T],
    *,
    policy: CursorPolicy = STRING_CURSOR,
    on_page: PageHandler[T] | None = None,
    materialize: bool = True,
    endpoint_id: str = "unknown",
) -> list[T]:
    """Walk all pages and return the concatenated items.

    Convenience wrapper around PageWalker.walk; returns an empty list when
    ``materialize`` is False.
    """
    walker: PageWalker[T] = PageWalker(policy=policy, endpoint_id=endpoint_id)
    result = await walker.walk(fetch_page, on_page=on_page, materialize=materialize)
    return result.items
