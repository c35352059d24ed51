"""Unit tests for the cursor pagination walker."""

from __future__ import annotations

import pytest

from vsts.tokenadmin.runtime.pagination import (
    GUID_CURSOR,
    STRING_CURSOR,
    Page,
    PageWalker,
    paginate,
)


def make_fetch(pages: list[Page], calls: list):
    """Build a fetch function serving ``pages`` in order and recording cursors."""

    async def fetch(cursor):
        calls.append(cursor)
        return pages[len(calls) - 1]

    return fetch


class TestPageWalker:
    """Test PageWalker aggregation."""

    @pytest.mark.asyncio
    async def test_two_pages_materialized(self):
        """Pages are concatenated in order with one fetch per page."""
        calls: list = []
        fetch = make_fetch([Page(["a", "b"], "x"), Page(["c"], None)], calls)

        result = await PageWalker().walk(fetch)

        assert result.items == ["a", "b", "c"]
        assert result.pages_fetched == 2
        assert result.total_items == 3
        assert calls == [None, "x"]

    @pytest.mark.asyncio
    async def test_n_pages_forward_cursors_verbatim(self):
        """Each returned cursor is passed unchanged to the next fetch."""
        calls: list = []
        pages = [
            Page([1, 2, 3], "Cursor-1=="),
            Page([4, 5, 6], " weird cursor "),
            Page([7], ""),
        ]

        result = await PageWalker(STRING_CURSOR).walk(make_fetch(pages, calls))

        assert result.items == [1, 2, 3, 4, 5, 6, 7]
        assert calls == [None, "Cursor-1==", " weird cursor "]

    @pytest.mark.asyncio
    async def test_on_page_called_once_per_page_before_next_fetch(self):
        """on_page sees each page's items before the following fetch happens."""
        events: list = []

        async def fetch(cursor):
            events.append(("fetch", cursor))
            if cursor is None:
                return Page(["a", "b"], "x")
            return Page(["c"], None)

        def on_page(items):
            events.append(("page", items))

        await PageWalker().walk(fetch, on_page=on_page)

        assert events == [
            ("fetch", None),
            ("page", ["a", "b"]),
            ("fetch", "x"),
            ("page", ["c"]),
        ]

    @pytest.mark.asyncio
    async def test_async_on_page_is_awaited(self):
        """Async handlers are awaited."""
        seen: list = []

        async def on_page(items):
            seen.extend(items)

        calls: list = []
        await PageWalker().walk(
            make_fetch([Page(["a"], "x"), Page(["b"], None)], calls), on_page=on_page
        )

        assert seen == ["a", "b"]

    @pytest.mark.asyncio
    async def test_streaming_does_not_materialize(self):
        """With materialize=False the handler still gets every page."""
        seen: list = []
        calls: list = []

        result = await PageWalker().walk(
            make_fetch([Page(["a", "b"], "x"), Page(["c"], None)], calls),
            on_page=seen.append,
            materialize=False,
        )

        assert result.items == []
        assert result.materialized is False
        assert result.total_items == 3
        assert seen == [["a", "b"], ["c"]]

    @pytest.mark.asyncio
    async def test_zero_pages(self):
        """An empty first page with no cursor yields nothing and skips on_page."""
        calls: list = []
        seen: list = []

        result = await PageWalker().walk(make_fetch([Page([], None)], calls), on_page=seen.append)

        assert result.items == []
        assert result.pages_fetched == 1
        assert seen == []

    @pytest.mark.asyncio
    async def test_empty_intermediate_page_continues(self):
        """An empty page with a live cursor does not end the walk and still reaches on_page."""
        calls: list = []
        seen: list = []
        pages = [Page(["a"], "x"), Page([], "y"), Page(["b"], None)]

        result = await PageWalker().walk(make_fetch(pages, calls), on_page=seen.append)

        assert result.items == ["a", "b"]
        assert seen == [["a"], [], ["b"]]
        assert len(seen) == result.pages_fetched == 3
        assert calls == [None, "x", "y"]

    @pytest.mark.asyncio
    async def test_empty_final_page_after_items_reaches_on_page(self):
        calls: list = []
        seen: list = []
        pages = [Page(["a"], "x"), Page([], None)]

        result = await PageWalker().walk(make_fetch(pages, calls), on_page=seen.append)

        assert result.items == ["a"]
        assert seen == [["a"], []]

    @pytest.mark.asyncio
    async def test_error_propagates_and_stops(self):
        """A failing fetch aborts the walk without requesting further pages."""
        calls: list = []

        async def fetch(cursor):
            calls.append(cursor)
            if cursor == "x":
                raise RuntimeError("boom")
            return Page(["a"], "x")

        with pytest.raises(RuntimeError, match="boom"):
            await PageWalker().walk(fetch)

        assert calls == [None, "x"]

    @pytest.mark.asyncio
    async def test_error_keeps_items_in_caller_accumulator(self):
        """Pages accumulated before a failure stay in a caller-owned list."""
        collected: list = []

        async def fetch(cursor):
            if cursor is None:
                return Page(["a", "b"], "x")
            raise RuntimeError("network down")

        with pytest.raises(RuntimeError):
            await PageWalker().walk(fetch, into=collected)

        assert collected == ["a", "b"]

    @pytest.mark.asyncio
    async def test_order_and_duplicates_preserved(self):
        """No reordering or dedup is applied."""
        calls: list = []
        pages = [Page([3, 1, 3], "x"), Page([1, 2], None)]

        result = await PageWalker().walk(make_fetch(pages, calls))

        assert result.items == [3, 1, 3, 1, 2]


class TestCursorPolicies:
    """Walk termination differs per endpoint."""

    @pytest.mark.asyncio
    async def test_guid_policy_stops_on_empty_guid(self):
        calls: list = []
        pages = [
            Page(["a"], "5b0e2c2e-8b3c-4c66-9d49-8a2f8c9f1a01"),
            Page(["b"], "00000000-0000-0000-0000-000000000000"),
        ]

        result = await PageWalker(GUID_CURSOR).walk(make_fetch(pages, calls))

        assert result.items == ["a", "b"]
        assert len(calls) == 2

    @pytest.mark.asyncio
    async def test_string_policy_does_not_stop_on_empty_guid(self):
        """The empty GUID is only a sentinel for GUID cursors."""
        calls: list = []
        pages = [
            Page(["a"], "00000000-0000-0000-0000-000000000000"),
            Page(["b"], None),
        ]

        result = await PageWalker(STRING_CURSOR).walk(make_fetch(pages, calls))

        assert result.items == ["a", "b"]
        assert calls == [None, "00000000-0000-0000-0000-000000000000"]

    def test_guid_policy_terminal_values(self):
        assert GUID_CURSOR.is_terminal(None)
        assert GUID_CURSOR.is_terminal("00000000-0000-0000-0000-000000000000")
        assert GUID_CURSOR.is_terminal("{00000000-0000-0000-0000-000000000000}")
        assert not GUID_CURSOR.is_terminal("5b0e2c2e-8b3c-4c66-9d49-8a2f8c9f1a01")
        assert GUID_CURSOR.is_terminal("")

    def test_string_policy_terminal_values(self):
        assert STRING_CURSOR.is_terminal(None)
        assert STRING_CURSOR.is_terminal("")
        assert not STRING_CURSOR.is_terminal(" ")
        assert not STRING_CURSOR.is_terminal("abc")


class TestIterPages:
    """Test streaming iteration."""

    @pytest.mark.asyncio
    async def test_iter_pages_yields_all_pages(self):
        calls: list = []
        pages = [Page(["a"], "x"), Page([], "y"), Page(["b"], None)]
        walker = PageWalker()

        seen = [page async for page in walker.iter_pages(make_fetch(pages, calls))]

        assert seen == pages

    @pytest.mark.asyncio
    async def test_iter_pages_is_lazy(self):
        """The next page is not requested until the consumer asks for it."""
        calls: list = []
        pages = [Page(["a"], "x"), Page(["b"], None)]
        iterator = PageWalker().iter_pages(make_fetch(pages, calls))

        first = await iterator.__anext__()
        assert first.items == ["a"]
        assert calls == [None]
        await iterator.aclose()


class TestPaginate:
    @pytest.mark.asyncio
    async def test_paginate_returns_items(self):
        calls: list = []
        items = await paginate(make_fetch([Page(["a", "b"], "x"), Page(["c"], None)], calls))
        assert items == ["a", "b", "c"]
