"""Precise unit tests for RestRunner.

Tests focus on endpoint execution, parameter building and pagination.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from vsts.tokenadmin.runtime.pagination import STRING_CURSOR, Page
from vsts.tokenadmin.runtime.rest import (
    HTTPResponse,
    ResponseAdapter,
    RestEndpointSpec,
    RESTTransport,
    RestRunner,
)


class TestRestRunner:
    """Test RestRunner endpoint execution."""

    @pytest.fixture
    def mock_transport(self):
        transport = MagicMock(spec=RESTTransport)
        transport.get = AsyncMock(return_value=HTTPResponse(status=200, data={"data": "test"}))
        transport.post = AsyncMock(return_value=HTTPResponse(status=204))
        return transport

    @pytest.fixture
    def runner(self, mock_transport):
        return RestRunner(mock_transport)

    @pytest.fixture
    def mock_adapter(self):
        adapter = MagicMock(spec=ResponseAdapter)
        adapter.parse = MagicMock(return_value={"parsed": "data"})
        return adapter

    @pytest.mark.asyncio
    async def test_run_get_endpoint(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(
            id="test",
            method="GET",
            build_path=lambda p: f"/test/{p['id']}",
            build_query=lambda p: {"param": p.get("param")},
        )

        result = await runner.run(
            spec=spec, adapter=mock_adapter, params={"id": "123", "param": "value"}
        )

        assert result == {"parsed": "data"}
        mock_transport.get.assert_called_once_with(
            "/test/123", params={"param": "value"}, headers=None
        )
        mock_adapter.parse.assert_called_once()

    @pytest.mark.asyncio
    async def test_none_query_values_dropped(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(
            id="test",
            method="GET",
            build_path=lambda p: "/test",
            build_query=lambda p: {"pageSize": None, "api-version": "1.0"},
        )

        await runner.run(spec=spec, adapter=mock_adapter, params={})

        mock_transport.get.assert_called_once_with(
            "/test", params={"api-version": "1.0"}, headers=None
        )

    @pytest.mark.asyncio
    async def test_run_post_endpoint(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(
            id="test",
            method="POST",
            build_path=lambda p: "/test",
            build_body=lambda p: [{"data": p["data"]}],
        )

        await runner.run(spec=spec, adapter=mock_adapter, params={"data": "value"})

        mock_transport.post.assert_called_once_with(
            "/test", params=None, json_body=[{"data": "value"}], headers=None
        )

    @pytest.mark.asyncio
    async def test_run_with_headers(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(
            id="test",
            method="GET",
            build_path=lambda p: "/test",
            build_headers=lambda p: {"X-Test": "1"},
        )

        await runner.run(spec=spec, adapter=mock_adapter, params={})

        mock_transport.get.assert_called_once_with("/test", params=None, headers={"X-Test": "1"})

    @pytest.mark.asyncio
    async def test_default_adapter_returns_data(self, runner):
        spec = RestEndpointSpec(id="test", method="GET", build_path=lambda p: "/test")

        result = await runner.run(spec=spec, adapter=ResponseAdapter(), params={})

        assert result == {"data": "test"}


class TestRestRunnerPagination:
    """Test RestRunner.run_paginated."""

    @pytest.mark.asyncio
    async def test_walks_pages_forwarding_cursor(self):
        transport = MagicMock(spec=RESTTransport)
        transport.get = AsyncMock(
            side_effect=[
                HTTPResponse(status=200, data={"items": [1, 2], "next": "c1"}),
                HTTPResponse(status=200, data={"items": [3], "next": None}),
            ]
        )

        class Adapter(ResponseAdapter):
            def parse(self, response, params):
                return Page(response.data["items"], response.data["next"])

        spec = RestEndpointSpec(
            id="things",
            method="GET",
            build_path=lambda p: "/things",
            build_query=lambda p: {"cursor": p.get("continuation_token")},
            cursor_policy=STRING_CURSOR,
        )

        result = await RestRunner(transport).run_paginated(
            spec=spec, adapter=Adapter(), params={}
        )

        assert result.items == [1, 2, 3]
        assert transport.get.call_args_list[0].kwargs["params"] == {}
        assert transport.get.call_args_list[1].kwargs["params"] == {"cursor": "c1"}

    @pytest.mark.asyncio
    async def test_non_paginated_spec_rejected(self):
        runner = RestRunner(MagicMock(spec=RESTTransport))
        spec = RestEndpointSpec(id="x", method="GET", build_path=lambda p: "/x")

        with pytest.raises(ValueError):
            await runner.run_paginated(spec=spec, adapter=ResponseAdapter(), params={})

    @pytest.mark.asyncio
    async def test_adapter_must_return_page(self):
        transport = MagicMock(spec=RESTTransport)
        transport.get = AsyncMock(return_value=HTTPResponse(status=200, data=[]))
        spec = RestEndpointSpec(
            id="x", method="GET", build_path=lambda p: "/x", cursor_policy=STRING_CURSOR
        )

        with pytest.raises(TypeError):
            await RestRunner(transport).run_paginated(
                spec=spec, adapter=ResponseAdapter(), params={}
            )
