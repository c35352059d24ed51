"""Read-only checks against a live organization (no revocations)."""

import os

import pytest

from vsts.tokenadmin import GraphRESTConnector, TokenAdminClient

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_VSTS_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_VSTS_NETWORK_TESTS=1 to run",
)


@pytest.mark.asyncio
async def test_first_users_page(connection_kwargs):
    async with GraphRESTConnector(**connection_kwargs) as graph:
        page = await graph.list_users()
    assert all(user.descriptor for user in page.items)


@pytest.mark.asyncio
async def test_pat_ids_for_first_users_page(connection_kwargs):
    async with TokenAdminClient(**connection_kwargs) as admin:
        page = await admin.graph.list_users()
        descriptors = [user.descriptor for user in page.items[:3]]
        ids = await admin.get_pat_authorization_ids_for_users(descriptors)
    assert len(ids) == len(set(ids))
