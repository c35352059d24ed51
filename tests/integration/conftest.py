"""Shared fixtures for integration tests."""

import os

import pytest


@pytest.fixture
def connection_kwargs() -> dict:
    organization = os.environ.get("VSTS_ORGANIZATION")
    if not organization:
        pytest.skip("VSTS_ORGANIZATION is not set")
    return {
        "organization": organization,
        "access_token": os.environ.get("VSTS_ACCESS_TOKEN"),
        "personal_access_token": os.environ.get("VSTS_PAT"),
    }
