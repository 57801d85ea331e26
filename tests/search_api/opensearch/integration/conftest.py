"""Pytest fixtures for integration tests against a running OpenSearch."""

import os
import uuid
from collections.abc import Generator

import pytest

from search_api.opensearch import api
from search_api.opensearch.client import TransportClient
from search_api.opensearch.settings import TransportSettings


@pytest.fixture(scope="session")
def server_url() -> str:
    """Get the OpenSearch URL from the environment."""
    url = os.getenv("OPENSEARCH_URL")
    if not url:
        pytest.skip("OPENSEARCH_URL is not set; export it to run integration tests.")
    return url


@pytest.fixture(scope="session")
def client() -> TransportClient:
    """Create a real TransportClient. It does NOT use mocks."""
    return TransportClient(settings=TransportSettings(timeout=30, verify_certs=False))


@pytest.fixture(scope="function")
def index_name(client: TransportClient, server_url: str) -> Generator[str, None, None]:
    """Create a test index and return its name.

    The index is created before the test and deleted after.
    """
    name = f"test-index-{uuid.uuid4().hex[:8]}"
    result = api.create_index(
        client,
        server_url,
        name,
        {
            "settings": {"number_of_shards": 1, "number_of_replicas": 0},
            "mappings": {"properties": {"title": {"type": "text"}, "views": {"type": "integer"}}},
        },
    )
    assert result.ok, result

    yield name

    api.delete_index(client, server_url, name)
