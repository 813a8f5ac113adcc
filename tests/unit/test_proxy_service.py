"""Unit tests for the upstream proxy service."""

import pytest

from infrastructure.errors import HTTPClientError
from services.proxy import UpstreamProxy

BASE = "https://leetcode-api-pied.vercel.app"


@pytest.fixture
def proxy(http_client):
    return UpstreamProxy(http_client, BASE)


@pytest.mark.asyncio
async def test_success_relays_body_unchanged(proxy, http_client, make_response):
    """Test that a 2xx body is relayed unchanged with status 200."""
    body = {"date": "2024-05-01", "question": {"title": "Two Sum", "nested": [1, {"a": None}]}}
    http_client.get.return_value = make_response(200, body)

    result = await proxy.daily()

    http_client.get.assert_awaited_once_with(f"{BASE}/daily", params=None)
    assert result.status_code == 200
    assert result.body == body
    assert result.ok


@pytest.mark.asyncio
async def test_upstream_error_status_is_propagated(proxy, http_client, make_response):
    """Test that a non-2xx status is kept with an error body."""
    http_client.get.return_value = make_response(404, {"detail": "missing"})

    result = await proxy.problem("does-not-exist")

    assert result.status_code == 404
    assert result.body == {"error": "Problem not found"}
    assert not result.ok


@pytest.mark.asyncio
async def test_network_failure_maps_to_internal_error(proxy, http_client):
    """Test that a transport failure becomes a 500."""
    http_client.get.side_effect = HTTPClientError(f"{BASE}/random", reason="timed out")

    result = await proxy.random()

    assert result.status_code == 500
    assert result.body == {"error": "Failed to fetch random problem"}


@pytest.mark.asyncio
async def test_invalid_upstream_json_maps_to_internal_error(proxy, http_client, make_response):
    """Test that an invalid upstream body becomes a 500."""
    response = make_response(200)
    response.json.side_effect = ValueError("Expecting value")
    http_client.get.return_value = response

    result = await proxy.daily()

    assert result.status_code == 500
    assert result.body == {"error": "Failed to fetch daily challenge"}


@pytest.mark.asyncio
async def test_search_forwards_query_parameter(proxy, http_client, make_response):
    """Test that search forwards its query parameter."""
    http_client.get.return_value = make_response(200, [])

    await proxy.search("two sum")

    http_client.get.assert_awaited_once_with(f"{BASE}/search", params={"query": "two sum"})


@pytest.mark.asyncio
async def test_search_failure_messages(proxy, http_client, make_response):
    """Test the search error messages."""
    http_client.get.return_value = make_response(503)
    assert (await proxy.search("x")).body == {"error": "Search failed"}

    http_client.get.side_effect = HTTPClientError(f"{BASE}/search")
    assert (await proxy.search("x")).body == {"error": "Failed to search"}


@pytest.mark.asyncio
async def test_problem_identifier_is_url_encoded(proxy, http_client, make_response):
    """Test that the problem identifier is URL-encoded."""
    http_client.get.return_value = make_response(200, {})

    await proxy.problem("../admin")

    http_client.get.assert_awaited_once_with(f"{BASE}/problem/..%2Fadmin", params=None)
