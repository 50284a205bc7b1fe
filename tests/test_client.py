"""Tests for client.py — NYT API client with mocked HTTP."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from nyt_reader.client import MostPopularClient
from nyt_reader.models import ResponseParseError

from .conftest import SAMPLE_BODY


@pytest.fixture
def client(config):
    return MostPopularClient(config)


def _ok_response(body):
    mock_response = MagicMock()
    mock_response.json.return_value = body
    mock_response.raise_for_status = MagicMock()
    return mock_response


@pytest.mark.asyncio
async def test_get_most_popular(client):
    mock_get = AsyncMock(return_value=_ok_response(SAMPLE_BODY))
    with patch.object(client._client, "get", mock_get):
        response = await client.get_most_popular("key")

    assert response.status == "OK"
    assert len(response.articles) == 1
    assert response.articles[0].title == "T"


@pytest.mark.asyncio
async def test_get_most_popular_sends_api_key(client):
    mock_get = AsyncMock(return_value=_ok_response(SAMPLE_BODY))
    with patch.object(client._client, "get", mock_get):
        await client.get_most_popular("abc")

    assert mock_get.call_args[0][0] == "mostpopular/v2/emailed/30.json"
    assert mock_get.call_args[1]["params"] == {"api-key": "abc"}


@pytest.mark.asyncio
async def test_request_over_transport(client, config):
    """Full URL is base URL + endpoint path, key in the query string."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=SAMPLE_BODY)

    await client.aclose()
    client._client = httpx.AsyncClient(
        base_url=config.nyt_base_url, transport=httpx.MockTransport(handler)
    )
    response = await client.get_most_popular("abc")
    await client.aclose()

    assert response.articles[0].id == 1
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/svc/mostpopular/v2/emailed/30.json"
    assert seen[0].url.params["api-key"] == "abc"


@pytest.mark.asyncio
async def test_http_error_propagates(client):
    mock_response = MagicMock()
    mock_response.status_code = 401
    mock_response.raise_for_status = MagicMock(
        side_effect=httpx.HTTPStatusError(
            "Unauthorized", request=MagicMock(), response=mock_response
        )
    )

    with (
        patch.object(client._client, "get", new_callable=AsyncMock, return_value=mock_response),
        pytest.raises(httpx.HTTPStatusError),
    ):
        await client.get_most_popular("bad")


@pytest.mark.asyncio
async def test_transport_error_propagates(client):
    with (
        patch.object(
            client._client,
            "get",
            new_callable=AsyncMock,
            side_effect=httpx.ConnectError("connection refused"),
        ),
        pytest.raises(httpx.RequestError),
    ):
        await client.get_most_popular("key")


@pytest.mark.asyncio
async def test_malformed_json_propagates(client):
    mock_response = MagicMock()
    mock_response.raise_for_status = MagicMock()
    mock_response.json.side_effect = json.JSONDecodeError("Expecting value", "", 0)

    with (
        patch.object(client._client, "get", new_callable=AsyncMock, return_value=mock_response),
        pytest.raises(ValueError),
    ):
        await client.get_most_popular("key")


@pytest.mark.asyncio
async def test_unexpected_shape_propagates(client):
    with (
        patch.object(
            client._client,
            "get",
            new_callable=AsyncMock,
            return_value=_ok_response({"results": []}),
        ),
        pytest.raises(ResponseParseError),
    ):
        await client.get_most_popular("key")


@pytest.mark.asyncio
async def test_aclose(client):
    await client.aclose()
    assert client._client.is_closed
