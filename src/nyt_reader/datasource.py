"""Remote data source seam between the repository and the HTTP client."""

from typing import Protocol

from .client import MostPopularClient
from .models import MostPopularResponse


class ArticleRemoteDataSource(Protocol):
    """Anything that can fetch a most-popular response for an API key.

    Implementations let transport and HTTP exceptions propagate.
    """

    async def get_most_popular(self, api_key: str) -> MostPopularResponse: ...


class RemoteArticleDataSource:
    """Data source backed by :class:`MostPopularClient`."""

    def __init__(self, client: MostPopularClient):
        self._client = client

    async def get_most_popular(self, api_key: str) -> MostPopularResponse:
        return await self._client.get_most_popular(api_key)
