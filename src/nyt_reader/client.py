"""NYT Most Popular API client."""

import logging

import httpx

from .config import Config
from .models import MostPopularResponse

logger = logging.getLogger(__name__)


class MostPopularClient:
    """Async client for the NYT Most Popular API.

    Designed for single-instance lifecycle: create once at startup, then
    reuse for every fetch. The underlying connection pool holds no
    per-request state.
    """

    def __init__(self, config: Config):
        self._config = config
        self.path = config.most_popular_path
        self._client = httpx.AsyncClient(
            base_url=config.nyt_base_url,
            timeout=config.request_timeout,
            follow_redirects=True,
        )

    async def get_most_popular(self, api_key: str) -> MostPopularResponse:
        """Fetch the most popular articles.

        Args:
            api_key: Value sent as the ``api-key`` query parameter

        Raises:
            httpx.HTTPStatusError: On a non-2xx response
            httpx.RequestError: On transport failures (DNS, timeout, refused)
            ValueError: If the body is not JSON or does not match the schema
        """
        logger.debug("Requesting %s", self.path)

        response = await self._client.get(self.path, params={"api-key": api_key})
        response.raise_for_status()

        result = MostPopularResponse.from_dict(response.json())
        logger.info("Retrieved %d articles (status=%s)", len(result.articles), result.status)
        return result

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
