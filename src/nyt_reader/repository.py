"""Article repository: the boundary where exceptions become typed results."""

import logging
from typing import Protocol

import httpx

from .datasource import ArticleRemoteDataSource
from .errors import (
    Failure,
    HttpInternalServerError,
    HttpUnauthorizedError,
    HttpUnknownError,
    Result,
    Success,
)
from .models import MostPopularResponse

logger = logging.getLogger(__name__)

# Status assumed when an HTTP error carries no response status.
_MISSING_STATUS = 503


class ArticleRepository(Protocol):
    async def request_news(self) -> Result[MostPopularResponse]: ...


class ArticleRepositoryImpl:
    """Fetches news through a data source and never raises to its caller."""

    def __init__(self, data_source: ArticleRemoteDataSource, api_key: str):
        self._data_source = data_source
        self._api_key = api_key

    async def request_news(self) -> Result[MostPopularResponse]:
        try:
            response = await self._data_source.get_most_popular(self._api_key)
        except httpx.HTTPStatusError as e:
            status = e.response.status_code if e.response is not None else None
            if status is None:
                status = _MISSING_STATUS
            if status == 401:
                logger.warning("Most popular request unauthorized")
                return Failure(HttpUnauthorizedError())
            # Every other status, 4xx included, is reported as a server error.
            logger.warning("Most popular request failed with HTTP %d", status)
            return Failure(HttpInternalServerError(str(e), status_code=status))
        except Exception as e:
            logger.warning("Most popular request failed: %s", e)
            return Failure(HttpUnknownError(str(e) or type(e).__name__))

        logger.debug("Most popular request returned %d articles", len(response.articles))
        return Success(response)
