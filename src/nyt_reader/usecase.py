"""Use case for requesting the most popular news."""

from typing import Protocol

from .errors import Result
from .models import MostPopularResponse
from .repository import ArticleRepository


class ArticleUseCase(Protocol):
    async def request_news(self) -> Result[MostPopularResponse]: ...


class ArticleUseCaseImpl:
    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def request_news(self) -> Result[MostPopularResponse]:
        return await self._repository.request_news()
