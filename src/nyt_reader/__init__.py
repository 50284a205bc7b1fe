"""NYT Most Popular reader — fetch pipeline and MCP server."""

from .client import MostPopularClient
from .controller import ArticleListController, ArticleListState
from .errors import Failure, HttpInternalServerError, HttpUnauthorizedError, HttpUnknownError, Success
from .models import Article, Media, MediaMetaData, MostPopularResponse
from .server import main

__all__ = [
    "main",
    "MostPopularClient",
    "ArticleListController",
    "ArticleListState",
    "Article",
    "Media",
    "MediaMetaData",
    "MostPopularResponse",
    "Success",
    "Failure",
    "HttpUnauthorizedError",
    "HttpInternalServerError",
    "HttpUnknownError",
]

__version__ = "0.1.0"
