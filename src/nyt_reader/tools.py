"""MCP tool definitions for the most popular reader.

The tools are the outer surface that renders ``ArticleListState``. All
exceptions are caught at the tool boundary and returned as "Error: ..."
strings so the MCP protocol never sees an uncaught exception.
"""

import logging

from fastmcp import FastMCP

from .config import Config
from .controller import ArticleListController

logger = logging.getLogger(__name__)


def _truncate(text: str, max_length: int) -> str:
    """Truncate text to max_length at a word boundary."""
    if len(text) <= max_length:
        return text
    return text[:max_length].rsplit(" ", 1)[0] + "..."


def register_tools(mcp: FastMCP, controller: ArticleListController, config: Config) -> None:
    """Register all reader tools on the given MCP server instance."""

    @mcp.tool()
    async def load_most_popular(max_abstract_length: int = 300) -> str:
        """Fetch the current most popular NYT articles.

        Args:
            max_abstract_length: Maximum characters for article abstracts (default 300).

        Returns a Python-literal list of article dicts with id, title, abstract,
        url, published_date and thumbnail_url keys.
        """
        try:
            state = await controller.load_articles()
            if state.is_loading:
                return "Superseded: a newer load is still in progress; call get_fetch_state or retry"
            if state.articles is None:
                if state.last_error is not None:
                    return f"Error: {state.last_error.describe()}"
                return "Error: No articles loaded"

            result = []
            for article in state.articles:
                result.append(
                    {
                        "id": article.id,
                        "title": article.title,
                        "abstract": _truncate(article.abstract, max_abstract_length),
                        "url": article.url,
                        "published_date": article.published_date,
                        "thumbnail_url": article.thumbnail_url(config.default_image_url),
                    }
                )
            return str(result)
        except Exception as e:
            logger.error("load_most_popular failed: %s", e, exc_info=True)
            return f"Error: {e}"

    @mcp.tool()
    async def get_article_details(article_id: int) -> str:
        """Get details of an article from the last successful load.

        Args:
            article_id: ID of the article.

        Returns a Python-literal dict with title, abstract, url, published_date,
        image_url and caption, or an error if the article is not loaded.
        """
        try:
            article = controller.find_article(article_id)
            if article is None:
                return f"Error: Article {article_id} not found; call load_most_popular first"
            caption = article.media[0].caption if article.media else ""
            return str(
                {
                    "id": article.id,
                    "title": article.title,
                    "abstract": article.abstract,
                    "url": article.url,
                    "published_date": article.published_date,
                    "image_url": article.large_image_url(config.default_image_url),
                    "caption": caption,
                }
            )
        except Exception as e:
            logger.error("get_article_details failed: %s", e, exc_info=True)
            return f"Error: {e}"

    @mcp.tool()
    async def get_fetch_state() -> str:
        """Get the state of the article list without fetching.

        Returns a Python-literal dict with status (idle, loading, loaded or
        failed), is_loading, article_count and error keys.
        """
        try:
            state = controller.state
            return str(
                {
                    "status": state.status,
                    "is_loading": state.is_loading,
                    "article_count": len(state.articles) if state.articles is not None else 0,
                    "error": state.last_error.describe() if state.last_error else None,
                }
            )
        except Exception as e:
            logger.error("get_fetch_state failed: %s", e, exc_info=True)
            return f"Error: {e}"
