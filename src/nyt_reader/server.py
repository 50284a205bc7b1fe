"""MCP server entry point for the NYT most popular reader.

Builds the object graph once with explicit constructor injection and runs
FastMCP with Streamable HTTP transport.
"""

import asyncio
import logging
import signal
import sys

from fastmcp import FastMCP

from .client import MostPopularClient
from .config import load_config
from .controller import ArticleListController
from .datasource import RemoteArticleDataSource
from .repository import ArticleRepositoryImpl
from .tools import register_tools
from .usecase import ArticleUseCaseImpl

logging.basicConfig(
    stream=sys.stderr,
    level=logging.INFO,
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Run the NYT reader MCP server."""
    config = load_config()
    client = MostPopularClient(config)
    repository = ArticleRepositoryImpl(
        RemoteArticleDataSource(client),
        api_key=config.nyt_api_key.get_secret_value(),
    )
    controller = ArticleListController(ArticleUseCaseImpl(repository))

    mcp = FastMCP("nyt-reader")
    register_tools(mcp, controller, config)

    def handle_shutdown(signum: int, frame: object) -> None:
        logger.info("Received shutdown signal, closing connections...")
        asyncio.run(client.aclose())
        sys.exit(0)

    signal.signal(signal.SIGTERM, handle_shutdown)
    signal.signal(signal.SIGINT, handle_shutdown)

    logger.info(
        "Starting NYT reader MCP server on %s:%d (streamable-http, %s)",
        config.server_host,
        config.server_port,
        config.most_popular_path,
    )
    mcp.run(
        transport="streamable-http",
        host=config.server_host,
        port=config.server_port,
    )


if __name__ == "__main__":
    main()
