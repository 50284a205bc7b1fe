"""Article list state holder.

``ArticleListController`` owns a single immutable ``ArticleListState`` and
replaces it on every transition, publishing each new snapshot to its
listeners::

    idle/loaded/failed --load--> loading --success--> loaded
                                  loading --failure--> failed

Overlapping loads are sequenced: each load takes a ticket, and a response
whose ticket is no longer the latest is dropped, so the last-triggered load
decides the final state.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace

from .errors import Error, Failure, HttpUnknownError, Success
from .models import Article
from .usecase import ArticleUseCase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArticleListState:
    """Snapshot observed by the UI layer."""

    is_loading: bool = False
    articles: tuple[Article, ...] | None = None
    last_error: Error | None = None

    @classmethod
    def initial(cls) -> "ArticleListState":
        return cls()

    @property
    def status(self) -> str:
        if self.is_loading:
            return "loading"
        if self.articles is not None:
            return "loaded"
        if self.last_error is not None:
            return "failed"
        return "idle"


Listener = Callable[[ArticleListState], None]


@dataclass(frozen=True)
class LoadArticles:
    pass


@dataclass(frozen=True)
class MarkAsFavorite:
    article: Article


@dataclass(frozen=True)
class UnmarkAsFavorite:
    article: Article


ArticleListEvent = LoadArticles | MarkAsFavorite | UnmarkAsFavorite


class ArticleListController:
    """Turns load triggers into use case calls and publishes state."""

    def __init__(self, use_case: ArticleUseCase):
        self._use_case = use_case
        self._state = ArticleListState.initial()
        self._listeners: list[Listener] = []
        self._sequence = 0

    @property
    def state(self) -> ArticleListState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, state: ArticleListState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("State listener %r failed", listener)

    async def dispatch(self, event: ArticleListEvent) -> None:
        match event:
            case LoadArticles():
                await self.load_articles()
            case MarkAsFavorite(article=article) | UnmarkAsFavorite(article=article):
                # Favorites are not persisted anywhere yet; state is left as is.
                logger.info(
                    "Ignoring %s for article %s: favorites are not supported",
                    type(event).__name__,
                    article.id,
                )
            case _:
                raise TypeError(f"Unknown event: {event!r}")

    async def load_articles(self) -> ArticleListState:
        """Fetch articles and publish loading, then loaded or failed.

        On failure any previously loaded articles are dropped. Returns the
        controller state after this load settles, which is the state of a
        newer load if one superseded it.
        """
        self._sequence += 1
        ticket = self._sequence
        self._emit(replace(self._state, is_loading=True, articles=None))

        try:
            result = await self._use_case.request_news()
        except BaseException as e:
            # Never leave the list stuck in loading with nothing in flight.
            if ticket == self._sequence:
                error = HttpUnknownError(str(e) or type(e).__name__)
                logger.warning("Loading articles aborted: %s", error.describe())
                self._emit(ArticleListState(is_loading=False, articles=None, last_error=error))
            raise

        if ticket != self._sequence:
            logger.debug("Dropping stale response for load #%d (latest #%d)", ticket, self._sequence)
            return self._state

        match result:
            case Success(value=response):
                self._emit(
                    ArticleListState(is_loading=False, articles=response.articles, last_error=None)
                )
            case Failure(error=error):
                logger.warning("Loading articles failed: %s", error.describe())
                self._emit(ArticleListState(is_loading=False, articles=None, last_error=error))
        return self._state

    def find_article(self, article_id: int) -> Article | None:
        """Look up a loaded article by id for the detail view."""
        for article in self._state.articles or ():
            if article.id == article_id:
                return article
        return None
