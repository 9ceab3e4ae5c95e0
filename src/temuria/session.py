"""Presentation state machine driven by Article Requester outcomes.

A ``SearchSession`` holds what a front end needs to decide what to show:
the current view, the selected language, the current article and which of
its images failed to load. Results of superseded searches are discarded.
"""

import itertools
import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol

from temuria.data import ArticleResult, LanguageCode
from temuria.errors import ConfigurationError, GenerationError
from temuria.trending import get_trending_topics

logger = logging.getLogger(__name__)

LOADING_MESSAGES = (
    "Searching global knowledge...",
    "Formatting references...",
    "Synthesizing recent events...",
    "Generating illustrations...",
    "Drafting article...",
)


class ViewState(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    ARTICLE = "article"
    ERROR = "error"


class ErrorKind(StrEnum):
    CONFIGURATION = "configuration"
    GENERATION = "generation"


class ArticleSource(Protocol):
    async def generate_article(
        self, topic: str, language: LanguageCode | str = LanguageCode.EN
    ) -> ArticleResult: ...


@dataclass
class SessionSnapshot:
    """Everything a view needs to render the current state."""

    state: ViewState
    language: LanguageCode
    topic: str | None = None
    article: ArticleResult | None = None
    error: ErrorKind | None = None
    failed_images: frozenset[str] = field(default_factory=frozenset)


def table_of_contents(content: str) -> list[str]:
    """Section titles of an article: every line starting with ``## ``."""
    return [line[3:] for line in content.split("\n") if line.startswith("## ")]


class SearchSession:
    """Track one user's searches and the view state they lead to.

    Args:
        requester: Object with an async ``generate_article`` method.
        language: Initial language (unknown codes fall back to English).
    """

    def __init__(
        self, requester: ArticleSource, language: LanguageCode | str = LanguageCode.EN
    ) -> None:
        self._requester = requester
        self._language = LanguageCode.parse(language)
        self._state = ViewState.IDLE
        self._topic: str | None = None
        self._article: ArticleResult | None = None
        self._error: ErrorKind | None = None
        self._failed_images: set[str] = set()
        self._request_ids = itertools.count(1)
        self._latest_request = 0

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def language(self) -> LanguageCode:
        return self._language

    @property
    def topic(self) -> str | None:
        return self._topic

    @property
    def article(self) -> ArticleResult | None:
        return self._article

    @property
    def error(self) -> ErrorKind | None:
        return self._error

    @property
    def trending(self) -> list[str]:
        return get_trending_topics(self._language)

    @property
    def visible_images(self) -> list[str]:
        """Images of the current article that have not failed to load."""
        if self._article is None:
            return []
        return [url for url in self._article.images if url not in self._failed_images]

    @property
    def table_of_contents(self) -> list[str]:
        if self._article is None:
            return []
        return table_of_contents(self._article.content)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            state=self._state,
            language=self._language,
            topic=self._topic,
            article=self._article,
            error=self._error,
            failed_images=frozenset(self._failed_images),
        )

    def set_language(self, language: LanguageCode | str) -> None:
        self._language = LanguageCode.parse(language)

    def go_home(self) -> None:
        """Return to the idle view, abandoning any pending search."""
        self._latest_request = next(self._request_ids)
        self._state = ViewState.IDLE
        self._topic = None
        self._article = None
        self._error = None
        self._failed_images = set()

    def mark_image_failed(self, url: str) -> None:
        """Record that the view could not load ``url``."""
        self._failed_images.add(url)

    async def search(self, topic: str) -> ArticleResult | None:
        """Run a search and move to ARTICLE or ERROR.

        Blank topics are ignored. If another search (or ``go_home``) happens
        while this one is pending, its outcome is discarded.

        Returns:
            The article if this search is still current and succeeded,
            otherwise None.
        """
        topic = topic.strip()
        if not topic:
            return None

        request_id = next(self._request_ids)
        self._latest_request = request_id
        self._state = ViewState.LOADING
        self._topic = topic
        self._error = None

        try:
            article = await self._requester.generate_article(topic, self._language)
        except ConfigurationError as e:
            self._apply_failure(request_id, ErrorKind.CONFIGURATION, e)
            return None
        except GenerationError as e:
            self._apply_failure(request_id, ErrorKind.GENERATION, e)
            return None

        if request_id != self._latest_request:
            logger.debug(f"Discarding stale result for {topic!r}")
            return None

        self._article = article
        self._failed_images = set()
        self._state = ViewState.ARTICLE
        return article

    def _apply_failure(self, request_id: int, kind: ErrorKind, error: Exception) -> None:
        if request_id != self._latest_request:
            logger.debug(f"Discarding stale failure: {error}")
            return
        logger.error(f"Search failed ({kind}): {error}")
        self._state = ViewState.ERROR
        self._error = kind
