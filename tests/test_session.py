"""Tests for the SearchSession state machine."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from temuria.data import ArticleResult, LanguageCode
from temuria.errors import ConfigurationError, GenerationError
from temuria.session import (
    LOADING_MESSAGES,
    ErrorKind,
    SearchSession,
    ViewState,
    table_of_contents,
)


def _article(title: str = "Mars", images: tuple[str, ...] = ()) -> ArticleResult:
    return ArticleResult(
        title=title,
        content="Summary.\n\n## History\n\nText.\n\n## Exploration\n\nMore text.\n",
        last_updated_display="October 19, 2026 at 2:30 PM",
        images=images,
    )


@pytest.fixture
def requester() -> MagicMock:
    mock = MagicMock()
    mock.generate_article = AsyncMock(return_value=_article())
    return mock


def test_starts_idle(requester: MagicMock) -> None:
    session = SearchSession(requester)
    assert session.state is ViewState.IDLE
    assert session.article is None
    assert session.visible_images == []
    assert session.table_of_contents == []


async def test_successful_search_shows_article(requester: MagicMock) -> None:
    session = SearchSession(requester, language="ru")

    article = await session.search("  Mars ")

    assert article is not None
    assert session.state is ViewState.ARTICLE
    assert session.article == article
    assert session.topic == "Mars"
    requester.generate_article.assert_awaited_once_with("Mars", LanguageCode.RU)


@pytest.mark.parametrize("topic", ["", "   ", "\n\t"])
async def test_blank_topic_is_ignored(requester: MagicMock, topic: str) -> None:
    session = SearchSession(requester)
    assert await session.search(topic) is None
    assert session.state is ViewState.IDLE
    requester.generate_article.assert_not_called()


async def test_generation_error_moves_to_error(requester: MagicMock) -> None:
    requester.generate_article.side_effect = GenerationError()
    session = SearchSession(requester)

    assert await session.search("Mars") is None
    assert session.state is ViewState.ERROR
    assert session.error is ErrorKind.GENERATION


async def test_configuration_error_is_distinguished(requester: MagicMock) -> None:
    requester.generate_article.side_effect = ConfigurationError("no key")
    session = SearchSession(requester)

    await session.search("Mars")
    assert session.state is ViewState.ERROR
    assert session.error is ErrorKind.CONFIGURATION


async def test_loading_state_while_pending() -> None:
    release = asyncio.Event()

    async def slow_generate(topic: str, language: LanguageCode) -> ArticleResult:
        await release.wait()
        return _article(topic)

    requester = MagicMock()
    requester.generate_article = slow_generate
    session = SearchSession(requester)

    task = asyncio.create_task(session.search("Mars"))
    await asyncio.sleep(0)
    assert session.state is ViewState.LOADING

    release.set()
    await task
    assert session.state is ViewState.ARTICLE


async def test_stale_result_is_discarded() -> None:
    gates = {"Old": asyncio.Event(), "New": asyncio.Event()}

    async def gated_generate(topic: str, language: LanguageCode) -> ArticleResult:
        await gates[topic].wait()
        return _article(topic)

    requester = MagicMock()
    requester.generate_article = gated_generate
    session = SearchSession(requester)

    old = asyncio.create_task(session.search("Old"))
    await asyncio.sleep(0)
    new = asyncio.create_task(session.search("New"))
    await asyncio.sleep(0)

    gates["New"].set()
    assert (await new) is not None
    gates["Old"].set()
    assert (await old) is None

    assert session.article is not None
    assert session.article.title == "New"
    assert session.state is ViewState.ARTICLE


async def test_stale_failure_is_discarded() -> None:
    gates = {"Old": asyncio.Event(), "New": asyncio.Event()}

    async def gated_generate(topic: str, language: LanguageCode) -> ArticleResult:
        await gates[topic].wait()
        if topic == "Old":
            raise GenerationError()
        return _article(topic)

    requester = MagicMock()
    requester.generate_article = gated_generate
    session = SearchSession(requester)

    old = asyncio.create_task(session.search("Old"))
    await asyncio.sleep(0)
    new = asyncio.create_task(session.search("New"))
    await asyncio.sleep(0)

    gates["New"].set()
    await new
    gates["Old"].set()
    await old

    assert session.state is ViewState.ARTICLE
    assert session.error is None


async def test_go_home_abandons_pending_search() -> None:
    release = asyncio.Event()

    async def slow_generate(topic: str, language: LanguageCode) -> ArticleResult:
        await release.wait()
        return _article(topic)

    requester = MagicMock()
    requester.generate_article = slow_generate
    session = SearchSession(requester)

    task = asyncio.create_task(session.search("Mars"))
    await asyncio.sleep(0)
    session.go_home()
    release.set()

    assert (await task) is None
    assert session.state is ViewState.IDLE


async def test_go_home_clears_previous_article(requester: MagicMock) -> None:
    requester.generate_article.return_value = _article(images=("https://x.example/a.jpg",))
    session = SearchSession(requester)
    await session.search("Mars")
    session.mark_image_failed("https://x.example/a.jpg")

    session.go_home()

    snapshot = session.snapshot()
    assert snapshot.state is ViewState.IDLE
    assert snapshot.article is None
    assert snapshot.topic is None
    assert snapshot.failed_images == frozenset()
    assert session.table_of_contents == []


async def test_failed_images_are_hidden_and_reset(requester: MagicMock) -> None:
    images = ("https://x.example/a.jpg", "https://x.example/b.png")
    requester.generate_article.return_value = _article(images=images)
    session = SearchSession(requester)

    await session.search("Mars")
    session.mark_image_failed("https://x.example/a.jpg")
    assert session.visible_images == ["https://x.example/b.png"]
    assert session.snapshot().failed_images == frozenset({"https://x.example/a.jpg"})

    await session.search("Mars")
    assert session.visible_images == list(images)


async def test_table_of_contents_for_current_article(requester: MagicMock) -> None:
    session = SearchSession(requester)
    await session.search("Mars")
    assert session.table_of_contents == ["History", "Exploration"]


def test_table_of_contents_ignores_other_headings() -> None:
    content = "# Title\n## Overview\n### Detail\n##NoSpace\n## Legacy"
    assert table_of_contents(content) == ["Overview", "Legacy"]


def test_trending_follows_language(requester: MagicMock) -> None:
    session = SearchSession(requester)
    assert session.trending[0] == "Artificial Intelligence"

    session.set_language("de")
    assert session.language is LanguageCode.DE
    assert session.trending[0] == "Künstliche Intelligenz"

    session.set_language("unknown")
    assert session.language is LanguageCode.EN


def test_snapshot_reflects_state(requester: MagicMock) -> None:
    snapshot = SearchSession(requester, language="fr").snapshot()
    assert snapshot.state is ViewState.IDLE
    assert snapshot.language is LanguageCode.FR
    assert snapshot.article is None


def test_loading_messages_are_defined() -> None:
    assert len(LOADING_MESSAGES) == 5
