"""Article Requester: one grounded text call and one image query, run concurrently."""

import asyncio
import contextlib
import logging
import time
from collections.abc import Callable
from datetime import datetime

from temuria.citations import dedupe_sources
from temuria.data import LANGUAGES, ArticleRequest, ArticleResult, LanguageCode, Usage
from temuria.dates import format_last_updated
from temuria.errors import ConfigurationError, GenerationError
from temuria.images import DEFAULT_MAX_IMAGES, ImageFinder
from temuria.llm.base import Completion, GenerativeClient
from temuria.llm.gemini import GeminiClient
from temuria.prompts import build_article_prompt, build_system_instruction
from temuria.run_logger import RunLogger, RunRecord

logger = logging.getLogger(__name__)

EMPTY_CONTENT_PLACEHOLDER = "No content generated."


def _local_now() -> datetime:
    return datetime.now().astimezone()


class ArticleRequester:
    """Generate an encyclopedia article for a topic.

    Flow:
    1. Image discovery is started as a background task
    2. The grounded text generation call is awaited
    3. Citations are deduplicated by uri
    4. The image task is joined and the result assembled

    Only the text call can fail the request. ``ConfigurationError`` is
    re-raised as is; any other failure becomes ``GenerationError``.
    No retries and no timeout are applied here.

    Args:
        client: Generative client for the article text.
        image_client: Client for image discovery (defaults to ``client``).
        max_images: Maximum number of image URLs per article (0 to 3).
        text_temperature: Sampling temperature for the article text.
        image_temperature: Sampling temperature for image discovery.
        run_logger: Optional RunLogger for per-request JSON logs.
        clock: Returns the "last updated" timestamp (defaults to local now).
    """

    def __init__(
        self,
        client: GenerativeClient,
        *,
        image_client: GenerativeClient | None = None,
        max_images: int = DEFAULT_MAX_IMAGES,
        text_temperature: float = 0.3,
        image_temperature: float = 0.1,
        run_logger: RunLogger | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._client = client
        self._image_finder = ImageFinder(
            image_client or client,
            max_images=max_images,
            temperature=image_temperature,
        )
        self._text_temperature = text_temperature
        self._run_logger = run_logger
        self._clock = clock or _local_now

    async def generate_article(
        self, topic: str, language: LanguageCode | str = LanguageCode.EN
    ) -> ArticleResult:
        """Generate an article about ``topic`` in ``language``.

        Args:
            topic: Non-empty, trimmed topic string; echoed as the title.
            language: Target language code. Unknown codes fall back to English.

        Returns:
            The assembled article.

        Raises:
            ConfigurationError: If the text client has no API key.
            GenerationError: If the text generation call failed.
        """
        request = ArticleRequest(topic=topic, language=LanguageCode.parse(language))
        record = self._run_logger.start_run(request) if self._run_logger else None
        now = self._clock()

        image_task = asyncio.create_task(self._discover_images(request, record))

        try:
            completion = await self._generate_text(request, now, record)
        except (ConfigurationError, asyncio.CancelledError) as e:
            await self._cancel_images(image_task)
            self._finish_run(record, None, Usage(), error=type(e).__name__)
            raise
        except Exception as e:
            await self._cancel_images(image_task)
            logger.error(f"Article generation failed for {topic!r}: {e}")
            self._finish_run(record, None, Usage(), error=repr(e))
            raise GenerationError() from e

        sources = dedupe_sources(completion.citations)

        # Never raises: failures were already collapsed to an empty list
        images, image_usage = await image_task

        result = ArticleResult(
            title=topic,
            content=completion.text or EMPTY_CONTENT_PLACEHOLDER,
            last_updated_display=format_last_updated(now, request.language),
            sources=tuple(sources),
            images=tuple(images),
        )
        self._finish_run(record, result, completion.usage + image_usage)
        return result

    async def _generate_text(
        self, request: ArticleRequest, now: datetime, record: RunRecord | None
    ) -> Completion:
        language_name = LANGUAGES[request.language].prompt_name
        t0 = time.monotonic()
        completion = await self._client.generate(
            build_article_prompt(request.topic, language_name, now.year),
            system_instruction=build_system_instruction(language_name),
            temperature=self._text_temperature,
            web_search=True,
        )
        if self._run_logger:
            self._run_logger.log_stage(
                record,
                stage="text_generation",
                component=type(self._client).__name__,
                input_data=request,
                output_data={
                    "characters": len(completion.text or ""),
                    "citations": len(completion.citations),
                },
                usage=completion.usage,
                duration_seconds=time.monotonic() - t0,
            )
        return completion

    async def _discover_images(
        self, request: ArticleRequest, record: RunRecord | None
    ) -> tuple[list[str], Usage]:
        t0 = time.monotonic()
        images, usage = await self._image_finder.find_or_empty(request.topic)
        if self._run_logger:
            self._run_logger.log_stage(
                record,
                stage="image_discovery",
                component=type(self._image_finder).__name__,
                input_data=request,
                output_data=images,
                usage=usage,
                duration_seconds=time.monotonic() - t0,
            )
        return (images, usage)

    @staticmethod
    async def _cancel_images(image_task: asyncio.Task[tuple[list[str], Usage]]) -> None:
        image_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await image_task

    def _finish_run(
        self,
        record: RunRecord | None,
        result: ArticleResult | None,
        usage: Usage,
        *,
        error: str | None = None,
    ) -> None:
        if self._run_logger:
            self._run_logger.finish_run(record, result, usage, error=error)


async def generate_article(
    topic: str,
    language: LanguageCode | str = LanguageCode.EN,
    *,
    client: GenerativeClient | None = None,
) -> ArticleResult:
    """Generate an article with a default Gemini-backed requester.

    Args:
        topic: Topic to write about.
        language: Target language code.
        client: Optional client; a ``GeminiClient`` reading the API key from
            the environment is used when omitted.
    """
    return await ArticleRequester(client or GeminiClient()).generate_article(topic, language)
