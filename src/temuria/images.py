"""Image discovery for article illustrations.

Image URLs come from a retrieval-augmented query that is asked to answer
with a JSON array. The answer is untrusted: anything that is not a JSON
array of http(s) image links is discarded. ``ImageFinder.find`` reports
those problems as ``ImageDiscoveryError``; ``ImageFinder.find_or_empty``
is the one place where they are swallowed.
"""

import json
import logging
import re
from collections.abc import Iterable

from temuria.data import Usage
from temuria.errors import ImageDiscoveryError
from temuria.llm.base import GenerativeClient
from temuria.prompts import build_image_prompt

logger = logging.getLogger(__name__)

IMAGE_EXTENSION_PATTERN = re.compile(r"\.(jpg|jpeg|png|webp|svg)", re.IGNORECASE)
DEFAULT_MAX_IMAGES = 3
MAX_IMAGES_LIMIT = 3


def parse_image_urls(raw: str | None) -> list[object]:
    """Parse the service's answer into a list of candidate values.

    Raises:
        ImageDiscoveryError: If the answer is empty, not JSON, or not an array.
    """
    text = (raw or "").strip()
    if not text:
        raise ImageDiscoveryError("Empty image response")
    # Strip markdown code fences if present
    if text.startswith("```"):
        text = text.split("\n", 1)[-1].rsplit("```", 1)[0].strip()

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        raise ImageDiscoveryError(f"Image response is not valid JSON: {e}") from e

    if not isinstance(parsed, list):
        raise ImageDiscoveryError(f"Expected JSON array, got {type(parsed).__name__}")
    return parsed


def is_image_url(candidate: object) -> bool:
    """Whether a candidate looks like a direct http(s) link to an image file."""
    return (
        isinstance(candidate, str)
        and candidate.startswith("http")
        and IMAGE_EXTENSION_PATTERN.search(candidate) is not None
    )


def filter_image_urls(
    candidates: Iterable[object], limit: int = DEFAULT_MAX_IMAGES
) -> list[str]:
    """Keep valid-looking image URLs, dropping duplicates, up to ``limit``."""
    urls: list[str] = []
    for candidate in candidates:
        if len(urls) >= limit:
            break
        if is_image_url(candidate) and candidate not in urls:
            urls.append(candidate)  # type: ignore[arg-type]
    return urls


class ImageFinder:
    """Find real-world image URLs for a topic.

    Args:
        client: Generative client used for the retrieval-augmented query.
        max_images: Maximum number of URLs to return (0 to MAX_IMAGES_LIMIT).
        temperature: Sampling temperature for the image query.
    """

    def __init__(
        self,
        client: GenerativeClient,
        *,
        max_images: int = DEFAULT_MAX_IMAGES,
        temperature: float = 0.1,
    ) -> None:
        if not 0 <= max_images <= MAX_IMAGES_LIMIT:
            msg = f"max_images must be between 0 and {MAX_IMAGES_LIMIT}, got {max_images}"
            raise ValueError(msg)
        self._client = client
        self._max_images = max_images
        self._temperature = temperature

    async def find(self, topic: str) -> tuple[list[str], Usage]:
        """Ask the service for image URLs.

        Returns:
            Tuple of (image URLs, usage).

        Raises:
            ImageDiscoveryError: If the answer cannot be parsed.
            Exception: Whatever the upstream client raises.
        """
        completion = await self._client.generate(
            build_image_prompt(topic, count=self._max_images),
            temperature=self._temperature,
            web_search=True,
            json_response=True,
        )
        candidates = parse_image_urls(completion.text)
        return (filter_image_urls(candidates, limit=self._max_images), completion.usage)

    async def find_or_empty(self, topic: str) -> tuple[list[str], Usage]:
        """Like ``find``, but any failure degrades to an empty list and no usage.

        Network errors and malformed answers are logged, never raised.
        """
        try:
            return await self.find(topic)
        except ImageDiscoveryError as e:
            logger.warning(f"Failed to parse image JSON for {topic!r}: {e}")
        except Exception as e:
            logger.warning(f"Image search failed for {topic!r}: {e}")
        return ([], Usage())
