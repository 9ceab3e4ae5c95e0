import logging
import os

from google import genai
from google.genai import types

from temuria.data import APICallUsage, Usage
from temuria.errors import ConfigurationError
from temuria.llm.base import Completion

logger = logging.getLogger(__name__)

API_KEY_ENV_VARS = ("GEMINI_API_KEY", "GOOGLE_API_KEY")


class GeminiClient:
    """Generate grounded text with Google's Gemini API.

    Uses the Google Search grounding tool, so citations come back as
    grounding chunks on the first candidate.

    Args:
        api_key: Gemini API key (defaults to GEMINI_API_KEY, then GOOGLE_API_KEY).
        model: Model to use (default: gemini-3-flash-preview).
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        model: str = "gemini-3-flash-preview",
    ) -> None:
        resolved_key = api_key or next(
            (os.environ[name] for name in API_KEY_ENV_VARS if os.environ.get(name)), None
        )
        self._client = genai.Client(api_key=resolved_key) if resolved_key else None
        self._model = model

    @property
    def configured(self) -> bool:
        return self._client is not None

    async def generate(
        self,
        prompt: str,
        *,
        system_instruction: str | None = None,
        temperature: float = 0.3,
        web_search: bool = True,
        json_response: bool = False,
    ) -> Completion:
        if self._client is None:
            raise ConfigurationError(
                f"Gemini API key is missing. Set one of: {', '.join(API_KEY_ENV_VARS)}"
            )

        config_params: dict[str, object] = {"temperature": temperature}
        if system_instruction:
            config_params["system_instruction"] = system_instruction
        if web_search:
            config_params["tools"] = [types.Tool(google_search=types.GoogleSearch())]
        if json_response:
            config_params["response_mime_type"] = "application/json"

        response = await self._client.aio.models.generate_content(
            model=self._model,
            contents=prompt,
            config=types.GenerateContentConfig(**config_params),
        )

        citations = self._extract_citations(response)
        usage_metadata = response.usage_metadata
        usage = Usage(
            api_calls=[
                APICallUsage(
                    model=self._model,
                    input_tokens=getattr(usage_metadata, "prompt_token_count", 0) or 0,
                    output_tokens=getattr(usage_metadata, "candidates_token_count", 0) or 0,
                    web_searches=self._count_web_searches(response),
                ),
            ],
        )

        logger.debug(f"{self._model}: {len(citations)} grounding citations")
        return Completion(text=response.text, citations=citations, usage=usage)

    @staticmethod
    def _grounding_metadata(response: types.GenerateContentResponse) -> object | None:
        if not response.candidates:
            return None
        return getattr(response.candidates[0], "grounding_metadata", None)

    def _extract_citations(
        self, response: types.GenerateContentResponse
    ) -> list[tuple[str | None, str | None]]:
        """Collect ``(title, uri)`` pairs from the web grounding chunks."""
        metadata = self._grounding_metadata(response)
        chunks = getattr(metadata, "grounding_chunks", None) or []
        citations: list[tuple[str | None, str | None]] = []
        for chunk in chunks:
            web = getattr(chunk, "web", None)
            if web is None:
                continue
            citations.append((web.title, web.uri))
        return citations

    def _count_web_searches(self, response: types.GenerateContentResponse) -> int:
        metadata = self._grounding_metadata(response)
        queries = getattr(metadata, "web_search_queries", None) or []
        return len(queries)
