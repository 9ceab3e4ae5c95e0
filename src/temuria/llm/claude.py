import logging
import os

import anthropic

from temuria.data import APICallUsage, Usage
from temuria.errors import ConfigurationError
from temuria.llm.base import Completion

logger = logging.getLogger(__name__)

JSON_ONLY_SUFFIX = "\n\nReturn ONLY the JSON, no markdown fences and no other text."


class ClaudeClient:
    """Generate grounded text using Claude's built-in web search tool.

    This uses Anthropic's server-side web search, so you only need your
    existing Claude API key.

    Note: Web search must be enabled in your Anthropic Console settings.

    Args:
        api_key: Anthropic API key (defaults to CLAUDE_API_KEY env var).
        model: Model to use (default: claude-haiku-4-5-20251001).
        max_searches: Max web searches per request (default: 3).
        max_tokens: Max output tokens per request (default: 4096).
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        model: str = "claude-haiku-4-5-20251001",
        max_searches: int = 3,
        max_tokens: int = 4096,
    ) -> None:
        resolved_key = api_key or os.environ.get("CLAUDE_API_KEY")
        self._client = anthropic.AsyncAnthropic(api_key=resolved_key) if resolved_key else None
        self._model = model
        self._max_searches = max_searches
        self._max_tokens = max_tokens

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
            raise ConfigurationError("Claude API key is missing. Set CLAUDE_API_KEY")

        # No native JSON mode; ask for it in the prompt instead
        user_prompt = prompt + JSON_ONLY_SUFFIX if json_response else prompt

        request: dict[str, object] = {
            "model": self._model,
            "max_tokens": self._max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": user_prompt}],
        }
        if system_instruction:
            request["system"] = system_instruction
        if web_search:
            request["tools"] = [
                {
                    "type": "web_search_20250305",
                    "name": "web_search",
                    "max_uses": self._max_searches,
                }
            ]

        response = await self._client.messages.create(**request)  # type: ignore[call-overload]

        # Count web searches from server_tool_use in usage
        web_searches = 0
        server_tool_use = getattr(response.usage, "server_tool_use", None)
        if server_tool_use is not None:
            web_searches = getattr(server_tool_use, "web_search_requests", 0) or 0

        usage = Usage(
            api_calls=[
                APICallUsage(
                    model=self._model,
                    input_tokens=response.usage.input_tokens,
                    output_tokens=response.usage.output_tokens,
                    web_searches=web_searches,
                ),
            ],
        )

        text_parts: list[str] = []
        citations: list[tuple[str | None, str | None]] = []
        for block in response.content:
            if block.type == "text":
                text_parts.append(block.text)
                for citation in block.citations or []:
                    url = getattr(citation, "url", None)
                    if url:
                        citations.append((getattr(citation, "title", None), url))
            elif block.type == "web_search_tool_result":
                # Text written before a search is preamble; only the final answer counts
                text_parts = []
                content = block.content
                if isinstance(content, list):
                    for result in content:
                        citations.append((result.title, result.url))

        logger.debug(f"{self._model}: {len(citations)} citations, {web_searches} web searches")
        return Completion(text="".join(text_parts) or None, citations=citations, usage=usage)
