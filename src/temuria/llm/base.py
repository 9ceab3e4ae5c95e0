"""Protocol for the hosted generative-language service."""

from dataclasses import dataclass, field
from typing import Protocol

from temuria.data import Usage


@dataclass(frozen=True)
class Completion:
    """Text returned by one upstream call.

    ``citations`` holds raw ``(title, uri)`` candidates exactly as the
    service reported them; either element may be missing.
    """

    text: str | None
    citations: list[tuple[str | None, str | None]] = field(default_factory=list)
    usage: Usage = field(default_factory=Usage)


class GenerativeClient(Protocol):
    """Interface for retrieval-augmented text generation."""

    async def generate(
        self,
        prompt: str,
        *,
        system_instruction: str | None = None,
        temperature: float = 0.3,
        web_search: bool = True,
        json_response: bool = False,
    ) -> Completion:
        """Run one generation request.

        Args:
            prompt: User prompt.
            system_instruction: Optional persona / language instruction.
            temperature: Sampling temperature.
            web_search: Whether the service may consult live web search.
            json_response: Ask the service to answer with JSON only.

        Returns:
            The completion text, its grounding citations and usage.

        Raises:
            ConfigurationError: If no API key is configured.
        """
        ...
