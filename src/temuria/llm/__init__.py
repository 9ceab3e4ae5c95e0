from temuria.llm.base import Completion, GenerativeClient
from temuria.llm.claude import ClaudeClient
from temuria.llm.gemini import GeminiClient

__all__ = [
    "ClaudeClient",
    "Completion",
    "GeminiClient",
    "GenerativeClient",
]
