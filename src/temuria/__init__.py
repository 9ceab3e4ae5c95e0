"""Temuria: a real-time, AI-generated encyclopedia."""

from temuria.citations import dedupe_sources
from temuria.config import TemuriaConfig, create_from_config, load_config
from temuria.data import (
    LANGUAGES,
    APICallUsage,
    ArticleRequest,
    ArticleResult,
    LanguageCode,
    LanguageInfo,
    Source,
    Usage,
)
from temuria.dates import format_last_updated
from temuria.errors import (
    ConfigurationError,
    GenerationError,
    ImageDiscoveryError,
    TemuriaError,
)
from temuria.images import ImageFinder, filter_image_urls, parse_image_urls
from temuria.llm import ClaudeClient, Completion, GeminiClient, GenerativeClient
from temuria.requester import ArticleRequester, generate_article
from temuria.run_logger import RunLogger
from temuria.session import ErrorKind, SearchSession, ViewState
from temuria.trending import get_trending_topics

__all__ = [
    # Models
    "APICallUsage",
    "ArticleRequest",
    "ArticleResult",
    "LANGUAGES",
    "LanguageCode",
    "LanguageInfo",
    "Source",
    "Usage",
    # Errors
    "ConfigurationError",
    "GenerationError",
    "ImageDiscoveryError",
    "TemuriaError",
    # Functions
    "dedupe_sources",
    "filter_image_urls",
    "format_last_updated",
    "generate_article",
    "get_trending_topics",
    "parse_image_urls",
    # Protocols
    "GenerativeClient",
    # Clients
    "ClaudeClient",
    "Completion",
    "GeminiClient",
    # Components
    "ArticleRequester",
    "ImageFinder",
    # Session
    "ErrorKind",
    "SearchSession",
    "ViewState",
    # Logging
    "RunLogger",
    # Config
    "TemuriaConfig",
    "create_from_config",
    "load_config",
]
