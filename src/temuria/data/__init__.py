"""Data models for Temuria."""

from temuria.data.models import (
    LANGUAGES,
    APICallUsage,
    ArticleRequest,
    ArticleResult,
    LanguageCode,
    LanguageInfo,
    Source,
    Usage,
)

__all__ = [
    "APICallUsage",
    "ArticleRequest",
    "ArticleResult",
    "LANGUAGES",
    "LanguageCode",
    "LanguageInfo",
    "Source",
    "Usage",
]
