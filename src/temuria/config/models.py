"""Pydantic configuration models for Temuria components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from temuria.data import LanguageCode

# ============================================================
# Backend Configs
# ============================================================


class GeminiBackendConfig(BaseModel):
    """Configuration for GeminiClient."""

    type: Literal["gemini"] = "gemini"
    model: str = "gemini-3-flash-preview"

    model_config = {"frozen": True}


class ClaudeBackendConfig(BaseModel):
    """Configuration for ClaudeClient."""

    type: Literal["claude"] = "claude"
    model: str = "claude-haiku-4-5-20251001"
    max_searches: int = 3
    max_tokens: int = 4096

    model_config = {"frozen": True}


BackendConfig = Annotated[
    GeminiBackendConfig | ClaudeBackendConfig,
    Field(discriminator="type"),
]


# ============================================================
# Requester Config
# ============================================================


class RequesterConfig(BaseModel):
    """Configuration for ArticleRequester.

    ``image_backend`` defaults to the text backend when omitted.
    """

    backend: BackendConfig = Field(default_factory=GeminiBackendConfig)
    image_backend: BackendConfig | None = None
    max_images: int = Field(default=3, ge=0, le=3)
    text_temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    image_temperature: float = Field(default=0.1, ge=0.0, le=2.0)

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for per-request JSON run logs."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class TemuriaConfig(BaseModel):
    """Root configuration for Temuria."""

    requester: RequesterConfig = Field(default_factory=RequesterConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    default_language: LanguageCode = LanguageCode.EN

    model_config = {"frozen": True}
