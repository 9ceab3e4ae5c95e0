"""Factory functions to create components from configuration."""

from pathlib import Path

from temuria.config.models import (
    BackendConfig,
    ClaudeBackendConfig,
    GeminiBackendConfig,
    RequesterConfig,
    TemuriaConfig,
)
from temuria.errors import ConfigurationError
from temuria.llm.base import GenerativeClient
from temuria.llm.claude import ClaudeClient
from temuria.llm.gemini import GeminiClient
from temuria.requester import ArticleRequester
from temuria.run_logger import RunLogger


def create_client(config: BackendConfig) -> GenerativeClient:
    """Create a generative client from config.

    Uses explicit type matching rather than getattr.
    """
    if isinstance(config, GeminiBackendConfig):
        return GeminiClient(model=config.model)
    if isinstance(config, ClaudeBackendConfig):
        return ClaudeClient(
            model=config.model,
            max_searches=config.max_searches,
            max_tokens=config.max_tokens,
        )
    msg = f"Unknown backend config type: {type(config)}"
    raise ConfigurationError(msg)


def create_requester(
    config: RequesterConfig,
    run_logger: RunLogger | None = None,
) -> ArticleRequester:
    """Create an article requester from config."""
    client = create_client(config.backend)
    image_client = create_client(config.image_backend) if config.image_backend else None
    return ArticleRequester(
        client,
        image_client=image_client,
        max_images=config.max_images,
        text_temperature=config.text_temperature,
        image_temperature=config.image_temperature,
        run_logger=run_logger,
    )


def create_from_config(
    config: TemuriaConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[ArticleRequester, RunLogger | None]:
    """Create a requester from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (requester, run_logger).
        run_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    run_logger: RunLogger | None = None
    if log_enabled:
        run_logger = RunLogger(log_dir=log_dir, enabled=True)

    requester = create_requester(config.requester, run_logger=run_logger)
    return (requester, run_logger)
