"""Configuration module for Temuria."""

from temuria.config.factory import create_client, create_from_config, create_requester
from temuria.config.loader import get_default_config_path, load_config
from temuria.config.models import (
    BackendConfig,
    ClaudeBackendConfig,
    GeminiBackendConfig,
    LoggingConfig,
    RequesterConfig,
    TemuriaConfig,
)

__all__ = [
    "BackendConfig",
    "ClaudeBackendConfig",
    "GeminiBackendConfig",
    "LoggingConfig",
    "RequesterConfig",
    "TemuriaConfig",
    "create_client",
    "create_from_config",
    "create_requester",
    "get_default_config_path",
    "load_config",
]
