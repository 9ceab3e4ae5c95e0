"""YAML configuration loading utilities."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from temuria.config.models import TemuriaConfig
from temuria.errors import ConfigurationError


def load_config(path: Path | str) -> TemuriaConfig:
    """Load configuration from YAML file.

    An empty file yields the default configuration.

    Args:
        path: Path to YAML config file.

    Returns:
        Validated TemuriaConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ConfigurationError: If config is invalid.
    """
    path = Path(path)
    with path.open() as f:
        raw = yaml.safe_load(f)

    try:
        return TemuriaConfig.model_validate(raw or {})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config {path}: {e}") from e


def get_default_config_path() -> Path:
    """Get path to default config file."""
    return Path(__file__).parent.parent.parent.parent / "configs" / "default.yaml"
