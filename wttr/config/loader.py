"""YAML config loader."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from wttr.config.schema import WttrConfig
from wttr.errors import ConfigError

logger = logging.getLogger(__name__)

USER_CONFIG = Path(".config") / "wttr" / "config.yaml"


def load_config(path: str | Path) -> WttrConfig:
    """Load and validate config from a YAML file.

    An empty file yields the defaults.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config {path} must be a mapping")

    try:
        return WttrConfig(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e


def resolve_config(path: str | Path | None, home: Path | None) -> WttrConfig:
    """Load an explicit config, else the per-user one if present, else defaults."""
    if path is not None:
        return load_config(path)
    if home is not None:
        user_path = home / USER_CONFIG
        if user_path.is_file():
            logger.info("Loading config from %s", user_path)
            return load_config(user_path)
    return WttrConfig()
