"""YAML configuration for changelog-md."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = ".changelog.yml"
DEFAULTS: Dict[str, Any] = {
    "output": "CHANGELOG.md",
    "remote": "origin",
    "debug": False,
}


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Path to the configuration file. When omitted,
            ``.changelog.yml`` in the working directory is used if present.

    Returns:
        Dictionary containing the configuration
    """
    path = Path(config_path or DEFAULT_CONFIG_PATH)
    try:
        with open(path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except FileNotFoundError:
        if config_path:
            logger.warning(f"Configuration file {path} not found, using defaults")
        return {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Error loading configuration {path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"Configuration {path} must be a mapping")
    return config


def get_config_value(config: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Walk ``keys`` into nested mappings, returning ``default`` on any miss.

    ``get_config_value(config, "settings", "output")`` reads
    ``config["settings"]["output"]``.
    """
    node: Any = config
    for key in keys:
        if not isinstance(node, dict) or key not in node:
            return default
        node = node[key]
    return node


def get_setting(config: Dict[str, Any], name: str) -> Any:
    return get_config_value(config, "settings", name, default=DEFAULTS[name])
