"""Configuration loader for ``.inkwell/config.yml``."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from inkwell.config.exceptions import ConfigLoadError, ConfigValidationError
from inkwell.config.schema import InkwellConfig

logger = logging.getLogger(__name__)

CONFIG_DIR = ".inkwell"
CONFIG_FILE = "config.yml"


def config_path(site_root: Path) -> Path:
    return site_root / CONFIG_DIR / CONFIG_FILE


def load_config(site_root: Path) -> InkwellConfig:
    """Load the site configuration, falling back to defaults when absent.

    Raises:
        ConfigLoadError: If the file exists but is unreadable or not YAML.
        ConfigValidationError: If the file does not match the schema.

    """
    path = config_path(site_root)
    if not path.exists():
        logger.info("No %s found, using default configuration", path)
        return InkwellConfig()

    logger.debug("Loading config from %s", path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigLoadError(path, str(e)) from e

    if not isinstance(data, dict):
        raise ConfigLoadError(path, "top level must be a mapping")

    try:
        return InkwellConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(path, e.errors()) from e


def save_config(config: InkwellConfig, site_root: Path) -> Path:
    """Write ``config`` to ``.inkwell/config.yml``, creating the directory."""
    path = config_path(site_root)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(mode="json")
    yaml_str = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    path.write_text(yaml_str, encoding="utf-8")
    logger.debug("Saved config to %s", path)
    return path


__all__ = ["config_path", "load_config", "save_config"]
