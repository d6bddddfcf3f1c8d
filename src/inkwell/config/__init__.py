"""Site configuration."""

from inkwell.config.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
    UnsafeOutputDirError,
)
from inkwell.config.loader import config_path, load_config, save_config
from inkwell.config.schema import (
    BuildMode,
    BuildSettings,
    InkwellConfig,
    NavLinkConfig,
    PathsSettings,
    SiteSettings,
)

__all__ = [
    "BuildMode",
    "BuildSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "InkwellConfig",
    "NavLinkConfig",
    "PathsSettings",
    "SiteSettings",
    "UnsafeOutputDirError",
    "config_path",
    "load_config",
    "save_config",
]
