"""Custom exceptions for configuration handling."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from inkwell.exceptions import InkwellError


class ConfigError(InkwellError):
    """Base exception for all configuration-related errors."""


class ConfigLoadError(ConfigError):
    """Raised when the configuration file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load config at '{path}': {reason}")


class ConfigValidationError(ConfigError):
    """Raised when the configuration file fails validation."""

    def __init__(self, path: Path, errors: Sequence[Any] | None = None) -> None:
        self.path = path
        self.errors = list(errors or [])
        super().__init__(f"Configuration at '{path}' failed validation with {len(self.errors)} error(s).")


class UnsafeOutputDirError(ConfigError):
    """Raised when the output directory would overlap the site sources."""

    def __init__(self, output_dir: Path, protected: Path) -> None:
        self.output_dir = output_dir
        self.protected = protected
        super().__init__(
            f"Output directory '{output_dir}' contains '{protected}'; choose a dedicated directory such as 'dist'."
        )
