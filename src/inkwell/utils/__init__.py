"""Shared helpers."""

from inkwell.utils.paths import PathTraversalError, safe_path_join, slugify

__all__ = ["PathTraversalError", "safe_path_join", "slugify"]
