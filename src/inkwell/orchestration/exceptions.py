"""Custom exceptions for build orchestration."""

from __future__ import annotations

from collections.abc import Sequence

from inkwell.exceptions import InkwellError
from inkwell.rendering.exceptions import RenderingError


class BuildFailedError(InkwellError):
    """Raised when one or more routes failed to render; nothing was written."""

    def __init__(self, failures: Sequence[RenderingError]) -> None:
        self.failures = tuple(failures)
        details = "; ".join(str(failure) for failure in self.failures)
        super().__init__(f"Build failed: {len(self.failures)} route(s) could not be rendered. {details}")
