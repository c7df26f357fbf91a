"""Exception hierarchy for post loading and configuration."""

from __future__ import annotations

from pathlib import Path


class PostcheckError(Exception):
    """Base class for all postcheck errors."""


class ConfigurationError(PostcheckError):
    """Raised when environment configuration is invalid."""


class PostLoadError(PostcheckError):
    """Raised when a post file cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class FrontMatterError(PostLoadError):
    """Raised when a post's front-matter block is malformed."""
