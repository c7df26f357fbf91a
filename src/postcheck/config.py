"""Environment-driven configuration for postcheck."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from postcheck.errors import ConfigurationError

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


def _env_list(key: str, default: str = "") -> tuple[str, ...]:
    """Split a comma-separated environment value, dropping blanks."""
    return tuple(item.strip() for item in _env(key, default).split(",") if item.strip())


@dataclass(frozen=True)
class ContentConfig:
    root: Path = field(default_factory=lambda: Path(_env("POSTCHECK_CONTENT_ROOT", "content")))
    patterns: tuple[str, ...] = field(default_factory=lambda: _env_list("POSTCHECK_PATTERNS", "**/*.md"))
    ignore: tuple[str, ...] = field(default_factory=lambda: _env_list("POSTCHECK_IGNORE"))


@dataclass(frozen=True)
class LintConfig:
    disabled_rules: frozenset[str] = field(
        default_factory=lambda: frozenset(_env_list("POSTCHECK_DISABLE")),
    )

    def is_enabled(self, rule_id: str) -> bool:
        return rule_id not in self.disabled_rules


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("POSTCHECK_ENV", "production"))
    log_level: str = field(default_factory=lambda: _env("POSTCHECK_LOG_LEVEL", "WARNING").upper())

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@dataclass(frozen=True)
class Settings:
    content: ContentConfig = field(default_factory=ContentConfig)
    lint: LintConfig = field(default_factory=LintConfig)
    app: AppConfig = field(default_factory=AppConfig)


def load_settings() -> Settings:
    """Build settings from the environment and validate them.

    Raises ``ConfigurationError`` when a value cannot be used.
    """
    settings = Settings()
    if settings.app.log_level not in _LOG_LEVELS:
        msg = f"POSTCHECK_LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {settings.app.log_level!r}"
        raise ConfigurationError(msg)
    if not settings.content.patterns:
        msg = "POSTCHECK_PATTERNS must name at least one glob"
        raise ConfigurationError(msg)
    logger.debug(
        "Settings loaded — root=%s patterns=%s env=%s",
        settings.content.root,
        ",".join(settings.content.patterns),
        settings.app.env,
    )
    return settings
