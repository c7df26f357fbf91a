"""Shared fixtures for building post collections on disk."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

POSTCHECK_ENV_VARS = (
    "POSTCHECK_CONTENT_ROOT",
    "POSTCHECK_PATTERNS",
    "POSTCHECK_IGNORE",
    "POSTCHECK_DISABLE",
    "POSTCHECK_LOG_LEVEL",
    "POSTCHECK_ENV",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in POSTCHECK_ENV_VARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo handlers installed by the CLI so later tests never log to a closed stream."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    root = tmp_path / "content"
    root.mkdir()
    return root


@pytest.fixture
def write_post(content_root: Path) -> Callable[[str, str], Path]:
    """Write a post file relative to the content root and return its path."""

    def _write(relative: str, text: str) -> Path:
        path = content_root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
