"""Front-matter splitting for YAML (``---``) and TOML (``+++``) blocks."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import yaml

from postcheck.errors import FrontMatterError
from postcheck.models.post import FrontMatterFormat

_DELIMITERS = {
    "---": FrontMatterFormat.YAML,
    "+++": FrontMatterFormat.TOML,
}
_BOM = "\ufeff"


def _parse_block(block: str, fmt: FrontMatterFormat, path: Path) -> dict[str, Any]:
    if fmt is FrontMatterFormat.TOML:
        try:
            return tomllib.loads(block)
        except tomllib.TOMLDecodeError as exc:
            raise FrontMatterError(path, f"invalid TOML front matter: {exc}") from exc

    # Impossible calendar dates in unquoted timestamps surface as ValueError.
    try:
        data = yaml.safe_load(block)
    except (yaml.YAMLError, ValueError) as exc:
        raise FrontMatterError(path, f"invalid YAML front matter: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FrontMatterError(path, f"front matter must be a mapping, got {type(data).__name__}")
    bad_keys = [key for key in data if not isinstance(key, str)]
    if bad_keys:
        raise FrontMatterError(path, f"front matter keys must be text, got {bad_keys[0]!r}")
    return data


def split_front_matter(
    text: str,
    path: Path | None = None,
) -> tuple[dict[str, Any], str, FrontMatterFormat]:
    """Split a post into its front-matter mapping, body and delimiter format.

    Text without an opening delimiter on its first line has no front matter
    and is returned whole as the body. ``path`` is only used in error messages.

    Raises ``FrontMatterError`` for an unterminated or unparseable block.
    """
    source = path or Path("<string>")
    text = text.removeprefix(_BOM).replace("\r\n", "\n")
    lines = text.split("\n")

    fmt = _DELIMITERS.get(lines[0].rstrip())
    if fmt is None:
        return {}, text, FrontMatterFormat.NONE

    delimiter = lines[0].rstrip()
    for index, line in enumerate(lines[1:], start=1):
        if line.rstrip() == delimiter:
            block = "\n".join(lines[1:index])
            body = "\n".join(lines[index + 1 :]).lstrip("\n")
            return _parse_block(block, fmt, source), body, fmt

    raise FrontMatterError(source, f"front matter opened with {delimiter!r} is never closed")
