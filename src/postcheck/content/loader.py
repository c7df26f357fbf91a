"""Collection loader — discovers post files and builds Post records."""

from __future__ import annotations

import fnmatch
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any

from postcheck.content.parser import split_front_matter
from postcheck.errors import PostLoadError
from postcheck.models.post import Post

logger = logging.getLogger(__name__)

DEFAULT_PATTERNS = ("**/*.md",)
BUNDLE_INDEX_NAMES = frozenset({"index", "_index"})

_WHITESPACE = re.compile(r"\s+")


@dataclass
class LoadResult:
    """Posts that loaded cleanly plus the files that did not."""

    root: Path
    posts: list[Post] = field(default_factory=list)
    failures: list[PostLoadError] = field(default_factory=list)


def slugify(value: str) -> str:
    return _WHITESPACE.sub("-", value.strip()).lower()


def derive_slug(relative_path: PurePosixPath, front_matter: dict[str, Any]) -> str:
    """Pick a post's slug: explicit ``slug`` key, then bundle directory, then file stem."""
    explicit = front_matter.get("slug")
    if isinstance(explicit, str) and explicit.strip():
        return slugify(explicit)
    if relative_path.stem in BUNDLE_INDEX_NAMES and relative_path.parent.name:
        return slugify(relative_path.parent.name)
    return slugify(relative_path.stem)


def _is_hidden(relative: PurePosixPath) -> bool:
    return any(part.startswith(".") for part in relative.parts)


def discover(
    root: Path,
    patterns: tuple[str, ...] = DEFAULT_PATTERNS,
    ignore: tuple[str, ...] = (),
) -> list[Path]:
    """List post files under ``root`` matching any pattern, in sorted order."""
    found: set[Path] = set()
    for pattern in patterns:
        for path in root.glob(pattern):
            if not path.is_file():
                continue
            relative = PurePosixPath(path.relative_to(root).as_posix())
            if _is_hidden(relative):
                continue
            if any(fnmatch.fnmatch(str(relative), glob) for glob in ignore):
                logger.debug("Skipping ignored file — path=%s", relative)
                continue
            found.add(path)
    return sorted(found)


def load_post(path: Path, root: Path) -> Post:
    """Read and parse a single post file.

    Raises ``PostLoadError`` when the file cannot be read or decoded, and
    ``FrontMatterError`` when its front matter is malformed.
    """
    relative = PurePosixPath(path.relative_to(root).as_posix())
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise PostLoadError(Path(str(relative)), f"not valid UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise PostLoadError(Path(str(relative)), exc.strerror or str(exc)) from exc

    front_matter, body, fmt = split_front_matter(text, Path(str(relative)))
    post = Post(
        path=str(relative),
        slug=derive_slug(relative, front_matter),
        front_matter=front_matter,
        body=body,
        format=fmt,
    )
    logger.debug("Post loaded — path=%s slug=%s format=%s", post.path, post.slug, post.format)
    return post


def load_collection(
    root: Path,
    patterns: tuple[str, ...] = DEFAULT_PATTERNS,
    ignore: tuple[str, ...] = (),
) -> LoadResult:
    """Load every post under ``root``, collecting per-file failures."""
    result = LoadResult(root=root)
    for path in discover(root, patterns, ignore):
        try:
            result.posts.append(load_post(path, root))
        except PostLoadError as exc:
            logger.warning("Post failed to load — path=%s reason=%s", exc.path, exc.reason)
            result.failures.append(exc)
    logger.info(
        "Collection loaded — root=%s posts=%d failures=%d",
        root,
        len(result.posts),
        len(result.failures),
    )
    return result
