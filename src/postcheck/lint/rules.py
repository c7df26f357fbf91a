"""Content-integrity rules over a loaded post collection.

Each rule takes the ``LoadResult`` and yields ``Finding`` objects. Rules are
registered in ``RULES`` under the id used in reports and in
``POSTCHECK_DISABLE``.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterator

from postcheck.content.loader import LoadResult
from postcheck.lint.findings import Finding, Severity
from postcheck.models.post import parse_timestamp

Rule = Callable[[LoadResult], Iterator[Finding]]


def check_front_matter(result: LoadResult) -> Iterator[Finding]:
    """Report files that failed to load or whose front matter did not parse."""
    for failure in result.failures:
        yield Finding(
            path=str(failure.path),
            rule="front-matter",
            severity=Severity.ERROR,
            message=failure.reason,
        )


def check_title(result: LoadResult) -> Iterator[Finding]:
    for post in result.posts:
        value = post.front_matter.get("title")
        if value is None:
            message = "missing required 'title'"
        elif not isinstance(value, str):
            message = f"'title' must be text, got {type(value).__name__}"
        elif not value.strip():
            message = "'title' is empty"
        else:
            continue
        yield Finding(path=post.path, rule="title", severity=Severity.ERROR, message=message)


def check_date(result: LoadResult) -> Iterator[Finding]:
    for post in result.posts:
        value = post.front_matter.get("date")
        if value is None:
            continue
        if parse_timestamp(value) is None:
            yield Finding(
                path=post.path,
                rule="date",
                severity=Severity.ERROR,
                message=f"'date' is not a valid timestamp: {value!r}",
            )


def check_date_missing(result: LoadResult) -> Iterator[Finding]:
    """Warn about posts with no date, counting an empty `date:` as absent."""
    for post in result.posts:
        if post.front_matter.get("date") is None:
            yield Finding(
                path=post.path,
                rule="date-missing",
                severity=Severity.WARNING,
                message="no 'date' set; the generator will fall back to its own default",
            )


def check_draft(result: LoadResult) -> Iterator[Finding]:
    for post in result.posts:
        if "draft" not in post.front_matter:
            continue
        value = post.front_matter["draft"]
        if not isinstance(value, bool):
            yield Finding(
                path=post.path,
                rule="draft",
                severity=Severity.ERROR,
                message=f"'draft' must be a boolean literal, got {value!r}",
            )


def check_summary(result: LoadResult) -> Iterator[Finding]:
    for post in result.posts:
        value = post.front_matter.get("summary")
        if value is not None and not isinstance(value, str):
            yield Finding(
                path=post.path,
                rule="summary",
                severity=Severity.ERROR,
                message=f"'summary' must be text, got {type(value).__name__}",
            )


def check_slug(result: LoadResult) -> Iterator[Finding]:
    """Report explicit slugs that are not usable text; the path slug is used instead."""
    for post in result.posts:
        value = post.front_matter.get("slug")
        if value is None or (isinstance(value, str) and value.strip()):
            continue
        yield Finding(
            path=post.path,
            rule="slug",
            severity=Severity.ERROR,
            message=f"'slug' must be non-empty text, got {value!r}",
        )


def check_slug_unique(result: LoadResult) -> Iterator[Finding]:
    """Report every post whose slug collides with another (case-insensitive)."""
    by_slug: dict[str, list[str]] = defaultdict(list)
    for post in result.posts:
        by_slug[post.slug.casefold()].append(post.path)

    for slug, paths in by_slug.items():
        if len(paths) < 2:
            continue
        for path in paths:
            others = ", ".join(p for p in paths if p != path)
            yield Finding(
                path=path,
                rule="slug-unique",
                severity=Severity.ERROR,
                message=f"slug '{slug}' is also used by {others}",
            )


RULES: dict[str, Rule] = {
    "front-matter": check_front_matter,
    "title": check_title,
    "date": check_date,
    "date-missing": check_date_missing,
    "draft": check_draft,
    "summary": check_summary,
    "slug": check_slug,
    "slug-unique": check_slug_unique,
}
