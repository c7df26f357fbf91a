"""Command line entry point — ``postcheck check`` and ``postcheck list``."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Annotated

import typer

from postcheck.config import LintConfig, Settings, load_settings
from postcheck.content.loader import load_collection
from postcheck.errors import ConfigurationError
from postcheck.lint import LintReport, lint_collection
from postcheck.logging import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(help="Lint a Markdown post collection's front matter.", no_args_is_help=True)

RootArgument = Annotated[
    Path | None,
    typer.Argument(help="Content root. Defaults to POSTCHECK_CONTENT_ROOT."),
]


def _settings() -> Settings:
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        configure_logging()
        logger.error(str(exc))  # noqa: TRY400
        raise typer.Exit(code=2) from exc
    level = "DEBUG" if settings.app.is_development else settings.app.log_level
    configure_logging(level)
    return settings


def _resolve_root(root: Path | None, settings: Settings) -> Path:
    resolved = root or settings.content.root
    if not resolved.is_dir():
        logger.error("Content root does not exist — root=%s", resolved)
        raise typer.Exit(code=2)
    return resolved


def _render_text(report: LintReport) -> None:
    for finding in report.findings:
        typer.echo(f"{finding.path}: {finding.severity} [{finding.rule}] {finding.message}")
    typer.echo(
        f"{report.post_count} posts checked, "
        f"{len(report.errors)} errors, {len(report.warnings)} warnings",
    )


@app.command()
def check(
    root: RootArgument = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the report as JSON.")] = False,
    strict: Annotated[bool, typer.Option("--strict", help="Fail on warnings too.")] = False,
    disable: Annotated[
        list[str] | None,
        typer.Option("--disable", help="Rule id to skip. May be repeated."),
    ] = None,
) -> None:
    """Check every post's front matter and report problems."""
    settings = _settings()
    content_root = _resolve_root(root, settings)

    lint_config = LintConfig(disabled_rules=settings.lint.disabled_rules | frozenset(disable or ()))
    result = load_collection(content_root, settings.content.patterns, settings.content.ignore)
    report = lint_collection(result, lint_config)

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
    else:
        _render_text(report)

    if not report.ok or (strict and report.warnings):
        raise typer.Exit(code=1)


@app.command("list")
def list_posts(
    root: RootArgument = None,
    drafts: Annotated[bool, typer.Option("--drafts/--no-drafts", help="Include draft posts.")] = True,
) -> None:
    """List posts newest first with slug, date, draft flag and title."""
    settings = _settings()
    content_root = _resolve_root(root, settings)
    result = load_collection(content_root, settings.content.patterns, settings.content.ignore)

    posts = [post for post in result.posts if drafts or post.draft is not True]
    # Undated posts sort last; naive and aware timestamps compare by wall-clock value.
    posts.sort(
        key=lambda post: post.date.replace(tzinfo=None) if post.date else datetime.min,
        reverse=True,
    )
    for post in posts:
        stamp = post.date.date().isoformat() if post.date else "----------"
        flag = "draft" if post.draft else "     "
        typer.echo(f"{stamp}  {flag}  {post.slug}  {post.title or '(untitled)'}")


def main() -> None:
    """Entry point for the postcheck console script."""
    app()


if __name__ == "__main__":
    main()
