"""Lint a loaded post collection and build a report."""

from __future__ import annotations

import logging

from postcheck.config import LintConfig
from postcheck.content.loader import LoadResult
from postcheck.lint.findings import Finding, LintReport, Severity
from postcheck.lint.rules import RULES

logger = logging.getLogger(__name__)


def lint_collection(result: LoadResult, config: LintConfig | None = None) -> LintReport:
    """Run every enabled rule over ``result`` and return the sorted findings."""
    config = config or LintConfig(disabled_rules=frozenset())
    unknown = config.disabled_rules - RULES.keys()
    if unknown:
        logger.warning("Unknown rule ids ignored — rules=%s", ",".join(sorted(unknown)))

    findings: list[Finding] = []
    for rule_id, rule in RULES.items():
        if not config.is_enabled(rule_id):
            logger.debug("Rule disabled — rule=%s", rule_id)
            continue
        findings.extend(rule(result))

    findings.sort(key=lambda f: (f.path, f.rule, f.message))
    report = LintReport(root=str(result.root), post_count=len(result.posts), findings=findings)
    logger.info(
        "Lint complete — posts=%d errors=%d warnings=%d",
        report.post_count,
        len(report.errors),
        len(report.warnings),
    )
    return report


__all__ = [
    "Finding",
    "LintReport",
    "RULES",
    "Severity",
    "lint_collection",
]
