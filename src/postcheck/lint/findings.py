"""Finding and report models produced by the lint rules."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Severity(StrEnum):
    """Enumerate how seriously a finding affects the report verdict."""

    ERROR = "error"
    WARNING = "warning"


class Finding(BaseModel):
    """One rule violation reported against one post file."""

    model_config = ConfigDict(frozen=True)

    path: str
    rule: str
    severity: Severity
    message: str


class LintReport(BaseModel):
    """The findings for a whole collection."""

    root: str
    post_count: int = 0
    findings: list[Finding] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def errors(self) -> list[Finding]:
        return [f for f in self.findings if f.severity is Severity.ERROR]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def warnings(self) -> list[Finding]:
        return [f for f in self.findings if f.severity is Severity.WARNING]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ok(self) -> bool:
        return not self.errors
