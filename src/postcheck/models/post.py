"""Post document model — one Markdown file and its front matter."""

from __future__ import annotations

from datetime import date, datetime, time
from enum import StrEnum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, StringConstraints, field_validator

NonEmptyStr = Annotated[StrictStr, StringConstraints(strip_whitespace=True, min_length=1)]


class FrontMatterFormat(StrEnum):
    """Enumerate the delimiter styles a front-matter block can use."""

    YAML = "yaml"
    TOML = "toml"
    NONE = "none"


def parse_timestamp(value: object) -> datetime | None:
    """Coerce a front-matter date value to a datetime, or None if it is not one.

    YAML and TOML loaders already produce ``datetime``/``date`` objects for
    unquoted timestamps; quoted values arrive as ISO-8601 strings. A bare
    date is taken as midnight.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str) and value.strip():
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    return None


class PostFrontMatter(BaseModel):
    """The front-matter keys the site generator recognises."""

    model_config = ConfigDict(frozen=True, extra="allow")

    title: NonEmptyStr
    date: datetime | None = None
    draft: StrictBool = False
    summary: StrictStr | None = None
    slug: NonEmptyStr | None = None

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, value: object) -> datetime | None:
        if value is None:
            return None
        parsed = parse_timestamp(value)
        if parsed is None:
            msg = f"not a valid timestamp: {value!r}"
            raise ValueError(msg)
        return parsed


class Post(BaseModel):
    """A single post loaded from a content collection.

    ``front_matter`` holds the raw mapping exactly as parsed so lint rules can
    see malformed values; the typed accessors only return well-formed ones.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    slug: str
    front_matter: dict[str, Any] = Field(default_factory=dict)
    body: str = ""
    format: FrontMatterFormat = FrontMatterFormat.NONE

    @property
    def title(self) -> str | None:
        value = self.front_matter.get("title")
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None

    @property
    def date(self) -> datetime | None:
        return parse_timestamp(self.front_matter.get("date"))

    @property
    def draft(self) -> bool | None:
        value = self.front_matter.get("draft", False)
        return value if isinstance(value, bool) else None

    @property
    def summary(self) -> str | None:
        value = self.front_matter.get("summary")
        return value if isinstance(value, str) else None

    def metadata(self) -> PostFrontMatter:
        """Validate the raw front matter against the recognised schema.

        Raises ``pydantic.ValidationError`` when the post breaks the contract.
        """
        return PostFrontMatter.model_validate(self.front_matter)
