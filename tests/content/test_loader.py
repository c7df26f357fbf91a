"""Tests for collection discovery and loading."""

from pathlib import Path, PurePosixPath

import pytest

from postcheck.content.loader import derive_slug, discover, load_collection, load_post, slugify
from postcheck.errors import FrontMatterError, PostLoadError
from postcheck.models.post import FrontMatterFormat

GOOD = "---\ntitle: Hello\ndate: 2023-01-01\n---\nbody\n"


class TestSlugs:
    """Test slug derivation."""

    def test_slugify(self) -> None:
        """Verify slugs are lower-cased with whitespace collapsed."""
        assert slugify("  Binding  Quirks\tExplained ") == "binding-quirks-explained"

    def test_file_stem(self) -> None:
        """Verify a plain file uses its stem."""
        assert derive_slug(PurePosixPath("posts/Binding-Quirks.md"), {}) == "binding-quirks"

    def test_page_bundle(self) -> None:
        """Verify index.md in a bundle takes the directory name."""
        assert derive_slug(PurePosixPath("posts/equatable/index.md"), {}) == "equatable"
        assert derive_slug(PurePosixPath("posts/_index.md"), {}) == "posts"

    def test_root_index_keeps_stem(self) -> None:
        """Verify an index file at the root has no directory to borrow."""
        assert derive_slug(PurePosixPath("index.md"), {}) == "index"

    def test_explicit_slug_wins(self) -> None:
        """Verify a front-matter slug overrides the path."""
        assert derive_slug(PurePosixPath("posts/a.md"), {"slug": "Custom Slug"}) == "custom-slug"

    def test_non_text_slug_is_ignored(self) -> None:
        """Verify a non-text slug value falls back to the path."""
        assert derive_slug(PurePosixPath("posts/a.md"), {"slug": 12}) == "a"


class TestDiscover:
    """Test post file discovery."""

    def test_sorted_and_recursive(self, content_root: Path, write_post) -> None:
        """Verify nested Markdown files are found in sorted order."""
        write_post("b.md", GOOD)
        write_post("posts/a.md", GOOD)
        write_post("notes.txt", "ignored")
        paths = discover(content_root)
        assert [p.relative_to(content_root).as_posix() for p in paths] == ["b.md", "posts/a.md"]

    def test_skips_hidden(self, content_root: Path, write_post) -> None:
        """Verify dot-directories and dot-files are skipped."""
        write_post(".obsidian/cache.md", GOOD)
        write_post(".hidden.md", GOOD)
        write_post("visible.md", GOOD)
        assert [p.name for p in discover(content_root)] == ["visible.md"]

    def test_ignore_globs(self, content_root: Path, write_post) -> None:
        """Verify ignore globs exclude matching relative paths."""
        write_post("drafts/wip.md", GOOD)
        write_post("posts/done.md", GOOD)
        paths = discover(content_root, ignore=("drafts/*",))
        assert [p.name for p in paths] == ["done.md"]

    def test_multiple_patterns_deduplicate(self, content_root: Path, write_post) -> None:
        """Verify overlapping patterns list each file once."""
        write_post("a.md", GOOD)
        write_post("b.markdown", GOOD)
        paths = discover(content_root, ("**/*.md", "*.md", "**/*.markdown"))
        assert [p.name for p in paths] == ["a.md", "b.markdown"]


class TestLoadPost:
    """Test loading a single post."""

    def test_loads_record(self, content_root: Path, write_post) -> None:
        """Verify a post record carries path, slug, front matter and body."""
        path = write_post("posts/hello-world.md", GOOD)
        post = load_post(path, content_root)
        assert post.path == "posts/hello-world.md"
        assert post.slug == "hello-world"
        assert post.title == "Hello"
        assert post.body == "body\n"
        assert post.format == FrontMatterFormat.YAML

    def test_invalid_utf8(self, content_root: Path) -> None:
        """Verify undecodable files raise a load error."""
        path = content_root / "latin1.md"
        path.write_bytes(b"---\ntitle: caf\xe9\n---\n")
        with pytest.raises(PostLoadError, match="not valid UTF-8") as exc_info:
            load_post(path, content_root)
        assert exc_info.value.path == Path("latin1.md")

    def test_bad_front_matter(self, content_root: Path, write_post) -> None:
        """Verify malformed front matter raises FrontMatterError."""
        path = write_post("broken.md", "---\ntitle: x\n")
        with pytest.raises(FrontMatterError):
            load_post(path, content_root)


class TestLoadCollection:
    """Test loading a whole collection."""

    def test_collects_posts_and_failures(self, content_root: Path, write_post) -> None:
        """Verify one broken file does not stop the others loading."""
        write_post("a.md", GOOD)
        write_post("b.md", "---\ntitle: [oops\n---\n")
        write_post("c.md", GOOD)
        result = load_collection(content_root)
        assert [p.path for p in result.posts] == ["a.md", "c.md"]
        assert len(result.failures) == 1
        assert result.failures[0].path == Path("b.md")
        assert result.root == content_root

    @pytest.mark.parametrize(
        "text",
        [
            "---\ntitle: B\ndate: 2023-13-45\n---\n",
            "---\ntitle: B\ndate: 2023-02-30\n---\n",
            "---\ntitle: B\n2024: x\n---\n",
        ],
    )
    def test_malformed_values_do_not_abort(self, content_root: Path, write_post, text: str) -> None:
        """Verify impossible dates and non-text keys become per-file failures."""
        write_post("a.md", GOOD)
        write_post("b.md", text)
        result = load_collection(content_root)
        assert [p.path for p in result.posts] == ["a.md"]
        assert [f.path for f in result.failures] == [Path("b.md")]
        assert isinstance(result.failures[0], FrontMatterError)

    def test_empty_collection(self, content_root: Path) -> None:
        """Verify an empty directory loads to an empty result."""
        result = load_collection(content_root)
        assert result.posts == []
        assert result.failures == []
