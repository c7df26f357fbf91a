"""Load and lint Markdown post collections with front matter."""

__version__ = "0.1.0"
