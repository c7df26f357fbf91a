"""Data models for posts and their front matter."""

from postcheck.models.post import FrontMatterFormat, Post, PostFrontMatter

__all__ = [
    "FrontMatterFormat",
    "Post",
    "PostFrontMatter",
]
