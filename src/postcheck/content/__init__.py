"""Reading post collections from disk."""

from postcheck.content.loader import LoadResult, derive_slug, discover, load_collection, load_post
from postcheck.content.parser import split_front_matter

__all__ = [
    "LoadResult",
    "derive_slug",
    "discover",
    "load_collection",
    "load_post",
    "split_front_matter",
]
