"""Input loading: content collections from markdown files with frontmatter."""

from .dates import normalize_pub_date, parse_iso8601
from .frontmatter import parse_frontmatter, split_frontmatter
from .loader import CollectionLoader, build_entry, load_snapshot

__all__ = [
    "CollectionLoader",
    "build_entry",
    "load_snapshot",
    "normalize_pub_date",
    "parse_iso8601",
    "parse_frontmatter",
    "split_frontmatter",
]
