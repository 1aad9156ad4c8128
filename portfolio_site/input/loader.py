"""
Filesystem collection loader.

Collections live under a content directory, one folder per collection:

    src/content/
        blog/
            first-post.md
            tutorial/index.md
        projects/
            site-generator.md

Each entry is a markdown file with YAML frontmatter. The loader validates
the fields the highlights pipelines depend on (``pubDate`` and ``draft``)
so that filtering and sorting can assume well-formed entries.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable

from ..core.errors import CollectionNotFoundError, EntryValidationError
from ..core.types import ContentEntry, SiteSnapshot
from ..utils.logging import log_event
from .dates import normalize_pub_date
from .frontmatter import parse_frontmatter

ENTRY_SUFFIXES = (".md", ".mdx")


class CollectionLoader:
    """Loads content collections from a directory tree.

    Every call to :meth:`load` reads the files again; nothing is cached.
    """

    def __init__(self, content_dir: Path, logger: logging.Logger | None = None):
        """Initialize the loader.

        Args:
            content_dir: Directory that holds one sub-folder per collection
            logger: Optional logger for load events
        """
        self._content_dir = Path(content_dir)
        self._logger = logger

    @property
    def content_dir(self) -> Path:
        return self._content_dir

    def load(self, name: str) -> tuple[ContentEntry, ...]:
        """Load every entry of a collection.

        Args:
            name: Collection name (e.g. "blog", "projects")

        Returns:
            Entries in sorted file path order

        Raises:
            CollectionNotFoundError: If the collection folder does not exist
            EntryValidationError: If any entry is malformed
        """
        collection_dir = self._content_dir / name
        if not collection_dir.is_dir():
            raise CollectionNotFoundError(name, collection_dir)

        entries = tuple(
            self._read_entry(name, collection_dir, path)
            for path in _entry_files(collection_dir)
        )
        log_event(
            self._logger,
            "Collection loaded",
            event="collection_loaded",
            collection=name,
            count=len(entries),
        )
        return entries

    def _read_entry(self, collection: str, collection_dir: Path, path: Path) -> ContentEntry:
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise EntryValidationError(path, f"not valid UTF-8: {exc}") from exc
        try:
            data = parse_frontmatter(text)
        except ValueError as exc:
            raise EntryValidationError(path, str(exc)) from exc
        if data is None:
            raise EntryValidationError(path, "missing frontmatter")
        return build_entry(collection, _slug_for(path, collection_dir), data, path)


def build_entry(
    collection: str, slug: str, data: dict[str, Any], path: Path | None = None
) -> ContentEntry:
    """Validate a frontmatter mapping and build a ContentEntry from it.

    Raises:
        EntryValidationError: If ``pubDate`` is missing or unreadable, or
            ``draft`` is not a boolean
    """
    where = path or Path(collection) / slug
    if data.get("pubDate") is None:
        raise EntryValidationError(where, "missing required field 'pubDate'")
    try:
        pub_date = normalize_pub_date(data["pubDate"])
    except ValueError as exc:
        raise EntryValidationError(where, f"invalid pubDate: {exc}") from exc

    draft = data.get("draft", False)
    if draft is None:
        draft = False
    if not isinstance(draft, bool):
        raise EntryValidationError(where, f"'draft' must be true or false, got {draft!r}")

    return ContentEntry(
        collection=collection,
        slug=slug,
        pub_date=pub_date,
        draft=draft,
        title=str(data.get("title") or slug),
        description=str(data.get("description") or ""),
        hero_image=_optional_str(data.get("heroImage") or data.get("image")),
        badge=_optional_str(data.get("badge")),
        url=_optional_str(data.get("url")),
        tags=_tags(data.get("tags")),
        data=dict(data),
    )


def load_snapshot(loader: CollectionLoader, names: Iterable[str]) -> SiteSnapshot:
    """Load each named collection once and freeze them into a snapshot."""
    return SiteSnapshot({name: loader.load(name) for name in names})


def _entry_files(collection_dir: Path) -> list[Path]:
    return sorted(
        path
        for path in collection_dir.rglob("*")
        if path.is_file()
        and path.suffix in ENTRY_SUFFIXES
        and not _is_hidden(path.relative_to(collection_dir))
    )


def _is_hidden(relative: Path) -> bool:
    # "_drafts/post.md" and "_partial.md" are both skipped
    return any(part.startswith("_") for part in relative.parts)


def _slug_for(path: Path, collection_dir: Path) -> str:
    # "2023/recap.md" -> "2023/recap", "tutorial/index.md" -> "tutorial"
    relative = path.relative_to(collection_dir).with_suffix("")
    if relative.name == "index" and relative.parent != Path("."):
        relative = relative.parent
    return relative.as_posix()


def _optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _tags(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(tag) for tag in value)
