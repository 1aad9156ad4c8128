"""
Core data types for the portfolio site highlights.

This module defines the fundamental data structures used throughout the build:
- ContentEntry: One typed content record loaded from a collection
- PipelineSpec: Fixed shape of a highlights pipeline (collection, drafts, limit)
- SiteSnapshot: Read-only view of every collection loaded for one build
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class ContentEntry:
    """Represents a single entry of a content collection.

    Entries are created by the collection loader and never mutated afterwards.

    Attributes:
        collection: Name of the collection the entry belongs to ("blog", "projects")
        slug: URL-safe identifier derived from the source file name
        pub_date: Timezone-aware publish instant, normalised to UTC
        draft: True when the entry must not be shown publicly
        title: Display title
        description: Short summary used on cards
        hero_image: Optional image reference for the card
        badge: Optional badge label for the card
        url: Optional explicit target URL (external project links)
        tags: Tags from frontmatter, in file order
        data: The raw frontmatter mapping as read from disk
    """
    collection: str
    slug: str
    pub_date: datetime
    draft: bool = False
    title: str = ""
    description: str = ""
    hero_image: str | None = None
    badge: str | None = None
    url: str | None = None
    tags: tuple[str, ...] = ()
    data: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)


@dataclass(frozen=True)
class PipelineSpec:
    """Shape of one highlights pipeline.

    Attributes:
        name: Pipeline name used in logs and page data
        collection: Collection the pipeline reads from
        skip_drafts: Whether the draft filter stage runs
        limit: Maximum number of entries kept after sorting
    """
    name: str
    collection: str
    skip_drafts: bool
    limit: int


class SiteSnapshot(Mapping[str, tuple[ContentEntry, ...]]):
    """Read-only mapping of collection name to its loaded entries.

    Built once per site build and handed to the pipelines explicitly.
    """

    def __init__(self, collections: Mapping[str, tuple[ContentEntry, ...]]):
        self._collections = MappingProxyType(
            {name: tuple(entries) for name, entries in collections.items()}
        )

    def __getitem__(self, name: str) -> tuple[ContentEntry, ...]:
        return self._collections[name]

    def __iter__(self):
        return iter(self._collections)

    def __len__(self) -> int:
        return len(self._collections)

    def __repr__(self) -> str:
        counts = ", ".join(f"{name}={len(items)}" for name, items in self._collections.items())
        return f"SiteSnapshot({counts})"
