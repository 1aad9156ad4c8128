"""
Highlights selection: draft filter, chronological sort and top-N truncation.

Both highlight pipelines share the same shape:

    entries -> filter_drafts (blog only) -> sort_by_pub_date -> select_top(N)

All functions are pure. They never mutate their input and hold no state
between calls, so running a pipeline twice on the same snapshot yields the
same ordered result.
"""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

from .errors import CollectionNotFoundError
from .types import ContentEntry, PipelineSpec, SiteSnapshot


BLOG_HIGHLIGHTS = PipelineSpec(name="recent_posts", collection="blog", skip_drafts=True, limit=3)
PROJECT_HIGHLIGHTS = PipelineSpec(
    name="recent_projects", collection="projects", skip_drafts=False, limit=5
)
HIGHLIGHT_PIPELINES = (BLOG_HIGHLIGHTS, PROJECT_HIGHLIGHTS)

# Receives (spec, loaded entries, selection) after each pipeline runs.
SelectionHook = Callable[[PipelineSpec, Sequence[ContentEntry], list[ContentEntry]], None]


def filter_drafts(entries: Iterable[ContentEntry]) -> list[ContentEntry]:
    """Drop entries flagged as drafts, preserving relative order.

    Entries without a draft flag are treated as published.
    """
    return [entry for entry in entries if not getattr(entry, "draft", False)]


def sort_by_pub_date(entries: Iterable[ContentEntry]) -> list[ContentEntry]:
    """Return entries ordered newest first.

    The sort is stable: entries sharing a publish instant keep their input order.
    """
    return sorted(entries, key=lambda entry: entry.pub_date, reverse=True)


def select_top(entries: Sequence[ContentEntry], limit: int) -> list[ContentEntry]:
    """Return the first ``limit`` entries, or all of them if there are fewer."""
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    return list(entries[:limit])


def run_selection(entries: Iterable[ContentEntry], spec: PipelineSpec) -> list[ContentEntry]:
    """Run one highlights pipeline over already-loaded entries.

    Args:
        entries: The collection's entries, in any order
        spec: Pipeline shape (draft handling and result size)

    Returns:
        At most ``spec.limit`` entries, newest first
    """
    selected = filter_drafts(entries) if spec.skip_drafts else list(entries)
    return select_top(sort_by_pub_date(selected), spec.limit)


def collection_entries(snapshot: SiteSnapshot, name: str) -> tuple[ContentEntry, ...]:
    """Entries of a collection from the snapshot, or CollectionNotFoundError."""
    try:
        return snapshot[name]
    except KeyError:
        raise CollectionNotFoundError(name) from None


def blog_highlights(snapshot: SiteSnapshot) -> list[ContentEntry]:
    """Three most recent published blog posts."""
    return run_selection(
        collection_entries(snapshot, BLOG_HIGHLIGHTS.collection), BLOG_HIGHLIGHTS
    )


def project_highlights(snapshot: SiteSnapshot) -> list[ContentEntry]:
    """Five most recent projects."""
    return run_selection(
        collection_entries(snapshot, PROJECT_HIGHLIGHTS.collection), PROJECT_HIGHLIGHTS
    )


def select_highlights(
    snapshot: SiteSnapshot,
    pipelines: Sequence[PipelineSpec] = HIGHLIGHT_PIPELINES,
    on_result: SelectionHook | None = None,
) -> dict[str, list[ContentEntry]]:
    """Run every pipeline independently against the same snapshot.

    Args:
        snapshot: Collections loaded for this build
        pipelines: Pipelines to run, in order
        on_result: Called after each pipeline with (spec, loaded entries, selection)

    Returns:
        Mapping of pipeline name to its selection result
    """
    results: dict[str, list[ContentEntry]] = {}
    for spec in pipelines:
        entries = collection_entries(snapshot, spec.collection)
        selected = run_selection(entries, spec)
        results[spec.name] = selected
        if on_result is not None:
            on_result(spec, entries, selected)
    return results
