"""
Core domain models and selection logic.

This package contains data types and the highlights pipelines, which are
independent of how content is loaded or where page data is written.
"""

from .errors import CollectionNotFoundError, EntryValidationError, PortfolioSiteError
from .selection import (
    BLOG_HIGHLIGHTS,
    HIGHLIGHT_PIPELINES,
    PROJECT_HIGHLIGHTS,
    blog_highlights,
    collection_entries,
    filter_drafts,
    project_highlights,
    run_selection,
    select_highlights,
    select_top,
    sort_by_pub_date,
)
from .types import ContentEntry, PipelineSpec, SiteSnapshot

__all__ = [
    "ContentEntry",
    "PipelineSpec",
    "SiteSnapshot",
    "PortfolioSiteError",
    "CollectionNotFoundError",
    "EntryValidationError",
    "BLOG_HIGHLIGHTS",
    "PROJECT_HIGHLIGHTS",
    "HIGHLIGHT_PIPELINES",
    "filter_drafts",
    "sort_by_pub_date",
    "select_top",
    "run_selection",
    "collection_entries",
    "blog_highlights",
    "project_highlights",
    "select_highlights",
]
