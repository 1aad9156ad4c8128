"""
Page data output for the site's templating engine.

The home page shows the recent posts and the CV page shows the recent
projects. Both lists are written to a single JSON file which the site's
templates read at render time:

    {
      "site": {"title": ..., "author": ..., "base_url": ...},
      "generated_at": "2026-01-01T00:00:00+00:00",
      "pages": {
        "home": {"recent_posts": [card, ...]},
        "cv": {"recent_projects": [card, ...]}
      }
    }
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping

from ..config import OutputConfig, SiteConfig
from ..core.selection import BLOG_HIGHLIGHTS, PROJECT_HIGHLIGHTS
from ..core.types import ContentEntry
from .cards import CardData, to_cards

# Page that displays each pipeline's result.
PAGE_FOR_PIPELINE = {
    BLOG_HIGHLIGHTS.name: "home",
    PROJECT_HIGHLIGHTS.name: "cv",
}


def build_page_data(
    results: Mapping[str, list[ContentEntry]],
    site: SiteConfig,
    generated_at: datetime | None = None,
) -> dict[str, Any]:
    """Assemble the page data document from pipeline results."""
    pages: dict[str, dict[str, list[dict[str, Any]]]] = {}
    for pipeline_name, entries in results.items():
        page = PAGE_FOR_PIPELINE.get(pipeline_name, pipeline_name)
        cards = to_cards(entries, site.base_url)
        pages.setdefault(page, {})[pipeline_name] = [
            _item(entry, card) for entry, card in zip(entries, cards)
        ]

    return {
        "site": {
            "title": site.title,
            "author": site.author,
            "base_url": site.base_url,
        },
        "generated_at": (generated_at or datetime.now(timezone.utc)).isoformat(),
        "pages": pages,
    }


def write_highlights(
    results: Mapping[str, list[ContentEntry]],
    output_path: Path,
    site: SiteConfig,
    output: OutputConfig | None = None,
) -> Path:
    """Write the page data JSON file and return its path."""
    output = output or OutputConfig()
    payload = build_page_data(results, site)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        f"{json.dumps(payload, ensure_ascii=False, indent=output.indent)}\n", encoding="utf-8"
    )
    return output_path


def _item(entry: ContentEntry, card: CardData) -> dict[str, Any]:
    item = {"slug": entry.slug, "pubDate": entry.pub_date.isoformat()}
    item.update(card.to_dict())
    if entry.tags:
        item["tags"] = list(entry.tags)
    return item
