"""Card payloads handed to the site's card component, one per selected entry."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from ..core.types import ContentEntry


@dataclass(frozen=True)
class CardData:
    """Display attributes of one card.

    Attributes:
        title: Card heading
        image: Image reference, or None for a text-only card
        description: Short summary text
        href: Target URL of the card
        badge: Optional badge label
    """
    title: str
    image: str | None
    description: str
    href: str
    badge: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def entry_href(entry: ContentEntry, base_url: str = "") -> str:
    """Target URL of an entry: its explicit ``url`` or ``/<collection>/<slug>/``."""
    if entry.url:
        return entry.url
    path = f"/{entry.collection}/{entry.slug}/"
    if base_url:
        return base_url.rstrip("/") + path
    return path


def to_card(entry: ContentEntry, base_url: str = "") -> CardData:
    """Map an entry's display attributes onto a card, unchanged."""
    return CardData(
        title=entry.title,
        image=entry.hero_image,
        description=entry.description,
        href=entry_href(entry, base_url),
        badge=entry.badge,
    )


def to_cards(entries: list[ContentEntry], base_url: str = "") -> list[CardData]:
    """Cards in the same order as the selection result."""
    return [to_card(entry, base_url) for entry in entries]
