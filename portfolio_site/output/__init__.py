"""Output: card payloads and the page data file."""

from .cards import CardData, entry_href, to_card, to_cards
from .writer import PAGE_FOR_PIPELINE, build_page_data, write_highlights

__all__ = [
    "CardData",
    "entry_href",
    "to_card",
    "to_cards",
    "PAGE_FOR_PIPELINE",
    "build_page_data",
    "write_highlights",
]
