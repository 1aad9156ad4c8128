"""Error kinds raised at the collection loader boundary."""

from __future__ import annotations

from pathlib import Path


class PortfolioSiteError(Exception):
    """Base class for build failures."""


class CollectionNotFoundError(PortfolioSiteError, LookupError):
    """Raised when a named collection does not exist."""

    def __init__(self, name: str, location: Path | None = None):
        self.name = name
        self.location = location
        where = f" at {location}" if location is not None else ""
        super().__init__(f"Collection not found: {name}{where}")


class EntryValidationError(PortfolioSiteError, ValueError):
    """Raised when a content entry is malformed (e.g. missing pubDate)."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
