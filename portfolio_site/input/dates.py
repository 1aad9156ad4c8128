"""Normalisation of frontmatter publish dates to comparable UTC instants."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

# Human-written dates seen in frontmatter, e.g. "Jul 08 2022" or "July 8, 2022".
_TEXT_FORMATS = ("%b %d %Y", "%B %d %Y", "%b %d, %Y", "%B %d, %Y", "%d %b %Y", "%d %B %Y")


def parse_iso8601(value: str) -> datetime:
    """Parse an ISO 8601 timestamp string into a timezone-aware datetime."""
    raw = value.strip()
    if raw.endswith("Z"):
        raw = f"{raw[:-1]}+00:00"
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def normalize_pub_date(value: Any) -> datetime:
    """Convert a frontmatter date value into an aware datetime in UTC.

    PyYAML already turns unquoted dates into ``date``/``datetime`` objects;
    quoted values arrive as strings.

    Raises:
        ValueError: If the value cannot be read as a date
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        parsed = _parse_text(value)
    else:
        raise ValueError(f"unsupported date value: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _parse_text(value: str) -> datetime:
    text = value.strip()
    if not text:
        raise ValueError("empty date string")
    try:
        return parse_iso8601(text)
    except ValueError:
        pass
    for fmt in _TEXT_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise ValueError(f"unrecognised date format: {value!r}")
