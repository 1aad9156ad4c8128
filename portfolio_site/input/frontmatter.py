"""
YAML frontmatter splitting for markdown content files.

A content file starts with a ``---`` line, followed by YAML, closed by
another ``---`` line. Everything after the closing fence is the body.
"""

from __future__ import annotations

import re
from typing import Any

import yaml

FENCE_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE)


def split_frontmatter(text: str) -> tuple[str | None, str]:
    """Split markdown text into (frontmatter YAML, body).

    Returns:
        ``(None, text)`` when the file has no frontmatter block
    """
    stripped = text.lstrip("\ufeff")
    match = FENCE_RE.match(stripped)
    if not match:
        return None, text
    return match.group(1), stripped[match.end():]


def parse_frontmatter(text: str) -> dict[str, Any] | None:
    """Parse the frontmatter block of a markdown file.

    Returns:
        The frontmatter mapping, an empty dict for an empty block, or None
        when there is no frontmatter at all

    Raises:
        ValueError: If the block is not valid YAML or not a mapping
    """
    raw, _body = split_frontmatter(text)
    if raw is None:
        return None
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid frontmatter YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("frontmatter must be a mapping")
    return data
