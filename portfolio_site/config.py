"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- SiteConfig: Site identity copied into the page data
- ContentConfig: Where content collections live
- OutputConfig: Page data file settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container

Highlight sizes (3 posts, 5 projects) are fixed by the pipelines and are
not read from configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml


@dataclass
class SiteConfig:
    """Site identity.

    Attributes:
        title: Site title
        author: Site owner's display name
        base_url: Public base URL, used to absolutise card links when set
    """

    title: str = "Portfolio"
    author: str = ""
    base_url: str = ""


@dataclass
class ContentConfig:
    """Configuration for content loading.

    Attributes:
        content_dir: Directory holding one folder per collection
    """

    content_dir: str = "src/content"


@dataclass
class OutputConfig:
    """Configuration for page data output.

    Attributes:
        filename: Name of the JSON page data file
        indent: JSON indentation, or None for compact output
    """

    filename: str = "highlights.json"
    indent: int | None = 2


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "build.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    site: SiteConfig = field(default_factory=SiteConfig)
    content: ContentConfig = field(default_factory=ContentConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update({k: v for k, v in value.items() if k in data[key]})
        else:
            data[key] = value
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "site": {
            "title": cfg.site.title,
            "author": cfg.site.author,
            "base_url": cfg.site.base_url,
        },
        "content": {
            "content_dir": cfg.content.content_dir,
        },
        "output": {
            "filename": cfg.output.filename,
            "indent": cfg.output.indent,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        site=SiteConfig(**data["site"]),
        content=ContentConfig(**data["content"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )
