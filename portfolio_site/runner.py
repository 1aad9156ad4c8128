"""
Build orchestration for the portfolio site highlights.

This module coordinates one build:
1. Load the blog and projects collections once into a snapshot
2. Run the recent posts pipeline (drafts dropped, newest 3)
3. Run the recent projects pipeline (newest 5)
4. Write the page data file for the templating engine

Loader failures (missing collection, malformed entry) propagate to the
caller and no page data is written.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

from .config import AppConfig
from .core.selection import HIGHLIGHT_PIPELINES, select_highlights
from .core.types import ContentEntry, SiteSnapshot
from .input.loader import CollectionLoader, load_snapshot
from .output.writer import write_highlights
from .utils.logging import close_logging, log_event, setup_logging

COLLECTIONS = tuple(dict.fromkeys(spec.collection for spec in HIGHLIGHT_PIPELINES))


def collect_highlights(
    snapshot: SiteSnapshot,
    logger=None,
    progress: Progress | None = None,
    task: int | None = None,
) -> dict[str, list[ContentEntry]]:
    """Run every highlights pipeline against the snapshot.

    Args:
        snapshot: Collections loaded for this build
        logger: Optional logger for per-pipeline events
        progress: Optional progress bar
        task: Progress task advanced once per pipeline

    Returns:
        Mapping of pipeline name to selected entries
    """
    def _record(spec, entries, selected) -> None:
        log_event(
            logger,
            "Pipeline complete",
            event="pipeline_complete",
            pipeline=spec.name,
            collection=spec.collection,
            loaded=len(entries),
            selected=len(selected),
            slugs=[entry.slug for entry in selected],
        )
        if progress and task is not None:
            progress.advance(task, 1)

    return select_highlights(snapshot, HIGHLIGHT_PIPELINES, on_result=_record)


def run_build(
    content_dir: Path,
    output_dir: Path,
    cfg: AppConfig,
    show_progress: bool = True,
    console: Console | None = None,
) -> Path:
    """Run a complete highlights build.

    Args:
        content_dir: Directory holding the content collections
        output_dir: Directory for the page data file (and log file)
        cfg: Application configuration
        show_progress: Whether to display a progress bar
        console: Rich console for output (creates default if None)

    Returns:
        Path to the written page data file
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    logger = setup_logging(cfg.logging, output_dir)
    output_path = output_dir / cfg.output.filename

    try:
        log_event(
            logger,
            "Build start",
            event="build_start",
            content_dir=str(content_dir),
            output=str(output_path),
        )
        loader = CollectionLoader(content_dir, logger)

        if not show_progress:
            snapshot = load_snapshot(loader, COLLECTIONS)
            results = collect_highlights(snapshot, logger)
            write_highlights(results, output_path, cfg.site, cfg.output)
        else:
            progress = Progress(
                SpinnerColumn(),
                TextColumn("{task.description}"),
                BarColumn(),
                TaskProgressColumn(),
                console=console or Console(),
            )
            with progress:
                stage_task = progress.add_task("Stages", total=3)

                snapshot = load_snapshot(loader, COLLECTIONS)
                progress.advance(stage_task, 1)

                select_task = progress.add_task("Select", total=len(HIGHLIGHT_PIPELINES))
                results = collect_highlights(snapshot, logger, progress, select_task)
                progress.advance(stage_task, 1)

                write_highlights(results, output_path, cfg.site, cfg.output)
                progress.advance(stage_task, 1)

        log_event(
            logger,
            "Build complete",
            event="build_complete",
            output=str(output_path),
            total=sum(len(entries) for entries in results.values()),
        )
    finally:
        close_logging(logger)

    return output_path
