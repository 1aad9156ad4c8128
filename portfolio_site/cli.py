"""
Command-line interface for the portfolio site highlights.

Uses Typer to provide a CLI with options for the main configuration
settings:
- build: write the home/CV page data file
- show: print the current highlights without writing anything
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from .config import AppConfig, load_config
from .core.errors import PortfolioSiteError
from .core.selection import HIGHLIGHT_PIPELINES, select_highlights
from .input.loader import CollectionLoader, load_snapshot
from .output.cards import entry_href
from .runner import COLLECTIONS, run_build

app = typer.Typer(add_completion=False)
console = Console()


def _load(config: Path | None, content_dir: Path | None) -> tuple[AppConfig, Path]:
    cfg = load_config(str(config) if config else None)
    if content_dir is not None:
        cfg.content.content_dir = str(content_dir)
    return cfg, Path(cfg.content.content_dir)


@app.command()
def build(
    content_dir: Path | None = typer.Option(
        None, "--content-dir", "-c", help="Directory with one folder per collection."
    ),
    output: Path = typer.Option(Path("src/data"), "--output", "-o"),
    config: Path | None = typer.Option(None, "--config", exists=True, readable=True),
    progress: bool = typer.Option(True, "--progress/--no-progress"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_format: str | None = typer.Option(
        None, "--log-format", help="Log file format: jsonl or plain."
    ),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
):
    """Build the recent posts and recent projects page data.

    Args:
        content_dir: Content collections directory (overrides config)
        output: Directory for the page data file
        config: Optional path to YAML config file
        progress: Whether to show progress bar
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Log file format (jsonl, plain)
        log_file: Enable/disable file logging
    """
    cfg, content_path = _load(config, content_dir)

    # Override with CLI options
    if log_level:
        cfg.logging.level = log_level
    if log_format:
        cfg.logging.format = log_format
    if log_file is not None:
        cfg.logging.file = log_file

    try:
        output_path = run_build(content_path, output, cfg, show_progress=progress, console=console)
    except PortfolioSiteError as exc:
        console.print(f"[red]Build failed:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    console.print(f"Page data written: {output_path}")


@app.command()
def show(
    content_dir: Path | None = typer.Option(
        None, "--content-dir", "-c", help="Directory with one folder per collection."
    ),
    config: Path | None = typer.Option(None, "--config", exists=True, readable=True),
):
    """Print the current highlights as tables."""
    cfg, content_path = _load(config, content_dir)

    try:
        snapshot = load_snapshot(CollectionLoader(content_path), COLLECTIONS)
    except PortfolioSiteError as exc:
        console.print(f"[red]Load failed:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    results = select_highlights(snapshot)
    for spec in HIGHLIGHT_PIPELINES:
        table = Table(title=f"{spec.name} ({spec.collection}, top {spec.limit})")
        table.add_column("Date")
        table.add_column("Title")
        table.add_column("Link")
        for entry in results[spec.name]:
            table.add_row(
                entry.pub_date.date().isoformat(),
                entry.title,
                entry_href(entry, cfg.site.base_url),
            )
        console.print(table)


if __name__ == "__main__":
    app()
