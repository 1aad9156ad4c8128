"""Smoke tests for the CLI."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from portfolio_site.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    root = tmp_path / "content"
    (root / "blog").mkdir(parents=True)
    (root / "projects").mkdir(parents=True)
    (root / "blog" / "hello.md").write_text(
        "---\ntitle: Hello World\npubDate: 2023-07-10\n---\nHi\n", encoding="utf-8"
    )
    (root / "projects" / "site.md").write_text(
        "---\ntitle: This Site\npubDate: 2023-05-01\nurl: https://example.com\n---\n",
        encoding="utf-8",
    )
    return root


def test_build_writes_page_data(runner: CliRunner, content_dir: Path, tmp_path: Path):
    output_dir = tmp_path / "data"

    result = runner.invoke(
        app,
        ["build", "-c", str(content_dir), "-o", str(output_dir), "--no-progress", "--no-log-file"],
    )

    assert result.exit_code == 0, result.output
    data = json.loads((output_dir / "highlights.json").read_text(encoding="utf-8"))
    assert data["pages"]["home"]["recent_posts"][0]["title"] == "Hello World"
    assert data["pages"]["cv"]["recent_projects"][0]["href"] == "https://example.com"


def test_build_reports_missing_collection(runner: CliRunner, tmp_path: Path):
    empty = tmp_path / "empty"
    empty.mkdir()

    result = runner.invoke(
        app, ["build", "-c", str(empty), "-o", str(tmp_path / "out"), "--no-progress"]
    )

    assert result.exit_code == 1
    assert "Collection not found" in result.output


def test_show_prints_highlight_tables(runner: CliRunner, content_dir: Path):
    result = runner.invoke(app, ["show", "-c", str(content_dir)])

    assert result.exit_code == 0, result.output
    assert "Hello World" in result.output
    assert "This Site" in result.output


def test_build_uses_content_dir_from_config(runner: CliRunner, content_dir: Path, tmp_path: Path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        f"content:\n  content_dir: '{content_dir.as_posix()}'\nlogging:\n  console: false\n",
        encoding="utf-8",
    )

    result = runner.invoke(
        app,
        ["build", "--config", str(config_path), "-o", str(tmp_path / "out"), "--no-progress"],
    )

    assert result.exit_code == 0, result.output
    assert (tmp_path / "out" / "highlights.json").exists()
